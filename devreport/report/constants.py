"""Shared constants for report rendering."""

from __future__ import annotations

from ..models import DiagnosticCategory

MAX_SECTION_ENTRIES = 5

DIAGNOSTIC_SECTIONS: tuple[DiagnosticCategory, ...] = (
    DiagnosticCategory.RUNTIME,
    DiagnosticCategory.BUILD,
    DiagnosticCategory.LINT,
    DiagnosticCategory.TYPE_CHECK,
)

SECTION_TITLES: dict[DiagnosticCategory, str] = {
    DiagnosticCategory.RUNTIME: "Runtime",
    DiagnosticCategory.BUILD: "Build",
    DiagnosticCategory.LINT: "ESLint",
    DiagnosticCategory.TYPE_CHECK: "TypeScript",
}

EMPTY_SENTINELS: dict[DiagnosticCategory, str] = {
    DiagnosticCategory.RUNTIME: "No runtime errors found.",
    DiagnosticCategory.BUILD: "No build errors found.",
    DiagnosticCategory.LINT: "No ESLint errors found.",
    DiagnosticCategory.TYPE_CHECK: "No TypeScript errors found.",
}

UNCAPPED_SECTIONS: frozenset[DiagnosticCategory] = frozenset({DiagnosticCategory.TYPE_CHECK})

PREAMBLE = (
    "This file provides a summary of the codebase, including code files. Please provide the updated and\n"
    "fixed code for each distinct file that requires changes to fix intentionally introduced errors\n"
    "(runtime, build, ESLint, and TypeScript), along with concise corrections. Do not include files\n"
    "that do not require any changes."
)

UNKNOWN_PROJECT = "Unknown Project"


__all__ = [
    "DIAGNOSTIC_SECTIONS",
    "EMPTY_SENTINELS",
    "MAX_SECTION_ENTRIES",
    "PREAMBLE",
    "SECTION_TITLES",
    "UNCAPPED_SECTIONS",
    "UNKNOWN_PROJECT",
]
