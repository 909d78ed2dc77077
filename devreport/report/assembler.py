"""Assembles the final markdown report from rendered files and diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import DiagnosticCategory, DiagnosticEntry, ReportSummary
from .constants import (
    DIAGNOSTIC_SECTIONS,
    EMPTY_SENTINELS,
    MAX_SECTION_ENTRIES,
    PREAMBLE,
    SECTION_TITLES,
    UNCAPPED_SECTIONS,
)

_TEMPLATE_NAME = "report.md.j2"


class ReportAssembler:
    """Renders the report template; identical inputs give byte-identical output."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._env = self._create_env(templates_dir)

    def assemble(
        self,
        file_blocks: Sequence[str],
        runtime_errors: Sequence[DiagnosticEntry],
        build_errors: Sequence[DiagnosticEntry],
        lint_errors: Sequence[DiagnosticEntry],
        type_errors: Sequence[DiagnosticEntry],
        summary: ReportSummary,
        project_name: str,
    ) -> str:
        diagnostics: Dict[DiagnosticCategory, Sequence[DiagnosticEntry]] = {
            DiagnosticCategory.RUNTIME: runtime_errors,
            DiagnosticCategory.BUILD: build_errors,
            DiagnosticCategory.LINT: lint_errors,
            DiagnosticCategory.TYPE_CHECK: type_errors,
        }
        sections = [
            {
                "title": SECTION_TITLES[category],
                "body": render_section(category, diagnostics[category]),
            }
            for category in DIAGNOSTIC_SECTIONS
        ]
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(
            preamble=PREAMBLE,
            summary=summary.render(),
            project_name=project_name,
            code_files="\n".join(unique_blocks(file_blocks)),
            sections=sections,
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


def unique_blocks(file_blocks: Sequence[str]) -> List[str]:
    """Drop empty blocks and exact duplicates, keeping first-seen order."""
    return list(dict.fromkeys(block for block in file_blocks if block))


def render_section(category: DiagnosticCategory, entries: Sequence[DiagnosticEntry]) -> str:
    if not entries:
        return EMPTY_SENTINELS[category]
    selected = entries if category in UNCAPPED_SECTIONS else entries[:MAX_SECTION_ENTRIES]
    return "\n".join(entry.text for entry in selected)


__all__ = ["ReportAssembler", "render_section", "unique_blocks"]
