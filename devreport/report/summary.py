"""Summary statistics and the approximate token metric."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from ..models import DiagnosticEntry, ReportSummary

_TOKEN_SPLIT = re.compile(r"\s+|[^\w\s]+", re.ASCII)


def build_summary(
    file_paths: Sequence[Path],
    file_blocks: Sequence[str],
    runtime_errors: Sequence[DiagnosticEntry],
    build_errors: Sequence[DiagnosticEntry],
    lint_errors: Sequence[DiagnosticEntry],
    type_errors: Sequence[DiagnosticEntry],
) -> ReportSummary:
    """Count files, rendered lines and errors per category (before any capping)."""
    return ReportSummary(
        total_files=len(file_paths),
        lines_of_code=len("".join(file_blocks).split("\n")),
        runtime_errors=len(runtime_errors),
        build_errors=len(build_errors),
        lint_errors=len(lint_errors),
        type_errors=len(type_errors),
    )


def count_tokens(text: str) -> int:
    """Rough token estimate: runs of whitespace and of punctuation act as separators."""
    return sum(1 for token in _TOKEN_SPLIT.split(text) if token)


__all__ = ["build_summary", "count_tokens"]
