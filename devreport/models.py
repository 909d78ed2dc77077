"""Core data models shared across devreport components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class DiagnosticCategory(str, Enum):
    """Source of a diagnostic entry."""

    RUNTIME = "runtime"
    BUILD = "build"
    LINT = "lint"
    TYPE_CHECK = "type_check"


@dataclass(frozen=True)
class DiagnosticEntry:
    """One human-readable line (or short block) describing a reported problem."""

    category: DiagnosticCategory
    text: str


@dataclass
class FileRecord:
    """A selected project file and its trimmed text content."""

    path: Path
    rel_path: str
    content: str

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass
class SessionDiagnostics:
    """Errors captured from one browser session against the running app."""

    runtime: List[DiagnosticEntry] = field(default_factory=list)
    build: List[DiagnosticEntry] = field(default_factory=list)


@dataclass(frozen=True)
class ReportSummary:
    """Aggregate counts shown at the top of the report."""

    total_files: int
    lines_of_code: int
    runtime_errors: int
    build_errors: int
    lint_errors: int
    type_errors: int

    def render(self) -> str:
        return "\n".join(
            (
                f"- Total files: {self.total_files}",
                f"- Lines of code: {self.lines_of_code}",
                f"- Runtime errors: {self.runtime_errors}",
                f"- Build errors: {self.build_errors}",
                f"- ESLint errors: {self.lint_errors}",
                f"- TypeScript errors: {self.type_errors}",
            )
        )
