"""TypeScript compiler adapter."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from ..models import DiagnosticCategory, DiagnosticEntry
from .base import CommandCollector, CommandRunner

DEFAULT_COMMAND: tuple[str, ...] = ("node", "node_modules/typescript/bin/tsc")
ERROR_MARKER = "error TS"


class TypeCheckCollector(CommandCollector):
    """Runs ``tsc`` without emitting and keeps the ``error TSxxxx`` lines."""

    name = "tsc"

    def __init__(
        self,
        command: Iterable[str] = DEFAULT_COMMAND,
        *,
        timeout: Optional[float] = None,
        runner: CommandRunner | None = None,
    ) -> None:
        super().__init__(command, timeout=timeout, runner=runner)

    def build_args(self) -> List[str]:
        return [*self.command, "--noEmit", "--listEmittedFiles", "--diagnostics"]

    def parse(self, output: str, root: Path) -> List[DiagnosticEntry]:
        return summarize_typescript_errors(output)


def summarize_typescript_errors(output: str) -> List[DiagnosticEntry]:
    return [
        DiagnosticEntry(DiagnosticCategory.TYPE_CHECK, line)
        for line in output.strip().splitlines()
        if ERROR_MARKER in line
    ]


__all__ = ["TypeCheckCollector", "summarize_typescript_errors"]
