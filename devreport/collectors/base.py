"""Shared plumbing for collectors that shell out to external tools."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..logging import get_logger
from ..models import DiagnosticEntry

CommandRunner = Callable[..., str]


class CommandCollector(ABC):
    """Runs one external tool and turns its output into diagnostic entries.

    Failures to launch the tool, or a tool that outlives ``timeout``, are
    logged and produce an empty list so the rest of the report still builds.
    """

    name = "command"

    def __init__(
        self,
        command: Iterable[str],
        *,
        timeout: Optional[float] = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.command = list(command)
        self.timeout = timeout
        self._runner = runner or self._default_runner
        self.logger = get_logger(f"collectors.{self.name}")

    def collect(self, root: Path) -> List[DiagnosticEntry]:
        args = self.build_args()
        self.logger.debug("Running %s: %s", self.name, " ".join(args))
        try:
            output = self._runner(args, cwd=root, timeout=self.timeout)
        except FileNotFoundError as exc:
            self.logger.warning("Failed to run %s: %s", self.name, exc)
            return []
        except subprocess.TimeoutExpired:
            self.logger.warning("%s did not finish within %s seconds", self.name, self.timeout)
            return []
        except OSError as exc:
            self.logger.warning("Failed to run %s: %s", self.name, exc)
            return []
        entries = self.parse(output, root)
        self.logger.info("%s reported %d errors", self.name, len(entries))
        return entries

    @abstractmethod
    def build_args(self) -> List[str]:
        """Return the full argument vector for the tool."""

    @abstractmethod
    def parse(self, output: str, root: Path) -> List[DiagnosticEntry]:
        """Translate raw tool output into diagnostic entries."""

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        timeout: Optional[float] = None,
    ) -> str:
        # Exit status is ignored: linters exit non-zero whenever they report problems.
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=False,
            text=True,
            encoding="utf-8",
            errors="replace",
            capture_output=True,
            timeout=timeout,
        )
        return completed.stdout or ""


__all__ = ["CommandCollector", "CommandRunner"]
