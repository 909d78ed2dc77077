"""Helper utilities for constructing temporary projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import List, Mapping, Sequence

from devreport.repo_scanner import RepoScanner
from devreport.rules import load_rules


class RepoBuilder:
    """Utility for writing files into a throwaway project and enumerating it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()
        self._scanner = RepoScanner()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, data: bytes) -> None:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def enumerate(self, extra_patterns: Sequence[str] = ()) -> List[str]:
        """Return the included files as root-relative posix paths."""
        rules = load_rules(self.root, extra_patterns)
        paths = self._scanner.enumerate(self.root, rules)
        return [path.relative_to(self.root.resolve()).as_posix() for path in paths]

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["RepoBuilder"]
