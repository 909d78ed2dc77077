"""Recursive project tree enumeration."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import List, Sequence, Set, Tuple

from .logging import get_logger
from .rules import ExclusionRule, RuleKind, is_included


class RepoScanner:
    """Walks the project tree and returns the files that pass the exclusion rules."""

    def __init__(self) -> None:
        self.logger = get_logger("scanner")

    def enumerate(self, root: str | Path, rules: Sequence[ExclusionRule]) -> List[Path]:
        """Return included file paths in directory-listing order.

        Any I/O failure (missing root, unreadable directory, broken entry)
        propagates: a partial listing would silently under-report the project.
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        fragments = [rule.value for rule in rules if rule.kind is RuleKind.PATH_FRAGMENT]
        visited: Set[Tuple[int, int]] = set()
        files: List[Path] = []
        self._walk(root_path, "", rules, fragments, visited, files)
        self.logger.debug("Enumerated %d files under %s", len(files), root_path)
        return files

    def _walk(
        self,
        directory: Path,
        rel_dir: str,
        rules: Sequence[ExclusionRule],
        fragments: Sequence[str],
        visited: Set[Tuple[int, int]],
        files: List[Path],
    ) -> None:
        stat_result = os.stat(directory)
        key = (stat_result.st_dev, stat_result.st_ino)
        if key in visited:
            self.logger.debug("Skipping already visited directory %s", directory)
            return
        visited.add(key)

        for name in os.listdir(directory):
            path = directory / name
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            # os.stat follows symlinks and raises for broken entries.
            entry_stat = os.stat(path)
            if stat.S_ISDIR(entry_stat.st_mode):
                if any(fragment in rel_path for fragment in fragments):
                    continue
                self._walk(path, rel_path, rules, fragments, visited, files)
            elif is_included(rel_path, rules):
                files.append(path)
            else:
                self.logger.debug("Excluded %s", rel_path)
