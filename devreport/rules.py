"""Exclusion rules deciding which project files make it into the report."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import CONFIG_FILENAME

DEFAULT_EXCLUDES: tuple[str, ...] = (
    CONFIG_FILENAME,
    "package-lock.json",
    "/node_modules",
    "/dist",
    "/build",
    "/git",
    "/firebase",
    "/vscode",
    "/coverage",
    "*.jpg",
    "*.jpeg",
    "*.png",
    "*.gif",
    "*.bmp",
    "*.svg",
    "*.ico",
    "*.tif",
    "*.tiff",
    "*.psd",
    "*.ai",
    "*.eps",
    "*.indd",
    "*.pdf",
    "*.doc",
    "*.docx",
    "*.xls",
    "*.xlsx",
    "*.ppt",
    "*.pptx",
    "*.odt",
    "*.ods",
    "*.odp",
    "*.mp3",
    "*.wav",
    "*.aac",
    "*.m4a",
    "*.mp4",
    "*.avi",
    "*.mov",
    "*.wmv",
    "*.flv",
    "*.zip",
    "*.rar",
    "*.7z",
    "*.tar",
    "*.gz",
    "*.bz2",
    "*.log",
    "*.d.ts",
    "*.md",
)


class RuleKind(str, Enum):
    """How an exclusion pattern is compared against a path."""

    EXTENSION = "extension"
    PATH_FRAGMENT = "path_fragment"
    EXACT_NAME = "exact_name"


@dataclass(frozen=True)
class ExclusionRule:
    """A single exclusion pattern, classified once when it is loaded.

    ``*.ext`` patterns match file names ending with ``.ext``; ``/fragment``
    patterns match any path containing ``fragment`` (plain substring, so
    ``/build`` also excludes ``rebuild/app.js``); anything else must equal the
    file name exactly.
    """

    pattern: str
    kind: RuleKind
    value: str

    @classmethod
    def parse(cls, pattern: str) -> "ExclusionRule":
        if pattern.startswith("*."):
            return cls(pattern=pattern, kind=RuleKind.EXTENSION, value=pattern[1:])
        if pattern.startswith("/"):
            return cls(pattern=pattern, kind=RuleKind.PATH_FRAGMENT, value=pattern[1:])
        return cls(pattern=pattern, kind=RuleKind.EXACT_NAME, value=pattern)

    def matches(self, rel_path: str) -> bool:
        normalized = rel_path.replace("\\", "/")
        if self.kind is RuleKind.PATH_FRAGMENT:
            return self.value in normalized
        name = posixpath.basename(normalized)
        if self.kind is RuleKind.EXTENSION:
            return name.endswith(self.value)
        return name == self.value


def parse_rules(patterns: Iterable[str]) -> List[ExclusionRule]:
    return [ExclusionRule.parse(pattern) for pattern in patterns]


def is_included(rel_path: str, rules: Sequence[ExclusionRule]) -> bool:
    """Return False when any rule matches ``rel_path``."""
    return not any(rule.matches(rel_path) for rule in rules)


def read_ignore_file(path: Path) -> List[str]:
    """Return the non-empty, non-comment lines of an ignore file.

    A missing file yields no patterns; an unreadable one raises ``OSError``.
    Undecodable bytes are replaced rather than rejected.
    """
    if not path.exists():
        return []
    patterns: List[str] = []
    for raw_line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def load_rules(
    root: Path,
    extra_patterns: Sequence[str] = (),
    *,
    ignore_file: str = ".gitignore",
) -> List[ExclusionRule]:
    """Combine built-in, configured and ignore-file patterns into parsed rules."""
    patterns: List[str] = list(DEFAULT_EXCLUDES)
    patterns.extend(extra_patterns)
    patterns.extend(read_ignore_file(root / ignore_file))
    return parse_rules(patterns)


__all__ = [
    "DEFAULT_EXCLUDES",
    "ExclusionRule",
    "RuleKind",
    "is_included",
    "load_rules",
    "parse_rules",
    "read_ignore_file",
]
