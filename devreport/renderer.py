"""Turns project files into report-ready text blocks."""

from __future__ import annotations

import os
from pathlib import Path

from .models import FileRecord

BLOCK_END = "..."


class ContentRenderer:
    """Reads files relative to a project root and formats them as ``[path]`` blocks."""

    def __init__(self, root: Path, output_path: Path | None = None) -> None:
        self.root = Path(os.path.abspath(root))
        self._resolved_root = self.root.resolve()
        self._output_path = Path(output_path).resolve() if output_path is not None else None

    def read(self, path: Path) -> FileRecord:
        """Return the trimmed content of ``path``; the report itself always reads empty."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        absolute = Path(os.path.abspath(candidate))
        rel_path = self._relative(absolute)
        if self._output_path is not None and absolute.resolve() == self._output_path:
            return FileRecord(path=absolute, rel_path=rel_path, content="")
        content = absolute.read_text(encoding="utf-8", errors="replace").strip()
        return FileRecord(path=absolute, rel_path=rel_path, content=content)

    def render(self, path: Path) -> str:
        record = self.read(path)
        if record.is_empty:
            return ""
        return format_block(record)

    def _relative(self, path: Path) -> str:
        for base in (self.root, self._resolved_root):
            try:
                return path.relative_to(base).as_posix()
            except ValueError:
                continue
        return path.as_posix()


def format_block(record: FileRecord) -> str:
    return f"[{record.rel_path}]\n{record.content}\n{BLOCK_END}\n"


__all__ = ["BLOCK_END", "ContentRenderer", "format_block"]
