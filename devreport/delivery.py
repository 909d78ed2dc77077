"""Writing the report to disk and to the clipboard."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pyperclip

from .logging import get_logger

logger = get_logger("delivery")

Copier = Callable[[str], None]


def truncate_output(path: Path) -> None:
    """Empty the output file so a stale report never feeds into the next one."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def write_report(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Report written to %s", path)


def copy_to_clipboard(text: str, copier: Copier | None = None) -> bool:
    """Push ``text`` to the system clipboard; returns False when no clipboard is usable."""
    copy = copier or pyperclip.copy
    try:
        copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Failed to copy report to clipboard: %s", exc)
        return False
    return True


__all__ = ["copy_to_clipboard", "truncate_output", "write_report"]
