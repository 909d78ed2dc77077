"""ESLint adapter."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..logging import get_logger
from ..models import DiagnosticCategory, DiagnosticEntry
from .base import CommandCollector, CommandRunner

logger = get_logger("collectors.eslint")

DEFAULT_COMMAND: tuple[str, ...] = ("node", "node_modules/eslint/bin/eslint.js")
DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")


class LintCollector(CommandCollector):
    """Runs ESLint with the JSON formatter over the source directory."""

    name = "eslint"

    def __init__(
        self,
        command: Iterable[str] = DEFAULT_COMMAND,
        *,
        source_dir: str = "src",
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        timeout: Optional[float] = None,
        runner: CommandRunner | None = None,
    ) -> None:
        super().__init__(command, timeout=timeout, runner=runner)
        self.source_dir = source_dir
        self.extensions = list(extensions)

    def build_args(self) -> List[str]:
        return [
            *self.command,
            self.source_dir,
            "--ext",
            ",".join(self.extensions),
            "--format",
            "json",
        ]

    def parse(self, output: str, root: Path) -> List[DiagnosticEntry]:
        return parse_eslint_output(output, root)


def parse_eslint_output(output: str, root: Path) -> List[DiagnosticEntry]:
    """Flatten ESLint JSON into ``[path] Line N: message (rule)`` entries.

    Unparseable output yields no entries; individual malformed records are skipped.
    """
    try:
        payload = json.loads(output)
    except (TypeError, ValueError) as exc:
        logger.warning("Failed to parse ESLint output: %s", exc)
        return []
    if not isinstance(payload, list):
        logger.warning("Failed to parse ESLint output: expected a list of file results")
        return []

    entries: List[DiagnosticEntry] = []
    for file_result in payload:
        if not isinstance(file_result, dict):
            continue
        file_path = file_result.get("filePath")
        messages = file_result.get("messages")
        if not isinstance(file_path, str) or not isinstance(messages, list):
            continue
        relative_path = _relative_path(file_path, root)
        for message in messages:
            if not isinstance(message, dict):
                continue
            text = message.get("message")
            if not isinstance(text, str):
                continue
            line = message.get("line")
            rule_id = message.get("ruleId")
            formatted = f"[{relative_path}] Line {line}: {text}"
            # Parsing errors carry no rule id.
            if rule_id is not None:
                formatted += f" ({rule_id})"
            entries.append(DiagnosticEntry(DiagnosticCategory.LINT, formatted))
    return entries


def _relative_path(file_path: str, root: Path) -> str:
    try:
        relative = os.path.relpath(file_path, str(root))
    except ValueError:
        # Different drives on Windows.
        return file_path
    return relative.replace(os.sep, "/")


__all__ = ["LintCollector", "parse_eslint_output"]
