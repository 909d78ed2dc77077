"""Project metadata lookups."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .report.constants import UNKNOWN_PROJECT


class ProjectError(RuntimeError):
    """Raised when project metadata exists but cannot be read."""


def read_project_name(root: Path, override: Optional[str] = None) -> str:
    """Return the configured name, else ``package.json``'s ``name``, else a placeholder."""
    if override:
        return override
    package_json = root / "package.json"
    if not package_json.exists():
        return UNKNOWN_PROJECT
    try:
        payload = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ProjectError(f"Failed to read {package_json}: {exc}") from exc
    name = payload.get("name") if isinstance(payload, dict) else None
    if isinstance(name, str) and name.strip():
        return name.strip()
    return UNKNOWN_PROJECT


__all__ = ["ProjectError", "read_project_name"]
