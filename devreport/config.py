"""Configuration loading for devreport (.devreport.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".devreport.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AppConfig:
    """Browser session settings for the running web application."""

    enabled: bool = True
    url: str = "http://localhost:3000"
    headless: bool = True
    overlay_selector: str = ".react-error-overlay"
    ready_timeout: float = 5.0
    quiet_period: float = 1.0
    settle_timeout: float = 5.0


@dataclass
class LintConfig:
    """ESLint invocation settings."""

    enabled: bool = True
    command: List[str] = field(
        default_factory=lambda: ["node", "node_modules/eslint/bin/eslint.js"]
    )
    source_dir: str = "src"
    extensions: List[str] = field(default_factory=lambda: [".js", ".jsx", ".ts", ".tsx"])
    timeout: Optional[float] = 300.0


@dataclass
class TypeCheckConfig:
    """TypeScript compiler invocation settings."""

    enabled: bool = True
    command: List[str] = field(
        default_factory=lambda: ["node", "node_modules/typescript/bin/tsc"]
    )
    timeout: Optional[float] = 300.0


@dataclass
class DevReportConfig:
    """Represents the high-level settings defined in .devreport.yml."""

    root: Path
    output: Path = Path("output.md")
    ignore_file: str = ".gitignore"
    exclude_paths: List[str] = field(default_factory=list)
    project_name: Optional[str] = None
    clipboard: bool = True
    app: AppConfig = field(default_factory=AppConfig)
    lint: LintConfig = field(default_factory=LintConfig)
    type_check: TypeCheckConfig = field(default_factory=TypeCheckConfig)

    @property
    def output_path(self) -> Path:
        if self.output.is_absolute():
            return self.output
        return self.root / self.output


def load_config(config_path: Path) -> DevReportConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DevReportConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DevReportConfig(root=root)

    output = _as_str(data.get("output"))
    if output:
        config.output = Path(output)
    ignore_file = _as_str(data.get("ignore_file"))
    if ignore_file:
        config.ignore_file = ignore_file
    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    config.project_name = _as_str(data.get("project_name"))
    clipboard = _as_bool(data.get("clipboard"))
    if clipboard is not None:
        config.clipboard = clipboard

    app_data = _as_dict(data.get("app"))
    if app_data:
        app = config.app
        app.enabled = _bool_or(app_data.get("enabled"), app.enabled)
        app.url = _as_str(app_data.get("url")) or app.url
        app.headless = _bool_or(app_data.get("headless"), app.headless)
        app.overlay_selector = _as_str(app_data.get("overlay_selector")) or app.overlay_selector
        app.ready_timeout = _float_or(app_data.get("ready_timeout"), app.ready_timeout)
        app.quiet_period = _float_or(app_data.get("quiet_period"), app.quiet_period)
        app.settle_timeout = _float_or(app_data.get("settle_timeout"), app.settle_timeout)

    lint_data = _as_dict(data.get("lint"))
    if lint_data:
        lint = config.lint
        lint.enabled = _bool_or(lint_data.get("enabled"), lint.enabled)
        lint.command = _as_command(lint_data.get("command")) or lint.command
        lint.source_dir = _as_str(lint_data.get("source_dir")) or lint.source_dir
        lint.extensions = _as_str_list(lint_data.get("extensions")) or lint.extensions
        lint.timeout = _float_or(lint_data.get("timeout"), lint.timeout)

    type_data = _as_dict(data.get("type_check"))
    if type_data:
        type_check = config.type_check
        type_check.enabled = _bool_or(type_data.get("enabled"), type_check.enabled)
        type_check.command = _as_command(type_data.get("command")) or type_check.command
        type_check.timeout = _float_or(type_data.get("timeout"), type_check.timeout)

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _as_command(value: Any) -> List[str]:
    # A plain string is split on whitespace so `command: npx eslint` works.
    if isinstance(value, str):
        return value.split()
    return _as_str_list(value)


def _bool_or(value: Any, default: bool) -> bool:
    parsed = _as_bool(value)
    return default if parsed is None else parsed


def _float_or(value: Any, default: Optional[float]) -> Optional[float]:
    parsed = _as_float(value)
    return default if parsed is None else parsed
