"""Tests for devreport.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from devreport.config import AppConfig, ConfigError, DevReportConfig, LintConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DevReportConfig)
    assert config.root == tmp_path.resolve()
    assert config.output_path == tmp_path.resolve() / "output.md"
    assert config.ignore_file == ".gitignore"
    assert config.exclude_paths == []
    assert config.project_name is None
    assert config.clipboard is True
    assert config.app == AppConfig()
    assert config.lint == LintConfig()
    assert config.lint.command == ["node", "node_modules/eslint/bin/eslint.js"]
    assert config.type_check.command == ["node", "node_modules/typescript/bin/tsc"]


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".devreport.yml"
    config_file.write_text(
        """
output: reports/context.txt
ignore_file: .reportignore
project_name: "storefront"
clipboard: false
exclude_paths:
  - "/fixtures"
  - "*.snap"
app:
  url: "http://localhost:5173"
  headless: "no"
  overlay_selector: "vite-error-overlay"
  ready_timeout: 10
  quiet_period: 0.5
  settle_timeout: "8"
lint:
  command: npx eslint
  source_dir: app
  extensions: [.js, .vue]
  timeout: 60
type_check:
  enabled: false
  command: [npx, tsc]
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.output_path == tmp_path.resolve() / "reports" / "context.txt"
    assert config.ignore_file == ".reportignore"
    assert config.project_name == "storefront"
    assert config.clipboard is False
    assert config.exclude_paths == ["/fixtures", "*.snap"]

    assert config.app.url == "http://localhost:5173"
    assert config.app.headless is False
    assert config.app.overlay_selector == "vite-error-overlay"
    assert config.app.ready_timeout == pytest.approx(10.0)
    assert config.app.quiet_period == pytest.approx(0.5)
    assert config.app.settle_timeout == pytest.approx(8.0)

    assert config.lint.command == ["npx", "eslint"]
    assert config.lint.source_dir == "app"
    assert config.lint.extensions == [".js", ".vue"]
    assert config.lint.timeout == pytest.approx(60.0)

    assert config.type_check.enabled is False
    assert config.type_check.command == ["npx", "tsc"]


def test_load_config_absolute_output_is_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "report.md"
    (tmp_path / ".devreport.yml").write_text(f"output: {target}\n", encoding="utf-8")

    assert load_config(tmp_path).output_path == target


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".devreport.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.app.enabled is True
    assert config.output_path.name == "output.md"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".devreport.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".devreport.yml").write_text("app: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert ".devreport.yml" in str(excinfo.value)


def test_load_config_wraps_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / ".devreport.yml").write_bytes(b"project_name: Caf\xe9\n")

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert "Failed to read .devreport.yml" in str(excinfo.value)
