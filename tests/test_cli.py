"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from devreport import cli
from devreport.cli import _build_parser
from devreport.models import ReportSummary
from devreport.orchestrator import RunOutcome


def test_cli_defaults() -> None:
    args = _build_parser().parse_args([])
    assert args.path == "."
    assert args.verbose is False
    assert args.output is None
    assert args.url is None
    assert (args.browser, args.lint, args.type_check, args.clipboard) == (True, True, True, True)


def test_cli_accepts_skip_flags() -> None:
    args = _build_parser().parse_args(
        ["app", "--no-browser", "--no-lint", "--no-typecheck", "--no-clipboard", "-v"]
    )
    assert args.path == "app"
    assert args.verbose is True
    assert (args.browser, args.lint, args.type_check, args.clipboard) == (False, False, False, False)


def test_cli_accepts_output_and_url() -> None:
    args = _build_parser().parse_args(["--output", "ctx.txt", "--url", "http://localhost:5173"])
    assert args.output == Path("ctx.txt")
    assert args.url == "http://localhost:5173"


class _StubOrchestrator:
    calls: list = []
    error: Exception | None = None

    def run(self, path, options):  # type: ignore[no-untyped-def]
        type(self).calls.append((path, options))
        if type(self).error is not None:
            raise type(self).error
        return RunOutcome(
            output_path=Path("output.md").resolve(),
            report="# Overview\n",
            summary=ReportSummary(1, 3, 0, 0, 2, 0),
            token_count=1,
            copied_to_clipboard=True,
        )


def test_main_prints_summary_and_token_count(monkeypatch, capsys) -> None:
    _StubOrchestrator.calls = []
    _StubOrchestrator.error = None
    monkeypatch.setattr(cli, "Orchestrator", _StubOrchestrator)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)

    cli.main(["project", "--no-lint"])

    out = capsys.readouterr().out
    assert "Output generated and copied to clipboard successfully!" in out
    assert "- Total files: 1" in out
    assert "- ESLint errors: 2" in out
    assert "- Token count: 1" in out
    path, options = _StubOrchestrator.calls[0]
    assert path == "project"
    assert options.lint is False
    assert options.browser is True


def test_main_exits_non_zero_on_fatal_error(monkeypatch, capsys) -> None:
    _StubOrchestrator.calls = []
    _StubOrchestrator.error = PermissionError(13, "Permission denied", "output.md")
    monkeypatch.setattr(cli, "Orchestrator", _StubOrchestrator)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "devreport failed" in capsys.readouterr().err
    _StubOrchestrator.error = None
