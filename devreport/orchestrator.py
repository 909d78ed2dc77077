"""Pipeline orchestration for a devreport run."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ContextManager, Iterator, List, Optional

from .collectors.lint import LintCollector
from .collectors.runtime import ErrorSource, RuntimeErrorCollector
from .collectors.session import BrowserSession
from .collectors.typecheck import TypeCheckCollector
from .config import AppConfig, ConfigError, DevReportConfig, load_config
from .delivery import Copier, copy_to_clipboard, truncate_output, write_report
from .logging import get_logger
from .models import DiagnosticEntry, ReportSummary, SessionDiagnostics
from .project import ProjectError, read_project_name
from .renderer import ContentRenderer
from .repo_scanner import RepoScanner
from .report import ReportAssembler, build_summary, count_tokens
from .rules import load_rules

SessionFactory = Callable[[AppConfig], ContextManager[ErrorSource]]


@dataclass
class RunOptions:
    """Command-line overrides applied on top of .devreport.yml."""

    output: Optional[Path] = None
    url: Optional[str] = None
    browser: bool = True
    lint: bool = True
    type_check: bool = True
    clipboard: bool = True


@dataclass
class RunOutcome:
    """Result of a report run."""

    output_path: Path
    report: str
    summary: ReportSummary
    token_count: int
    copied_to_clipboard: bool


def _default_session_factory(app: AppConfig) -> BrowserSession:
    return BrowserSession(
        app.url,
        headless=app.headless,
        overlay_selector=app.overlay_selector,
        ready_timeout=app.ready_timeout,
        quiet_period=app.quiet_period,
        settle_timeout=app.settle_timeout,
    )


class Orchestrator:
    """Runs collectors, scans the project and delivers the assembled report."""

    def __init__(
        self,
        scanner: RepoScanner | None = None,
        assembler: ReportAssembler | None = None,
        session_factory: SessionFactory | None = None,
        lint_collector: LintCollector | None = None,
        type_check_collector: TypeCheckCollector | None = None,
        copier: Copier | None = None,
    ) -> None:
        self.scanner = scanner or RepoScanner()
        self.assembler = assembler or ReportAssembler()
        self._session_factory = session_factory or _default_session_factory
        self._lint_collector = lint_collector
        self._type_check_collector = type_check_collector
        self._copier = copier
        self.logger = get_logger("orchestrator")

    def run(self, path: str | Path, options: RunOptions | None = None) -> RunOutcome:
        """Build the report for the project at ``path``."""
        options = options or RunOptions()
        root = Path(path).expanduser().resolve()
        self.logger.info("Starting report run for %s", root)
        if not root.exists():
            self.logger.error("Project path not found: %s", root)
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            self.logger.error("Project path is not a directory: %s", root)
            raise NotADirectoryError(f"Project path is not a directory: {path}")

        config = self._load_config(root, options)
        output_path = config.output_path

        session = self._collect_session(config)
        lint_errors = self._collect_lint(root, config)
        type_errors = self._collect_type_errors(root, config)

        with self._fatal_step("Clearing previous report"):
            truncate_output(output_path)

        with self._fatal_step("Project scan"):
            rules = load_rules(root, config.exclude_paths, ignore_file=config.ignore_file)
            report_path = output_path.resolve()
            file_paths = [
                file_path
                for file_path in self.scanner.enumerate(root, rules)
                if file_path.resolve() != report_path
            ]
            renderer = ContentRenderer(root, output_path)
            file_blocks = [block for block in map(renderer.render, file_paths) if block]
        self.logger.debug(
            "Rendered %d non-empty files out of %d", len(file_blocks), len(file_paths)
        )

        with self._fatal_step("Reading project metadata"):
            project_name = read_project_name(root, config.project_name)

        summary = build_summary(
            file_paths,
            file_blocks,
            session.runtime,
            session.build,
            lint_errors,
            type_errors,
        )
        report = self.assembler.assemble(
            file_blocks,
            session.runtime,
            session.build,
            lint_errors,
            type_errors,
            summary,
            project_name,
        )

        with self._fatal_step("Writing report"):
            write_report(output_path, report)

        copied = False
        if config.clipboard:
            copied = copy_to_clipboard(report, self._copier)
        else:
            self.logger.info("Clipboard copy disabled")

        return RunOutcome(
            output_path=output_path,
            report=report,
            summary=summary,
            token_count=count_tokens(report),
            copied_to_clipboard=copied,
        )

    # ------------------------------------------------------------------
    # Internals

    def _load_config(self, root: Path, options: RunOptions) -> DevReportConfig:
        try:
            config = load_config(root)
        except ConfigError as exc:
            self.logger.error("Loading configuration failed: %s", exc)
            raise
        if options.output is not None:
            config.output = options.output
        if options.url:
            config.app.url = options.url
        config.app.enabled = config.app.enabled and options.browser
        config.lint.enabled = config.lint.enabled and options.lint
        config.type_check.enabled = config.type_check.enabled and options.type_check
        config.clipboard = config.clipboard and options.clipboard
        return config

    def _collect_session(self, config: DevReportConfig) -> SessionDiagnostics:
        if not config.app.enabled:
            self.logger.info("Browser capture disabled; skipping runtime and build errors")
            return SessionDiagnostics()
        collector = RuntimeErrorCollector(lambda: self._session_factory(config.app))
        return collector.collect()

    def _collect_lint(self, root: Path, config: DevReportConfig) -> List[DiagnosticEntry]:
        if not config.lint.enabled:
            self.logger.info("ESLint disabled")
            return []
        collector = self._lint_collector or LintCollector(
            config.lint.command,
            source_dir=config.lint.source_dir,
            extensions=config.lint.extensions,
            timeout=config.lint.timeout,
        )
        return collector.collect(root)

    def _collect_type_errors(self, root: Path, config: DevReportConfig) -> List[DiagnosticEntry]:
        if not config.type_check.enabled:
            self.logger.info("TypeScript check disabled")
            return []
        collector = self._type_check_collector or TypeCheckCollector(
            config.type_check.command,
            timeout=config.type_check.timeout,
        )
        return collector.collect(root)

    @contextmanager
    def _fatal_step(self, step: str) -> Iterator[None]:
        try:
            yield
        except (OSError, ProjectError) as exc:
            self.logger.error("%s failed: %s", step, exc)
            raise


__all__ = ["Orchestrator", "RunOptions", "RunOutcome"]
