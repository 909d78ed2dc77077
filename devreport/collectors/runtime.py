"""Runtime and build-overlay errors captured from the running application."""

from __future__ import annotations

from typing import Callable, ContextManager, Iterable, List, Optional, Protocol

from playwright.sync_api import Error as PlaywrightError

from ..logging import get_logger
from ..models import DiagnosticCategory, DiagnosticEntry, SessionDiagnostics

FRAME_MARKER = "at "


class ErrorSource(Protocol):
    def capture_errors(self) -> List[str]: ...

    def read_overlay(self) -> Optional[str]: ...


SessionFactory = Callable[[], ContextManager[ErrorSource]]


class RuntimeErrorCollector:
    """Opens a browser session and summarises what the application reported."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory
        self.logger = get_logger("collectors.runtime")

    def collect(self) -> SessionDiagnostics:
        diagnostics = SessionDiagnostics()
        try:
            with self._session_factory() as session:
                stacks = session.capture_errors()
                diagnostics.runtime = summarize_runtime_errors(stacks)
                diagnostics.build = self._collect_overlay(session)
        except (PlaywrightError, OSError, RuntimeError) as exc:
            self.logger.warning("Failed to capture runtime errors: %s", exc)
            return SessionDiagnostics()
        self.logger.info(
            "Session reported %d runtime and %d build errors",
            len(diagnostics.runtime),
            len(diagnostics.build),
        )
        return diagnostics

    def _collect_overlay(self, session: ErrorSource) -> List[DiagnosticEntry]:
        try:
            text = session.read_overlay()
        except (PlaywrightError, RuntimeError) as exc:
            self.logger.warning("Failed to retrieve build errors: %s", exc)
            return []
        return split_overlay_text(text or "")


def summarize_runtime_errors(stacks: Iterable[object]) -> List[DiagnosticEntry]:
    """Reduce each stack to its headline plus the first call-site frame."""
    entries: List[DiagnosticEntry] = []
    for stack in stacks:
        if not isinstance(stack, str) or not stack.strip():
            continue
        lines = stack.split("\n")
        headline = lines[0].strip()
        frame = next((line.strip() for line in lines[1:] if FRAME_MARKER in line), None)
        text = f"- {headline}\n  {frame}" if frame else f"- {headline}"
        entries.append(DiagnosticEntry(DiagnosticCategory.RUNTIME, text))
    return entries


def split_overlay_text(text: str) -> List[DiagnosticEntry]:
    return [
        DiagnosticEntry(DiagnosticCategory.BUILD, line)
        for line in (raw.strip() for raw in text.strip().split("\n"))
        if line
    ]


__all__ = [
    "RuntimeErrorCollector",
    "SessionFactory",
    "split_overlay_text",
    "summarize_runtime_errors",
]
