"""Adapters that translate external tool output into diagnostic entries."""

from .base import CommandCollector
from .lint import LintCollector, parse_eslint_output
from .runtime import RuntimeErrorCollector, split_overlay_text, summarize_runtime_errors
from .session import BrowserSession, wait_for_quiet
from .typecheck import TypeCheckCollector, summarize_typescript_errors

__all__ = [
    "BrowserSession",
    "CommandCollector",
    "LintCollector",
    "RuntimeErrorCollector",
    "TypeCheckCollector",
    "parse_eslint_output",
    "split_overlay_text",
    "summarize_runtime_errors",
    "summarize_typescript_errors",
    "wait_for_quiet",
]
