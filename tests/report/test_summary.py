"""Tests for summary statistics and token counting."""

from __future__ import annotations

from pathlib import Path

from devreport.models import DiagnosticCategory, DiagnosticEntry
from devreport.report import build_summary, count_tokens


def test_build_summary_counts_uncapped_lists() -> None:
    lint = [DiagnosticEntry(DiagnosticCategory.LINT, f"l{index}") for index in range(8)]
    types = [DiagnosticEntry(DiagnosticCategory.TYPE_CHECK, "t")]

    summary = build_summary(
        [Path("a.js"), Path("empty.js"), Path("b.js")],
        ["[a.js]\nx\n...\n", "[b.js]\ny\nz\n...\n"],
        [],
        [],
        lint,
        types,
    )

    assert summary.total_files == 3
    # 3 + 4 newline-terminated lines, plus the trailing empty piece.
    assert summary.lines_of_code == 8
    assert summary.lint_errors == 8
    assert summary.type_errors == 1
    assert summary.runtime_errors == 0


def test_summary_render_lines() -> None:
    summary = build_summary([], [], [], [], [], [])

    assert summary.render() == (
        "- Total files: 0\n"
        "- Lines of code: 1\n"
        "- Runtime errors: 0\n"
        "- Build errors: 0\n"
        "- ESLint errors: 0\n"
        "- TypeScript errors: 0"
    )


def test_count_tokens_splits_on_whitespace_and_punctuation() -> None:
    assert count_tokens("const x=1;") == 3
    assert count_tokens("  hello   world  ") == 2
    assert count_tokens("") == 0
    assert count_tokens("foo.bar(baz)") == 3


def test_count_tokens_treats_non_ascii_letters_as_separators() -> None:
    # Only ASCII letters, digits and underscore form words.
    assert count_tokens("naïve code") == 3
    assert count_tokens("café") == 1
