"""CLI entrypoint for devreport."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator, RunOptions, RunOutcome
from .project import ProjectError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devreport",
        description=(
            "Collect project sources plus runtime, build, ESLint and TypeScript errors "
            "into a single markdown report."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Report destination, relative to the project root (default: output.md).",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="URL of the running application (default: http://localhost:3000).",
    )
    parser.add_argument(
        "--no-browser",
        dest="browser",
        action="store_false",
        help="Skip capturing runtime and build errors from the running application.",
    )
    parser.add_argument(
        "--no-lint",
        dest="lint",
        action="store_false",
        help="Skip running ESLint.",
    )
    parser.add_argument(
        "--no-typecheck",
        dest="type_check",
        action="store_false",
        help="Skip running the TypeScript compiler.",
    )
    parser.add_argument(
        "--no-clipboard",
        dest="clipboard",
        action="store_false",
        help="Do not copy the report to the clipboard.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for devreport."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    options = RunOptions(
        output=args.output,
        url=args.url,
        browser=args.browser,
        lint=args.lint,
        type_check=args.type_check,
        clipboard=args.clipboard,
    )

    try:
        outcome = Orchestrator().run(args.path, options)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, ProjectError, OSError) as exc:
        parser.exit(1, f"devreport failed: {exc}\nRun with --verbose for more details.\n")

    _print_outcome(outcome)


def _print_outcome(outcome: RunOutcome) -> None:
    if outcome.copied_to_clipboard:
        print("Output generated and copied to clipboard successfully!")
    else:
        print(f"Output generated at {_relativize(outcome.output_path)}")
    print(outcome.summary.render())
    print(f"- Token count: {outcome.token_count}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
