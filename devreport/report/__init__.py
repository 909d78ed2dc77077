"""Report rendering: summary statistics and the final markdown document."""

from .assembler import ReportAssembler, render_section, unique_blocks
from .summary import build_summary, count_tokens

__all__ = [
    "ReportAssembler",
    "build_summary",
    "count_tokens",
    "render_section",
    "unique_blocks",
]
