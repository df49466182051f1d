"""User interface components."""

from vsrename.ui.console import ConsoleUI, console
from vsrename.ui.display import (
    format_file_count,
    display_scan_results,
    display_ignored_subtitle,
    display_skipped_video,
    display_unmatched_video,
    display_rename,
    display_rename_failure,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "console",
    "format_file_count",
    "display_scan_results",
    "display_ignored_subtitle",
    "display_skipped_video",
    "display_unmatched_video",
    "display_rename",
    "display_rename_failure",
    "display_summary",
]
