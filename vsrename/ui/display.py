"""Display functions for rename output."""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from vsrename.models.plan import RenameEntry, RenameSummary
from vsrename.ui.console import ConsoleUI, console as default_console


def _name(path: Path) -> str:
    """Escape a path for use inside Rich markup."""
    return escape(str(path))


def format_file_count(count: int) -> str:
    """
    Format the final renamed count.

    Args:
        count: Number of renamed files.

    Returns:
        "No files renamed." or "N files renamed."
    """
    if count == 0:
        return "No files renamed."
    return f"{count} files renamed."


def display_scan_results(
    video_count: int,
    video_ext: str,
    subtitle_count: int,
    subtitle_ext: str,
    ui: Optional[ConsoleUI] = None
) -> None:
    """Print how many videos and subtitles were found."""
    ui = ui or default_console
    ui.print(
        f"Found total {video_count} video files (*.{escape(video_ext)}) "
        f"and {subtitle_count} subtitle files (*.{escape(subtitle_ext)})."
    )


def display_ignored_subtitle(subtitle: Path, ui: Optional[ConsoleUI] = None) -> None:
    """Print a subtitle that has no episode key."""
    ui = ui or default_console
    ui.print_line(f"  [red][X][/red] Ignoring subtitle file '{_name(subtitle)}' (does not match regex).")


def display_skipped_video(video: Path, ui: Optional[ConsoleUI] = None) -> None:
    """Print a video that has no episode key."""
    ui = ui or default_console
    ui.print_line(f"  [red][X][/red] '{_name(video)}' -> Skipping (episode not found matching regex).")


def display_unmatched_video(video: Path, ui: Optional[ConsoleUI] = None) -> None:
    """Print a video whose episode has no subtitle."""
    ui = ui or default_console
    ui.print_line(f"  [red][X][/red] No subtitle file found for '{_name(video)}'. Skipping.")


def display_rename(entry: RenameEntry, ui: Optional[ConsoleUI] = None) -> None:
    """Print a planned rename."""
    ui = ui or default_console
    ui.print_line(f"  [green][*][/green] '{_name(entry.source)}' -> '{_name(entry.destination)}'")


def display_rename_failure(entry: RenameEntry, ui: Optional[ConsoleUI] = None) -> None:
    """Print a rename that could not be performed."""
    ui = ui or default_console
    ui.print_line(f"  [red][X][/red] Could not rename '{_name(entry.source)}' -> '{_name(entry.destination)}'")


def display_summary(summary: RenameSummary, dry_run: bool = False, ui: Optional[ConsoleUI] = None) -> None:
    """
    Display final rename summary.

    Args:
        summary: Outcome of the rename pass.
        dry_run: Whether this was a dry run.
        ui: Console to print to.
    """
    ui = ui or default_console
    ui.print()
    if dry_run and summary.matched:
        ui.print(f"[dim]SIMULATION - {summary.matched} renames planned, use --write to apply.[/dim]")
    if summary.failed:
        ui.print(f"[red]Failed:[/red] {len(summary.failed)}")
    ui.print(format_file_count(summary.renamed))
