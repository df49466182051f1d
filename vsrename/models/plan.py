"""Rename plan data models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class RenameEntry:
    """A single planned rename: video file -> name taken from its subtitle."""

    source: Path
    destination: Path


@dataclass
class RenameSummary:
    """
    Outcome of a rename pass.

    Attributes:
        ignored_subtitles: Subtitle files without an episode key.
        skipped_videos: Video files without an episode key.
        unmatched_videos: Video files whose episode has no subtitle.
        planned: Renames computed for matched videos, in processing order.
        failed: Renames that raised an OS error in write mode.
        renamed: Number of files actually renamed.
    """

    ignored_subtitles: List[Path] = field(default_factory=list)
    skipped_videos: List[Path] = field(default_factory=list)
    unmatched_videos: List[Path] = field(default_factory=list)
    planned: List[RenameEntry] = field(default_factory=list)
    failed: List[RenameEntry] = field(default_factory=list)
    renamed: int = 0

    @property
    def matched(self) -> int:
        """Number of videos paired with a subtitle."""
        return len(self.planned)
