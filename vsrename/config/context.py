"""Run configuration for a rename pass."""

from dataclasses import dataclass
from pathlib import Path

from vsrename.config.settings import (
    DEFAULT_LOCATION,
    DEFAULT_SUBTITLE_EXT,
    DEFAULT_VIDEO_EXT,
)


@dataclass(frozen=True)
class RenameConfig:
    """
    Immutable configuration built once at startup.

    Passed explicitly to the pipeline instead of being kept in globals.

    Attributes:
        subtitle_pattern: Regex extracting the episode key from subtitle names.
        video_pattern: Regex extracting the episode key from video names.
        subtitle_ext: Subtitle extension, without leading '.'.
        video_ext: Video extension, without leading '.'.
        location: Directory holding both videos and subtitles.
        write: If True, actually rename files.
        debug: If True, enable debug logging.
    """

    subtitle_pattern: str = ""
    video_pattern: str = ""
    subtitle_ext: str = DEFAULT_SUBTITLE_EXT
    video_ext: str = DEFAULT_VIDEO_EXT
    location: Path = DEFAULT_LOCATION
    write: bool = False
    debug: bool = False

    @property
    def is_simulation(self) -> bool:
        """True when renames are only reported."""
        return not self.write
