"""Episode key extraction and subtitle/video name matching."""

import re
from pathlib import Path
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from loguru import logger

from vsrename.exceptions import ConfigurationError


def compile_pattern(pattern: str, label: str) -> Pattern[str]:
    """
    Compile a user-supplied episode pattern.

    Args:
        pattern: Regex whose first capture group is the episode key.
        label: Kind of file the pattern applies to, used in messages.

    Returns:
        Compiled pattern.

    Raises:
        ConfigurationError: If the pattern is empty or not a valid regex.
    """
    if not pattern:
        raise ConfigurationError(f"Regex pattern for {label} files is required")

    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid {label} regex '{pattern}': {e}") from e

    if compiled.groups < 1:
        logger.warning(f"{label.capitalize()} regex '{pattern}' has no capture group, no file will match")

    return compiled


def extract_episode(pattern: Pattern[str], filename: str) -> Optional[str]:
    """
    Extract the episode key from a filename.

    The pattern is searched anywhere in the name; the key is its first
    capture group. A group that did not take part in the match gives ''.

    Args:
        pattern: Compiled episode pattern.
        filename: File name to search.

    Returns:
        The episode key, or None if there is no match or no group.
    """
    match = pattern.search(filename)
    if match is None or pattern.groups < 1:
        return None
    return match.group(1) or ""


def build_subtitle_index(
    subtitles: Sequence[Path],
    pattern: Pattern[str]
) -> Tuple[Dict[str, Path], List[Path]]:
    """
    Index subtitle files by episode key.

    A later subtitle with an already indexed key replaces the earlier one.

    Args:
        subtitles: Subtitle files in listing order.
        pattern: Compiled subtitle episode pattern.

    Returns:
        Tuple of (episode key -> subtitle path, ignored subtitle paths).
    """
    index: Dict[str, Path] = {}
    ignored: List[Path] = []

    for subtitle in subtitles:
        episode = extract_episode(pattern, subtitle.name)
        if episode is None:
            logger.debug(f"Ignoring subtitle (no episode match): {subtitle.name}")
            ignored.append(subtitle)
            continue

        if episode in index:
            logger.warning(
                f"Episode '{episode}' already indexed from {index[episode].name}, "
                f"replaced by {subtitle.name}"
            )
        index[episode] = subtitle
        logger.debug(f"Subtitle episode '{episode}': {subtitle.name}")

    return index, ignored


def trim_extension(filename: str, extension: str) -> str:
    """
    Remove '.<extension>' from the end of a filename, if present.

    Only the literal suffix is removed: 'Test.srt' gives 'Test'.
    """
    suffix = f".{extension}"
    if filename.endswith(suffix):
        return filename[:-len(suffix)]
    return filename


def add_extension(stem: str, extension: str) -> str:
    """Append '.<extension>' to a filename without extension."""
    return f"{stem}.{extension}"


def build_destination_name(subtitle_name: str, subtitle_ext: str, video_ext: str) -> str:
    """
    Compute the new video name from its subtitle name.

    Args:
        subtitle_name: Name of the matching subtitle file.
        subtitle_ext: Subtitle extension to strip.
        video_ext: Video extension to append.

    Returns:
        Subtitle name with the video extension.
    """
    return add_extension(trim_extension(subtitle_name, subtitle_ext), video_ext)
