"""File discovery functions for finding videos and subtitles."""

from pathlib import Path
from typing import List

from loguru import logger


def list_files(directory: Path, extension: str) -> List[Path]:
    """
    List files matching '*.<extension>' directly inside directory.

    Args:
        directory: Directory to scan (not recursive).
        extension: Extension without leading '.'.

    Returns:
        Sorted list of matching file paths (empty on access error).
    """
    try:
        files = sorted(
            path for path in directory.glob(f"*.{extension}") if path.is_file()
        )
    except OSError as e:
        logger.warning(f"Cannot list {directory}: {e}")
        return []

    logger.debug(f"{len(files)} *.{extension} files found in {directory}")
    return files
