"""File operations for renaming videos."""

from pathlib import Path

from loguru import logger


def rename_file(source: Path, destination: Path) -> bool:
    """
    Rename a file in place.

    The destination is not checked beforehand; an existing file may be
    replaced depending on the platform.

    Args:
        source: Current file path.
        destination: New file path.

    Returns:
        True if successful, False otherwise.
    """
    try:
        source.rename(destination)
    except OSError as e:
        logger.error(f'Error renaming {source} -> {destination}: {e}')
        return False

    logger.info(f'File renamed: {source.name} -> {destination.name}')
    return True
