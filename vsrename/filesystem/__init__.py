"""Filesystem operations for video/subtitle renaming."""

from vsrename.filesystem.discovery import list_files
from vsrename.filesystem.file_ops import rename_file

__all__ = [
    "list_files",
    "rename_file",
]
