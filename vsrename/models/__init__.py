"""Data models for video/subtitle renaming."""

from vsrename.models.plan import RenameEntry, RenameSummary

__all__ = ["RenameEntry", "RenameSummary"]
