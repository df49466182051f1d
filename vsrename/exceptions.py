"""Exceptions raised while configuring or running a rename."""


class VSRenameError(Exception):
    """Base class for all vsrename errors."""

    pass


class ConfigurationError(VSRenameError):
    """Invalid run configuration (missing or malformed pattern)."""

    pass


class NoInputError(VSRenameError):
    """Nothing to work on: the run stops before renaming anything."""

    pass


class NoVideosFoundError(NoInputError):
    """No video file matched the video extension in the location."""

    pass


class NoSubtitlesMatchedError(NoInputError):
    """No subtitle file produced an episode key."""

    pass
