"""Configuration and CLI handling."""

from vsrename.config.settings import (
    DEFAULT_SUBTITLE_EXT,
    DEFAULT_VIDEO_EXT,
    DEFAULT_LOCATION,
    LOG_FILE,
    LOG_ROTATION,
    LOG_RETENTION,
)
from vsrename.config.context import RenameConfig
from vsrename.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    normalize_extension,
    args_to_cli_args,
    args_to_config,
)

__all__ = [
    "DEFAULT_SUBTITLE_EXT",
    "DEFAULT_VIDEO_EXT",
    "DEFAULT_LOCATION",
    "LOG_FILE",
    "LOG_ROTATION",
    "LOG_RETENTION",
    "RenameConfig",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "normalize_extension",
    "args_to_cli_args",
    "args_to_config",
]
