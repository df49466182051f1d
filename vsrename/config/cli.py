"""Command-line interface argument parsing."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Optional

from vsrename.config.context import RenameConfig
from vsrename.config.settings import (
    DEFAULT_LOCATION,
    DEFAULT_SUBTITLE_EXT,
    DEFAULT_VIDEO_EXT,
)

USAGE_EXAMPLES = """\
examples:
  (show renames without actually renaming)
  vsrename --subext="srt" --vidext="mp4" --subregex=".*1x([0-9]+).*" --vidregex=".*S01E([0-9]+).*"

  (show renames and actually rename)
  vsrename -w --subext="srt" --vidext="mp4" --subregex=".*1x([0-9]+).*" --vidregex=".*S01E([0-9]+).*"
"""


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints the full help and exits 0 on bad input."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(0, f"\n{self.prog}: error: {message}\n")


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        subtitle_ext: Subtitle extension (without leading '.').
        video_ext: Video extension (without leading '.').
        subtitle_pattern: Episode regex for subtitle files.
        video_pattern: Episode regex for video files.
        location: Directory to scan.
        write: If True, perform the renames.
        debug: If True, enable debug mode.
    """

    subtitle_ext: str = DEFAULT_SUBTITLE_EXT
    video_ext: str = DEFAULT_VIDEO_EXT
    subtitle_pattern: str = ""
    video_pattern: str = ""
    location: Path = DEFAULT_LOCATION
    write: bool = False
    debug: bool = False

    @property
    def has_patterns(self) -> bool:
        """Check that both episode patterns were supplied."""
        return bool(self.subtitle_pattern) and bool(self.video_pattern)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = UsageArgumentParser(
        prog='vsrename',
        description="""
        Renames video files after the subtitle file of the same episode,
        keeping the video extension.
        """,
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Subtitles
    parser.add_argument(
        '--subext',
        default=DEFAULT_SUBTITLE_EXT,
        help=f"extension of the subtitle files, without leading '.' (default: {DEFAULT_SUBTITLE_EXT})"
    )

    parser.add_argument(
        '--subregex',
        default='',
        help="regex identifying the episode of each subtitle file (as a regex group)"
    )

    # Videos
    parser.add_argument(
        '--vidext',
        default=DEFAULT_VIDEO_EXT,
        help=f"extension of the video files, without leading '.' (default: {DEFAULT_VIDEO_EXT})"
    )

    parser.add_argument(
        '--vidregex',
        default='',
        help="regex identifying the episode of each video file (as a regex group)"
    )

    # Paths
    parser.add_argument(
        '-l', '--location',
        default=str(DEFAULT_LOCATION),
        help=f"location of the video and subtitle files (default: {DEFAULT_LOCATION})"
    )

    # Mode flags
    parser.add_argument(
        '-w', '--write',
        action='store_true',
        help="actually perform the rename"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def normalize_extension(extension: str) -> str:
    """Strip surrounding whitespace and a leading '.' from an extension."""
    extension = extension.strip()
    if extension.startswith('.'):
        extension = extension[1:]
    return extension


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        subtitle_ext=normalize_extension(namespace.subext),
        video_ext=normalize_extension(namespace.vidext),
        subtitle_pattern=namespace.subregex,
        video_pattern=namespace.vidregex,
        location=Path(namespace.location),
        write=namespace.write,
        debug=namespace.debug,
    )


def args_to_config(cli_args: CLIArgs) -> RenameConfig:
    """Build the immutable run configuration from parsed arguments."""
    return RenameConfig(
        subtitle_pattern=cli_args.subtitle_pattern,
        video_pattern=cli_args.video_pattern,
        subtitle_ext=cli_args.subtitle_ext,
        video_ext=cli_args.video_ext,
        location=cli_args.location,
        write=cli_args.write,
        debug=cli_args.debug,
    )
