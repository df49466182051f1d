"""Entry point for the vsrename package.

This module provides the command-line entry point for the renaming tool.
Run with: python -m vsrename
"""

import sys
from typing import List, Optional

from loguru import logger
from rich.markup import escape

from vsrename.config import (
    LOG_FILE,
    LOG_RETENTION,
    LOG_ROTATION,
    RenameConfig,
    args_to_cli_args,
    args_to_config,
    create_parser,
    parse_arguments,
)
from vsrename.exceptions import VSRenameError
from vsrename.pipeline import RenameOrchestrator
from vsrename.ui import ConsoleUI


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def display_configuration(config: RenameConfig, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        config: Run configuration.
        console: Console UI instance.
    """
    mode_status = "[yellow]SIMULATION[/yellow]" if config.is_simulation else "[red]WRITE[/red]"

    console.print_panel(
        f"[bold]Rename configuration[/bold]\n"
        f"Location: [cyan]{escape(str(config.location))}[/cyan]\n"
        f"Subtitles: [cyan]*.{escape(config.subtitle_ext)}[/cyan] "
        f"regex [cyan]{escape(config.subtitle_pattern)}[/cyan]\n"
        f"Videos: [cyan]*.{escape(config.video_ext)}[/cyan] "
        f"regex [cyan]{escape(config.video_pattern)}[/cyan]\n"
        f"Mode: {mode_status}",
        title="vsrename",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the renaming tool.

    Args:
        argv: Argument strings (None for sys.argv).

    Returns:
        Exit code. Always 0: aborted runs are reported, not signalled.
    """
    # Parse command-line arguments
    cli_args = args_to_cli_args(parse_arguments(argv))

    # Initialize console UI
    console = ConsoleUI()

    # Patterns are required
    if not cli_args.has_patterns:
        console.print_error("Regex pattern for subtitle and videos required. Aborting.")
        create_parser().print_help()
        return 0

    setup_logging(cli_args.debug)
    config = args_to_config(cli_args)

    try:
        orchestrator = RenameOrchestrator(config, ui=console)

        if config.is_simulation:
            console.print_warning("SIMULATION - no file will be renamed (use -w to write)")
        display_configuration(config, console)

        orchestrator.run()
    except VSRenameError as e:
        logger.debug(str(e))
        console.print_error(escape(str(e)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
