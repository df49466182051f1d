"""Tests for the vsrename package entry point."""

from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

from vsrename.__main__ import (
    setup_logging,
    display_configuration,
    main,
)
from vsrename.config import RenameConfig
from vsrename.exceptions import NoVideosFoundError


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Sets up logging with default level."""
        with patch("vsrename.__main__.logger") as mock_logger:
            setup_logging(debug=False)
            mock_logger.remove.assert_called_once()
            assert mock_logger.add.call_count == 2
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "INFO"

    def test_setup_logging_debug(self):
        """Sets up logging with debug level."""
        with patch("vsrename.__main__.logger") as mock_logger:
            setup_logging(debug=True)
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "DEBUG"


class TestDisplayConfiguration:
    """Tests for display_configuration function."""

    def test_displays_simulation_mode(self):
        """Displays configuration in simulation mode."""
        console = MagicMock()

        display_configuration(RenameConfig(subtitle_pattern="a(1)", video_pattern="b(1)"), console)

        console.print_panel.assert_called_once()
        content = console.print_panel.call_args[0][0]
        assert "SIMULATION" in content
        assert "a(1)" in content

    def test_displays_write_mode(self):
        """Displays configuration in write mode."""
        console = MagicMock()

        display_configuration(RenameConfig(write=True, location=Path("/media")), console)

        content = console.print_panel.call_args[0][0]
        assert "WRITE" in content
        assert "/media" in content


@pytest.fixture
def quiet_main():
    """Patch logging setup and the console used by main."""
    with patch("vsrename.__main__.setup_logging") as mock_setup, \
            patch("vsrename.__main__.ConsoleUI") as mock_ui:
        yield mock_setup, mock_ui.return_value


class TestMain:
    """Tests for main function."""

    def test_missing_patterns_prints_usage(self, quiet_main, capsys):
        """Missing pattern prints usage and returns 0."""
        _, console = quiet_main

        with patch("vsrename.__main__.RenameOrchestrator") as mock_orchestrator:
            result = main(["--subregex", ".*1x([0-9]+).*"])

        assert result == 0
        mock_orchestrator.assert_not_called()
        console.print_error.assert_called_once()
        assert "usage" in capsys.readouterr().out

    def test_runs_orchestrator(self, quiet_main, tmp_path):
        """Builds the configuration and runs the orchestrator."""
        mock_setup, _ = quiet_main

        with patch("vsrename.__main__.RenameOrchestrator") as mock_orchestrator:
            result = main([
                "-w", "--debug", "-l", str(tmp_path),
                "--subregex", ".*1x([0-9]+).*", "--vidregex", ".*S01E([0-9]+).*",
            ])

        assert result == 0
        mock_setup.assert_called_once_with(True)
        config = mock_orchestrator.call_args[0][0]
        assert config.write is True
        assert config.location == tmp_path
        mock_orchestrator.return_value.run.assert_called_once()

    def test_aborted_run_returns_zero(self, quiet_main):
        """Run-level errors are reported and exit normally."""
        _, console = quiet_main

        with patch("vsrename.__main__.RenameOrchestrator") as mock_orchestrator:
            mock_orchestrator.return_value.run.side_effect = NoVideosFoundError("No video files found. Aborting.")
            result = main(["--subregex", "a(1)", "--vidregex", "b(1)"])

        assert result == 0
        console.print_error.assert_called_once_with("No video files found. Aborting.")

    def test_aborted_run_reported_once(self, quiet_main):
        """The abort message goes to the console, not to the error log."""
        with patch("vsrename.__main__.RenameOrchestrator") as mock_orchestrator, \
                patch("vsrename.__main__.logger") as mock_logger:
            mock_orchestrator.return_value.run.side_effect = NoVideosFoundError("No video files found. Aborting.")
            main(["--subregex", "a(1)", "--vidregex", "b(1)"])

        mock_logger.error.assert_not_called()
        mock_logger.debug.assert_called_once_with("No video files found. Aborting.")

    def test_malformed_pattern_reported(self, quiet_main, tmp_path):
        """Invalid regex is a configuration error reported to the user."""
        _, console = quiet_main

        result = main(["-l", str(tmp_path), "--subregex", "1x([0-9]+", "--vidregex", "b(1)"])

        assert result == 0
        assert "Invalid subtitle regex" in console.print_error.call_args[0][0]
