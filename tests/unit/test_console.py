"""Tests for console UI wrapper."""

from unittest.mock import patch

from vsrename.ui.console import ConsoleUI


class TestConsoleUI:
    """Tests for ConsoleUI class."""

    def test_initialization(self):
        """ConsoleUI initializes with Rich Console."""
        ui = ConsoleUI()
        assert ui.console is not None

    def test_uses_given_console(self, recording_ui):
        """An injected console is used as is."""
        ui = ConsoleUI(recording_ui.console)
        assert ui.console is recording_ui.console

    def test_print_delegates_to_console(self):
        """print() delegates to Rich Console."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print("test message")
            mock_print.assert_called_once_with("test message")

    def test_print_warning(self, recording_ui, output):
        """print_warning() prints the message."""
        recording_ui.print_warning("Warning message")
        assert "Warning message" in output()

    def test_print_error(self, recording_ui, output):
        """print_error() prints the message."""
        recording_ui.print_error("Error message")
        assert "Error message" in output()

    def test_print_line(self, recording_ui, output):
        """print_line() prints the line."""
        recording_ui.print_line("  [green][*][/green] done")
        assert "[*] done" in output()

    def test_print_line_disables_emoji_and_wrap(self):
        """print_line() keeps emoji codes and never wraps."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_line("a :fire: b")
            mock_print.assert_called_once_with("a :fire: b", emoji=False, soft_wrap=True)

    def test_print_panel(self, recording_ui, output):
        """print_panel() prints title and content."""
        recording_ui.print_panel("Panel content", title="Title")
        text = output()
        assert "Panel content" in text
        assert "Title" in text
