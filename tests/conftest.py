"""Pytest configuration and fixtures."""

import io

import pytest
from rich.console import Console

from vsrename.config import RenameConfig
from vsrename.ui.console import ConsoleUI

SUBTITLE_REGEX = r".*1x([0-9]+).*"
VIDEO_REGEX = r".*S01E([0-9]+).*"


@pytest.fixture
def recording_ui():
    """ConsoleUI writing to an in-memory buffer."""
    return ConsoleUI(Console(file=io.StringIO(), width=300, color_system=None))


@pytest.fixture
def output(recording_ui):
    """Return a callable giving what was printed so far."""
    return lambda: recording_ui.console.file.getvalue()


@pytest.fixture
def make_config(tmp_path):
    """Factory for a RenameConfig pointing at tmp_path."""
    def _make(**kwargs):
        values = {
            "subtitle_pattern": SUBTITLE_REGEX,
            "video_pattern": VIDEO_REGEX,
            "location": tmp_path,
        }
        values.update(kwargs)
        return RenameConfig(**values)
    return _make


@pytest.fixture
def media_dir(tmp_path):
    """Directory with a small season of videos and subtitles."""
    for name in [
        "Show.1x01.srt",
        "Show.1x02.srt",
        "Show.1x03.srt",
        "Show.S01E01.mp4",
        "Show.S01E02.mp4",
        "Show.S01E04.mp4",
        "Show.Extras.mp4",
    ]:
        (tmp_path / name).write_text(name)
    return tmp_path
