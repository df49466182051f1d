"""Tests for the run configuration."""

import dataclasses
from pathlib import Path

import pytest

from vsrename.config import RenameConfig


class TestRenameConfig:
    """Tests for RenameConfig dataclass."""

    def test_defaults(self):
        """Has expected default values."""
        config = RenameConfig()

        assert config.subtitle_ext == "srt"
        assert config.video_ext == "mp4"
        assert config.location == Path(".")
        assert config.write is False
        assert config.subtitle_pattern == ""

    def test_is_simulation(self):
        """is_simulation is the opposite of write."""
        assert RenameConfig().is_simulation is True
        assert RenameConfig(write=True).is_simulation is False

    def test_is_immutable(self):
        """Configuration cannot be changed after creation."""
        config = RenameConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.write = True
