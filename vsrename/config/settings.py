"""Configuration settings and constants for the vsrename package."""

from pathlib import Path

# Default extensions (without leading '.')
DEFAULT_SUBTITLE_EXT = "srt"
DEFAULT_VIDEO_EXT = "mp4"

# Default directory scanned for videos and subtitles
DEFAULT_LOCATION = Path(".")

# Log file
LOG_FILE = "vsrename.log"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"
