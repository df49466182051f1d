"""
vsrename - Video/subtitle episode renamer.

Pairs video files with subtitle files in a directory by:
- Extracting an episode key from each filename with a regex capture group
- Indexing subtitles by episode key
- Renaming each matching video after its subtitle (keeping the video extension)
"""

__version__ = "0.1.0"
