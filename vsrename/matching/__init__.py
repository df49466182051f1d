"""Episode extraction and matching."""

from vsrename.matching.episode import (
    compile_pattern,
    extract_episode,
    build_subtitle_index,
    trim_extension,
    add_extension,
    build_destination_name,
)

__all__ = [
    "compile_pattern",
    "extract_episode",
    "build_subtitle_index",
    "trim_extension",
    "add_extension",
    "build_destination_name",
]
