"""Orchestration of a video/subtitle rename pass."""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from vsrename.config.context import RenameConfig
from vsrename.exceptions import NoSubtitlesMatchedError, NoVideosFoundError
from vsrename.filesystem import list_files, rename_file
from vsrename.matching import (
    build_destination_name,
    build_subtitle_index,
    compile_pattern,
    extract_episode,
)
from vsrename.models.plan import RenameEntry, RenameSummary
from vsrename.ui import display
from vsrename.ui.console import ConsoleUI

RenameFn = Callable[[Path, Path], bool]
ListFn = Callable[[Path, str], List[Path]]


class RenameOrchestrator:
    """
    Runs the rename pass for one directory.

    Builds the subtitle index from the subtitle pattern, then looks up the
    episode of every video and renames it after its subtitle. Patterns are
    compiled on construction so a bad pattern fails before any file access.
    """

    def __init__(
        self,
        config: RenameConfig,
        ui: Optional[ConsoleUI] = None,
        list_fn: ListFn = list_files,
        rename_fn: RenameFn = rename_file,
    ):
        """
        Initialise the orchestrator.

        Args:
            config: Run configuration.
            ui: Console for user-facing output.
            list_fn: Directory lister, (directory, extension) -> files.
            rename_fn: Filesystem rename, (source, destination) -> success.

        Raises:
            ConfigurationError: If a pattern is missing or invalid.
        """
        self.config = config
        self.ui = ui or ConsoleUI()
        self._list_fn = list_fn
        self._rename_fn = rename_fn
        self.subtitle_regex = compile_pattern(config.subtitle_pattern, "subtitle")
        self.video_regex = compile_pattern(config.video_pattern, "video")

    def scan(self) -> Tuple[List[Path], List[Path]]:
        """
        List subtitle and video files in the configured location.

        Returns:
            Tuple of (subtitle files, video files).
        """
        cfg = self.config
        subtitles = self._list_fn(cfg.location, cfg.subtitle_ext)
        videos = self._list_fn(cfg.location, cfg.video_ext)
        logger.info(f"{len(videos)} videos and {len(subtitles)} subtitles in {cfg.location}")
        display.display_scan_results(
            len(videos), cfg.video_ext, len(subtitles), cfg.subtitle_ext, self.ui
        )
        return subtitles, videos

    def build_index(self, subtitles: Sequence[Path], summary: RenameSummary) -> Dict[str, Path]:
        """Index subtitles by episode, reporting ignored ones."""
        index, ignored = build_subtitle_index(subtitles, self.subtitle_regex)
        for subtitle in ignored:
            display.display_ignored_subtitle(subtitle, self.ui)
        summary.ignored_subtitles.extend(ignored)
        return index

    def match(self, subtitles: Sequence[Path], videos: Sequence[Path]) -> RenameSummary:
        """
        Pair videos with subtitles and rename them.

        Args:
            subtitles: Subtitle files in listing order.
            videos: Video files in listing order.

        Returns:
            RenameSummary of the pass.

        Raises:
            NoVideosFoundError: If there is no video.
            NoSubtitlesMatchedError: If no subtitle yields an episode key.
        """
        if not videos:
            raise NoVideosFoundError("No video files found. Aborting.")

        summary = RenameSummary()
        index = self.build_index(subtitles, summary)
        if not index:
            raise NoSubtitlesMatchedError("No subtitles matching regex found. Aborting.")

        for video in videos:
            self._process_video(video, index, summary)

        return summary

    def _process_video(self, video: Path, index: Dict[str, Path], summary: RenameSummary) -> None:
        """Match a single video and rename it if a subtitle exists."""
        cfg = self.config

        episode = extract_episode(self.video_regex, video.name)
        if episode is None:
            logger.debug(f"No episode in video name: {video.name}")
            display.display_skipped_video(video, self.ui)
            summary.skipped_videos.append(video)
            return

        subtitle = index.get(episode)
        if subtitle is None:
            logger.debug(f"No subtitle for episode '{episode}': {video.name}")
            display.display_unmatched_video(video, self.ui)
            summary.unmatched_videos.append(video)
            return

        new_name = build_destination_name(subtitle.name, cfg.subtitle_ext, cfg.video_ext)
        entry = RenameEntry(source=video, destination=video.with_name(new_name))
        summary.planned.append(entry)
        display.display_rename(entry, self.ui)

        if cfg.is_simulation:
            return

        if self._rename_fn(entry.source, entry.destination):
            summary.renamed += 1
        else:
            summary.failed.append(entry)
            display.display_rename_failure(entry, self.ui)

    def run(self) -> RenameSummary:
        """
        Scan the location, match and rename, then print the summary.

        Returns:
            RenameSummary of the pass.
        """
        subtitles, videos = self.scan()
        summary = self.match(subtitles, videos)
        display.display_summary(summary, dry_run=self.config.is_simulation, ui=self.ui)
        logger.info(f"{summary.renamed} files renamed, {len(summary.failed)} failed")
        return summary
