"""Serializes subtitle entries into subtitle document text (SRT)."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from .models import SubtitleEntry
from .utils import format_time_srt

logger = logging.getLogger(__name__)

DEFAULT_SRT_FILENAME = "subtitle.srt"
SRT_MEDIA_TYPE = "text/plain;charset=utf-8"

class SubtitleFormatter(ABC):
    """Abstract base class for subtitle formatters."""

    @abstractmethod
    def serialize(self, entries: Sequence[SubtitleEntry]) -> str:
        """
        Serializes the entries into the document text of this format.

        Args:
            entries: Ordered subtitle entries.

        Returns:
            The complete subtitle document as a string.
        """
        pass


class SRTFormatter(SubtitleFormatter):
    """Formats subtitles into the SRT (SubRip Text) format."""

    def format_block(self, entry: SubtitleEntry) -> str:
        """Renders one cue: index, time range, text and the blank separator line."""
        start_time_str = format_time_srt(entry.start)
        end_time_str = format_time_srt(entry.end)
        return f"{entry.index}\n{start_time_str} --> {end_time_str}\n{entry.text}\n\n"

    def serialize(self, entries: Sequence[SubtitleEntry]) -> str:
        blocks = []
        for entry in entries:
            if entry.end <= entry.start:
                logger.warning(f"Entry {entry.index} has zero or negative duration ({entry.start} -> {entry.end}).")
            blocks.append(self.format_block(entry))
        logger.debug(f"Serialized {len(blocks)} SRT blocks.")
        return "".join(blocks)
