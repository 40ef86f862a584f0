"""Data models for TextSub."""

from dataclasses import dataclass

# Duration range offered to the user. The core accepts any positive duration.
MIN_DURATION = 1.0
MAX_DURATION = 10.0
DURATION_STEP = 0.5
DEFAULT_DURATION = 3.0

@dataclass(frozen=True)
class SubtitleEntry:
    """Represents a single numbered, timed line of subtitle text."""
    index: int
    start: float
    end: float
    text: str

@dataclass(frozen=True)
class ExportPayload:
    """What gets handed to a file export sink."""
    content: str
    filename: str
    media_type: str
