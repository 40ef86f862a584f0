"""Assigns uniform, back-to-back time slots to subtitle lines."""

import logging
import math
import numbers
from decimal import Decimal
from typing import List, Sequence

from .models import SubtitleEntry
from .exceptions import InvalidDurationError

logger = logging.getLogger(__name__)

def build_entries(lines: Sequence[str], duration: float) -> List[SubtitleEntry]:
    """
    Builds one subtitle entry per line.

    Line i (0-based) is shown from ``i * duration`` to ``(i + 1) * duration``,
    so entries are contiguous and the timeline is ``len(lines) * duration``
    long. Lines are expected to be non-blank; a blank one still yields an
    entry, with empty text.

    Args:
        lines: Ordered subtitle lines.
        duration: Display time of one line in seconds. Any positive finite
                  real (int, float, Fraction, Decimal) is accepted; range
                  limits belong to the caller.

    Returns:
        The entries, in line order, numbered from 1.

    Raises:
        InvalidDurationError: If duration is zero, negative or not finite.
    """
    if isinstance(duration, bool) or not isinstance(duration, (numbers.Real, Decimal)):
        raise InvalidDurationError(f"Duration must be a number, got {duration!r}")
    if not math.isfinite(duration) or duration <= 0:
        raise InvalidDurationError(f"Duration must be a positive finite number of seconds, got {duration!r}")

    entries = []
    for i, line in enumerate(lines):
        if not line.strip():
            logger.warning(f"Line {i + 1} is blank; emitting an empty subtitle.")
        entries.append(
            SubtitleEntry(index=i + 1, start=i * duration, end=(i + 1) * duration, text=line)
        )
    logger.debug(f"Built {len(entries)} entries at {duration}s per line.")
    return entries
