"""Utility functions for TextSub."""

import os
import logging
from fractions import Fraction
from .exceptions import FileSystemError

logger = logging.getLogger(__name__)

def ensure_dir_exists(dir_path: str) -> None:
    """
    Ensures that a directory exists. Creates it if it doesn't.

    Args:
        dir_path: The path to the directory.

    Raises:
        FileSystemError: If the directory cannot be created due to permissions
                         or if the path exists but is not a directory.
    """
    if not dir_path:
        raise ValueError("Directory path cannot be empty.")
    try:
        if not os.path.exists(dir_path):
            os.makedirs(dir_path)
            logger.info(f"Created directory: {dir_path}")
        elif not os.path.isdir(dir_path):
            raise FileSystemError(f"Path exists but is not a directory: {dir_path}")
    except OSError as e:
        logger.error(f"Error creating or accessing directory {dir_path}: {e}", exc_info=True)
        raise FileSystemError(f"Could not create or access directory {dir_path}: {e}") from e

def format_time_srt(seconds: float) -> str:
    """
    Formats seconds into SRT time format HH:MM:SS,mmm.

    Every field is truncated, never rounded: 3.999 gives 00:00:03,999.
    Hours are not clipped, so 360000 seconds gives 100:00:00,000.

    Args:
        seconds: Non-negative time in seconds (int, float, Fraction or Decimal).

    Returns:
        Formatted time string.

    Raises:
        ValueError: If seconds is negative.
    """
    if seconds < 0:
        raise ValueError(f"Cannot format negative time: {seconds}")
    # Floats go through their shortest repr, so 3661.999 stays 3661.999 and not 3661.99899...
    value = Fraction(str(seconds)) if isinstance(seconds, float) else Fraction(seconds)
    hrs = int(value // 3600)
    mins = int((value % 3600) // 60)
    secs = int(value % 60)
    milliseconds = int((value % 1) * 1000)
    return f"{hrs:02d}:{mins:02d}:{secs:02d},{milliseconds:03d}"
