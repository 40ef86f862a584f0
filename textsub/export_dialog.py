"""The export confirmation flow: ask for a duration, then export."""

import logging
from enum import Enum
from typing import Callable, Optional

from .models import MIN_DURATION, MAX_DURATION, DURATION_STEP, DEFAULT_DURATION
from .exceptions import TextSubError, InvalidDurationError

logger = logging.getLogger(__name__)

class DialogState(Enum):
    CLOSED = "closed"
    OPEN = "open"

def prompt_duration(raw: Optional[str], default: float = DEFAULT_DURATION) -> float:
    """
    Parses a user-entered duration.

    Empty input selects the default. The value must lie in
    [MIN_DURATION, MAX_DURATION] and is snapped to the nearest DURATION_STEP.

    Raises:
        InvalidDurationError: If the input is not a number or is out of range.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidDurationError(f"Not a number: {raw!r}") from e
    if not MIN_DURATION <= value <= MAX_DURATION:
        raise InvalidDurationError(
            f"Duration must be between {MIN_DURATION:g} and {MAX_DURATION:g} seconds, got {value:g}"
        )
    return round(value / DURATION_STEP) * DURATION_STEP


class ExportDialog:
    """Two-state dialog (closed/open) that runs an export callback on confirm."""

    def __init__(self, on_export: Callable[[float], object], default_duration: float = DEFAULT_DURATION):
        self.on_export = on_export
        self.duration = default_duration
        self.state = DialogState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is DialogState.OPEN

    def open(self) -> None:
        self.state = DialogState.OPEN

    def cancel(self) -> None:
        if not self.is_open:
            raise TextSubError("Cannot cancel: export dialog is not open.")
        logger.info("Export cancelled.")
        self.state = DialogState.CLOSED

    def confirm(self, duration: Optional[float] = None):
        """Closes the dialog and exports with the given (or last used) duration."""
        if not self.is_open:
            raise TextSubError("Cannot confirm: export dialog is not open.")
        if duration is not None:
            self.duration = duration
        self.state = DialogState.CLOSED
        logger.info(f"Export confirmed with {self.duration}s per line.")
        return self.on_export(self.duration)
