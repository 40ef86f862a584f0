"""File export sinks for finished subtitle payloads."""

import logging
import os
from abc import ABC, abstractmethod

from .models import ExportPayload
from .exceptions import ExportError
from .utils import ensure_dir_exists

logger = logging.getLogger(__name__)

class FileExporter(ABC):
    """Abstract base class for anything that can save an export payload."""

    @abstractmethod
    def export(self, payload: ExportPayload) -> None:
        """
        Persists the payload under its suggested filename.

        Raises:
            ExportError: If the payload cannot be saved.
        """
        pass


class LocalFileExporter(FileExporter):
    """Saves payloads as files in a local directory."""

    def __init__(self, output_dir: str):
        self.output_dir = output_dir
        self.last_path = None

    def export(self, payload: ExportPayload) -> None:
        ensure_dir_exists(self.output_dir)
        output_path = os.path.join(self.output_dir, payload.filename)
        logger.info(f"Saving {payload.media_type} payload to {output_path}")
        try:
            with open(output_path, 'wb') as f:
                f.write(payload.content.encode('utf-8'))
        except OSError as e:
            logger.error(f"Failed to save {output_path}: {e}", exc_info=True)
            raise ExportError(f"Could not save {output_path}: {e}") from e
        self.last_path = output_path
