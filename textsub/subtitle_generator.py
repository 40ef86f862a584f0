"""Orchestrates the text-to-subtitle pipeline."""

import logging
from typing import Optional, Tuple

from .document_reader import DocumentReader, reader_for_path
from .exporter import FileExporter
from .subtitle_formatter import SubtitleFormatter, SRTFormatter, SRT_MEDIA_TYPE
from .config_loader import merge_with_defaults
from .models import ExportPayload
from .exceptions import ExtractionError, TextSubError
from .line_filter import split_lines
from .normalizer import normalize
from .timer import build_entries

logger = logging.getLogger(__name__)

class SubtitleGenerator:
    """
    Turns document text into an SRT payload and hands it to an exporter.

    Normalization and export are separate steps over the same text: export
    never normalizes on its own, the caller decides when to call normalize().
    """

    def __init__(
        self,
        config: Optional[dict] = None,
        document_reader: Optional[DocumentReader] = None,
        exporter: Optional[FileExporter] = None,
        subtitle_formatter: Optional[SubtitleFormatter] = None,
    ):
        """
        Initializes the SubtitleGenerator.

        Args:
            config: Configuration settings; missing keys fall back to DEFAULT_CONFIG.
            document_reader: Reader to use for every document. If None, one is
                             picked per file from its extension.
            exporter: Sink that receives finished payloads. Required by export().
            subtitle_formatter: Serializer for entries. Defaults to SRTFormatter.
        """
        self.config = merge_with_defaults(config or {})
        self.document_reader = document_reader
        self.exporter = exporter
        self.subtitle_formatter = subtitle_formatter or SRTFormatter()
        self.output_filename = self.config['output_filename']
        self.error_placeholder = self.config['error_placeholder']

    def try_load_text(self, document_path: str) -> Tuple[str, Optional[ExtractionError]]:
        """
        Extracts the text of a document, reporting a decode failure next to it.

        Returns:
            (text, None) on success, or (error placeholder, the error) if the
            document cannot be decoded.

        Raises:
            FileNotFoundError: If the document does not exist.
        """
        try:
            reader = self.document_reader or reader_for_path(document_path)
            return reader.read(document_path), None
        except ExtractionError as e:
            logger.error(f"Error reading file {document_path}: {e}")
            return self.error_placeholder, e

    def load_text(self, document_path: str) -> str:
        """
        Extracts the text of a document.

        A document that cannot be decoded is not fatal: the configured error
        placeholder is returned instead and processed like any other text.

        Raises:
            FileNotFoundError: If the document does not exist.
        """
        text, _ = self.try_load_text(document_path)
        return text

    def normalize(self, text: str) -> str:
        """Replaces punctuation with line breaks."""
        normalized = normalize(text)
        logger.info(f"Replaced punctuation with line breaks ({len(text)} characters in)")
        return normalized

    def build_srt(self, text: str, duration: float) -> str:
        """
        Builds the SRT document for the text.

        Blank lines are dropped, every remaining line gets `duration` seconds.

        Raises:
            InvalidDurationError: If duration is not a positive finite number.
        """
        lines = split_lines(text)
        entries = build_entries(lines, duration)
        logger.info(f"Built {len(entries)} subtitle entries ({float(len(entries) * duration):g}s total)")
        return self.subtitle_formatter.serialize(entries)

    def build_payload(self, text: str, duration: float, filename: Optional[str] = None) -> ExportPayload:
        return ExportPayload(
            content=self.build_srt(text, duration),
            filename=filename or self.output_filename,
            media_type=SRT_MEDIA_TYPE,
        )

    def export(self, text: str, duration: Optional[float] = None, filename: Optional[str] = None) -> ExportPayload:
        """
        Builds the SRT payload and hands it to the exporter.

        Args:
            text: The current document text.
            duration: Seconds per line. Defaults to the configured duration.
            filename: Suggested filename. Defaults to the configured output filename.

        Returns:
            The payload that was exported.

        Raises:
            TextSubError: If no exporter is configured.
            InvalidDurationError: If duration is not a positive finite number.
            ExportError: If the exporter fails to save the payload.
        """
        if self.exporter is None:
            raise TextSubError("No exporter configured.")
        if duration is None:
            duration = self.config['duration']
        payload = self.build_payload(text, duration, filename)
        self.exporter.export(payload)
        logger.info(f"Exported {payload.filename}")
        return payload
