"""Handles turning uploaded documents into plain text."""

import io
import logging
import os
from abc import ABC, abstractmethod

import mammoth

from .exceptions import ExtractionError

logger = logging.getLogger(__name__)

class DocumentReader(ABC):
    """Abstract base class for document-to-text extractors."""

    @abstractmethod
    def extract_text(self, payload: bytes) -> str:
        """
        Extracts the plain text of a document.

        Args:
            payload: The raw bytes of the document.

        Returns:
            The extracted text.

        Raises:
            ExtractionError: If the payload cannot be decoded.
        """
        pass

    def read(self, path: str) -> str:
        """
        Reads a document from disk and extracts its text.

        Raises:
            FileNotFoundError: If the document does not exist.
            ExtractionError: If the file cannot be read or decoded.
        """
        logger.info(f"Reading document: {path}")
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Input document not found: {path}")
        try:
            with open(path, 'rb') as f:
                payload = f.read()
        except OSError as e:
            raise ExtractionError(f"Could not read document {path}: {e}") from e
        text = self.extract_text(payload)
        logger.info(f"Extracted {len(text)} characters from {path}")
        return text


class MammothDocumentReader(DocumentReader):
    """Extracts raw text from .docx documents with mammoth."""

    def extract_text(self, payload: bytes) -> str:
        try:
            result = mammoth.extract_raw_text(io.BytesIO(payload))
        except Exception as e:
            logger.error(f"mammoth failed to decode document: {e}", exc_info=True)
            raise ExtractionError(f"Could not extract text from document: {e}") from e
        for message in result.messages:
            logger.debug(f"mammoth: {message}")
        return result.value


class PlainTextReader(DocumentReader):
    """Reads UTF-8 text files as they are."""

    def extract_text(self, payload: bytes) -> str:
        try:
            return payload.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise ExtractionError(f"Text file is not valid UTF-8: {e}") from e


def reader_for_path(path: str) -> DocumentReader:
    """
    Picks a reader by file extension.

    Raises:
        ExtractionError: If the extension is not supported.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == '.docx':
        return MammothDocumentReader()
    if ext == '.txt':
        return PlainTextReader()
    raise ExtractionError(f"Unsupported document type '{ext}' for {path}. Expected .docx or .txt.")
