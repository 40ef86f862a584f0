"""Custom Exceptions for the TextSub application."""

class TextSubError(Exception):
    """Base class for exceptions in this module."""
    pass

class ConfigurationError(TextSubError):
    """Exception raised for errors in configuration loading."""
    pass

class ExtractionError(TextSubError):
    """Exception raised when a document cannot be turned into plain text."""
    pass

class ExportError(TextSubError):
    """Exception raised when a subtitle payload cannot be saved."""
    pass

class FileSystemError(TextSubError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass

class InvalidDurationError(TextSubError, ValueError):
    """Exception raised when a per-line duration is not a positive finite number."""
    pass
