"""
Custom Exceptions Module.

This module defines the custom exceptions used throughout the weighing
slip parser. Diagnostics produced while parsing a single slip are plain
strings collected in the parsing context; these exceptions cover the
surfaces around it (configuration, document loading, export).

Exception Hierarchy:
    WeighingSlipError (base)
    ├── ConfigurationError
    ├── DocumentLoadError
    ├── ExtractionError
    ├── ValidationError
    └── ExcelExportError
"""


class WeighingSlipError(Exception):
    """
    Base exception for all weighing slip parser errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(WeighingSlipError):
    """Raised when a configuration value is missing or out of range."""

    def __init__(self, key: str, reason: str = None):
        message = f"Invalid configuration value: {key}"
        details = {"key": key, "reason": reason}
        super().__init__(message, details)


class DocumentLoadError(WeighingSlipError):
    """
    Raised when an OCR response cannot be turned into a document.

    Example:
        >>> raise DocumentLoadError("slip_01.json", "No pages in OCR response")
    """

    def __init__(self, source: str, reason: str = None):
        message = f"Could not load OCR document: {source}"
        details = {"source": source, "reason": reason}
        super().__init__(message, details)


class ExtractionError(WeighingSlipError):
    """
    A field extractor failed unexpectedly.

    The pipeline turns it into a warning and keeps extracting the other
    fields, so the message is the warning text.
    """

    def __init__(self, field: str, reason: str = None):
        message = f"{field} extraction failed: {reason}"
        details = {"field": field, "reason": reason}
        super().__init__(message, details)


class ValidationError(WeighingSlipError):
    """A validator could not evaluate a record; recorded as a parse error."""

    def __init__(self, validator: str, reason: str = None):
        message = f"{validator} failed: {reason}"
        details = {"validator": validator, "reason": reason}
        super().__init__(message, details)


class ExcelExportError(WeighingSlipError):
    """Raised when Excel export fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export Excel file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'WeighingSlipError',
    'ConfigurationError',
    'DocumentLoadError',
    'ExtractionError',
    'ValidationError',
    'ExcelExportError',
]
