"""
Parsing Result Data Class.

This module defines the outcome of parsing one weighing slip: the
success flag, the record (on success), and the accumulated diagnostics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import json

from .weighing_record import WeighingRecord


@dataclass
class ParsingResult:
    """
    Represents the result of parsing one weighing slip.

    Use the ok() and failure() factories rather than the constructor so
    the success/record/errors combination stays consistent.

    Attributes:
        success: True when no errors were recorded
        record: Parsed record (success only)
        errors: Error messages (failure only)
        warnings: Warning messages (success only)
        confidence: 1.0 on success, 0.0 on failure
        source_file: Source OCR file, set by batch callers
        processing_time: Wall-clock parse time in seconds, set by batch callers

    Example:
        >>> result = ParsingResult.failure("OCR document is None")
        >>> result.success, result.errors
        (False, ['OCR document is None'])
    """
    success: bool
    record: Optional[WeighingRecord] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    confidence: float = 0.0

    # Metadata
    source_file: Optional[str] = None
    processing_time: float = 0.0

    @classmethod
    def ok(cls, record: WeighingRecord,
           warnings: Optional[List[str]] = None) -> 'ParsingResult':
        """
        Create a successful result.

        Args:
            record: The parsed record.
            warnings: Non-fatal diagnostics collected during the parse.
        """
        return cls(
            success=True,
            record=record,
            errors=[],
            warnings=list(warnings or []),
            confidence=1.0
        )

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> 'ParsingResult':
        """
        Create a failed result.

        Args:
            errors: A single error message or a list of them.
        """
        if isinstance(errors, str):
            errors = [errors]
        return cls(
            success=False,
            record=None,
            errors=list(errors),
            warnings=[],
            confidence=0.0
        )

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary representation of the parsing result.
        """
        return {
            'success': self.success,
            'confidence': self.confidence,
            'record': self.record.to_dict() if self.record else None,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
            'source_file': self.source_file,
            'processing_time': self.processing_time
        }

    def to_json(self, indent: int = 2) -> str:
        """
        Convert to JSON string.

        Args:
            indent: JSON indentation level.

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __str__(self) -> str:
        status = "OK" if self.success else "FAILED"
        lines = [f"ParsingResult [{status}] confidence={self.confidence:.1f}"]
        if self.record:
            record = self.record
            lines.append(f"  date: {record.date or '-'}")
            lines.append(f"  vehicle_number: {record.vehicle_number or '-'}")
            lines.append(f"  gross: {record.gross_weight or '-'}")
            lines.append(f"  tare: {record.tare_weight or '-'}")
            lines.append(f"  net: {record.net_weight or '-'}")
        for error in self.errors:
            lines.append(f"  ERROR: {error}")
        for warning in self.warnings:
            lines.append(f"  WARNING: {warning}")
        return "\n".join(lines)
