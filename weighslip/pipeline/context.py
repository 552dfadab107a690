"""
Parsing Context Module.

Per-invocation state shared by the pipeline stages: the document being
parsed, the record builder, and the accumulated diagnostics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from weighslip.document import OCRDocument
from weighslip.models import WeighingRecordBuilder


@dataclass
class ParsingContext:
    """
    Mutable state for one pipeline run.

    Attributes:
        document: Document being parsed
        builder: Record under construction
        errors: Error messages in the order recorded
        warnings: Warning messages in the order recorded
        metadata: Free-form diagnostics (extracted field names, weight path)

    Example:
        >>> context = ParsingContext(document)
        >>> context.add_error("")
        >>> context.has_errors
        False
    """
    document: Optional[OCRDocument]
    builder: WeighingRecordBuilder = field(default_factory=WeighingRecordBuilder)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_error(self, message: Optional[str]) -> None:
        """Record an error; empty messages are ignored."""
        if message:
            self.errors.append(message)

    def add_warning(self, message: Optional[str]) -> None:
        """Record a warning; empty messages are ignored."""
        if message:
            self.warnings.append(message)

    def put_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
