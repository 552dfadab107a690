"""
OCR Document Data Classes.

This module defines the provider-independent representation of an
OCR-extracted weighing slip consumed by the parsing core.

Classes:
    OCRWord: Individual word with an axis-aligned bounding box
    OCRDocument: Full text, line texts and words of one slip

Coordinates use a top-left origin with y increasing downward.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class OCRWord:
    """
    Represents a single word/token recognized by OCR.

    Attributes:
        text: The recognized text content
        x: Left coordinate of the bounding box in pixels
        y: Top coordinate of the bounding box in pixels
        width: Width of the bounding box in pixels
        height: Height of the bounding box in pixels
        confidence: Recognition confidence, if the provider reports one

    Example:
        >>> word = OCRWord(text="8713", x=420, y=100, width=80, height=30)
        >>> word.right
        500
    """
    text: str
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    confidence: Optional[float] = None

    @property
    def right(self) -> int:
        """Right edge coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Bottom edge coordinate."""
        return self.y + self.height

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        """Bounding box as (x1, y1, x2, y2)."""
        return (self.x, self.y, self.right, self.bottom)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'text': self.text,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'confidence': self.confidence
        }

    def __repr__(self) -> str:
        return f"OCRWord('{self.text}', bbox={self.bbox})"


@dataclass(frozen=True)
class OCRDocument:
    """
    Complete OCR output for one weighing slip.

    The document is read-only input to the parser; lines and words keep
    the order reported by the OCR provider.

    Attributes:
        text: Full recognized text
        lines: Text of each recognized line, top to bottom
        words: Words with bounding boxes
        confidence: Overall recognition confidence, if available

    Example:
        >>> document = OCRDocument(lines=("vehicle number: 8713",))
        >>> document.has_lines
        True
    """
    text: str = ""
    lines: Tuple[str, ...] = field(default_factory=tuple)
    words: Tuple[OCRWord, ...] = field(default_factory=tuple)
    confidence: Optional[float] = None

    def __post_init__(self):
        # Accept any sequence from callers but store tuples
        object.__setattr__(self, 'lines', tuple(self.lines or ()))
        object.__setattr__(self, 'words', tuple(self.words or ()))

    @property
    def has_lines(self) -> bool:
        """True when at least one line is available."""
        return len(self.lines) > 0

    @property
    def has_words(self) -> bool:
        """True when word-level geometry is available."""
        return len(self.words) > 0

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def word_count(self) -> int:
        return len(self.words)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        return {
            'text': self.text,
            'lines': list(self.lines),
            'words': [w.to_dict() for w in self.words],
            'confidence': self.confidence
        }

    def __repr__(self) -> str:
        return f"OCRDocument(lines={self.line_count}, words={self.word_count})"
