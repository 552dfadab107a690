"""
Position Helper Module.

Geometric predicates over OCR word boxes, used to pair a label word
with the value printed to its right on the same row.
"""

from typing import Iterable, List, Optional

from config import ParserSettings
from weighslip.document import OCRWord


class PositionHelper:
    """
    Same-row and right-of tests with configurable tolerances.

    Attributes:
        y_tolerance: Maximum |y| difference for two words to share a row
        x_min_offset: Minimum gap between a label's right edge and a value

    Example:
        >>> helper = PositionHelper()
        >>> label = OCRWord("차량번호", x=100, y=100, width=120, height=30)
        >>> value = OCRWord("8713", x=400, y=105, width=80, height=30)
        >>> helper.find_closest_value_on_right(label, [value]).text
        '8713'
    """

    def __init__(self, settings: Optional[ParserSettings] = None) -> None:
        settings = settings or ParserSettings()
        self.y_tolerance = settings.y_tolerance
        self.x_min_offset = settings.x_min_offset

    def is_same_row(self, first: OCRWord, second: OCRWord) -> bool:
        return abs(first.y - second.y) <= self.y_tolerance

    def is_right_of(self, label: OCRWord, candidate: OCRWord) -> bool:
        return candidate.x >= label.right + self.x_min_offset

    def find_values_on_right(self, label: OCRWord, words: Iterable[OCRWord]) -> List[OCRWord]:
        """All words on the label's row and to its right, in input order."""
        return [
            word for word in words
            if self.is_same_row(label, word) and self.is_right_of(label, word)
        ]

    def find_closest_value_on_right(
        self,
        label: OCRWord,
        words: Iterable[OCRWord]
    ) -> Optional[OCRWord]:
        """
        Nearest word to the right of the label on the same row.

        Args:
            label: The label word.
            words: Candidate words.

        Returns:
            The candidate with the smallest x (first one on ties), or None.
        """
        closest = None
        for word in self.find_values_on_right(label, words):
            if closest is None or word.x < closest.x:
                closest = word
        return closest
