"""
Extraction Strategies Module.

A strategy resolves "keyword → raw value" for one field against an OCR
document. Two tactics are provided and tried in priority order:

    1. TextProximityStrategy: value follows the label on the same text line
    2. SpatialProximityStrategy: value is the nearest word right of the label
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from weighslip.document import OCRDocument
from weighslip.matching import PositionHelper, TextMatcher, TextNormalizer
from weighslip.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class ExtractionStrategy(ABC):
    """Base class for keyword → value resolution tactics."""

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower values run first."""

    @abstractmethod
    def supports(self, document: OCRDocument) -> bool:
        """Whether the document carries the data this strategy needs."""

    @abstractmethod
    def extract(self, document: OCRDocument, keywords: Sequence[str]) -> Optional[str]:
        """Return the raw value text for the keywords, or None."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"


class TextProximityStrategy(ExtractionStrategy):
    """
    Reads the value that follows a label on the same text line.

    For "gross weight: 10:35 12,480 kg" the candidate is
    "10:35 12,480 kg"; clock times survive so the weight post-processor
    can read the measurement time.

    Example:
        >>> strategy = TextProximityStrategy(TextMatcher(), TextNormalizer())
        >>> document = OCRDocument(lines=["vehicle number: 8713"])
        >>> strategy.extract(document, ["vehicle number"])
        '8713'
    """

    # Letters of any script, digits, comma, space, period, hyphen, underscore;
    # a colon only between two digits.
    VALUE_PATTERN = re.compile(r'(?:[\w\s,.\-]|(?<=\d):(?=\d))+')

    def __init__(self, matcher: TextMatcher, normalizer: TextNormalizer) -> None:
        self.matcher = matcher
        self.normalizer = normalizer

    @property
    def priority(self) -> int:
        return 1

    def supports(self, document: OCRDocument) -> bool:
        return document.has_lines

    def extract(self, document: OCRDocument, keywords: Sequence[str]) -> Optional[str]:
        for line in document.lines:
            if not self.matcher.matches(line, keywords):
                continue

            value = self._extract_from_line(line, keywords)
            if value:
                logger.debug(f"Text proximity value '{value}' from line '{line}'")
                return value

        return None

    def _extract_from_line(self, line: str, keywords: Sequence[str]) -> Optional[str]:
        index = self.matcher.find_keyword_index(line, keywords)
        if index < 0:
            return None

        normalized_keywords = [k for k in self.normalizer.normalize_keywords(keywords) if k]
        min_length = min((len(k) for k in normalized_keywords), default=0)
        normalized_line = self.normalizer.normalize(line) or ""
        candidate = normalized_line[index + min_length:]

        literal_remainder = self._literal_remainder(line, keywords)
        if literal_remainder:
            candidate = literal_remainder

        return self._clean_value(candidate)

    @staticmethod
    def _literal_remainder(line: str, keywords: Sequence[str]) -> Optional[str]:
        """Text after the first keyword found verbatim in the line."""
        for keyword in keywords:
            if not keyword:
                continue
            match = re.search(re.escape(keyword), line, re.IGNORECASE)
            if match is None:
                continue
            remainder = line[match.end():]
            if remainder.strip(" :"):
                return remainder
        return None

    def _clean_value(self, candidate: str) -> Optional[str]:
        candidate = candidate.strip()
        if candidate.startswith(':'):
            candidate = candidate[1:].strip()
        if not candidate:
            return None

        match = self.VALUE_PATTERN.search(candidate)
        if not match:
            return None

        value = match.group(0).strip()
        return value or None


class SpatialProximityStrategy(ExtractionStrategy):
    """
    Pairs the first label word with the closest word right of it on its row.

    Example:
        >>> strategy = SpatialProximityStrategy(TextMatcher(), PositionHelper())
        >>> words = [OCRWord("차량번호", 100, 100, 120, 30), OCRWord("8713", 400, 105, 80, 30)]
        >>> strategy.extract(OCRDocument(words=words), ["차량번호"])
        '8713'
    """

    def __init__(self, matcher: TextMatcher, position_helper: PositionHelper) -> None:
        self.matcher = matcher
        self.position_helper = position_helper

    @property
    def priority(self) -> int:
        return 2

    def supports(self, document: OCRDocument) -> bool:
        return document.has_words

    def extract(self, document: OCRDocument, keywords: Sequence[str]) -> Optional[str]:
        label = next(
            (word for word in document.words if self.matcher.matches(word.text, keywords)),
            None
        )
        if label is None:
            return None

        value = self.position_helper.find_closest_value_on_right(label, document.words)
        if value is None:
            return None

        logger.debug(f"Spatial value '{value.text}' right of label '{label.text}'")
        return value.text
