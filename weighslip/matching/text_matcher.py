"""
Text Matcher Module.

Exact and fuzzy keyword matching against normalized OCR text. Fuzzy
matching slides a keyword-sized window across the text and scores each
window with Levenshtein similarity, so a misread label character
("차랑번호" for "차량번호") still finds the label.

Usage:
    from weighslip.matching import TextMatcher

    matcher = TextMatcher()
    if matcher.matches(line, ["gross weight", "총중량"]):
        ...
"""

from typing import List, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from config import ParserSettings
from weighslip.utils.logger import get_logger
from .text_normalizer import TextNormalizer

# Initialize module logger
logger = get_logger(__name__)


class TextMatcher:
    """
    Keyword matcher over normalized, lower-cased text.

    Attributes:
        normalizer: Normalizer applied to both text and keywords
        threshold: Minimum similarity for a fuzzy window to count as a hit

    Example:
        >>> matcher = TextMatcher()
        >>> matcher.matches("Gross Weight: 12,480 kg", ["gross weight"])
        True
        >>> matcher.similarity("차랑번호", "차량번호")
        0.75
    """

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        settings: Optional[ParserSettings] = None
    ) -> None:
        self.normalizer = normalizer or TextNormalizer()
        self.threshold = (settings or ParserSettings()).fuzzy_match_threshold

    def matches(self, text: Optional[str], keywords: Sequence[str]) -> bool:
        """
        Check whether any keyword occurs in the text, exactly or fuzzily.

        Args:
            text: Text to search (a line or a word).
            keywords: Candidate keywords.

        Returns:
            True if a keyword is contained in the normalized text, or a
            window of the text is similar enough to a keyword.
        """
        if not text or not keywords:
            return False

        prepared_text = self._prepare(text)
        prepared_keywords = self._prepare_keywords(keywords)

        if any(keyword in prepared_text for keyword in prepared_keywords):
            return True

        return any(
            self._fuzzy_window_index(prepared_text, keyword) >= 0
            for keyword in prepared_keywords
        )

    def find_keyword_index(self, text: Optional[str], keywords: Sequence[str]) -> int:
        """
        Locate a keyword in the normalized text.

        Exact occurrences take precedence over fuzzy ones; keywords are
        tried in the order given.

        Args:
            text: Text to search.
            keywords: Candidate keywords.

        Returns:
            Start offset in the normalized text, or -1 if no keyword is found.
        """
        if not text or not keywords:
            return -1

        prepared_text = self._prepare(text)
        prepared_keywords = self._prepare_keywords(keywords)

        for keyword in prepared_keywords:
            index = prepared_text.find(keyword)
            if index >= 0:
                return index

        for keyword in prepared_keywords:
            index = self._fuzzy_window_index(prepared_text, keyword)
            if index >= 0:
                return index

        return -1

    def fuzzy_match(self, text: Optional[str], keyword: Optional[str]) -> bool:
        """
        Check whether any keyword-sized window of the text is similar enough.

        Keywords longer than the text never match.
        """
        if not text or not keyword:
            return False

        prepared_keyword = self._prepare(keyword)
        if not prepared_keyword:
            return False

        return self._fuzzy_window_index(self._prepare(text), prepared_keyword) >= 0

    def similarity(self, first: Optional[str], second: Optional[str]) -> float:
        """
        Levenshtein similarity: 1 - distance / max(len(first), len(second)).

        Args:
            first: First string.
            second: Second string.

        Returns:
            Similarity in [0.0, 1.0]; two empty strings are identical.
        """
        first = first or ""
        second = second or ""
        longest = max(len(first), len(second))
        if longest == 0:
            return 1.0
        return 1.0 - Levenshtein.distance(first, second) / longest

    def _fuzzy_window_index(self, prepared_text: str, prepared_keyword: str) -> int:
        """Offset of the first window passing the threshold, or -1."""
        size = len(prepared_keyword)
        if size == 0 or size > len(prepared_text):
            return -1

        for start in range(len(prepared_text) - size + 1):
            window = prepared_text[start:start + size]
            score = self.similarity(window, prepared_keyword)
            if score >= self.threshold:
                logger.debug(
                    f"Fuzzy hit '{window}' ~ '{prepared_keyword}' ({score:.2f})"
                )
                return start

        return -1

    def _prepare(self, text: str) -> str:
        return (self.normalizer.normalize(text) or "").lower()

    def _prepare_keywords(self, keywords: Sequence[str]) -> List[str]:
        prepared = (self._prepare(keyword) for keyword in keywords if keyword)
        return [keyword for keyword in prepared if keyword]
