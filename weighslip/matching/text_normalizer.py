"""
Text Normalizer Module.

Canonicalizes OCR text before keyword comparison. OCR output of slip
labels varies in spacing and punctuation ("계량 일자:", "gross-weight"),
so both sides of every comparison go through the same normalization.
"""

import re
from typing import Iterable, List, Optional


class TextNormalizer:
    """
    Strips whitespace, label punctuation, clock times and number separators.

    Example:
        >>> normalizer = TextNormalizer()
        >>> normalizer.normalize("vehicle number : 8713")
        'vehiclenumber8713'
        >>> normalizer.normalize_number("12,480")
        '12480'
    """

    WHITESPACE_PATTERN = re.compile(r'\s+')
    SPECIAL_CHARS_PATTERN = re.compile(r'[:\-_/\\]')
    TIME_PATTERN = re.compile(r'\d{2}:\d{2}(?::\d{2})?')
    NUMBER_SEPARATOR_PATTERN = re.compile(r'[,\s]+')

    def normalize(self, text: Optional[str]) -> Optional[str]:
        """
        Remove whitespace, then the characters ``: - _ / \\``.

        Args:
            text: Text to normalize.

        Returns:
            Normalized text; None and "" are returned unchanged.
        """
        if not text:
            return text
        return self.remove_special_chars(self.remove_whitespace(text))

    def remove_whitespace(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return text
        return self.WHITESPACE_PATTERN.sub('', text)

    def remove_special_chars(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return text
        return self.SPECIAL_CHARS_PATTERN.sub('', text)

    def remove_time_pattern(self, text: Optional[str]) -> Optional[str]:
        """Strip HH:MM and HH:MM:SS substrings."""
        if not text:
            return text
        return self.TIME_PATTERN.sub('', text)

    def normalize_number(self, text: Optional[str]) -> Optional[str]:
        """Strip thousands separators and spaces from a numeric string."""
        if not text:
            return text
        return self.NUMBER_SEPARATOR_PATTERN.sub('', text)

    def normalize_keywords(self, keywords: Iterable[str]) -> List[str]:
        return [self.normalize(keyword) for keyword in keywords]
