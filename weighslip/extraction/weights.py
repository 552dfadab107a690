"""
Weight Extractors Module.

Extractors for the three weight roles of a weighing slip:

    - Gross weight: vehicle plus load (총중량)
    - Tare weight: empty vehicle (공차중량)
    - Net weight: load only (실중량)

Weight values are often printed next to the clock time of the
measurement ("10:35  12,480 kg"), so the shared post-processor reads
the time first, strips it, and only then parses the number before "kg".
"""

import re
from datetime import date, datetime, time
from typing import Dict, Optional, Sequence

from weighslip.document import OCRDocument
from weighslip.matching import TextNormalizer
from weighslip.models import Weight
from weighslip.utils.logger import get_logger
from .base import FieldExtractor, KeywordFieldExtractor
from .fields import find_first_date
from .strategies import ExtractionStrategy

# Initialize module logger
logger = get_logger(__name__)

WEIGHT_UNIT = "kg"

TIME_PATTERN = re.compile(r'(\d{2}):(\d{2})(?::(\d{2}))?')
TIME_STRIP_PATTERN = re.compile(r'\d{2}\s*:\s*\d{2}(?:\s*:\s*\d{2})?\s*')
WEIGHT_PATTERN = re.compile(r'([\d,\s]+)\s*kg', re.IGNORECASE)


def parse_time(text: Optional[str]) -> Optional[time]:
    """First valid HH:MM[:SS] clock time in the text, or None."""
    if not text:
        return None

    match = TIME_PATTERN.search(text)
    if not match:
        return None

    hour, minute, second = match.groups()
    try:
        return time(int(hour), int(minute), int(second or 0))
    except ValueError:
        return None


def parse_weight(
    text: Optional[str],
    base_date: Optional[date],
    normalizer: TextNormalizer
) -> Optional[Weight]:
    """
    Parse a "<number> kg" weight, with its measurement time if printed.

    Args:
        text: Raw value or full line.
        base_date: Slip date combined with the clock time.
        normalizer: Normalizer used to drop thousands separators.

    Returns:
        Weight in kg, or None when no "<number> kg" is present.

    Example:
        >>> parse_weight("10:35 12,480 kg", date(2026, 2, 2), TextNormalizer())
        Weight(value=12480.0, unit='kg', measured_at=datetime.datetime(2026, 2, 2, 10, 35))
    """
    if not text:
        return None

    clock_time = parse_time(text)
    measured_at = None
    if clock_time is not None and base_date is not None:
        measured_at = datetime.combine(base_date, clock_time)

    match = WEIGHT_PATTERN.search(TIME_STRIP_PATTERN.sub('', text))
    if not match:
        return None

    number = normalizer.normalize_number(match.group(1))
    if not number:
        return None

    try:
        value = float(number)
    except ValueError:
        return None

    return Weight(value=value, unit=WEIGHT_UNIT, measured_at=measured_at)


class WeightFieldExtractor(KeywordFieldExtractor):
    """Keyword extractor sharing the weight post-processor."""

    def __init__(
        self,
        name: str,
        keywords: Sequence[str],
        strategies: Sequence[ExtractionStrategy],
        normalizer: TextNormalizer,
        with_fallback: bool = False
    ) -> None:
        self.normalizer = normalizer
        super().__init__(
            name=name,
            keywords=keywords,
            strategies=strategies,
            post_processor=self._post_process,
            fallback=self._fallback_weight if with_fallback else None
        )

    def _post_process(self, raw: str, document: OCRDocument) -> Optional[Weight]:
        return parse_weight(raw, find_first_date(document.lines), self.normalizer)

    def _fallback_weight(self, document: OCRDocument) -> Optional[Weight]:
        """Keyword-independent heuristic; roles without one find nothing."""
        return None


class GrossWeightExtractor(WeightFieldExtractor):
    """Gross weight; falls back to the first "<number> kg" on any line."""

    KEYWORDS = ("gross weight", "total weight", "gross", "총중량", "총 중량")

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        super().__init__("gross_weight", self.KEYWORDS, strategies, normalizer,
                         with_fallback=True)

    def _fallback_weight(self, document: OCRDocument) -> Optional[Weight]:
        base_date = find_first_date(document.lines)
        for line in document.lines:
            weight = parse_weight(line, base_date, self.normalizer)
            if weight is not None:
                return weight
        return None


class TareWeightExtractor(WeightFieldExtractor):
    """
    Tare (empty vehicle) weight.

    The keyword set deliberately has no bare "weight" entry; a generic
    weight label is only used by the fallback, and only on lines that
    carry none of the gross or net vocabulary.
    """

    KEYWORDS = ("tare weight", "empty weight", "tare",
                "차중량", "공차중량", "차량중량", "공차", "차중")

    GENERIC_WEIGHT_WORDS = ("weight", "중량")

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        super().__init__("tare_weight", self.KEYWORDS, strategies, normalizer,
                         with_fallback=True)
        excluded = GrossWeightExtractor.KEYWORDS + NetWeightExtractor.KEYWORDS
        self._excluded_words = [
            word.lower() for word in normalizer.normalize_keywords(excluded)
        ]
        self._generic_words = [
            word.lower() for word in normalizer.normalize_keywords(self.GENERIC_WEIGHT_WORDS)
        ]

    def _fallback_weight(self, document: OCRDocument) -> Optional[Weight]:
        base_date = find_first_date(document.lines)
        lines = document.lines

        for index, line in enumerate(lines):
            if not self._is_generic_weight_label(line):
                continue

            weight = parse_weight(line, base_date, self.normalizer)
            if weight is None and index + 1 < len(lines):
                weight = parse_weight(lines[index + 1], base_date, self.normalizer)
            if weight is not None:
                return weight

        return None

    def _is_generic_weight_label(self, line: str) -> bool:
        normalized = (self.normalizer.normalize(line) or "").lower()
        if not any(word in normalized for word in self._generic_words):
            return False
        return not any(word in normalized for word in self._excluded_words)


class NetWeightExtractor(WeightFieldExtractor):
    """Net (load) weight."""

    KEYWORDS = ("net weight", "actual weight", "net", "실중량", "실 중량")

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        super().__init__("net_weight", self.KEYWORDS, strategies, normalizer)


class WeightExtractor(FieldExtractor):
    """
    Combines the three weight roles into one field.

    Roles are extracted net, tare, gross, in that order.

    Example:
        >>> weights = extractor.extract(document)
        >>> weights["gross"].value
        12480.0
    """

    ROLE_ORDER = ("net", "tare", "gross")

    def __init__(
        self,
        gross: GrossWeightExtractor,
        tare: TareWeightExtractor,
        net: NetWeightExtractor
    ) -> None:
        self.role_extractors: Dict[str, KeywordFieldExtractor] = {
            'net': net,
            'tare': tare,
            'gross': gross
        }

    @property
    def name(self) -> str:
        return "weight"

    def extract(self, document: Optional[OCRDocument]) -> Optional[Dict[str, Weight]]:
        """
        Extract every weight role found in the document.

        Returns:
            Mapping of role ("net", "tare", "gross") to Weight containing
            only the roles found, or None when none is found.
        """
        if document is None:
            return None

        weights: Dict[str, Weight] = {}
        for role in self.ROLE_ORDER:
            weight = self.role_extractors[role].extract(document)
            if weight is not None:
                weights[role] = weight

        if not weights:
            logger.debug("No weights found")
            return None

        return weights
