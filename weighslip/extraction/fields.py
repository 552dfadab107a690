"""
Field Extractors Module.

Keyword extractors for the non-weight fields of a weighing slip:
date, vehicle number, counterparty and product name. Keyword sets
cover the English and Korean labels printed on slips.
"""

import re
from datetime import date
from typing import Iterable, Optional, Sequence

from weighslip.document import OCRDocument
from weighslip.matching import TextNormalizer
from .base import KeywordFieldExtractor
from .strategies import ExtractionStrategy

DATE_PATTERN = re.compile(r'(\d{4})[-.]?(\d{2})[-.]?(\d{2})')


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse the first YYYY-MM-DD / YYYY.MM.DD / YYYYMMDD match in the text.

    Invalid calendar dates such as month 13 yield None.

    Example:
        >>> parse_date("계량일자: 2026.02.02")
        datetime.date(2026, 2, 2)
    """
    if not text:
        return None

    match = DATE_PATTERN.search(text)
    if not match:
        return None

    year, month, day = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def find_first_date(lines: Iterable[str]) -> Optional[date]:
    """First valid date found scanning the lines top to bottom."""
    for line in lines:
        parsed = parse_date(line)
        if parsed is not None:
            return parsed
    return None


class DateExtractor(KeywordFieldExtractor):
    """Weighing date; falls back to the first date printed anywhere."""

    KEYWORDS = ("measurement date", "weighing date", "date-time", "date",
                "계량일자", "날짜", "일시")

    def __init__(self, strategies: Sequence[ExtractionStrategy]) -> None:
        super().__init__(
            name="date",
            keywords=self.KEYWORDS,
            strategies=strategies,
            post_processor=lambda raw, document: parse_date(raw),
            fallback=lambda document: find_first_date(document.lines)
        )


class VehicleNumberExtractor(KeywordFieldExtractor):
    """
    Vehicle identifier.

    Accepts plate numbers ("12가3456": digits, a run of non-ASCII
    letters, digits) or a bare four-digit number.
    """

    KEYWORDS = ("vehicle number", "vehicle no", "car number", "plate number",
                "차량번호", "차량No", "차번호", "차량")

    # [^\W\d_A-Za-z] is any letter outside ASCII
    VEHICLE_PATTERN = re.compile(r'\d+[^\W\d_A-Za-z]*\d+|\d{4}')

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        self.normalizer = normalizer
        super().__init__(
            name="vehicle_number",
            keywords=self.KEYWORDS,
            strategies=strategies,
            post_processor=self._post_process
        )

    def _post_process(self, raw: str, document: OCRDocument) -> Optional[str]:
        compact = self.normalizer.remove_whitespace(raw)
        if not compact:
            return None
        match = self.VEHICLE_PATTERN.search(compact)
        return match.group(0) if match else None


def clean_label_value(normalizer: TextNormalizer, raw: Optional[str]) -> Optional[str]:
    """Drop label punctuation and trim; empty results become None."""
    cleaned = normalizer.remove_special_chars(raw)
    if cleaned is None:
        return None
    cleaned = cleaned.strip()
    return cleaned or None


class CompanyExtractor(KeywordFieldExtractor):
    """Counterparty / company name. Optional on the record."""

    KEYWORDS = ("counterparty", "company name", "company", "customer",
                "거래처", "상호")

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        super().__init__(
            name="company",
            keywords=self.KEYWORDS,
            strategies=strategies,
            post_processor=lambda raw, document: clean_label_value(normalizer, raw)
        )


class ProductNameExtractor(KeywordFieldExtractor):
    """Product or item weighed. Optional on the record."""

    KEYWORDS = ("product name", "product", "item", "품명", "품목")

    def __init__(self, strategies: Sequence[ExtractionStrategy],
                 normalizer: TextNormalizer) -> None:
        super().__init__(
            name="product_name",
            keywords=self.KEYWORDS,
            strategies=strategies,
            post_processor=lambda raw, document: clean_label_value(normalizer, raw)
        )
