"""Shared fixtures for the weighing slip parser tests."""

import pytest

from config import ConfigurationManager, ParserSettings
from weighslip.document import OCRDocument, OCRWord
from weighslip.matching import PositionHelper, TextMatcher, TextNormalizer


@pytest.fixture(autouse=True)
def reset_configuration():
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def settings():
    return ParserSettings()


@pytest.fixture
def normalizer():
    return TextNormalizer()


@pytest.fixture
def matcher(normalizer, settings):
    return TextMatcher(normalizer, settings)


@pytest.fixture
def position_helper(settings):
    return PositionHelper(settings)


@pytest.fixture
def make_document():
    """Build an OCRDocument from lines and (text, x, y) word tuples."""
    def _make(lines=(), words=()):
        ocr_words = [
            OCRWord(text=text, x=x, y=y, width=width, height=30)
            for text, x, y, width in (_with_width(w) for w in words)
        ]
        return OCRDocument(text="\n".join(lines), lines=list(lines), words=ocr_words)
    return _make


def _with_width(word):
    if len(word) == 4:
        return word
    text, x, y = word
    return text, x, y, 20 * len(text)


@pytest.fixture
def slip_lines():
    return [
        "WEIGHING SLIP",
        "2026-02-02",
        "vehicle number: 8713",
        "gross weight: 12,480 kg",
        "tare weight: 7,470 kg",
        "net weight: 5,010 kg",
    ]
