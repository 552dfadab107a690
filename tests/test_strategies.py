"""Tests for the text and spatial extraction strategies."""

import pytest

from config import ParserSettings
from weighslip.document import OCRDocument
from weighslip.extraction import SpatialProximityStrategy, TextProximityStrategy
from weighslip.matching import TextMatcher


@pytest.fixture
def text_strategy(matcher, normalizer):
    return TextProximityStrategy(matcher, normalizer)


@pytest.fixture
def spatial_strategy(matcher, position_helper):
    return SpatialProximityStrategy(matcher, position_helper)


def test_priorities(text_strategy, spatial_strategy):
    assert text_strategy.priority == 1
    assert spatial_strategy.priority == 2


def test_supports(text_strategy, spatial_strategy, make_document):
    lines_only = make_document(lines=["vehicle number: 8713"])
    words_only = make_document(words=[("차량번호", 100, 100)])
    assert text_strategy.supports(lines_only)
    assert not text_strategy.supports(words_only)
    assert spatial_strategy.supports(words_only)
    assert not spatial_strategy.supports(lines_only)


def test_text_value_after_literal_keyword(text_strategy, make_document):
    document = make_document(lines=["WEIGHING SLIP", "vehicle number: 8713"])
    assert text_strategy.extract(document, ["vehicle number", "차량번호"]) == "8713"


def test_text_value_after_case_changing_prefix(text_strategy, make_document):
    # "İ" lower-cases to two characters
    document = make_document(lines=["İİİ vehicle number: 8713"])
    assert text_strategy.extract(document, ["vehicle number"]) == "8713"


def test_text_value_keeps_clock_time(text_strategy, make_document):
    document = make_document(lines=["총중량: 10:35 12,480 kg"])
    assert text_strategy.extract(document, ["총중량"]) == "10:35 12,480 kg"


def test_text_value_when_label_spacing_differs(text_strategy, make_document):
    # literal keyword absent; normalized remainder is used
    document = make_document(lines=["총 중 량 12,480kg"])
    assert text_strategy.extract(document, ["총중량"]) == "12,480kg"


def test_text_skips_label_only_lines(text_strategy, make_document):
    document = make_document(lines=["vehicle number:", "vehicle number: 8713"])
    assert text_strategy.extract(document, ["vehicle number"]) == "8713"


def test_text_returns_none_without_keyword(text_strategy, make_document):
    document = make_document(lines=["gross weight: 12,480 kg"])
    assert text_strategy.extract(document, ["vehicle number"]) is None


def test_text_value_with_typo_keyword(normalizer, make_document):
    matcher = TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=0.75))
    strategy = TextProximityStrategy(matcher, normalizer)
    document = make_document(lines=["차랑번호: 12가3456"])
    value = strategy.extract(document, ["차량번호", "차량"])
    assert "12가3456" in value


def test_spatial_closest_word_on_row(spatial_strategy, make_document):
    document = make_document(words=[
        ("차량번호", 100, 100),
        ("far", 900, 100),
        ("8713", 400, 110),
        ("below", 400, 400),
    ])
    assert spatial_strategy.extract(document, ["차량번호"]) == "8713"


def test_spatial_uses_first_matching_label(spatial_strategy, make_document):
    document = make_document(words=[
        ("차량번호", 100, 100),
        ("8713", 400, 100),
        ("차량번호", 100, 500),
        ("1234", 400, 500),
    ])
    assert spatial_strategy.extract(document, ["차량번호"]) == "8713"


def test_spatial_none_without_label_or_value(spatial_strategy, make_document):
    assert spatial_strategy.extract(make_document(words=[("8713", 400, 100)]), ["차량번호"]) is None
    assert spatial_strategy.extract(make_document(words=[("차량번호", 100, 100)]), ["차량번호"]) is None


def test_strategies_accept_empty_document(text_strategy, spatial_strategy):
    document = OCRDocument()
    assert not text_strategy.supports(document)
    assert not spatial_strategy.supports(document)
