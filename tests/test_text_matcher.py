"""Tests for TextMatcher exact and fuzzy keyword matching."""

import pytest

from config import ParserSettings
from weighslip.matching import TextMatcher


def test_exact_match_after_normalization(matcher):
    assert matcher.matches("차량 번호 : 12가3456", ["차량번호"])


def test_match_is_case_insensitive(matcher):
    assert matcher.matches("Gross Weight: 12,480 kg", ["gross weight"])


def test_no_match(matcher):
    assert not matcher.matches("tare weight: 7,470 kg", ["gross weight", "총중량"])


@pytest.mark.parametrize("text, keywords", [
    (None, ["date"]),
    ("", ["date"]),
    ("date: 2026-02-02", []),
])
def test_empty_inputs_never_match(matcher, text, keywords):
    assert not matcher.matches(text, keywords)


def test_similarity():
    matcher = TextMatcher()
    assert matcher.similarity("차랑번호", "차량번호") == pytest.approx(0.75)
    assert matcher.similarity("abc", "abc") == 1.0
    assert matcher.similarity("", "") == 1.0
    assert matcher.similarity("abc", "xyz") == 0.0


def test_typo_matches_at_lower_threshold(normalizer):
    matcher = TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=0.75))
    assert matcher.matches("차랑번호: 12가3456", ["차량번호"])


def test_typo_rejected_at_default_threshold(matcher):
    assert not matcher.matches("차랑번호: 12가3456", ["차량번호"])


def test_fuzzy_match_scans_windows(normalizer):
    matcher = TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=0.8))
    # one substitution in an 11-letter keyword
    assert matcher.fuzzy_match("TOTAL: gros5weight 12,480 kg", "grossweight")


def test_keyword_longer_than_text_never_fuzzy_matches(matcher):
    assert not matcher.fuzzy_match("net", "net weight")


@pytest.mark.parametrize("text", [
    "차랑번호: 12가3456",
    "gros5 weight 12,480 kg",
    "tare weiht: 7,470 kg",
    "completely unrelated",
])
def test_raising_threshold_never_adds_matches(normalizer, text):
    keywords = ["차량번호", "gross weight", "tare weight"]
    thresholds = [0.5, 0.6, 0.7, 0.75, 0.8, 0.9, 1.0]
    results = [
        TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=t)).matches(text, keywords)
        for t in thresholds
    ]
    # once a higher threshold rejects, every higher one rejects too
    for lower, higher in zip(results, results[1:]):
        assert lower or not higher


def test_find_keyword_index_exact(matcher):
    # normalized text: "계량일자20260202"
    assert matcher.find_keyword_index("계량 일자: 2026-02-02", ["일자", "계량일자"]) == 2


def test_find_keyword_index_prefers_exact_over_fuzzy(normalizer):
    matcher = TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=0.5))
    # "grass" at offset 0 is a fuzzy hit; the exact hit wins
    assert matcher.find_keyword_index("grass gross", ["gross"]) == 5


def test_find_keyword_index_fuzzy_fallback(normalizer):
    matcher = TextMatcher(normalizer, ParserSettings(fuzzy_match_threshold=0.75))
    assert matcher.find_keyword_index("번호 차랑번호", ["차량번호"]) == 2


def test_find_keyword_index_not_found(matcher):
    assert matcher.find_keyword_index("2026-02-02", ["vehicle number"]) == -1
