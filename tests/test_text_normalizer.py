"""Tests for TextNormalizer."""

import pytest


@pytest.mark.parametrize("text, expected", [
    ("계량 일자 :", "계량일자"),
    ("vehicle number : 8713", "vehiclenumber8713"),
    ("a-b_c/d\\e", "abcde"),
    ("  \t\n ", ""),
])
def test_normalize_strips_whitespace_and_label_punctuation(normalizer, text, expected):
    assert normalizer.normalize(text) == expected


@pytest.mark.parametrize("text", [None, ""])
def test_normalize_passes_empty_values_through(normalizer, text):
    assert normalizer.normalize(text) == text


@pytest.mark.parametrize("text", [
    "계량 일자 : 2026-02-02",
    "Gross Weight: 10:35 12,480 kg",
    "차 량 번 호 / 12가 3456",
    "__--::",
])
def test_normalize_is_idempotent(normalizer, text):
    once = normalizer.normalize(text)
    assert normalizer.normalize(once) == once


def test_remove_special_chars_keeps_whitespace(normalizer):
    assert normalizer.remove_special_chars("(주) 한국-물산") == "(주) 한국물산"


def test_remove_whitespace_keeps_punctuation(normalizer):
    assert normalizer.remove_whitespace("gross weight: 1 kg") == "grossweight:1kg"


def test_remove_time_pattern(normalizer):
    assert normalizer.remove_time_pattern("10:35 12,480 kg") == " 12,480 kg"
    assert normalizer.remove_time_pattern("10:35:07 kg") == " kg"


@pytest.mark.parametrize("text, expected", [
    ("12,480", "12480"),
    ("13 460", "13460"),
    ("1,234,567", "1234567"),
])
def test_normalize_number(normalizer, text, expected):
    assert normalizer.normalize_number(text) == expected


def test_normalize_keywords(normalizer):
    assert normalizer.normalize_keywords(["gross weight", "총 중량"]) == ["grossweight", "총중량"]
