"""Tests for the weight and date normalizers."""

from datetime import date, datetime

import pytest

from weighslip.models import Weight
from weighslip.postprocessor import DateNormalizer, WeightNormalizer


@pytest.fixture
def weight_normalizer():
    return WeightNormalizer()


def test_none_stays_none(weight_normalizer):
    assert weight_normalizer.normalize(None) is None


def test_missing_value_is_unchanged(weight_normalizer):
    weight = Weight(value=None, unit=None)
    assert weight_normalizer.normalize(weight) is weight


@pytest.mark.parametrize("value, expected", [
    (-3.0, 0.0),
    (12480.456, 12480.46),
    (0.0004, 0.0),
    (-0.0004, 0.0),
    (5010.0, 5010.0),
])
def test_value_rules(weight_normalizer, value, expected):
    assert weight_normalizer.normalize(Weight(value=value, unit="kg")).value == expected


@pytest.mark.parametrize("value", [-1e9, -0.5, 0.0, 0.0009, 0.004, 1.005, 7470.0, 1e9 + 0.123])
def test_normalized_values_are_bounded(weight_normalizer, value):
    normalized = weight_normalizer.normalize(Weight(value=value)).value
    assert normalized >= 0
    assert normalized == round(normalized, 2)
    assert normalized == 0.0 or abs(normalized) >= 0.001


def test_unit_defaults_to_kg(weight_normalizer):
    assert weight_normalizer.normalize(Weight(value=1.0)).unit == "kg"
    assert weight_normalizer.normalize(Weight(value=1.0, unit="t")).unit == "t"


def test_measured_at_is_kept(weight_normalizer):
    measured_at = datetime(2026, 2, 2, 10, 35)
    weight = weight_normalizer.normalize(Weight(value=1.0, measured_at=measured_at))
    assert weight.measured_at == measured_at


def test_date_pass_through():
    normalizer = DateNormalizer()
    assert normalizer.normalize(date(2026, 2, 2)) == date(2026, 2, 2)
    assert normalizer.normalize(None) is None
