"""Tests for the weight extractors and the weight post-processor."""

from datetime import date, datetime

import pytest

from weighslip.extraction import (
    GrossWeightExtractor,
    NetWeightExtractor,
    SpatialProximityStrategy,
    TareWeightExtractor,
    TextProximityStrategy,
    WeightExtractor,
)
from weighslip.extraction.weights import parse_time, parse_weight
from weighslip.models import Weight


@pytest.fixture
def strategies(matcher, normalizer, position_helper):
    return [
        TextProximityStrategy(matcher, normalizer),
        SpatialProximityStrategy(matcher, position_helper),
    ]


@pytest.fixture
def weight_extractor(strategies, normalizer):
    return WeightExtractor(
        gross=GrossWeightExtractor(strategies, normalizer),
        tare=TareWeightExtractor(strategies, normalizer),
        net=NetWeightExtractor(strategies, normalizer),
    )


def test_parse_weight_strips_clock_time(normalizer):
    weight = parse_weight("10:35 12,480 kg", date(2026, 2, 2), normalizer)
    assert weight == Weight(value=12480.0, unit="kg",
                            measured_at=datetime(2026, 2, 2, 10, 35))


def test_parse_weight_with_seconds_and_spaced_digits(normalizer):
    weight = parse_weight("10:35:20  13 460 KG", date(2026, 2, 2), normalizer)
    assert weight.value == 13460.0
    assert weight.measured_at == datetime(2026, 2, 2, 10, 35, 20)


def test_parse_weight_without_base_date_has_no_timestamp(normalizer):
    weight = parse_weight("10:35 7,470 kg", None, normalizer)
    assert weight.value == 7470.0
    assert weight.measured_at is None


@pytest.mark.parametrize("text", ["12,480", "kg", "10:35", "", None])
def test_parse_weight_requires_number_and_unit(normalizer, text):
    assert parse_weight(text, None, normalizer) is None


def test_parse_time():
    assert parse_time("at 09:05") is not None
    assert parse_time("at 25:61") is None
    assert parse_time("no time") is None


def test_gross_from_keyword_with_time(strategies, normalizer, make_document):
    document = make_document(lines=[
        "계량일자: 2026-02-02",
        "총중량: 10:35 12,480 kg",
    ])
    weight = GrossWeightExtractor(strategies, normalizer).extract(document)
    assert weight.value == 12480.0
    assert weight.unit == "kg"
    assert weight.measured_at == datetime(2026, 2, 2, 10, 35)


def test_gross_fallback_first_weight_on_any_line(strategies, normalizer, make_document):
    document = make_document(lines=["2026-02-02", "11:02 12,480 kg", "5,010 kg"])
    weight = GrossWeightExtractor(strategies, normalizer).extract(document)
    assert weight.value == 12480.0
    assert weight.measured_at == datetime(2026, 2, 2, 11, 2)


def test_tare_from_keyword(strategies, normalizer, make_document):
    document = make_document(lines=["공차중량: 7,470 kg"])
    assert TareWeightExtractor(strategies, normalizer).extract(document).value == 7470.0


def test_tare_fallback_on_generic_weight_line(strategies, normalizer, make_document):
    document = make_document(lines=[
        "총중량: 12,480 kg",
        "중량: 7,470 kg",
        "실중량: 5,010 kg",
    ])
    assert TareWeightExtractor(strategies, normalizer).extract(document).value == 7470.0


def test_tare_fallback_reads_following_line(strategies, normalizer, make_document):
    document = make_document(lines=["weight", "7,470 kg"])
    assert TareWeightExtractor(strategies, normalizer).extract(document).value == 7470.0


def test_tare_fallback_skips_label_without_value(strategies, normalizer, make_document):
    document = make_document(lines=[
        "Truck Weight Report",
        "No. 123",
        "Operator A",
        "weight 7,470 kg",
    ])
    assert TareWeightExtractor(strategies, normalizer).extract(document).value == 7470.0


def test_tare_fallback_ignores_gross_and_net_lines(strategies, normalizer, make_document):
    document = make_document(lines=["gross weight: 12,480 kg", "net weight: 5,010 kg"])
    assert TareWeightExtractor(strategies, normalizer).extract(document) is None


def test_net_from_keyword(strategies, normalizer, make_document):
    document = make_document(lines=["실중량: 5,010 kg"])
    assert NetWeightExtractor(strategies, normalizer).extract(document).value == 5010.0


def test_weight_extractor_collects_all_roles(weight_extractor, make_document, slip_lines):
    weights = weight_extractor.extract(make_document(lines=slip_lines))
    assert list(weights) == ["net", "tare", "gross"]
    assert weights["gross"].value == 12480.0
    assert weights["tare"].value == 7470.0
    assert weights["net"].value == 5010.0


def test_weight_extractor_only_roles_found(strategies, normalizer, make_document):
    extractor = WeightExtractor(
        gross=GrossWeightExtractor(strategies, normalizer),
        tare=TareWeightExtractor(strategies, normalizer),
        net=NetWeightExtractor(strategies, normalizer),
    )
    weights = extractor.extract(make_document(lines=["net weight: 5,010 kg"]))
    # the gross fallback picks up the only weight on the slip
    assert set(weights) == {"net", "gross"}


def test_weight_extractor_none_when_no_weights(weight_extractor, make_document):
    assert weight_extractor.extract(make_document(lines=["vehicle number: 8713"])) is None


def test_weight_extractor_invocation_order(weight_extractor, make_document):
    calls = []
    for role, extractor in weight_extractor.role_extractors.items():
        original = extractor.extract
        extractor.extract = lambda document, role=role, original=original: (
            calls.append(role) or original(document)
        )
    weight_extractor.extract(make_document(lines=["x"]))
    assert calls == ["net", "tare", "gross"]
