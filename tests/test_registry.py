"""Tests for ExtractorRegistry."""

import pytest

from weighslip.extraction import ExtractorRegistry, WeightExtractor


def test_default_registry_names():
    registry = ExtractorRegistry.default()
    assert registry.names() == ["date", "vehicle_number", "company", "product_name", "weight"]
    assert len(registry) == 5


def test_get_and_contains():
    registry = ExtractorRegistry.default()
    assert isinstance(registry.get("weight"), WeightExtractor)
    assert registry.get("issuer") is None
    assert "date" in registry
    assert "issuer" not in registry


def test_all_is_read_only():
    registry = ExtractorRegistry.default()
    with pytest.raises(TypeError):
        registry.all()["date"] = None


def test_duplicate_names_rejected():
    extractor = ExtractorRegistry.default().get("date")
    with pytest.raises(ValueError):
        ExtractorRegistry([extractor, extractor])
