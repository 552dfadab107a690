"""
Extraction Module for the Weighing Slip Parser.

This module provides the keyword → value strategies, the per-field
extractors and the registry that names them.
"""

from .strategies import ExtractionStrategy, TextProximityStrategy, SpatialProximityStrategy
from .base import FieldExtractor, KeywordFieldExtractor
from .fields import (
    DateExtractor,
    VehicleNumberExtractor,
    CompanyExtractor,
    ProductNameExtractor,
)
from .weights import (
    WeightFieldExtractor,
    GrossWeightExtractor,
    TareWeightExtractor,
    NetWeightExtractor,
    WeightExtractor,
)
from .registry import ExtractorRegistry

__all__ = [
    'ExtractionStrategy',
    'TextProximityStrategy',
    'SpatialProximityStrategy',
    'FieldExtractor',
    'KeywordFieldExtractor',
    'DateExtractor',
    'VehicleNumberExtractor',
    'CompanyExtractor',
    'ProductNameExtractor',
    'WeightFieldExtractor',
    'GrossWeightExtractor',
    'TareWeightExtractor',
    'NetWeightExtractor',
    'WeightExtractor',
    'ExtractorRegistry',
]
