"""
Extractor Registry Module.

Holds one extractor instance per named field. The pipeline looks up
extractors by name so a registry can be assembled with a subset of
fields or with replacement extractors.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from config import ParserSettings
from weighslip.matching import PositionHelper, TextMatcher, TextNormalizer
from weighslip.utils.logger import get_logger
from .base import FieldExtractor
from .fields import (
    CompanyExtractor,
    DateExtractor,
    ProductNameExtractor,
    VehicleNumberExtractor,
)
from .strategies import SpatialProximityStrategy, TextProximityStrategy
from .weights import (
    GrossWeightExtractor,
    NetWeightExtractor,
    TareWeightExtractor,
    WeightExtractor,
)

# Initialize module logger
logger = get_logger(__name__)


class ExtractorRegistry:
    """
    Named collection of field extractors.

    Example:
        >>> registry = ExtractorRegistry.default()
        >>> registry.names()
        ['date', 'vehicle_number', 'company', 'product_name', 'weight']
        >>> "weight" in registry
        True
    """

    def __init__(self, extractors: Iterable[FieldExtractor]) -> None:
        self._extractors: Dict[str, FieldExtractor] = {}
        for extractor in extractors:
            if extractor.name in self._extractors:
                raise ValueError(f"Duplicate extractor name: {extractor.name}")
            self._extractors[extractor.name] = extractor

    @classmethod
    def default(cls, settings: Optional[ParserSettings] = None) -> 'ExtractorRegistry':
        """
        Build the standard extractor set.

        All extractors share one normalizer, matcher and position helper,
        and the text and spatial strategies.

        Args:
            settings: Parser settings. If None, uses the defaults.

        Returns:
            Registry with date, vehicle_number, company, product_name and
            weight extractors.
        """
        settings = settings or ParserSettings()
        normalizer = TextNormalizer()
        matcher = TextMatcher(normalizer, settings)
        position_helper = PositionHelper(settings)

        strategies = [
            TextProximityStrategy(matcher, normalizer),
            SpatialProximityStrategy(matcher, position_helper),
        ]

        registry = cls([
            DateExtractor(strategies),
            VehicleNumberExtractor(strategies, normalizer),
            CompanyExtractor(strategies, normalizer),
            ProductNameExtractor(strategies, normalizer),
            WeightExtractor(
                gross=GrossWeightExtractor(strategies, normalizer),
                tare=TareWeightExtractor(strategies, normalizer),
                net=NetWeightExtractor(strategies, normalizer),
            ),
        ])

        logger.debug(f"Default registry built with {len(registry)} extractors")
        return registry

    def get(self, name: str) -> Optional[FieldExtractor]:
        return self._extractors.get(name)

    def all(self) -> Mapping[str, FieldExtractor]:
        """Read-only view of the extractors keyed by name."""
        return MappingProxyType(self._extractors)

    def names(self) -> List[str]:
        return list(self._extractors)

    def __len__(self) -> int:
        return len(self._extractors)

    def __contains__(self, name: object) -> bool:
        return name in self._extractors

    def __repr__(self) -> str:
        return f"ExtractorRegistry({self.names()})"
