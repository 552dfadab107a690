"""
Value Normalizers Module.

This module provides normalization of extracted values before
validation:
    - Dates (passed through; extractors already produce calendar dates)
    - Weights (non-negative, rounded, unit defaulted)
"""

from datetime import date
from typing import Optional

from weighslip.models import Weight
from weighslip.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class DateNormalizer:
    """
    Normalizes extracted dates.

    Date extractors already return datetime.date values, so this is a
    pass-through kept as the hook for date clean-up.
    """

    def normalize(self, value: Optional[date]) -> Optional[date]:
        return value


class WeightNormalizer:
    """
    Normalizes weight measurements.

    Rules:
        - negative values are clamped to 0
        - values are rounded to 2 decimals
        - magnitudes below 0.001 collapse to exactly 0.0
        - a missing unit defaults to "kg"
        - the measurement time is kept

    Example:
        >>> normalizer = WeightNormalizer()
        >>> normalizer.normalize(Weight(value=-3.0, unit=None))
        Weight(value=0.0, unit='kg', measured_at=None)
        >>> normalizer.normalize(Weight(value=12480.456, unit="kg")).value
        12480.46
    """

    DEFAULT_UNIT = "kg"
    DECIMAL_PLACES = 2
    ZERO_EPSILON = 0.001

    def normalize(self, weight: Optional[Weight]) -> Optional[Weight]:
        """
        Normalize a weight.

        Args:
            weight: Weight to normalize.

        Returns:
            Normalized weight; None stays None, and a weight without a
            value is returned unchanged.
        """
        if weight is None or weight.value is None:
            return weight

        value = max(weight.value, 0.0)
        value = round(value, self.DECIMAL_PLACES)
        if abs(value) < self.ZERO_EPSILON:
            value = 0.0

        if value != weight.value:
            logger.debug(f"Weight normalized: {weight.value} -> {value}")

        return Weight(
            value=value,
            unit=weight.unit or self.DEFAULT_UNIT,
            measured_at=weight.measured_at
        )
