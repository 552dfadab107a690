"""
Record Validators Module.

This module provides the validation rules run against a parsed
weighing record:
    - Required fields (date, vehicle number, three weights)
    - Weight arithmetic (net = gross - tare within tolerance)

Validators return plain error strings; an empty list means the record
passed. The pipeline runs them in ascending order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from config import ParserSettings
from weighslip.models import WeighingRecord
from weighslip.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class Validator(ABC):
    """Base class for record validation rules."""

    @property
    @abstractmethod
    def order(self) -> int:
        """Execution order; lower runs first."""

    @abstractmethod
    def validate(self, record: Optional[WeighingRecord]) -> List[str]:
        """Return the error messages for the record (empty when valid)."""


class RequiredFieldValidator(Validator):
    """
    Checks that the mandatory fields were extracted.

    Company and product name are optional and never reported.

    Example:
        >>> RequiredFieldValidator().validate(WeighingRecord(vehicle_number="8713"))
        ['Date is missing', 'Gross weight is missing', 'Tare weight is missing', 'Net weight is missing']
    """

    @property
    def order(self) -> int:
        return 1

    def validate(self, record: Optional[WeighingRecord]) -> List[str]:
        if record is None:
            return ["Weighing record is missing"]

        errors = []

        if record.date is None:
            errors.append("Date is missing")

        if not record.vehicle_number:
            errors.append("Vehicle number is missing")

        if record.gross_weight is None:
            errors.append("Gross weight is missing")

        if record.tare_weight is None:
            errors.append("Tare weight is missing")

        if record.net_weight is None:
            errors.append("Net weight is missing")

        return errors


class BusinessRuleValidator(Validator):
    """
    Checks the weight arithmetic of a complete record.

    Rules (each reported independently):
        - |(gross - tare) - net| <= tolerance
        - gross >= tare
        - net >= 0

    Records missing any weight or weight value are skipped; the
    required-field validator reports those.

    Attributes:
        tolerance: Allowed net weight discrepancy in kg
    """

    def __init__(self, settings: Optional[ParserSettings] = None) -> None:
        self.tolerance = (settings or ParserSettings()).weight_tolerance

    @property
    def order(self) -> int:
        return 2

    def validate(self, record: Optional[WeighingRecord]) -> List[str]:
        """
        Validate the weight arithmetic.

        Args:
            record: Record to check.

        Returns:
            List of rule violations.
        """
        if record is None:
            return []

        weights = (record.gross_weight, record.tare_weight, record.net_weight)
        if any(weight is None or weight.value is None for weight in weights):
            return []

        gross = record.gross_weight.value
        tare = record.tare_weight.value
        net = record.net_weight.value

        errors = []

        difference = abs((gross - tare) - net)
        if difference > self.tolerance:
            errors.append(
                f"Weight calculation mismatch: net weight ({net:.2f}) != "
                f"gross weight ({gross:.2f}) - tare weight ({tare:.2f}) "
                f"(difference: {difference:.2f} kg, tolerance: {self.tolerance:.2f} kg)"
            )

        if gross < tare:
            errors.append(
                f"Gross weight ({gross:.2f} kg) is smaller than "
                f"tare weight ({tare:.2f} kg)"
            )

        if net < 0:
            errors.append(f"Net weight ({net:.2f} kg) is negative")

        if errors:
            logger.debug(f"Business rule violations: {len(errors)}")

        return errors
