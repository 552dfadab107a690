"""
Weighing Record Data Classes.

This module defines the structured output of the parser: the weighing
record, its weight measurements, and the mutable builder used while the
pipeline fills fields in.
"""

from dataclasses import dataclass
import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Weight:
    """
    A single weight measurement from the slip.

    Attributes:
        value: Measured weight, or None when the number could not be read
        unit: Mass unit ("kg" after normalization)
        measured_at: Measurement timestamp, when a clock time was printed

    Example:
        >>> Weight(value=12480.0, unit="kg")
        Weight(value=12480.0, unit='kg', measured_at=None)
    """
    value: Optional[float] = None
    unit: Optional[str] = None
    measured_at: Optional[datetime.datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'unit': self.unit,
            'measured_at': self.measured_at.isoformat() if self.measured_at else None
        }

    def __str__(self) -> str:
        if self.value is None:
            return "-"
        return f"{self.value:,.2f} {self.unit or ''}".strip()


@dataclass(frozen=True)
class WeighingRecord:
    """
    Structured data read from one weighing slip.

    Attributes:
        date: Weighing date
        vehicle_number: Vehicle identifier (plate number or short number)
        company: Counterparty / company name (optional)
        product_name: Product or item weighed (optional)
        gross_weight: Vehicle plus load
        tare_weight: Empty vehicle
        net_weight: Load only
        issuer: Slip issuer (optional)
        coordinates: Location string (optional)
    """
    date: Optional[datetime.date] = None
    vehicle_number: Optional[str] = None
    company: Optional[str] = None
    product_name: Optional[str] = None
    gross_weight: Optional[Weight] = None
    tare_weight: Optional[Weight] = None
    net_weight: Optional[Weight] = None
    issuer: Optional[str] = None
    coordinates: Optional[str] = None

    @property
    def weights(self) -> Dict[str, Optional[Weight]]:
        """Weight measurements keyed by role."""
        return {
            'gross': self.gross_weight,
            'tare': self.tare_weight,
            'net': self.net_weight
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'date': self.date.isoformat() if self.date else None,
            'vehicle_number': self.vehicle_number,
            'company': self.company,
            'product_name': self.product_name,
            'gross_weight': self.gross_weight.to_dict() if self.gross_weight else None,
            'tare_weight': self.tare_weight.to_dict() if self.tare_weight else None,
            'net_weight': self.net_weight.to_dict() if self.net_weight else None,
            'issuer': self.issuer,
            'coordinates': self.coordinates
        }

    def to_flat_dict(self) -> Dict[str, Any]:
        """
        Convert to a flat dictionary suitable for spreadsheet rows.

        Returns:
            Flat dictionary with no nested structures.
        """
        result = {
            'date': self.date.isoformat() if self.date else '',
            'vehicle_number': self.vehicle_number or '',
            'company': self.company or '',
            'product_name': self.product_name or '',
        }
        for role, weight in self.weights.items():
            result[f'{role}_weight'] = weight.value if weight else None
            result[f'{role}_unit'] = (weight.unit or '') if weight else ''
            result[f'{role}_measured_at'] = (
                weight.measured_at.isoformat()
                if weight and weight.measured_at else ''
            )
        return result


@dataclass
class WeighingRecordBuilder:
    """
    Mutable builder used while the pipeline fills in a WeighingRecord.

    Every build() call returns a new immutable snapshot, so stages can
    inspect the record and keep editing the builder afterwards.

    Example:
        >>> builder = WeighingRecordBuilder()
        >>> builder.vehicle_number = "8713"
        >>> builder.build().vehicle_number
        '8713'
    """
    date: Optional[datetime.date] = None
    vehicle_number: Optional[str] = None
    company: Optional[str] = None
    product_name: Optional[str] = None
    gross_weight: Optional[Weight] = None
    tare_weight: Optional[Weight] = None
    net_weight: Optional[Weight] = None
    issuer: Optional[str] = None
    coordinates: Optional[str] = None

    def set_weight(self, role: str, weight: Optional[Weight]) -> None:
        """
        Set a weight by role name ("gross", "tare" or "net").

        Raises:
            KeyError: If the role is unknown.
        """
        attribute = f"{role}_weight"
        if attribute not in ('gross_weight', 'tare_weight', 'net_weight'):
            raise KeyError(f"Unknown weight role: {role}")
        setattr(self, attribute, weight)

    def build(self) -> WeighingRecord:
        return WeighingRecord(
            date=self.date,
            vehicle_number=self.vehicle_number,
            company=self.company,
            product_name=self.product_name,
            gross_weight=self.gross_weight,
            tare_weight=self.tare_weight,
            net_weight=self.net_weight,
            issuer=self.issuer,
            coordinates=self.coordinates
        )
