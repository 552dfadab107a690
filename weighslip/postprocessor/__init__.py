"""
Post-Processing Module for the Weighing Slip Parser.

This module provides functionality for:
    - Weight and date normalization
    - Required-field validation
    - Weight arithmetic validation
"""

from .normalizers import DateNormalizer, WeightNormalizer
from .validators import Validator, RequiredFieldValidator, BusinessRuleValidator

__all__ = [
    'DateNormalizer',
    'WeightNormalizer',
    'Validator',
    'RequiredFieldValidator',
    'BusinessRuleValidator'
]
