"""
Matching Module for the Weighing Slip Parser.

This module provides text normalization, keyword matching and
word-geometry helpers shared by the extraction strategies.
"""

from .text_normalizer import TextNormalizer
from .text_matcher import TextMatcher
from .position_helper import PositionHelper

__all__ = ['TextNormalizer', 'TextMatcher', 'PositionHelper']
