"""
Data Model Module for the Weighing Slip Parser.

This module provides the record types produced by the parser.
"""

from .weighing_record import Weight, WeighingRecord, WeighingRecordBuilder
from .parsing_result import ParsingResult

__all__ = ['Weight', 'WeighingRecord', 'WeighingRecordBuilder', 'ParsingResult']
