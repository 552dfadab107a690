"""
Output Handler Module for the Weighing Slip Parser.

This module provides functionality for:
    - Excel file generation
    - JSON result files
"""

from .handler import OutputHandler
from .excel_exporter import ExcelExporter

__all__ = ['OutputHandler', 'ExcelExporter']
