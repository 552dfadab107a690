"""
Utility Module for the Weighing Slip Parser.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exceptions
    - File helpers
"""

from .logger import LoggingSettings, set_level, setup_logger, get_logger
from .helpers import ensure_directory, generate_timestamp, find_ocr_files

__all__ = [
    'LoggingSettings',
    'set_level',
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'generate_timestamp',
    'find_ocr_files'
]
