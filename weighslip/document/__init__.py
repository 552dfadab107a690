"""
OCR Document Module for the Weighing Slip Parser.

This module provides the provider-independent OCR document model and
the loader that builds it from provider JSON responses.
"""

from .ocr_document import OCRDocument, OCRWord
from .loader import OCRDocumentLoader

__all__ = ['OCRDocument', 'OCRWord', 'OCRDocumentLoader']
