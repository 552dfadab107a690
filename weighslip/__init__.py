"""
Weighing Slip Parser - Source Package.

This package turns the OCR output of a printed vehicle weighing slip
into a structured, verified weighing record.

Modules:
    - document: OCR document model and provider JSON loader
    - matching: Text normalization, fuzzy keyword matching, word geometry
    - extraction: Strategies, field extractors and the extractor registry
    - postprocessor: Weight/date normalization and validation rules
    - pipeline: Parsing context, pipeline and service facade
    - output_handler: Excel export of parsing results

Architecture:
    OCR JSON → Document → Extraction → Normalization → Validation → Result
"""

__version__ = "1.0.0"

__all__ = [
    'document',
    'matching',
    'extraction',
    'models',
    'postprocessor',
    'pipeline',
    'output_handler',
    'utils'
]
