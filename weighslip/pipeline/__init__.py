"""
Pipeline Module for the Weighing Slip Parser.

This module provides the parsing context, the extract → normalize →
validate pipeline and the service facade used by callers.
"""

from .context import ParsingContext
from .pipeline import ParsingPipeline
from .service import ParsingService

__all__ = ['ParsingContext', 'ParsingPipeline', 'ParsingService']
