"""
Parsing Service Module.

Entry point used by callers: runs the pipeline over one document and
logs the outcome.

Usage:
    from weighslip.pipeline import ParsingService

    service = ParsingService()
    result = service.parse(document)
"""

from typing import Optional

from weighslip.document import OCRDocument
from weighslip.models import ParsingResult
from weighslip.utils.logger import get_logger
from .pipeline import ParsingPipeline

# Initialize module logger
logger = get_logger(__name__)


class ParsingService:
    """
    Logging facade over ParsingPipeline.

    Unexpected exceptions escaping the pipeline are converted into a
    failure result instead of propagating.

    Attributes:
        pipeline: The ParsingPipeline used for every parse
    """

    def __init__(self, pipeline: Optional[ParsingPipeline] = None) -> None:
        self.pipeline = pipeline or ParsingPipeline()

    def parse(self, document: Optional[OCRDocument]) -> ParsingResult:
        """
        Parse one OCR document.

        Args:
            document: OCR document, or None.

        Returns:
            ParsingResult from the pipeline.
        """
        if document is not None:
            logger.info(
                f"Parsing document: {document.line_count} lines, "
                f"{document.word_count} words"
            )

        try:
            result = self.pipeline.process(document)
        except Exception as e:
            logger.error(f"Parsing failed: {e}")
            return ParsingResult.failure(f"Parsing failed: {e}")

        if result.success:
            logger.info("Parsing succeeded")
            for warning in result.warnings:
                logger.warning(f"  {warning}")
        else:
            logger.warning(f"Parsing failed with {len(result.errors)} error(s)")
            for error in result.errors:
                logger.warning(f"  {error}")

        return result
