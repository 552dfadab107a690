"""
Parsing Pipeline Module.

This module provides the ParsingPipeline class that turns one OCR
document into a ParsingResult.

Stages:
    1. Extract every registered field into the record builder
    2. Normalize the weights and the date
    3. Run the validators in ascending order
    4. Assemble the result (success iff no errors)

An unexpected exception inside one extractor only costs that field: it
is recorded as a warning and the remaining fields are still extracted.
"""

from datetime import date
from typing import Any, List, Optional, Sequence

from config import ParserSettings
from weighslip.document import OCRDocument
from weighslip.extraction import ExtractorRegistry
from weighslip.models import ParsingResult, Weight
from weighslip.postprocessor import (
    BusinessRuleValidator,
    DateNormalizer,
    RequiredFieldValidator,
    Validator,
    WeightNormalizer,
)
from weighslip.utils.exceptions import ExtractionError, ValidationError
from weighslip.utils.logger import get_logger
from .context import ParsingContext

# Initialize module logger
logger = get_logger(__name__)

TEXT_FIELDS = ("vehicle_number", "company", "product_name")
WEIGHT_ROLES = ("net", "tare", "gross")


class ParsingPipeline:
    """
    Extract → normalize → validate → assemble, over one document.

    Attributes:
        registry: Extractors keyed by field name
        validators: Validators sorted by order
        weight_normalizer: WeightNormalizer instance
        date_normalizer: DateNormalizer instance

    Example:
        >>> pipeline = ParsingPipeline()
        >>> result = pipeline.process(document)
        >>> if result.success:
        ...     print(result.record.net_weight)
    """

    def __init__(
        self,
        registry: Optional[ExtractorRegistry] = None,
        validators: Optional[Sequence[Validator]] = None,
        settings: Optional[ParserSettings] = None
    ) -> None:
        settings = settings or ParserSettings()

        if registry is None:
            registry = ExtractorRegistry.default(settings)
        self.registry = registry

        if validators is None:
            validators = [RequiredFieldValidator(), BusinessRuleValidator(settings)]
        self.validators: List[Validator] = sorted(validators, key=lambda v: v.order)

        self.weight_normalizer = WeightNormalizer()
        self.date_normalizer = DateNormalizer()

    def process(self, document: Optional[OCRDocument]) -> ParsingResult:
        """
        Parse one document.

        Args:
            document: OCR document, or None.

        Returns:
            ParsingResult; a None document fails immediately.
        """
        if document is None:
            return ParsingResult.failure("OCR document is None")

        return self.execute(ParsingContext(document))

    def execute(self, context: ParsingContext) -> ParsingResult:
        """
        Run every stage against a prepared context.

        The context keeps the diagnostics and metadata after the run,
        which callers can inspect.
        """
        if context.document is None:
            return ParsingResult.failure("OCR document is None")

        self._extract(context)
        self._normalize(context)
        self._validate(context)

        if context.has_errors:
            return ParsingResult.failure(context.errors)

        return ParsingResult.ok(context.builder.build(), context.warnings)

    # =========================================================================
    # Extraction
    # =========================================================================

    def _extract(self, context: ParsingContext) -> None:
        extracted = []

        value = self._run_extractor("date", context)
        if isinstance(value, date):
            context.builder.date = value
            extracted.append("date")
        elif value is not None:
            self._log_ignored("date", value)

        for name in TEXT_FIELDS:
            value = self._run_extractor(name, context)
            if isinstance(value, str):
                setattr(context.builder, name, value)
                extracted.append(name)
            elif value is not None:
                self._log_ignored(name, value)

        extracted.extend(self._extract_weights(context))

        context.put_metadata("extracted_fields", extracted)
        logger.debug(f"Extracted fields: {extracted}")

    def _extract_weights(self, context: ParsingContext) -> List[str]:
        """
        Extract weights through the combined "weight" extractor, or through
        per-role "<role>_weight" extractors when the registry has no
        combined one.
        """
        found = []

        if "weight" in self.registry:
            context.put_metadata("weight_path", "combined")
            weights = self._run_extractor("weight", context)
            if weights is not None and not isinstance(weights, dict):
                self._log_ignored("weight", weights)
                weights = None

            for role in WEIGHT_ROLES:
                weight = (weights or {}).get(role)
                if isinstance(weight, Weight):
                    context.builder.set_weight(role, weight)
                    found.append(f"{role}_weight")
        else:
            context.put_metadata("weight_path", "individual")
            for role in WEIGHT_ROLES:
                name = f"{role}_weight"
                weight = self._run_extractor(name, context)
                if isinstance(weight, Weight):
                    context.builder.set_weight(role, weight)
                    found.append(name)
                elif weight is not None:
                    self._log_ignored(name, weight)

        return found

    def _run_extractor(self, name: str, context: ParsingContext) -> Optional[Any]:
        extractor = self.registry.get(name)
        if extractor is None:
            return None

        try:
            return extractor.extract(context.document)
        except Exception as e:
            error = ExtractionError(name, str(e))
            logger.warning(error.message)
            context.add_warning(error.message)
            return None

    @staticmethod
    def _log_ignored(name: str, value: Any) -> None:
        logger.debug(f"Ignoring {name} value of type {type(value).__name__}")

    # =========================================================================
    # Normalization and validation
    # =========================================================================

    def _normalize(self, context: ParsingContext) -> None:
        builder = context.builder
        builder.gross_weight = self.weight_normalizer.normalize(builder.gross_weight)
        builder.tare_weight = self.weight_normalizer.normalize(builder.tare_weight)
        builder.net_weight = self.weight_normalizer.normalize(builder.net_weight)
        builder.date = self.date_normalizer.normalize(builder.date)

    def _validate(self, context: ParsingContext) -> None:
        record = context.builder.build()

        for validator in self.validators:
            try:
                errors = validator.validate(record)
            except Exception as e:
                error = ValidationError(validator.__class__.__name__, str(e))
                logger.warning(error.message)
                context.add_error(error.message)
                continue

            for error in errors:
                context.add_error(error)
