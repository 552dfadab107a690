"""
Field Extractor Base Module.

Every field extractor runs the same template: try each supporting
strategy in priority order, post-process the raw value, and fall back
to a keyword-independent heuristic when every strategy comes up empty.
Concrete extractors only supply the keyword set, the post-processor and
the optional fallback.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Tuple

from weighslip.document import OCRDocument
from weighslip.utils.logger import get_logger
from .strategies import ExtractionStrategy

# Initialize module logger
logger = get_logger(__name__)

PostProcessor = Callable[[str, OCRDocument], Optional[Any]]
Fallback = Callable[[OCRDocument], Optional[Any]]


class FieldExtractor(ABC):
    """Extracts one named field from an OCR document."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Field name used in diagnostics and the registry."""

    @abstractmethod
    def extract(self, document: Optional[OCRDocument]) -> Optional[Any]:
        """Return the field value, or None when it cannot be found."""


class KeywordFieldExtractor(FieldExtractor):
    """
    Keyword-driven extractor parameterised by callables.

    Subclasses pass their keyword tuple, post-processor and optional
    fallback to __init__. The post-processor receives the raw
    strategy value and the document, so weight extractors can read the
    base date from other lines.

    Attributes:
        keywords: Fixed keyword vocabulary for the field
        strategies: Strategies sorted by ascending priority
    """

    def __init__(
        self,
        name: str,
        keywords: Sequence[str],
        strategies: Sequence[ExtractionStrategy],
        post_processor: PostProcessor,
        fallback: Optional[Fallback] = None
    ) -> None:
        self._name = name
        self.keywords: Tuple[str, ...] = tuple(keywords)
        self.strategies = sorted(strategies, key=lambda s: s.priority)
        self._post_processor = post_processor
        self._fallback = fallback

    @property
    def name(self) -> str:
        return self._name

    def extract(self, document: Optional[OCRDocument]) -> Optional[Any]:
        """
        Run the strategy chain, then the fallback.

        A strategy whose raw value fails post-processing does not stop
        the chain; the next strategy is tried.

        Args:
            document: OCR document to read.

        Returns:
            Post-processed field value, or None.
        """
        if document is None:
            return None

        for strategy in self.strategies:
            if not strategy.supports(document):
                continue

            raw_value = strategy.extract(document, self.keywords)
            if not raw_value:
                continue

            value = self._post_processor(raw_value, document)
            if value is not None:
                logger.debug(
                    f"{self.name}: '{raw_value}' -> {value!r} "
                    f"via {strategy.__class__.__name__}"
                )
                return value

            logger.debug(f"{self.name}: rejected raw value '{raw_value}'")

        if self._fallback is None:
            return None

        value = self._fallback(document)
        if value is not None:
            logger.debug(f"{self.name}: {value!r} via fallback")
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', keywords={len(self.keywords)})"
