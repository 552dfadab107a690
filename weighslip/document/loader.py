"""
OCR Document Loader Module.

This module maps a provider OCR response (pages, lines, words with
bounding-box vertex lists) into the OCRDocument consumed by the parser.
The parsing core never sees provider-specific structures.

Expected response shape:
    {
        "pages": [{
            "text": "...",
            "confidence": 0.97,
            "lines": [{"text": "..."}],
            "words": [{
                "text": "...",
                "confidence": 0.99,
                "boundingBox": {"vertices": [{"x": 0, "y": 0}, ...]}
            }]
        }]
    }

Usage:
    from weighslip.document import OCRDocumentLoader

    loader = OCRDocumentLoader()
    document = loader.load_file("samples/slip_01.json")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from weighslip.utils.logger import get_logger
from weighslip.utils.exceptions import DocumentLoadError
from .ocr_document import OCRDocument, OCRWord

# Initialize module logger
logger = get_logger(__name__)


class OCRDocumentLoader:
    """
    Converts provider OCR responses into OCRDocument values.

    Only the first page of a response is used; weighing slips are
    single-page documents.

    Example:
        >>> loader = OCRDocumentLoader()
        >>> document = loader.load_dict({"pages": [{"text": "", "lines": [], "words": []}]})
        >>> document.line_count
        0
    """

    def load_file(self, filepath: Union[str, Path]) -> OCRDocument:
        """
        Load an OCR document from a JSON file.

        Args:
            filepath: Path to the OCR response file.

        Returns:
            Loaded OCRDocument.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed.
        """
        path = Path(filepath)
        logger.debug(f"Loading OCR response: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise DocumentLoadError(str(path), f"Could not read file: {e}")
        except UnicodeDecodeError as e:
            raise DocumentLoadError(str(path), f"File is not valid UTF-8: {e}")
        except json.JSONDecodeError as e:
            raise DocumentLoadError(str(path), f"Invalid JSON: {e}")

        return self.load_dict(data, source=str(path))

    def load_json(self, text: str, source: str = "<string>") -> OCRDocument:
        """
        Load an OCR document from a JSON string.

        Args:
            text: JSON text of the OCR response.
            source: Name used in error messages.

        Returns:
            Loaded OCRDocument.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentLoadError(source, f"Invalid JSON: {e}")

        return self.load_dict(data, source=source)

    def load_dict(self, data: Dict[str, Any], source: str = "<dict>") -> OCRDocument:
        """
        Convert an already-decoded OCR response into an OCRDocument.

        Args:
            data: Decoded OCR response.
            source: Name used in error messages.

        Returns:
            Loaded OCRDocument.

        Raises:
            DocumentLoadError: If the response has no pages.
        """
        if not isinstance(data, dict):
            raise DocumentLoadError(source, "OCR response must be a JSON object")

        pages = data.get('pages') or []
        if not pages:
            raise DocumentLoadError(source, "No pages in OCR response")

        if not isinstance(pages, list):
            raise DocumentLoadError(source, "OCR response pages must be a list")

        page = pages[0]
        if not isinstance(page, dict):
            raise DocumentLoadError(source, "OCR response page must be a JSON object")

        lines = [
            line.get('text', '') for line in page.get('lines') or []
            if isinstance(line, dict)
        ]
        words = [
            self._convert_word(word, source) for word in page.get('words') or []
            if isinstance(word, dict)
        ]

        document = OCRDocument(
            text=page.get('text') or '',
            lines=lines,
            words=words,
            confidence=page.get('confidence')
        )

        logger.debug(
            f"Loaded {source}: {document.line_count} lines, "
            f"{document.word_count} words"
        )
        return document

    def _convert_word(self, word: Dict[str, Any], source: str = "<dict>") -> OCRWord:
        """
        Convert a provider word into an OCRWord.

        Vertex 0 is the top-left corner and vertex 2 the bottom-right one.
        Words without a bounding box get a zero-sized box at the origin.

        Raises:
            DocumentLoadError: If the bounding box or a vertex is malformed.
        """
        text = word.get('text', '')
        confidence = word.get('confidence')
        bounding_box = word.get('boundingBox') or {}
        if not isinstance(bounding_box, dict):
            raise DocumentLoadError(source, f"Malformed bounding box for word {text!r}")
        vertices = bounding_box.get('vertices') or []

        if not vertices:
            return OCRWord(text=text, confidence=confidence)

        if not isinstance(vertices, list) or not all(
            vertex is None or isinstance(vertex, dict) for vertex in vertices
        ):
            raise DocumentLoadError(source, f"Malformed vertices for word {text!r}")

        top_left = vertices[0]
        bottom_right = vertices[2] if len(vertices) > 2 else top_left

        try:
            x = self._coordinate(top_left, 'x')
            y = self._coordinate(top_left, 'y')
            right = self._coordinate(bottom_right, 'x')
            bottom = self._coordinate(bottom_right, 'y')
        except (TypeError, ValueError) as e:
            raise DocumentLoadError(source, f"Invalid coordinate for word {text!r}: {e}")

        return OCRWord(
            text=text,
            x=x,
            y=y,
            width=right - x,
            height=bottom - y,
            confidence=confidence
        )

    @staticmethod
    def _coordinate(vertex: Optional[Dict[str, Any]], axis: str) -> int:
        """Read one vertex coordinate; providers omit zero values."""
        if not vertex:
            return 0
        return int(vertex.get(axis) or 0)
