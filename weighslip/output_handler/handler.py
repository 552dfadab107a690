"""
Main Output Handler Module.

This module provides the unified OutputHandler class that coordinates
all output operations (Excel workbook and JSON file).
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from config import get_config
from weighslip.models import ParsingResult
from weighslip.utils.logger import get_logger
from weighslip.utils.helpers import ensure_directory
from .excel_exporter import ExcelExporter

# Initialize module logger
logger = get_logger(__name__)


class OutputHandler:
    """
    Unified output handler for parsing results.

    Writes a batch of results to an Excel workbook, a JSON file, or both.

    Attributes:
        excel_enabled: Whether Excel export is enabled
        json_indent: Indentation of the JSON output

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(results, excel_path="outputs/slips.xlsx",
        ...              json_path="outputs/slips.json")
    """

    def __init__(self, excel_enabled: Optional[bool] = None) -> None:
        """
        Initialize the output handler.

        Args:
            excel_enabled: Override config for Excel output.
        """
        self.excel_enabled = excel_enabled if excel_enabled is not None else \
            get_config("output.excel.enabled", True)
        self.json_indent = get_config("output.json.indent", 2)

        # Created on first use
        self._excel_exporter = None

        logger.debug(f"OutputHandler initialized (excel={self.excel_enabled})")

    @property
    def excel_exporter(self) -> ExcelExporter:
        """Get or create the Excel exporter."""
        if self._excel_exporter is None:
            self._excel_exporter = ExcelExporter()
        return self._excel_exporter

    def save(
        self,
        results: Union[ParsingResult, List[ParsingResult]],
        excel_path: Optional[str] = None,
        json_path: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Save results to all enabled outputs.

        A failing output is logged and reported as None; the other
        output is still written.

        Args:
            results: Single result or list of results.
            excel_path: Excel file path (auto-generated when None).
            json_path: JSON file path; JSON is only written when given.

        Returns:
            Dictionary with the written paths:
            {'excel_path': 'path/to/file.xlsx', 'json_path': 'path/to/file.json'}
        """
        if isinstance(results, ParsingResult):
            results = [results]

        output_info = {
            'excel_path': None,
            'json_path': None
        }

        if self.excel_enabled:
            try:
                output_info['excel_path'] = self.to_excel(results, excel_path)
            except Exception as e:
                logger.error(f"Excel export failed: {e}")

        if json_path:
            try:
                output_info['json_path'] = self.to_json(results, json_path)
            except OSError as e:
                logger.error(f"JSON export failed: {e}")

        return output_info

    def to_excel(
        self,
        results: Union[ParsingResult, List[ParsingResult]],
        filepath: Optional[str] = None
    ) -> str:
        """
        Export results to an Excel file.

        Returns:
            Path to created Excel file.
        """
        if isinstance(results, ParsingResult):
            results = [results]

        return self.excel_exporter.export(results, filepath)

    def to_json(
        self,
        results: Union[ParsingResult, List[ParsingResult]],
        filepath: str
    ) -> str:
        """
        Write results to a JSON file as a list of result objects.

        Returns:
            Path to the created JSON file.
        """
        if isinstance(results, ParsingResult):
            results = [results]

        path = Path(filepath)
        ensure_directory(path.parent)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(
                [result.to_dict() for result in results],
                f,
                indent=self.json_indent,
                ensure_ascii=False
            )

        logger.info(f"JSON file saved: {path} ({len(results)} records)")
        return str(path)
