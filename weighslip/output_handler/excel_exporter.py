"""
Excel Exporter Module.

This module provides Excel file generation for weighing slip parsing
results. Uses openpyxl for modern Excel format support.

Features:
    - Formatted headers
    - Auto-column width
    - Diagnostics sheet (errors and warnings per slip)
    - Multiple result support
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from config import get_config
from weighslip.models import ParsingResult
from weighslip.utils.logger import get_logger
from weighslip.utils.helpers import ensure_directory, generate_timestamp
from weighslip.utils.exceptions import ExcelExportError

# Initialize module logger
logger = get_logger(__name__)


class ExcelExporter:
    """
    Exports parsing results to Excel format.

    One row per slip on the main sheet; failed slips keep their row with
    empty record columns so the batch stays aligned with its inputs.

    Attributes:
        output_dir: Directory for generated files
        sheet_name: Title of the main sheet
        include_diagnostics: Whether to add the diagnostics sheet

    Example:
        >>> exporter = ExcelExporter()
        >>> filepath = exporter.export(results, "outputs/slips.xlsx")
    """

    # Column definitions: (header, key in WeighingRecord.to_flat_dict())
    COLUMNS = [
        ('Date', 'date'),
        ('Vehicle Number', 'vehicle_number'),
        ('Company', 'company'),
        ('Product', 'product_name'),
        ('Gross Weight (kg)', 'gross_weight'),
        ('Gross Measured At', 'gross_measured_at'),
        ('Tare Weight (kg)', 'tare_weight'),
        ('Tare Measured At', 'tare_measured_at'),
        ('Net Weight (kg)', 'net_weight'),
        ('Net Measured At', 'net_measured_at'),
    ]

    STATUS_COLUMNS = [
        ('Source File', 'source_file'),
        ('Success', 'success'),
        ('Confidence', 'confidence'),
    ]

    DIAGNOSTIC_COLUMNS = ['Source File', 'Level', 'Message']

    HEADER_FONT = Font(bold=True, color="FFFFFF")
    THIN_BORDER = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    def __init__(self) -> None:
        """Initialize the Excel exporter with configuration."""
        self.output_dir = Path(get_config("paths.output_dir", "outputs"))
        self.sheet_name = get_config("output.excel.sheet_name", "Weighing Slips")
        self.include_diagnostics = get_config("output.excel.include_diagnostics", True)

        logger.debug(f"ExcelExporter initialized (output_dir: {self.output_dir})")

    def export(
        self,
        results: Union[ParsingResult, List[ParsingResult]],
        filepath: Optional[Union[str, Path]] = None
    ) -> str:
        """
        Export parsing results to an Excel file.

        Args:
            results: Single result or list of results to export.
            filepath: Output file. If None, a timestamped file is created
                in the configured output directory.

        Returns:
            Path to the created Excel file.

        Raises:
            ExcelExportError: If there is nothing to export or saving fails.
        """
        if isinstance(results, ParsingResult):
            results = [results]

        if not results:
            raise ExcelExportError("No results", "No results to export")

        if filepath is None:
            filepath = self.output_dir / self.get_default_filename()
        filepath = Path(filepath)
        ensure_directory(filepath.parent)

        try:
            workbook = Workbook()
            self._create_data_sheet(workbook, results)

            if self.include_diagnostics:
                self._create_diagnostics_sheet(workbook, results)

            workbook.save(filepath)

        except OSError as e:
            logger.error(f"Excel export failed: {e}")
            raise ExcelExportError(str(filepath), str(e))

        logger.info(f"Excel file saved: {filepath} ({len(results)} records)")
        return str(filepath)

    def _create_data_sheet(self, workbook: Workbook, results: List[ParsingResult]) -> None:
        """
        Create the main sheet with one row per slip.

        Args:
            workbook: openpyxl Workbook instance.
            results: List of parsing results.
        """
        sheet = workbook.active
        sheet.title = self.sheet_name

        columns = self.STATUS_COLUMNS + self.COLUMNS
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        self._write_headers(sheet, [name for name, _ in columns], header_fill)

        for row_num, result in enumerate(results, 2):
            record_values = result.record.to_flat_dict() if result.record else {}
            for col, (_, key) in enumerate(columns, 1):
                if key in record_values:
                    value = record_values[key]
                else:
                    value = getattr(result, key, None)
                cell = sheet.cell(row=row_num, column=col, value=self._cell_value(value))
                cell.border = self.THIN_BORDER

        self._fit_columns(sheet, len(columns))
        sheet.freeze_panes = 'A2'

    def _create_diagnostics_sheet(self, workbook: Workbook, results: List[ParsingResult]) -> None:
        """One row per error or warning, tagged with its source file."""
        sheet = workbook.create_sheet(title="Diagnostics")

        header_fill = PatternFill(start_color="C65911", end_color="C65911", fill_type="solid")
        self._write_headers(sheet, self.DIAGNOSTIC_COLUMNS, header_fill)

        row_num = 2
        for result in results:
            messages = [('ERROR', m) for m in result.errors]
            messages += [('WARNING', m) for m in result.warnings]
            for level, message in messages:
                sheet.cell(row=row_num, column=1, value=result.source_file or '')
                sheet.cell(row=row_num, column=2, value=level)
                sheet.cell(row=row_num, column=3, value=message)
                row_num += 1

        self._fit_columns(sheet, len(self.DIAGNOSTIC_COLUMNS))

    def _write_headers(self, sheet, headers: List[str], fill: PatternFill) -> None:
        for col, header_name in enumerate(headers, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = self.HEADER_FONT
            cell.fill = fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = self.THIN_BORDER

    @staticmethod
    def _fit_columns(sheet, column_count: int) -> None:
        for col in range(1, column_count + 1):
            max_length = 0
            for row in range(1, sheet.max_row + 1):
                cell_value = sheet.cell(row=row, column=col).value
                if cell_value is not None:
                    max_length = max(max_length, len(str(cell_value)))
            sheet.column_dimensions[get_column_letter(col)].width = min(max_length + 2, 60)

    @staticmethod
    def _cell_value(value: Any) -> Any:
        if value is None:
            return ''
        if isinstance(value, bool):
            return 'Yes' if value else 'No'
        return value

    def get_default_filename(self) -> str:
        """
        Generate a default filename with timestamp.

        Returns:
            Default filename string.
        """
        timestamp = generate_timestamp()
        pattern = get_config(
            "output.excel.filename_pattern",
            "weighing_slips_{timestamp}.xlsx"
        )
        return pattern.format(timestamp=timestamp)
