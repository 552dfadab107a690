#!/usr/bin/env python3
"""
Weighing Slip Parser - Main Entry Point.

This is the main entry point for the weighing slip parser. It provides
both a command-line interface and programmatic access to batch parsing
of OCR responses.

Usage:
    Command Line:
        python main.py --input slip.json --output results.xlsx
        python main.py --input ./ocr_responses/ --json results.json --no-excel

    Python:
        from main import run_parsing
        results = run_parsing("ocr_responses/")

Version: 1.0.0
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import project modules
from config import ConfigurationManager, ParserSettings
from weighslip.document import OCRDocumentLoader
from weighslip.models import ParsingResult
from weighslip.output_handler import OutputHandler
from weighslip.pipeline import ParsingPipeline, ParsingService
from weighslip.utils.exceptions import WeighingSlipError
from weighslip.utils.helpers import find_ocr_files
from weighslip.utils.logger import get_logger, set_level, setup_logger_from_config


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Weighing Slip OCR Parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Parse a single OCR response:
        python main.py --input slip.json --output results.xlsx

    Parse a directory and write JSON only:
        python main.py --input ./ocr_responses/ --json results.json --no-excel
        """
    )

    # Input/Output arguments
    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="OCR response JSON file or directory of JSON files"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Excel output file (default: timestamped file in paths.output_dir)"
    )

    parser.add_argument(
        "--json", "-j",
        type=str,
        default=None,
        help="Also write results to this JSON file"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--no-excel",
        action="store_true",
        help="Disable Excel output"
    )

    # Logging options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        set_level(logging.DEBUG)
    elif args.quiet:
        set_level(logging.WARNING)

    logger.info("=" * 60)
    logger.info("WEIGHING SLIP PARSER")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Input: {args.input}")

    return config


def parse_file(
    file_path: Path,
    loader: OCRDocumentLoader,
    service: ParsingService
) -> ParsingResult:
    """
    Load and parse one OCR response file.

    Load failures become failure results so one bad file does not stop
    the batch.
    """
    start = time.perf_counter()

    try:
        document = loader.load_file(file_path)
    except WeighingSlipError as e:
        result = ParsingResult.failure(str(e))
    else:
        result = service.parse(document)

    result.source_file = str(file_path)
    result.processing_time = time.perf_counter() - start
    return result


def run_parsing(
    input_path: str,
    excel_path: Optional[str] = None,
    json_path: Optional[str] = None,
    config_path: Optional[str] = None,
    enable_excel: bool = True
) -> List[ParsingResult]:
    """
    Parse every OCR response under the input path and write the outputs.

    This is the main programmatic entry point.

    Args:
        input_path: OCR JSON file or directory.
        excel_path: Excel output file (auto-generated when None).
        json_path: JSON output file (skipped when None).
        config_path: Optional custom configuration file path.
        enable_excel: Whether to generate Excel output.

    Returns:
        List of parsing results, one per input file.

    Example:
        >>> results = run_parsing("ocr_responses/", json_path="outputs/results.json")
        >>> sum(r.success for r in results)
        12
    """
    logger = get_logger(__name__)

    config = ConfigurationManager(config_path)
    settings = ParserSettings.from_config(config)

    loader = OCRDocumentLoader()
    service = ParsingService(ParsingPipeline(settings=settings))
    output_handler = OutputHandler(excel_enabled=enable_excel)

    files_to_process = find_ocr_files(input_path)
    logger.info(f"Processing {len(files_to_process)} files...")

    results = []
    for file_path in files_to_process:
        logger.info(f"Processing: {file_path.name}")
        result = parse_file(file_path, loader, service)
        results.append(result)

        record = result.record
        if result.success:
            logger.info(
                f"  OK: vehicle {record.vehicle_number}, date {record.date}, "
                f"net {record.net_weight}"
            )
        else:
            logger.warning(f"  FAILED: {len(result.errors)} error(s)")

    if results:
        logger.info("Generating outputs...")
        output_info = output_handler.save(results, excel_path=excel_path, json_path=json_path)

        if output_info.get('excel_path'):
            logger.info(f"Excel output: {output_info['excel_path']}")
        if output_info.get('json_path'):
            logger.info(f"JSON output: {output_info['json_path']}")

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        args = parse_arguments(argv)

        initialize_system(args)
        logger = get_logger(__name__)

        results = run_parsing(
            input_path=args.input,
            excel_path=args.output,
            json_path=args.json,
            config_path=args.config,
            enable_excel=not args.no_excel
        )

        if not results:
            logger.error("No files to process")
            return 1

        succeeded = sum(1 for r in results if r.success)
        logger.info("=" * 60)
        logger.info(f"Parsing complete. {succeeded}/{len(results)} slips parsed successfully.")
        logger.info("=" * 60)

        return 0

    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except WeighingSlipError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
