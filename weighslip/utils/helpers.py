"""
Helper Utilities Module.

Small filesystem and formatting helpers shared by the CLI and the
output writers.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - generate_timestamp: Generate formatted timestamps
    - find_ocr_files: Collect OCR response files from a path
"""

from datetime import datetime
from pathlib import Path
from typing import List, Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Example:
        >>> ensure_directory("outputs/reports")
        PosixPath('outputs/reports')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def generate_timestamp(format_str: str = "%Y%m%d_%H%M%S") -> str:
    """
    Generate a formatted timestamp string.

    Args:
        format_str: strftime format string.

    Returns:
        Formatted timestamp string.

    Example:
        >>> generate_timestamp("%Y-%m-%d")
        "2026-02-02"
    """
    return datetime.now().strftime(format_str)


def find_ocr_files(path: Union[str, Path]) -> List[Path]:
    """
    Collect OCR response files (*.json) from a file or directory path.

    Args:
        path: A single JSON file or a directory containing JSON files.

    Returns:
        Sorted list of JSON file paths.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If a file path does not point to a JSON file.
    """
    input_path = Path(path)

    if not input_path.exists():
        raise FileNotFoundError(f"Input path not found: {input_path}")

    if input_path.is_file():
        if input_path.suffix.lower() != ".json":
            raise ValueError(f"Unsupported file type: {input_path.suffix}")
        return [input_path]

    files = list(input_path.glob("*.json")) + list(input_path.glob("*.JSON"))
    return sorted(set(files))
