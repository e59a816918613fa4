"""
File utility functions.
"""

import os
from typing import Optional
from .logger import get_logger

logger = get_logger(__name__)


def read_file(file_path: str) -> Optional[str]:
    """
    Read a markup file.

    Args:
        file_path: Path to the file

    Returns:
        File content as string, or None if it could not be read
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file {file_path}: {e}")
        return None


def write_file(file_path: str, content: str) -> bool:
    """
    Write generated output to a file, creating parent directories.

    Args:
        file_path: Path to the file
        content: Content to write

    Returns:
        True if successful, False otherwise
    """
    try:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug(f"Successfully wrote file: {file_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to write file {file_path}: {e}")
        return False
