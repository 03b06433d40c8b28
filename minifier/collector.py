"""
Usage Collector Module
Counts class name occurrences across every line of every scanned file.
"""

from collections import Counter
from pathlib import Path
from typing import Union
import logging

from .dialects import Dialect, extract

logger = logging.getLogger(__name__)


def collect(line: str, dialect: Dialect, usage: Counter) -> None:
    """Add one count to usage for every class name recognized in the line."""
    for class_name in extract(line, dialect):
        usage[class_name] += 1


def collect_file(file_path: Union[str, Path], dialect: Dialect, usage: Counter) -> bool:
    """
    Stream a file line by line into the usage table.

    Args:
        file_path: File to scan
        dialect: Dialect bound to the file's extension
        usage: Shared usage table, updated in place

    Returns:
        True if the whole file was read, False if it was skipped. Counts from
        a partially read file are discarded.
    """
    partial = Counter()
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            for line in f:
                collect(line.rstrip('\r\n'), dialect, partial)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable file {file_path}: {e}")
        return False

    usage.update(partial)
    logger.debug(f"Collected {sum(partial.values())} class uses from {file_path}")
    return True
