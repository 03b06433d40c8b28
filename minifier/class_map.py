"""
Class Map Module
Ranks collected class names by usage and assigns each a short replacement.
"""

import string
from collections import Counter
from typing import Dict, Iterator, List, Tuple
import logging

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


def short_name(index: int) -> str:
    """
    Return the short class name for a 0-based rank position.

    The letter cycles a..z; every full cycle adds a tier suffix. Tiers 1-9
    are written as the digit, tiers from 10 on as "a" followed by tier - 10.

    >>> [short_name(i) for i in (0, 25, 26, 35, 260)]
    ['a', 'z', 'a1', 'j1', 'aa0']
    """
    if index < 0:
        raise ValueError(f"Rank index must be non-negative, got {index}")
    letter = ALPHABET[index % len(ALPHABET)]
    tier = index // len(ALPHABET)
    if tier == 0:
        return letter
    if tier > 9:
        return f"{letter}a{tier - 10}"
    return f"{letter}{tier}"


def rank_classes(usage: Counter) -> List[Tuple[str, int]]:
    """Sort classes by descending count; equal counts keep first-seen order."""
    return sorted(usage.items(), key=lambda item: item[1], reverse=True)


def build_map(usage: Counter) -> Dict[str, str]:
    """Build the original -> short name mapping from a usage table."""
    class_map = {}
    for index, (class_name, count) in enumerate(rank_classes(usage)):
        class_map[class_name] = short_name(index)
        logger.debug(f"Assigned {class_name} ({count} uses) -> {class_map[class_name]}")
    return class_map


def preview_lines(class_map: Dict[str, str]) -> Iterator[str]:
    for original, short in class_map.items():
        yield f"{original} -> {short}"
