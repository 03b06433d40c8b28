"""
Dialects Module
Names the three source dialects and dispatches lines to the matching
recognizer and rewriter.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from utils.file_utils import get_dialect_name

from . import patterns, rewriter


class Dialect(str, Enum):
    MARKUP = 'markup'
    STYLESHEET = 'stylesheet'
    SCRIPT = 'script'

    @classmethod
    def for_path(cls, path: Union[str, Path]) -> Optional['Dialect']:
        """Return the dialect bound to the file's extension, or None if unsupported."""
        name = get_dialect_name(path)
        return cls(name) if name else None


def extract(line: str, dialect: Dialect) -> List[str]:
    """Return every class name the dialect's recognizers find in the line."""
    if dialect is Dialect.STYLESHEET:
        return patterns.extract_css_classes(line)
    if dialect is Dialect.SCRIPT:
        return patterns.extract_js_classes(line)
    return patterns.extract_html_classes(line)


def rewrite(line: str, dialect: Dialect, class_map: Dict[str, str],
            suppress_duplicates: bool = True) -> str:
    """Rewrite the line with the dialect's rewriter."""
    if dialect is Dialect.STYLESHEET:
        return rewriter.rewrite_css_line(line, class_map)
    if dialect is Dialect.SCRIPT:
        return rewriter.rewrite_js_line(line, class_map)
    return rewriter.rewrite_html_line(line, class_map, suppress_duplicates)
