"""
Cross-file CSS class minifier.

Collects class names from markup, stylesheets and scripts, ranks them by
usage, assigns short replacements and rewrites every file consistently.
"""

from .dialects import Dialect, extract, rewrite
from .collector import collect, collect_file
from .class_map import short_name, rank_classes, build_map, preview_lines
from .errors import MinifierError, TraversalError
from .engine import ClassMinifier, MinifyResult

__all__ = [
    'Dialect',
    'extract',
    'rewrite',
    'collect',
    'collect_file',
    'short_name',
    'rank_classes',
    'build_map',
    'preview_lines',
    'MinifierError',
    'TraversalError',
    'ClassMinifier',
    'MinifyResult',
]
