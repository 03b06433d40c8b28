"""
Class Minifier Engine
Coordinates the collection pass, class map assignment and the rewrite pass
over a directory tree.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union
import logging

from utils.file_utils import atomic_output, iter_supported_files

from .class_auditor import ClassAuditor
from .class_map import build_map
from .collector import collect_file
from .dialects import Dialect, rewrite
from .errors import TraversalError

logger = logging.getLogger(__name__)


@dataclass
class MinifyResult:
    usage: Counter = field(default_factory=Counter)
    class_map: Dict[str, str] = field(default_factory=dict)
    files_scanned: int = 0
    files_rewritten: int = 0
    files_changed: int = 0
    skipped_files: List[str] = field(default_factory=list)
    aborted: bool = False
    preview: bool = False
    missed_classes: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """Convert the result to a plain dictionary for reports."""
        return {
            'summary': {
                'classes': len(self.class_map),
                'class_uses': sum(self.usage.values()),
                'files_scanned': self.files_scanned,
                'files_rewritten': self.files_rewritten,
                'files_changed': self.files_changed,
                'files_skipped': len(self.skipped_files),
                'aborted': self.aborted,
                'preview': self.preview,
            },
            'class_map': [
                {'original': original, 'short': short, 'count': self.usage.get(original, 0)}
                for original, short in self.class_map.items()
            ],
            'skipped_files': list(self.skipped_files),
            'missed_classes': self.missed_classes,
        }


class ClassMinifier:
    """Two-pass class name minifier for a directory tree."""

    def __init__(self, root: Union[str, Path] = '.', suppress_duplicates: bool = True):
        self.root = Path(root)
        self.suppress_duplicates = suppress_duplicates

    def _walk(self) -> Iterator[Tuple[Path, Dialect]]:
        try:
            for path, dialect_name in iter_supported_files(self.root):
                yield path, Dialect(dialect_name)
        except OSError as e:
            raise TraversalError(self.root, e) from e

    def collect_usage(self, result: Optional[MinifyResult] = None) -> Counter:
        """First pass: count class uses in every readable supported file."""
        result = result if result is not None else MinifyResult()
        logger.info(f"Collecting class usage under {self.root}")
        for path, dialect in self._walk():
            if collect_file(path, dialect, result.usage):
                result.files_scanned += 1
            else:
                result.skipped_files.append(str(path))
        logger.info(f"Found {len(result.usage)} distinct classes in {result.files_scanned} files")
        return result.usage

    def build_class_map(self, usage: Counter) -> Dict[str, str]:
        return build_map(usage)

    def rewrite_file(self, file_path: Union[str, Path], dialect: Dialect, class_map: Dict[str, str]) -> bool:
        """
        Rewrite one file in place through a temporary file.

        Returns:
            True if any line changed

        Raises:
            OSError, UnicodeDecodeError: If the file cannot be read or the
                temporary output cannot be written. The original is untouched.
        """
        changed = False
        with atomic_output(file_path) as out:
            with open(file_path, 'r', encoding='utf-8') as src:
                for line in src:
                    line = line.rstrip('\r\n')
                    updated = rewrite(line, dialect, class_map, self.suppress_duplicates)
                    changed = changed or updated != line
                    out.write(updated + '\n')
        return changed

    def rewrite_files(self, class_map: Dict[str, str], result: Optional[MinifyResult] = None) -> MinifyResult:
        """Second pass: rewrite every supported file with the finished class map."""
        result = result if result is not None else MinifyResult(class_map=class_map)
        logger.info(f"Rewriting classes under {self.root}")
        for path, dialect in self._walk():
            try:
                changed = self.rewrite_file(path, dialect, class_map)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping rewrite of {path}: {e}")
                result.skipped_files.append(str(path))
                continue
            result.files_rewritten += 1
            if changed:
                result.files_changed += 1
                logger.debug(f"Rewrote {path}")
        return result

    def run(self, preview: bool = False, audit: bool = False) -> MinifyResult:
        """
        Collect, assign and (unless previewing) rewrite.

        With audit set, markup and stylesheets are also parsed with real
        parsers before rewriting to record classes the class map misses.

        A traversal failure aborts the current pass; the result is returned
        with aborted set and whatever was gathered so far.
        """
        result = MinifyResult(preview=preview)
        try:
            self.collect_usage(result)
        except TraversalError as e:
            logger.error(f"Collection aborted: {e}", exc_info=True)
            result.aborted = True
            return result

        result.class_map = self.build_class_map(result.usage)
        if audit:
            try:
                result.missed_classes = ClassAuditor().audit(self.root, result.class_map)
            except OSError as e:
                logger.error(f"Audit aborted: {e}", exc_info=True)
        if preview:
            return result

        try:
            self.rewrite_files(result.class_map, result)
        except TraversalError as e:
            logger.error(f"Rewrite aborted: {e}", exc_info=True)
            result.aborted = True
        logger.info(f"Rewrote {result.files_rewritten} files ({result.files_changed} changed, "
                    f"{len(result.skipped_files)} skipped)")
        return result
