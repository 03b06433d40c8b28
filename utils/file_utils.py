"""
File Utilities Module
Directory walking, extension binding and atomic file replacement.
"""

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Set, TextIO, Tuple
import logging

logger = logging.getLogger(__name__)

# Extensions bound to each dialect; matched case-sensitively
EXTENSION_GROUPS: Dict[str, Set[str]] = {
    'markup': {'.html', '.php'},
    'stylesheet': {'.css'},
    'script': {'.js'},
}


def get_dialect_name(path: str | Path) -> Optional[str]:
    """Return the dialect name bound to the file's extension, or None."""
    suffix = Path(path).suffix
    for dialect, extensions in EXTENSION_GROUPS.items():
        if suffix in extensions:
            return dialect
    return None


def _raise_walk_error(error: OSError) -> None:
    raise error


def iter_supported_files(base_path: str | Path) -> Iterator[Tuple[Path, str]]:
    """
    Recursively yield (path, dialect name) for every supported file.

    Directories and files are visited in sorted order so repeated walks of an
    unchanged tree produce the same sequence.

    Raises:
        OSError: If the walk itself fails (for example, a missing root or an
            unreadable directory)
    """
    base_path = Path(base_path)
    if not base_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {base_path}")

    for root, dirs, files in os.walk(base_path, onerror=_raise_walk_error):
        dirs.sort()
        for file in sorted(files):
            dialect = get_dialect_name(file)
            if dialect:
                yield Path(root) / file, dialect


@contextmanager
def atomic_output(file_path: str | Path) -> Iterator[TextIO]:
    """
    Open a temporary file beside file_path and move it over file_path on success.

    The temporary file takes the target's permission bits. If the block
    raises, the temporary file is removed and the target is left untouched.
    """
    target = Path(file_path)
    fd, temp_path_str = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.", suffix='.tmp')
    temp_path = Path(temp_path_str)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as out:
            yield out
        shutil.copymode(target, temp_path)
        os.replace(temp_path, target)
    except BaseException:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError as e:
                logger.warning(f"Failed to remove temp file {temp_path}: {e}")
        raise


def read_file_content(file_path: Path) -> str:
    """
    Read a whole file as UTF-8 text.

    Raises:
        OSError: If the file can't be read
        UnicodeDecodeError: If the file isn't valid UTF-8
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()
