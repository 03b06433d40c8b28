"""
Errors raised by the class minifier.
"""

from pathlib import Path
from typing import Optional, Union


class MinifierError(Exception):
    """Base class for class minifier errors."""


class TraversalError(MinifierError):
    """The directory walk itself failed; the current pass cannot continue."""

    def __init__(self, root: Union[str, Path], cause: Optional[Exception] = None):
        super().__init__(f"Failed to walk {root}")
        self.root = root
        self.cause = cause

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.cause:
            return f"{base_msg} (caused by {type(self.cause).__name__}: {self.cause})"
        return base_msg
