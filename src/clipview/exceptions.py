"""Custom exceptions for clipview."""

from pathlib import Path
from typing import Union


class ClipviewError(Exception):
    """Base exception for clipview."""
    pass


class ClipboardAccessError(ClipviewError):
    """Raised when the clipboard cannot be read at all."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot access clipboard: {reason}")


class ImageSaveError(ClipviewError):
    """Raised when an image payload cannot be written to disk."""

    def __init__(self, path: Union[Path, str], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot save image to {self.path}: {reason}")
