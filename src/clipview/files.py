"""File operations module for clipview."""

import secrets
import tempfile
from pathlib import Path
from typing import Optional, Union

from .exceptions import ImageSaveError


def random_filename(extension: str) -> str:
    """
    Build a fresh random file name with the given extension.

    Args:
        extension: Extension without the leading dot (e.g., "png")

    Returns:
        File name such as "3f9a0c1d2b7e.png"
    """
    return f"{secrets.token_hex(6)}.{extension}"


def ensure_dir(directory: Path) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Raises:
        ImageSaveError: If the directory cannot be created
    """
    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ImageSaveError(directory, str(e))


def save_stream(
    buffer: bytes,
    extension: str,
    directory: Optional[Union[Path, str]] = None,
) -> Path:
    """
    Write a byte buffer to a newly created file.

    The file is created exclusively and written once, an existing file is
    never overwritten.

    Args:
        buffer: Bytes to write
        extension: File extension without the dot
        directory: Target directory (defaults to the system temp directory)

    Returns:
        Path of the written file

    Raises:
        ImageSaveError: If the file cannot be created or written
    """
    if directory is None:
        directory = tempfile.gettempdir()
    directory = Path(directory)

    ensure_dir(directory)

    path = directory / random_filename(extension)
    try:
        with open(path, "xb") as stream:
            stream.write(buffer)
    except OSError as e:
        raise ImageSaveError(path, str(e))

    return path
