"""Clipboard sources for clipview."""

from typing import Any, Dict, List, Optional, Protocol

import pyperclip

from .exceptions import ClipboardAccessError

TEXT_FORMAT = "Text"
UNICODE_TEXT_FORMAT = "UnicodeText"


class ClipboardSource(Protocol):
    """Anything that can enumerate clipboard formats and fetch their data."""

    def list_formats(self) -> List[str]:
        ...

    def get_payload(self, format_name: str, auto_convert: bool = False) -> Optional[Any]:
        ...


def get_text() -> Optional[str]:
    """
    Get text content from the clipboard.

    Returns:
        Text content from clipboard or None if empty

    Raises:
        ClipboardAccessError: If no clipboard mechanism is available
    """
    try:
        content = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise ClipboardAccessError(str(e))

    # pyperclip returns empty string for empty clipboard
    return content if content else None


class PyperclipSource:
    """
    Clipboard source backed by pyperclip.

    pyperclip only exposes text, so the clipboard is reported as a single
    "Text" format, plus "UnicodeText" when auto-conversion is requested.
    """

    def __init__(self, auto_convert: bool = False):
        self.auto_convert = auto_convert
        self._text = get_text()

    def list_formats(self) -> List[str]:
        if self._text is None:
            return []
        if self.auto_convert:
            return [TEXT_FORMAT, UNICODE_TEXT_FORMAT]
        return [TEXT_FORMAT]

    def get_payload(self, format_name: str, auto_convert: bool = False) -> Optional[Any]:
        if self._text is None:
            return None
        if format_name == TEXT_FORMAT:
            return self._text
        if format_name == UNICODE_TEXT_FORMAT and (auto_convert or self.auto_convert):
            return self._text
        return None


class StaticSource:
    """In-memory clipboard source holding a fixed, ordered set of formats."""

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        self._items = dict(items or {})

    def list_formats(self) -> List[str]:
        return list(self._items)

    def get_payload(self, format_name: str, auto_convert: bool = False) -> Optional[Any]:
        return self._items.get(format_name)


def open_source(auto_convert: bool = False) -> ClipboardSource:
    """Open the system clipboard."""
    return PyperclipSource(auto_convert=auto_convert)
