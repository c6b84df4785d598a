"""Tests for clipboard sources."""

from unittest.mock import patch

import pyperclip
import pytest
from clipview.clipboard import PyperclipSource, StaticSource, get_text, open_source
from clipview.exceptions import ClipboardAccessError


class TestGetText:
    """Test reading text through pyperclip."""

    @patch('clipview.clipboard.pyperclip.paste')
    def test_returns_text(self, mock_paste):
        mock_paste.return_value = "hello"
        assert get_text() == "hello"

    @patch('clipview.clipboard.pyperclip.paste')
    def test_empty_is_none(self, mock_paste):
        mock_paste.return_value = ""
        assert get_text() is None

    @patch('clipview.clipboard.pyperclip.paste')
    def test_no_mechanism(self, mock_paste):
        mock_paste.side_effect = pyperclip.PyperclipException("no clipboard")
        with pytest.raises(ClipboardAccessError):
            get_text()


class TestPyperclipSource:
    """Test the pyperclip-backed source."""

    @patch('clipview.clipboard.get_text')
    def test_text_format(self, mock_get_text):
        mock_get_text.return_value = "hello"
        source = PyperclipSource()
        assert source.list_formats() == ["Text"]
        assert source.get_payload("Text") == "hello"
        assert source.get_payload("UnicodeText") is None

    @patch('clipview.clipboard.get_text')
    def test_auto_convert_adds_unicode_text(self, mock_get_text):
        mock_get_text.return_value = "hello"
        source = open_source(auto_convert=True)
        assert source.list_formats() == ["Text", "UnicodeText"]
        assert source.get_payload("UnicodeText", True) == "hello"

    @patch('clipview.clipboard.get_text')
    def test_empty_clipboard(self, mock_get_text):
        mock_get_text.return_value = None
        source = PyperclipSource()
        assert source.list_formats() == []
        assert source.get_payload("Text") is None


class TestStaticSource:
    """Test the in-memory source."""

    def test_order_preserved(self):
        source = StaticSource({"Locale": b"\x09\x04", "Text": "a", "PNG": b"\x89PNG"})
        assert source.list_formats() == ["Locale", "Text", "PNG"]

    def test_missing_format(self):
        assert StaticSource().get_payload("Text") is None
