"""Render clipboard payloads as readable diagnostic text."""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from . import files
from .signature import ImageSignature, detect_signature

LOCALE_FORMAT = "Locale"
ONENOTE_INTERNAL_FORMAT = "OneNote 2016 Internal"
DIB_FORMAT = "DeviceIndependentBitmap"

HTML_PREAMBLE_MARKER = "Version:"
PREVIEW_BYTES = 10

BYTE_TYPES = (bytes, bytearray, memoryview, io.BytesIO)


@dataclass(frozen=True)
class RenderedItem:
    """One rendered clipboard representation."""

    format_name: str
    length: int
    type_label: str
    content: str
    byte_preview: Optional[str] = None
    preamble: Optional[str] = None
    saved_path: Optional[Path] = None


def type_label(payload: Any) -> str:
    """Return the qualified type name of a payload (e.g. "_io.BytesIO")."""
    cls = type(payload)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def as_bytes(payload: Any) -> Optional[bytes]:
    """Return the bytes of a byte-sequence payload, or None for other values."""
    if isinstance(payload, io.BytesIO):
        return payload.getvalue()
    if isinstance(payload, BYTE_TYPES):
        return bytes(payload)
    return None


def decode_locale(buffer: bytes) -> int:
    """
    Decode a locale identifier stored as a little-endian unsigned integer.

    Every byte of the buffer contributes, so the width is not fixed.
    """
    value = 0
    for i, byte in enumerate(buffer):
        value += byte << (8 * i)
    return value


def hex_preview(buffer: bytes, count: int = PREVIEW_BYTES) -> str:
    """Format the first bytes of a buffer as "0x09 0x04 ..."."""
    return " ".join(f"0x{byte:02x}" for byte in buffer[:count])


def split_preamble(text: str) -> Tuple[Optional[str], str]:
    """
    Separate a clipboard HTML header from the markup that follows it.

    Returns:
        (preamble, remainder); preamble is None when there is nothing to split
    """
    if not text.startswith(HTML_PREAMBLE_MARKER):
        return None, text

    start = text.find("<")
    if start < 0:
        return None, text

    return text[:start], text[start:]


def _drop_blank_text(node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == child.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
        else:
            _drop_blank_text(child)


def prettify_markup(text: str) -> Optional[str]:
    """
    Re-serialise an XML fragment with indentation.

    Comments, processing instructions and namespace prefixes are kept as
    written.

    Returns:
        The indented markup, or None if the text does not parse
    """
    try:
        document = minidom.parseString(text)
    except ExpatError:
        return None

    _drop_blank_text(document)
    pretty = "".join(node.toprettyxml(indent="  ") for node in document.childNodes)
    return pretty.rstrip("\n")


def _render_image(
    format_name: str,
    buffer: bytes,
    signature: ImageSignature,
    save_images: bool,
    save_dir: Optional[Union[Path, str]],
) -> Tuple[str, Optional[Path]]:
    if not save_images:
        return f"<< image: {signature} >>", None

    extension = "dib" if format_name == DIB_FORMAT else signature.extension
    path = files.save_stream(buffer, extension, save_dir)
    return f"<< image: {signature} @ {path} >>", path


def render_item(
    format_name: str,
    payload: Any,
    save_images: bool = False,
    save_dir: Optional[Union[Path, str]] = None,
) -> RenderedItem:
    """
    Render one clipboard payload.

    Args:
        format_name: Name of the clipboard format
        payload: Raw bytes (or a BytesIO stream) or an already decoded value
        save_images: Write recognised images to disk
        save_dir: Directory for saved images (defaults to the temp directory)

    Returns:
        RenderedItem describing the payload

    Raises:
        ImageSaveError: If an image should be saved but cannot be written
    """
    buffer = as_bytes(payload)
    byte_preview = None
    saved_path = None

    if buffer is not None and format_name == LOCALE_FORMAT:
        content = str(decode_locale(buffer))
        length = len(buffer)
    elif format_name == ONENOTE_INTERNAL_FORMAT:
        content = "<< internal >>"
        length = len(buffer) if buffer is not None else len(str(payload))
    elif buffer is not None:
        byte_preview = hex_preview(buffer)
        signature = detect_signature(buffer)

        if signature is ImageSignature.UNKNOWN:
            content = buffer.decode("utf-8", errors="replace")
        else:
            content, saved_path = _render_image(
                format_name, buffer, signature, save_images, save_dir
            )
        length = len(buffer)
    else:
        content = str(payload)
        length = len(content)

    preamble, content = split_preamble(content)
    if preamble is None and content.startswith("<") and content.endswith(">"):
        pretty = prettify_markup(content)
        if pretty is not None:
            content = pretty

    return RenderedItem(
        format_name=format_name,
        length=length,
        type_label=type_label(payload),
        content=content,
        byte_preview=byte_preview,
        preamble=preamble,
        saved_path=saved_path,
    )
