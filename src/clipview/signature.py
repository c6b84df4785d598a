"""Image signature detection from leading bytes."""

from enum import Enum
from typing import Tuple


class ImageSignature(Enum):
    """Image encodings recognised by their magic numbers."""

    UNKNOWN = "Unknown"
    BMP = "Bmp"
    GIF = "Gif"
    JPEG = "Jpeg"
    PNG = "Png"
    TIFF = "Tiff"

    def __str__(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        """File extension used when the image is saved."""
        return self.value.lower()


# Checked in order, first match wins.
SIGNATURES: Tuple[Tuple[bytes, ImageSignature], ...] = (
    (b"\x89PNG\r\n\x1a\n", ImageSignature.PNG),
    (b"\xff\xd8", ImageSignature.JPEG),
    (b"GIF87a", ImageSignature.GIF),
    (b"GIF89a", ImageSignature.GIF),
    (b"BM", ImageSignature.BMP),
    (b"II*\x00", ImageSignature.TIFF),
    (b"MM\x00*", ImageSignature.TIFF),
)

# Clipboard DIBs carry no file header; they start with the size of their
# BITMAPINFOHEADER (40) or BITMAPV5HEADER (124), and hold at least that many bytes.
DIB_HEADER_SIZES = (40, 124)


def _is_dib(buffer) -> bool:
    if len(buffer) < 4:
        return False
    header_size = int.from_bytes(bytes(buffer[:4]), "little")
    return header_size in DIB_HEADER_SIZES and len(buffer) >= header_size


def detect_signature(buffer) -> ImageSignature:
    """
    Identify the image encoding of a buffer from its leading bytes.

    Args:
        buffer: Any bytes-like object, possibly empty

    Returns:
        The first matching ImageSignature, or ImageSignature.UNKNOWN
    """
    head = bytes(buffer[:max(len(magic) for magic, _ in SIGNATURES)])

    for magic, signature in SIGNATURES:
        if len(head) >= len(magic) and head[:len(magic)] == magic:
            return signature

    if _is_dib(buffer):
        return ImageSignature.BMP

    return ImageSignature.UNKNOWN
