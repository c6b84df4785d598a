"""Tests for saving image streams."""

from pathlib import Path

import pytest
from clipview.exceptions import ImageSaveError
from clipview.files import random_filename, save_stream


class TestRandomFilename:
    """Test random file name generation."""

    def test_extension_appended(self):
        name = random_filename("png")
        assert name.endswith(".png")
        assert len(Path(name).stem) > 0

    def test_names_differ(self):
        names = {random_filename("gif") for _ in range(50)}
        assert len(names) == 50


class TestSaveStream:
    """Test writing buffers to disk."""

    def test_writes_exact_bytes(self, tmp_path):
        path = save_stream(b"\x00\x01\x02", "bmp", tmp_path)
        assert path.parent == tmp_path
        assert path.suffix == ".bmp"
        assert path.read_bytes() == b"\x00\x01\x02"

    def test_accepts_string_directory(self, tmp_path):
        path = save_stream(b"data", "jpeg", str(tmp_path))
        assert path.exists()

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "images"
        path = save_stream(b"data", "png", target)
        assert path.parent == target
        assert target.is_dir()

    def test_never_overwrites(self, tmp_path, monkeypatch):
        """Test an existing file with the same name is reported, not replaced."""
        existing = tmp_path / "fixed.png"
        existing.write_bytes(b"original")
        monkeypatch.setattr("clipview.files.random_filename", lambda ext: f"fixed.{ext}")

        with pytest.raises(ImageSaveError) as exc_info:
            save_stream(b"new", "png", tmp_path)

        assert exc_info.value.path == existing
        assert existing.read_bytes() == b"original"

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ImageSaveError) as exc_info:
            save_stream(b"data", "png", blocker / "sub")

        assert "Cannot save image" in str(exc_info.value)
