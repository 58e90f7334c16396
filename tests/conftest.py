"""Shared test fixtures for the image field OCR test suite."""

import io
from pathlib import Path

import pytest
from PIL import Image


def _encode(fmt: str) -> bytes:
    img = Image.new("RGB", (200, 100), color=(255, 255, 255))
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """Create a minimal PNG image as bytes."""
    return _encode("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Create a minimal JPEG image as bytes."""
    return _encode("JPEG")


@pytest.fixture
def gif_bytes() -> bytes:
    """Create a minimal GIF image as bytes."""
    return _encode("GIF")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"


@pytest.fixture
def mpo_bytes() -> bytes:
    """Create a two-frame JPEG with a Multi-Picture segment, as phones write."""
    first = Image.new("RGB", (200, 100), color=(255, 255, 255))
    second = Image.new("RGB", (200, 100), color=(0, 0, 0))
    buf = io.BytesIO()
    first.save(buf, format="MPO", save_all=True, append_images=[second])
    return buf.getvalue()
