"""Transient storage of uploaded images for the OCR engine.

Each upload is written to its own temporary file, which is removed as
soon as the caller leaves the ``transient_image`` block.
"""

import base64
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from src.utils.logger import get_logger

logger = get_logger(__name__)


class FileWriteError(Exception):
    """Raised when an uploaded image cannot be persisted for OCR."""


@contextmanager
def transient_image(
    content: bytes,
    suffix: str = ".png",
    directory: str | None = None,
) -> Iterator[Path]:
    """Write image bytes to a uniquely named temporary file.

    The bytes are base64 encoded and decoded back before writing, so the
    file holds exactly what an upload carrying base64 data would produce.

    Args:
        content: Raw image bytes.
        suffix: File suffix, used by Tesseract to pick an image reader.
        directory: Directory for the file. Defaults to the system temp dir.

    Yields:
        Path to the temporary file.

    Raises:
        FileWriteError: If the file cannot be created or written.
    """
    encoded = base64.b64encode(content)
    logger.info("Image converted to base64 (%d bytes)", len(encoded))

    try:
        fd, name = tempfile.mkstemp(prefix="ocr_upload_", suffix=suffix, dir=directory)
    except OSError as exc:
        logger.error("Error saving image to file: %s", exc)
        raise FileWriteError(str(exc)) from exc

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(base64.b64decode(encoded))
        except OSError as exc:
            logger.error("Error saving image to file: %s", exc)
            raise FileWriteError(str(exc)) from exc

        logger.info("Image saved to temporary path %s", path)
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug("Removed temporary image %s", path)
