"""Tesseract OCR engine wrapper.

Runs the external ``tesseract`` executable on an image file and returns
the recognized plain text.
"""

import shutil
from pathlib import Path

import pytesseract

from src.utils.logger import get_logger, snippet

logger = get_logger(__name__)


class OcrInvocationError(Exception):
    """Raised when the OCR engine cannot be run or fails while running."""


class TesseractEngine:
    """Wrapper around Tesseract OCR for plain-text extraction.

    Args:
        tesseract_cmd: Path to the Tesseract executable.
            If ``None``, the executable is looked up on ``PATH``.
        default_lang: OCR language code.
        psm: Tesseract page segmentation mode.
        timeout: Seconds to wait for Tesseract before giving up.
            ``0`` disables the timeout.
    """

    def __init__(
        self,
        tesseract_cmd: str | None = None,
        default_lang: str = "eng",
        psm: int = 3,
        timeout: float = 30.0,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.default_lang = default_lang
        self.psm = psm
        self.timeout = timeout

    def is_available(self) -> bool:
        """Return whether the Tesseract executable can be found."""
        return shutil.which(pytesseract.pytesseract.tesseract_cmd) is not None

    def run(self, image_path: Path) -> str:
        """Extract text from an image file.

        Args:
            image_path: Path to a PNG or JPEG image.

        Returns:
            Raw recognized text, possibly empty.

        Raises:
            OcrInvocationError: If Tesseract is missing, exits with an error,
                cannot read the image, or times out.
        """
        try:
            text = pytesseract.image_to_string(
                str(image_path),
                lang=self.default_lang,
                config=f"--psm {self.psm}",
                timeout=self.timeout,
            )
        except (
            pytesseract.TesseractNotFoundError,
            pytesseract.TesseractError,
            RuntimeError,  # pytesseract reports timeouts as a bare RuntimeError
            OSError,
        ) as exc:
            logger.error("Error running OCR on image: %s", exc)
            raise OcrInvocationError(str(exc)) from exc

        logger.info("OCR extraction successful: %s", snippet(text))
        return text
