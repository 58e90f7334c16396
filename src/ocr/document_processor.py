"""Image processing pipeline from uploaded bytes to recognized text.

Combines transient file handling and Tesseract OCR into a single
processing interface shared by the API and the CLI.
"""

from pathlib import Path

from src.utils.config import AppConfig
from src.utils.logger import get_logger

from .image_intake import transient_image
from .tesseract_engine import TesseractEngine

logger = get_logger(__name__)

_SUFFIXES = {".png": ".png", ".jpg": ".jpg", ".jpeg": ".jpg"}


class DocumentProcessor:
    """Runs OCR over a single uploaded image.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.ocr_engine = TesseractEngine(
            tesseract_cmd=config.ocr.tesseract_cmd,
            default_lang=config.ocr.default_lang,
            psm=config.ocr.psm,
            timeout=config.ocr.timeout,
        )

    def process(self, content: bytes, filename: str = "image.png") -> str:
        """Recognize the text of an image.

        Args:
            content: Raw JPEG or PNG bytes.
            filename: Display name of the upload, used for its suffix.

        Returns:
            Recognized text.

        Raises:
            FileWriteError: If the transient image cannot be written.
            OcrInvocationError: If Tesseract fails.
        """
        logger.info("Processing image: %s", filename)
        suffix = _SUFFIXES.get(Path(filename).suffix.lower(), ".png")

        with transient_image(
            content, suffix=suffix, directory=self.config.intake.temp_dir
        ) as path:
            return self.ocr_engine.run(path)
