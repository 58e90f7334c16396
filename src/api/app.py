"""FastAPI application for the image field OCR service.

Provides the field extraction endpoint and a health check.
"""

import io
from typing import Annotated

from fastapi import FastAPI, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from PIL import Image

from src.extraction.rule_extractor import NoStructuredDataFound, extract_fields
from src.ocr.document_processor import DocumentProcessor
from src.ocr.image_intake import FileWriteError
from src.ocr.tesseract_engine import OcrInvocationError
from src.utils.config import load_config
from src.utils.logger import get_logger

from .schemas import (
    ErrorResponse,
    ExtractedData,
    ExtractionResponse,
    HealthResponse,
    ResponseMessage,
)

logger = get_logger(__name__)

VERSION = "1.0.0"
UPLOAD_FIELD = "imageBase64"

app = FastAPI(
    title="Image Field OCR API",
    description="Extract name, organization, address and mobile fields from images",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_components() -> DocumentProcessor:
    """Initialize and return the image processing pipeline."""
    return DocumentProcessor(load_config())


# Pillow reports JPEGs carrying a Multi-Picture segment (common for phone
# photos) as MPO.
_ALLOWED_FORMATS = {"JPEG", "MPO", "PNG"}


def _validation_error(message: str, value: object) -> RequestValidationError:
    """Build a field-level validation error for the upload part."""
    return RequestValidationError(
        [
            {
                "type": "value_error",
                "loc": ("body", UPLOAD_FIELD),
                "msg": message,
                "input": value,
            }
        ]
    )


def _check_image(content: bytes, filename: str | None) -> None:
    """Reject uploads whose bytes are not a JPEG or PNG image.

    The declared part content type is ignored; only the content counts.

    Raises:
        RequestValidationError: If the content is not an accepted image.
    """
    try:
        with Image.open(io.BytesIO(content)) as img:
            image_format = img.format
    except Image.DecompressionBombError as exc:
        logger.error("Rejected oversized image %s: %s", filename, exc)
        raise _validation_error(
            "The image dimensions are too large", filename
        ) from exc
    except OSError:
        image_format = None

    if image_format not in _ALLOWED_FORMATS:
        raise _validation_error("The file must be of type: jpeg, png, jpg", filename)


def _failure(message: ResponseMessage) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(message=message).model_dump(),
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return system health status."""
    processor = _get_components()
    return HealthResponse(
        status="healthy",
        version=VERSION,
        tesseract_available=processor.ocr_engine.is_available(),
    )


@app.post(
    "/api/extract-json",
    response_model=ExtractionResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def extract_json(
    image: Annotated[UploadFile, File(alias=UPLOAD_FIELD)],
) -> ExtractionResponse | JSONResponse:
    """Extract structured fields from an uploaded image.

    Args:
        image: Uploaded JPEG or PNG image.

    Returns:
        The extracted fields, or a failure response with a fixed message.
    """
    logger.info(
        "Received request for JSON extraction: %s (%s)",
        image.filename,
        image.content_type,
    )

    content = await image.read()
    if not content:
        logger.error("No file uploaded")
        return _failure(ResponseMessage.NO_FILE)

    _check_image(content, image.filename)

    logger.info("Validation passed for uploaded image")

    processor = _get_components()
    try:
        text = await run_in_threadpool(
            processor.process, content, image.filename or "image.png"
        )
    except FileWriteError:
        return _failure(ResponseMessage.FILE_WRITE_ERROR)
    except OcrInvocationError:
        return _failure(ResponseMessage.OCR_ERROR)

    try:
        fields = extract_fields(text)
    except NoStructuredDataFound:
        logger.error("Failed to extract valid JSON from image")
        return _failure(ResponseMessage.NO_DATA)

    logger.info("JSON data successfully extracted from text: %s", fields)
    return ExtractionResponse(data=ExtractedData(**fields))
