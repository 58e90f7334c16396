"""Pydantic response schemas for the FastAPI endpoints."""

from enum import StrEnum

from pydantic import BaseModel


class ResponseMessage(StrEnum):
    """Fixed messages returned by the extraction endpoint."""

    SUCCESS = "Successfully extracted JSON from image"
    NO_FILE = "No image file uploaded"
    FILE_WRITE_ERROR = "Error saving image to file"
    OCR_ERROR = "Error running OCR on image"
    NO_DATA = "Failed to extract valid JSON from image"


class ExtractedData(BaseModel):
    """Fields extracted from the image; unmatched fields are omitted."""

    name: str | None = None
    organization: str | None = None
    address: str | None = None
    mobile: str | None = None


class ExtractionResponse(BaseModel):
    """Response schema for a successful extraction."""

    success: bool = True
    data: ExtractedData
    message: str = ResponseMessage.SUCCESS


class ErrorResponse(BaseModel):
    """Response schema for a failed extraction."""

    success: bool = False
    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    tesseract_available: bool
