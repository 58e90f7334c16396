"""Command-line interface for extracting fields from a local image.

Runs the same OCR and extraction pipeline as the API and prints the
same JSON envelope.
"""

import argparse
import json
import sys
from pathlib import Path

from src.api.schemas import (
    ErrorResponse,
    ExtractedData,
    ExtractionResponse,
    ResponseMessage,
)
from src.extraction.rule_extractor import NoStructuredDataFound, extract_fields
from src.ocr.document_processor import DocumentProcessor
from src.ocr.image_intake import FileWriteError
from src.ocr.tesseract_engine import OcrInvocationError
from src.utils.config import AppConfig, load_config
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg")


def extract_single(
    file_path: Path, config: AppConfig | None = None
) -> dict[str, object]:
    """Process a single image and return the response envelope.

    Args:
        file_path: Path to a PNG or JPEG image.
        config: Application configuration. Loaded from the default path
            when omitted.

    Returns:
        Dictionary with ``success``, ``message`` and, on success, ``data``.

    Raises:
        OSError: If the image file cannot be read.
    """
    config = config or load_config()
    processor = DocumentProcessor(config)

    try:
        text = processor.process(file_path.read_bytes(), file_path.name)
        fields = extract_fields(text)
    except FileWriteError:
        response = ErrorResponse(message=ResponseMessage.FILE_WRITE_ERROR)
    except OcrInvocationError:
        response = ErrorResponse(message=ResponseMessage.OCR_ERROR)
    except NoStructuredDataFound:
        response = ErrorResponse(message=ResponseMessage.NO_DATA)
    else:
        response = ExtractionResponse(data=ExtractedData(**fields))

    return response.model_dump(mode="json", exclude_none=True)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(description="Image Field OCR")
    parser.add_argument("-c", "--config", type=Path, help="YAML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    single_parser = subparsers.add_parser(
        "extract", help="Extract fields from a single image"
    )
    single_parser.add_argument("file", type=Path, help="PNG or JPEG image to process")
    single_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    args = parser.parse_args(argv)

    # stdout carries only the JSON result.
    config = load_config(args.config)
    setup_logging(config.log_level, stream=sys.stderr)

    if args.command != "extract":
        parser.print_help()
        sys.exit(0)

    if not args.file.is_file():
        print(f"Error: {args.file} is not a file", file=sys.stderr)
        sys.exit(1)
    if args.file.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        print(f"Error: {args.file} is not a PNG or JPEG image", file=sys.stderr)
        sys.exit(1)

    try:
        result = extract_single(args.file, config)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
        sys.exit(1)

    output_str = json.dumps(result, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output_str)
        print(f"Output written to {args.output}")
    else:
        print(output_str)

    if not result["success"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
