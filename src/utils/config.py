"""Configuration management for the image field OCR service.

Loads and validates YAML configuration with sensible defaults
for OCR invocation, transient file handling, and the API server.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

TESSERACT_CMD_ENV = "TESSERACT_CMD"


class OCRConfig(BaseModel):
    """Configuration for Tesseract OCR engine."""

    tesseract_cmd: str | None = None
    default_lang: str = "eng"
    psm: int = 3
    timeout: float = 30.0


class IntakeConfig(BaseModel):
    """Configuration for transient storage of uploaded images."""

    temp_dir: str | None = None


class ServerConfig(BaseModel):
    """Configuration for the API server."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    """Top-level application configuration."""

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    intake: IntakeConfig = Field(default_factory=IntakeConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    The ``TESSERACT_CMD`` environment variable, when set, overrides
    ``ocr.tesseract_cmd`` from the file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        config = AppConfig(**raw)
    else:
        logger.info("No config file found at %s, using defaults", path)
        config = AppConfig()

    env_cmd = os.environ.get(TESSERACT_CMD_ENV)
    if env_cmd:
        logger.debug("Using Tesseract executable from %s", TESSERACT_CMD_ENV)
        config.ocr.tesseract_cmd = env_cmd

    return config
