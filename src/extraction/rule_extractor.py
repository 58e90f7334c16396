"""Rule-based field extraction using regex patterns.

Extracts the quoted ``name``, ``organization``, ``address`` and ``mobile``
values from OCR text. Each field has one pattern: the label, an optional
``:``/``-`` separator and a double-quoted value. Matching is case-sensitive
and captured values are returned verbatim.
"""

import re

from src.utils.logger import get_logger, snippet

logger = get_logger(__name__)


class NoStructuredDataFound(Exception):
    """Raised when none of the field patterns match the text."""

    def __init__(self, text: str) -> None:
        super().__init__("No structured data found in text")
        self.text = text


def _field_pattern(label: str) -> re.Pattern[str]:
    # The separator class keeps a literal "|" as an accepted separator.
    return re.compile(label + r'\s*[:|-]?\s*"([^"]+)"')


# Order is fixed: name, organization, address, mobile.
FIELD_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (_field_pattern("name"), "name"),
    (_field_pattern("organization"), "organization"),
    (_field_pattern("address"), "address"),
    (_field_pattern("mobile"), "mobile"),
]

FIELD_NAMES: list[str] = [field for _, field in FIELD_PATTERNS]


def extract_fields(text: str) -> dict[str, str]:
    """Extract the known fields from OCR text.

    Only the first match of each pattern is used. Fields whose pattern does
    not match are left out of the result.

    Args:
        text: Raw OCR text.

    Returns:
        Mapping of field name to captured value, never empty.

    Raises:
        NoStructuredDataFound: If no pattern matched.
    """
    logger.info("Parsing text for structured data: %s", snippet(text))

    fields: dict[str, str] = {}
    for pattern, field_name in FIELD_PATTERNS:
        match = pattern.search(text)
        if match:
            fields[field_name] = match.group(1)

    if not fields:
        logger.error("Failed to parse structured data from text: %s", snippet(text))
        raise NoStructuredDataFound(text)

    logger.info("Successfully extracted structured data: %s", fields)
    return fields
