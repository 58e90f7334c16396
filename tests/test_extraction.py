"""Tests for rule-based field extraction."""

import pytest

from src.extraction.rule_extractor import (
    FIELD_NAMES,
    NoStructuredDataFound,
    extract_fields,
)


class TestFieldPatterns:
    """Tests for the individual field patterns."""

    @pytest.mark.parametrize("field", ["name", "organization", "address", "mobile"])
    def test_colon_separator(self, field: str) -> None:
        assert extract_fields(f'{field}: "value"') == {field: "value"}

    @pytest.mark.parametrize("field", ["name", "organization", "address", "mobile"])
    def test_hyphen_separator(self, field: str) -> None:
        assert extract_fields(f'{field} - "value"') == {field: "value"}

    def test_no_separator(self) -> None:
        assert extract_fields('name "Jane"') == {"name": "Jane"}

    def test_pipe_separator(self) -> None:
        assert extract_fields('mobile | "555-0100"') == {"mobile": "555-0100"}

    def test_field_order(self) -> None:
        assert FIELD_NAMES == ["name", "organization", "address", "mobile"]


class TestExtractFields:
    """Tests for the extract_fields function."""

    def test_two_fields(self) -> None:
        text = 'name: "John Doe"\norganization - "Acme Corp"'
        assert extract_fields(text) == {
            "name": "John Doe",
            "organization": "Acme Corp",
        }

    def test_all_fields(self) -> None:
        text = (
            'name: "John Doe"\n'
            'organization: "Acme Corp"\n'
            'address: "1 Main St, Springfield"\n'
            'mobile: "+1 555 0100"'
        )
        result = extract_fields(text)
        assert set(result) == {"name", "organization", "address", "mobile"}
        assert result["address"] == "1 Main St, Springfield"

    def test_first_occurrence_wins(self) -> None:
        text = 'name: "First"\nname: "Second"'
        assert extract_fields(text) == {"name": "First"}

    def test_no_fields_raises(self) -> None:
        with pytest.raises(NoStructuredDataFound) as exc_info:
            extract_fields("Hello, this is scanned text with no fields.")
        assert exc_info.value.text == "Hello, this is scanned text with no fields."

    def test_empty_text_raises(self) -> None:
        with pytest.raises(NoStructuredDataFound):
            extract_fields("")

    def test_unquoted_value_not_matched(self) -> None:
        with pytest.raises(NoStructuredDataFound):
            extract_fields("name: John Doe")

    def test_empty_quotes_not_matched(self) -> None:
        with pytest.raises(NoStructuredDataFound):
            extract_fields('name: ""')

    def test_case_sensitive(self) -> None:
        with pytest.raises(NoStructuredDataFound):
            extract_fields('Name: "John"\nMOBILE: "555"')

    def test_value_not_trimmed(self) -> None:
        assert extract_fields('name: "  padded  "') == {"name": "  padded  "}

    def test_value_spans_lines(self) -> None:
        assert extract_fields('address: "1 Main St\nSpringfield"') == {
            "address": "1 Main St\nSpringfield"
        }

    def test_label_inside_word(self) -> None:
        # "username" contains the "name" label.
        assert extract_fields('username: "jdoe"') == {"name": "jdoe"}

    def test_idempotent(self) -> None:
        text = 'organization: "Acme"\nmobile - "555"'
        assert extract_fields(text) == extract_fields(text)

    def test_fields_independent(self) -> None:
        text = 'mobile: "555"\nnoise\naddress: "Somewhere"'
        assert extract_fields(text) == {"address": "Somewhere", "mobile": "555"}
