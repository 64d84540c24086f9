"""Test function scan_number."""
import logging

import pytest

from rpn_calculator.common.scanner import is_digit, scan_number


@pytest.mark.parametrize("text,start,expected", [
    ("42", 0, (42.0, 2)),
    ("3.25+1", 0, (3.25, 4)),
    ("1 2.5*", 2, (2.5, 5)),
    (".5", 0, (0.5, 2)),
    ("5.", 0, (5.0, 2)),
    ("007", 0, (7.0, 3)),
])
def test_scan_number(text: str, start: int, expected: tuple) -> None:
    """The maximal digit/point run is parsed and the next index returned."""
    assert scan_number(text, start) == expected


def test_scan_number_stops_before_separator() -> None:
    """The character ending the run is left for the caller."""
    value, end = scan_number("12 34+", 0)
    assert value == 12.0
    assert end == 2


@pytest.mark.parametrize("text", [".", "1.2.3"])
def test_malformed_number_falls_back_to_zero(text: str, caplog) -> None:
    """Captures that are not valid floats parse to zero with a warning."""
    with caplog.at_level(logging.WARNING, logger="rpn_calculator"):
        assert scan_number(text, 0) == (0.0, len(text))
    assert "Malformed number" in caplog.text


@pytest.mark.parametrize("char,expected", [
    ("0", True),
    ("9", True),
    ("²", False),
    ("٣", False),
    (".", False),
])
def test_is_digit_ascii_only(char: str, expected: bool) -> None:
    """Only ASCII 0-9 count as digits."""
    assert is_digit(char) is expected
