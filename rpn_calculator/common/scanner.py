"""Number scanning shared by the converter and the evaluator."""
from typing import Tuple

from rpn_calculator.common.logger import logger

DIGITS = frozenset("0123456789")
POINT = "."
NUMBER_CHARS = DIGITS | {POINT}


def is_digit(char: str) -> bool:
    """ASCII digits only, ``str.isdigit`` would also accept e.g. superscripts."""
    return char in DIGITS


def scan_number(text: str, start: int) -> Tuple[float, int]:
    """
    Read the maximal run of digits and points starting at ``start``.

    The character that ends the run is not consumed: the returned index
    points at it (or at ``len(text)``). A capture that is not a valid float,
    such as a lone ``"."``, falls back to ``0.0``.

    :param str text: Text to scan
    :param int start: Index of the first digit or point of the number

    :return: Tuple of (parsed value, index just past the number)
    :rtype: Tuple[float, int]
    """
    end = start
    while end < len(text) and text[end] in NUMBER_CHARS:
        end += 1

    captured = text[start:end]
    try:
        return float(captured), end
    except ValueError:
        logger.warning(f"Malformed number {captured!r} at {start}, using 0")
        return 0.0, end
