"""Lenient numeric parsing for form text."""

import math
import re

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_number(text: str) -> float:
    """Parse the leading number in text, returning NaN when there is none.

    Leading whitespace is skipped and trailing garbage is ignored, so
    ``"12abc"`` parses as 12.0 and ``"abc"`` as NaN.
    """
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    token = match.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def format_number(value: float) -> str:
    """Render a number the way a form input displays it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
