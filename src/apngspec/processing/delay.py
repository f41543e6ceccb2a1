"""
Delay token parsing.

A delay token is "N" or "N/D". Parsing is total: any part that is not a valid
unsigned 32-bit integer falls back to the corresponding default.
"""

from __future__ import annotations

import re

from ..config import UINT_MAX
from ..core.types import Delay

DELAY_SEPARATOR = "/"

_UINT_RE = re.compile(r"[0-9]+")


def parse_uint(text: str | None, default: int) -> int:
    """Convert text to an unsigned 32-bit integer.

    Args:
        text (Optional[str]): Decimal digits, e.g. "30".
        default (int): Value returned when `text` is empty, non-numeric or out of range.

    Returns:
        int: Parsed value or `default`.
    """
    if text is None or not _UINT_RE.fullmatch(text):
        return default
    value = int(text)
    if value > UINT_MAX:
        return default
    return value


def parse_delay(token: str | None, default: Delay | None = None) -> Delay:
    """Convert a delay token into a Delay.

    Examples:
        "12"   -> Delay(12, default.denominator)
        "1/30" -> Delay(1, 30)
        "x/30" -> Delay(default.numerator, 30)
        ""     -> default

    Args:
        token (Optional[str]): Delay token; None behaves like "".
        default (Optional[Delay]): Supplies fallback numerator/denominator.
            Defaults to the configured DEFAULT_FRAME_NUMERATOR/DENOMINATOR.

    Returns:
        Delay: Parsed delay, never raises.
    """
    if default is None:
        default = Delay()
    if token is None:
        return default

    num_text, sep, den_text = token.partition(DELAY_SEPARATOR)
    if not sep:
        return Delay(numerator=parse_uint(token, default.numerator), denominator=default.denominator)

    return Delay(
        numerator=parse_uint(num_text, default.numerator),
        denominator=parse_uint(den_text, default.denominator),
    )
