"""Coercion of decoded document values to the text and flags the readers expect."""

from __future__ import annotations

from typing import Any

TRUE_WORDS = {"true", "1", "yes", "on"}
FALSE_WORDS = {"false", "0", "no", "off"}


def scalar_text(value: Any) -> str | None:
    """Return the textual form of a scalar document value.

    Strings pass through, numbers are rendered as written, booleans become
    "true"/"false". Containers and null have no textual form and yield None.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def parse_flag(value: Any, default: bool) -> bool:
    """Interpret a boolean document value, falling back to `default` when unrecognized."""
    if isinstance(value, bool):
        return value
    text = scalar_text(value)
    if text is None:
        return default
    lowered = text.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    return default
