"""Centralized JSON handling utilities."""

import json
from pathlib import Path
from typing import Any

from ..core.errors import SpecDecodeError, SpecReadError


def load_json(path: Path) -> Any:
    """Load JSON file with error handling.

    Object key order is preserved, which frame declarations rely on.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If file doesn't exist
        SpecReadError: If the path exists but cannot be read
        SpecDecodeError: If JSON is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SpecReadError(f"cannot read: {e.strerror or e}", path) from e
    except json.JSONDecodeError as e:
        raise SpecDecodeError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", path) from e
    except UnicodeDecodeError as e:
        raise SpecDecodeError(f"not valid UTF-8: {e.reason}", path) from e
    except RecursionError as e:
        raise SpecDecodeError("JSON nested too deeply", path) from e
    except ValueError as e:
        raise SpecDecodeError(f"invalid JSON: {e}", path) from e


def write_json(path: Path, data: dict[str, Any], indent: int | None = 2) -> None:
    """Write data to JSON file.

    Args:
        path: Path to write JSON file
        data: Data to serialize
        indent: JSON indentation (None for compact)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
