"""
Path and file system utilities for apngspec.

This module handles frame path resolution:
- Anchoring relative path specs at the spec file's directory
- Image extension handling
- Single-level wildcard expansion with deterministic ordering
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from ..config import IMAGE_EXTENSION

WILDCARD = "*"


def has_extension(path: str, ext: str) -> bool:
    """Return True if `path` ends with `ext`, ignoring case."""
    return path.lower().endswith(ext.lower())


def is_wildcard(spec: str) -> bool:
    return WILDCARD in spec


def wildcard_regex(path: str) -> re.Pattern[str]:
    """Compile a full-path pattern where each `*` matches one or more characters.

    Every other character is matched literally.

    Args:
        path (str): Absolute path containing wildcards.

    Returns:
        re.Pattern: Pattern to be used with `fullmatch`.
    """
    return re.compile(".+".join(re.escape(part) for part in path.split(WILDCARD)), re.DOTALL)


def resolve_paths(spec: str, base_dir: str | Path, image_extension: str = IMAGE_EXTENSION) -> list[str]:
    """Expand one frame path spec into absolute file paths.

    Without a wildcard the spec names exactly one file (existence is not
    checked) and the image extension is appended when missing. With a wildcard
    the files directly inside the parent directory that match the pattern and
    carry the image extension are returned, sorted lexicographically.

    Args:
        spec (str): Literal or wildcarded path, absolute or relative to `base_dir`.
        base_dir (str | Path): Directory relative specs are anchored at.
        image_extension (str): Extension with leading dot, e.g. ".png".

    Returns:
        list[str]: Absolute paths; empty when the wildcard's directory is missing.
    """
    resolved = os.path.abspath(os.path.join(os.fspath(base_dir), spec))

    if not is_wildcard(resolved):
        if has_extension(resolved, image_extension):
            return [resolved]
        return [resolved + image_extension]

    parent = os.path.dirname(resolved)
    # Wildcards never span directory levels
    if is_wildcard(parent) or not os.path.isdir(parent):
        return []

    pattern = wildcard_regex(resolved)
    files: list[str] = []
    with os.scandir(parent) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            full_path = os.path.join(parent, entry.name)
            if not pattern.fullmatch(full_path):
                continue
            if has_extension(full_path, image_extension):
                files.append(full_path)

    files.sort()
    return files
