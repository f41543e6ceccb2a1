import json
from pathlib import Path

import pytest


@pytest.fixture
def make_files():
    """Create empty files under a directory and return the directory."""

    def _make(directory: Path, *names: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_bytes(b"")
        return directory

    return _make


@pytest.fixture
def write_json_spec():
    def _write(path: Path, payload) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
