"""Shared fixtures for shader include tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_shaders(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper that writes ``{relative_name: content}`` under tmp_path.

    Contents are written byte-exact (no newline translation).
    """

    def _write(files: dict[str, str]) -> Path:
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _write
