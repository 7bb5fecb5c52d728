"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed langmerge package.
"""

import json
from pathlib import Path

import pytest


@pytest.fixture
def app_root(tmp_path):
    """Application source root of a checkout: <tmp>/project/src/app."""
    root = tmp_path / "project" / "src" / "app"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_lang():
    """Write a translation file, creating parent directories.

    Dicts are written as JSON; strings are written verbatim (for malformed
    or empty content).
    """
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write
