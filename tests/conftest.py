from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"

# Ensure ``pgident`` can be imported without installing the package.
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def clean_env(monkeypatch):
    """
    Clear pgident environment variables and the cached settings so each test
    sees the defaults unless it sets variables itself.
    """
    from pgident import config

    for var in ("PGIDENT_SPLIT_DOTS", "PGIDENT_DEFAULT_SCHEMA"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "_SETTINGS", None)
    yield monkeypatch
    config._SETTINGS = None
