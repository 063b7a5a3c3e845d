# tests/conftest.py

"""Shared pytest fixtures for the inventory tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[None, None, None]:
    """Point the catalog, rate and log files at a per-test temp dir."""
    with patch.object(Settings, "DATA_DIR", tmp_path), patch.object(
        Settings, "CATALOG_PATH", tmp_path / "product_catalog.txt"
    ), patch.object(
        Settings, "RATE_PATH", tmp_path / "dollar_rate.txt"
    ), patch.object(
        Settings, "LOGS_DIR", tmp_path / "logs"
    ):
        yield
