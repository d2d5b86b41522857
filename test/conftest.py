"""Pytest configuration and fixtures

Provides shared fixtures for all tests. Browser launching is disabled and
rendered pages go to a per-test temporary directory.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vlplot.logger import DefaultLogger  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_display(monkeypatch, tmp_path):
    """Never open a browser and keep rendered pages out of the real temp dir."""
    monkeypatch.setenv("VLPLOT_OPEN_BROWSER", "0")
    monkeypatch.setenv("VLPLOT_OUTPUT_DIR", str(tmp_path / "pages"))
    monkeypatch.delenv("VLPLOT_THEME", raising=False)


@pytest.fixture
def memory_logger():
    """Logger that records entries for assertions."""
    return DefaultLogger()


@pytest.fixture
def stocks_csv(tmp_path):
    """Small stocks.csv with two symbols."""
    path = tmp_path / "stocks.csv"
    path.write_text(
        "symbol,date,price\n"
        "MSFT,Jan 1 2000,39.81\n"
        "GOOG,Aug 1 2004,102.37\n"
        "GOOG,Sep 1 2004,129.6\n",
        encoding="utf-8",
    )
    return path
