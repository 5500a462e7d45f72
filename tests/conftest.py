"""Shared test fixtures for ttygrid tests."""

from __future__ import annotations

import pytest

from ttygrid.core import GridHeader, TTYGrid, header


@pytest.fixture(autouse=True)
def clean_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides out of width and color detection."""
    for name in ("COLUMNS", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_headers() -> list[GridHeader]:
    """Three headers with increasing priority."""
    return [
        header("line", 0, pad=0),
        header("one", 1, pad=2),
        header("two", 2, pad=2),
    ]


@pytest.fixture
def sample_grid(sample_headers: list[GridHeader]) -> TTYGrid:
    """Grid whose display widths are line=4, one=8, two=11 (total 23)."""
    g = TTYGrid(sample_headers)
    g.add_line("0", "abc", "abcdef")
    return g
