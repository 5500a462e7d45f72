"""Tests for grid headers."""

from __future__ import annotations

import pytest

from ttygrid.core.header import DEFAULT_PAD, GridHeader, header


class TestGridHeader:
    """Tests for GridHeader."""

    def test_defaults(self) -> None:
        """Header defaults to priority 0 and the default pad."""
        h = GridHeader("name")
        assert h.text == "name"
        assert h.priority == 0
        assert h.pad == DEFAULT_PAD == 4

    def test_builder(self) -> None:
        """header() passes text, priority and pad through."""
        h = header("p3", 3, pad=1)
        assert (h.text, h.priority, h.pad) == ("p3", 3, 1)

    def test_identity_not_text(self) -> None:
        """Headers with the same text are distinct columns."""
        a = header("dup")
        b = header("dup")
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_fallback_width(self) -> None:
        """Fallback width is text length plus two."""
        assert header("name", pad=0).fallback_width == 6

    def test_negative_priority_rejected(self) -> None:
        with pytest.raises(ValueError, match="priority"):
            header("x", -1)

    def test_negative_pad_rejected(self) -> None:
        with pytest.raises(ValueError, match="pad"):
            header("x", pad=-1)

    def test_immutable(self) -> None:
        """Headers cannot be mutated after creation."""
        h = header("x")
        with pytest.raises(AttributeError):
            h.priority = 5  # type: ignore[misc]
