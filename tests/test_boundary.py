"""Tests for app.boundary (top-level fault boundary)."""

import logging

from app.boundary import FALLBACK_MESSAGE, render_with_boundary


class TestRenderWithBoundary:
    """Tests for render_with_boundary."""

    def test_returns_render_result(self):
        calls = []
        out = render_with_boundary(lambda: "page", calls.append)

        assert out == "page"
        assert calls == []

    def test_fault_swaps_in_fallback_and_logs(self, caplog):
        calls = []

        def render():
            raise AttributeError("'NoneType' object has no attribute 'price'")

        with caplog.at_level(logging.ERROR, logger="app.boundary"):
            out = render_with_boundary(render, calls.append)

        assert out is None
        assert len(calls) == 1
        assert isinstance(calls[0], AttributeError)
        assert caplog.records[0].exc_info is not None

    def test_fallback_message(self):
        assert "refresh" in FALLBACK_MESSAGE.lower()
