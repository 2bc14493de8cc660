"""
Top-level fault boundary for the dashboard.

Wraps the whole render pass. Any exception is logged with its traceback and
the fallback view replaces the page. No retry and no per-section recovery:
the user has to reload.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Something went wrong. Please refresh the page."

T = TypeVar("T")


def render_with_boundary(
    render: Callable[[], T],
    fallback: Callable[[Exception], None],
) -> Optional[T]:
    """Run `render`; on any exception log it, call `fallback(exc)` and return None."""
    try:
        return render()
    except Exception as exc:
        logger.exception("Unhandled error while rendering the dashboard")
        fallback(exc)
        return None
