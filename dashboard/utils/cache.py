from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import streamlit as st

F = TypeVar("F", bound=Callable[..., Any])


def cache_data(
    *,
    ttl: Optional[int] = None,
    max_entries: Optional[int] = None,
    show_spinner: bool = False,
) -> Callable[[F], F]:
    """Apply the dashboard's caching policy through st.cache_data."""

    def decorator(func: F) -> F:
        cached = st.cache_data(ttl=ttl, max_entries=max_entries, show_spinner=show_spinner)(func)
        return cached  # type: ignore[return-value]

    return decorator
