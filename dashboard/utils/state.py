from __future__ import annotations

from typing import List, Optional

import streamlit as st

from dashboard.core.config import AppConfig
from dashboard.core.models import DashboardData, ListItem
from dashboard.core.viewmodels import CarouselViewModel, ListViewModel, StatisticsViewModel
from dashboard.utils.logging import get_logger


LIST_VIEW_MODEL_KEY = "list_view_model"
STATISTICS_VIEW_MODEL_KEY = "statistics_view_model"
CAROUSEL_VIEW_MODEL_KEY = "carousel_view_model"
SEARCH_TEXT_KEY = "search_text"
SEARCH_MATCH_COUNT_KEY = "search_match_count"
STATISTICS_SHEET_KEY = "show_statistics_sheet"

LOGGER = get_logger("dashboard.state")


def trigger_rerun() -> None:
    """Trigger a Streamlit rerun using the most compatible API."""
    rerun_fn = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun_fn:
        rerun_fn()


def _record_search_matches(items: List[ListItem]) -> None:
    st.session_state[SEARCH_MATCH_COUNT_KEY] = len(items)


def _log_carousel_page(index: int) -> None:
    LOGGER.debug("Carousel moved to page %d", index + 1)


def ensure_view_models(data: DashboardData, config: AppConfig) -> None:
    """Create the session's view models on first use."""
    if LIST_VIEW_MODEL_KEY not in st.session_state:
        list_vm = ListViewModel(data.list_items)
        list_vm.subscribe(_record_search_matches)
        st.session_state[LIST_VIEW_MODEL_KEY] = list_vm
        st.session_state[SEARCH_MATCH_COUNT_KEY] = len(list_vm.filtered_items)

    if STATISTICS_VIEW_MODEL_KEY not in st.session_state:
        st.session_state[STATISTICS_VIEW_MODEL_KEY] = StatisticsViewModel(
            data.word_lists,
            selected_list=config.default_list,
            top_n=config.top_n,
        )

    if CAROUSEL_VIEW_MODEL_KEY not in st.session_state:
        carousel_vm = CarouselViewModel(data.carousel_items)
        carousel_vm.subscribe(_log_carousel_page)
        st.session_state[CAROUSEL_VIEW_MODEL_KEY] = carousel_vm

    st.session_state.setdefault(STATISTICS_SHEET_KEY, False)


def get_list_view_model() -> ListViewModel:
    return st.session_state[LIST_VIEW_MODEL_KEY]


def get_statistics_view_model() -> StatisticsViewModel:
    return st.session_state[STATISTICS_VIEW_MODEL_KEY]


def get_carousel_view_model() -> CarouselViewModel:
    return st.session_state[CAROUSEL_VIEW_MODEL_KEY]


def get_search_match_count(default: Optional[int] = None) -> Optional[int]:
    return st.session_state.get(SEARCH_MATCH_COUNT_KEY, default)


def request_statistics_sheet() -> None:
    st.session_state[STATISTICS_SHEET_KEY] = True


def consume_statistics_sheet_request() -> bool:
    """Return True once per request to open the statistics sheet."""
    requested = bool(st.session_state.get(STATISTICS_SHEET_KEY, False))
    st.session_state[STATISTICS_SHEET_KEY] = False
    return requested


def sync_selected_list(widget_key: str) -> None:
    """Widget callback applying a list selection to the statistics view model."""
    selected = st.session_state.get(widget_key)
    if selected:
        get_statistics_view_model().select_list(selected)
