from __future__ import annotations

from typing import Any, Dict

import pytest

from dashboard.core.config import AppConfig
from dashboard.core.sample_data import build_dashboard_data
from dashboard.utils import state as app_state


@pytest.fixture
def session_state(monkeypatch) -> Dict[str, Any]:
    """Replace Streamlit session state with a plain dict."""
    fake_state: Dict[str, Any] = {}
    monkeypatch.setattr(app_state.st, "session_state", fake_state)
    return fake_state


def test_ensure_view_models_creates_once(session_state) -> None:
    data = build_dashboard_data()
    app_state.ensure_view_models(data, AppConfig(top_n=2, default_list="List 3"))

    stats_vm = app_state.get_statistics_view_model()
    assert stats_vm.selected_list == "List 3"
    assert len(stats_vm.top_characters) == 2
    assert app_state.get_carousel_view_model().page_count == 5
    assert app_state.get_search_match_count() == 5

    list_vm = app_state.get_list_view_model()
    app_state.ensure_view_models(data, AppConfig())
    assert app_state.get_list_view_model() is list_vm
    assert app_state.get_statistics_view_model().selected_list == "List 3"


def test_search_listener_tracks_match_count(session_state) -> None:
    app_state.ensure_view_models(build_dashboard_data(), AppConfig())
    app_state.get_list_view_model().set_search_text("an")
    assert app_state.get_search_match_count() == 2


def test_statistics_sheet_request_is_consumed_once(session_state) -> None:
    app_state.ensure_view_models(build_dashboard_data(), AppConfig())
    assert app_state.consume_statistics_sheet_request() is False

    app_state.request_statistics_sheet()
    assert app_state.consume_statistics_sheet_request() is True
    assert app_state.consume_statistics_sheet_request() is False


def test_sync_selected_list(session_state) -> None:
    app_state.ensure_view_models(build_dashboard_data(), AppConfig())
    session_state["sheet_selected_list"] = "List 2"
    app_state.sync_selected_list("sheet_selected_list")
    assert app_state.get_statistics_view_model().selected_list == "List 2"

    session_state["sheet_selected_list"] = "Unknown"
    app_state.sync_selected_list("sheet_selected_list")
    assert app_state.get_statistics_view_model().selected_list == "List 2"
