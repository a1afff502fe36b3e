from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Ensure the project root is available on sys.path for `dashboard.*` imports.
APP_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = APP_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from dashboard.ui import components
from dashboard.ui.page_state import ensure_data_ready
from dashboard.utils import state as app_state
from dashboard.utils.logging import get_logger


LOGGER = get_logger("dashboard.home")


def main() -> None:
    st.set_page_config(
        page_title="Dashboard | Fruit Dashboard",
        page_icon="🍇",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    config, _ = ensure_data_ready()

    st.title("Dashboard")
    components.render_carousel(app_state.get_carousel_view_model(), config.assets_dir)

    st.divider()

    components.render_search_list(app_state.get_list_view_model(), config.assets_dir)
    components.render_floating_action_button()

    if app_state.consume_statistics_sheet_request():
        LOGGER.debug("Opening statistics sheet")
        components.render_statistics_sheet(app_state.get_statistics_view_model())


if __name__ == "__main__":
    main()
