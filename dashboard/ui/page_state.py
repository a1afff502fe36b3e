from __future__ import annotations

import streamlit as st

from dashboard.core.config import AppConfig, get_config
from dashboard.core.models import DashboardData
from dashboard.ui import components
from dashboard.ui.data_access import load_dashboard_data
from dashboard.utils import state as app_state
from dashboard.utils.logging import get_logger, set_level


LOGGER = get_logger("dashboard.page_state")


def ensure_data_ready() -> tuple[AppConfig, DashboardData]:
    """Ensure sample data and the session's view models are available for a page."""
    config = get_config()
    set_level(config.log_level)
    data = load_dashboard_data()
    if not data.word_lists:
        LOGGER.error("No word lists are defined; statistics are unavailable")
        st.error("No word lists are defined, so statistics cannot be shown.")
        st.stop()

    app_state.ensure_view_models(data, config)
    if not config.has_assets:
        LOGGER.debug("Assets directory %s not found; using image placeholders", config.assets_dir)

    components.render_sidebar_branding(st.sidebar)
    return config, data
