from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

APP_DIR = Path(__file__).resolve().parents[1]
PROJECT_ROOT = APP_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

st.set_page_config(
    page_title="Statistics | Fruit Dashboard",
    page_icon="🍇",
    layout="centered",
    initial_sidebar_state="expanded",
)

from dashboard.ui import components  # noqa: E402
from dashboard.ui.page_state import ensure_data_ready  # noqa: E402
from dashboard.utils import state as app_state  # noqa: E402


def render_page() -> None:
    ensure_data_ready()

    st.subheader("List Statistics")
    st.caption("The chart covers every character in the selected list, not only the top entries.")
    components.render_statistics_content(
        app_state.get_statistics_view_model(),
        key_prefix="statistics_page",
        full_tally=True,
    )


if __name__ == "__main__":
    render_page()
