from __future__ import annotations

import html
from pathlib import Path
from typing import Optional

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

from dashboard.core.constants import (
    IMAGE_EXTENSIONS,
    ITEMS_HEADER,
    SEARCH_PLACEHOLDER,
    TOP_CHARACTERS_HEADER,
)
from dashboard.core.models import ListItem
from dashboard.core.processing import (
    build_character_frame,
    build_items_frame,
    count_characters,
    format_character_count,
    format_list_title,
    rank_characters,
)
from dashboard.core.viewmodels import CarouselViewModel, ListViewModel, StatisticsViewModel
from dashboard.ui.charts import create_character_frequency_chart
from dashboard.utils import state as app_state


FAB_KEY = "statistics_fab"


def resolve_image_path(image_name: str, assets_dir: Path) -> Optional[Path]:
    """Return the first existing image file for ``image_name``, if any."""
    if not image_name:
        return None
    for extension in IMAGE_EXTENSIONS:
        candidate = assets_dir / f"{image_name}{extension}"
        if candidate.is_file():
            return candidate
    return None


def render_sidebar_branding(container: Optional[DeltaGenerator] = None) -> None:
    """Render a compact app title in the sidebar."""
    target = container or st.sidebar
    target.markdown(
        (
            "<div style=\"font-size:0.85rem;font-weight:600;color:#1f2937;"
            "letter-spacing:0.015em;margin:0.25rem 0 0.75rem 0;\">"
            "🍇 Fruit Dashboard"
            "</div>"
            "<hr/>"
        ),
        unsafe_allow_html=True,
    )


def render_image(
    image_name: str,
    assets_dir: Path,
    *,
    container: Optional[DeltaGenerator] = None,
    height: int = 220,
) -> None:
    """Render an asset image, or a placeholder card naming it when missing."""
    target = container or st
    image_path = resolve_image_path(image_name, assets_dir)
    if image_path is not None:
        target.image(str(image_path), use_container_width=True)
        return
    target.markdown(
        (
            f"<div style='height:{height}px;border-radius:12px;display:flex;align-items:center;"
            "justify-content:center;background:linear-gradient(135deg,#eef2ff 0%,#fdf2f8 100%);"
            "color:#6b7280;font-size:0.9rem;border:1px solid #e5e7eb;'>"
            f"🖼️ {html.escape(image_name or 'No image')}"
            "</div>"
        ),
        unsafe_allow_html=True,
    )


def render_carousel(carousel_vm: CarouselViewModel, assets_dir: Path) -> None:
    """Render the current carousel slide with paging controls."""
    current = carousel_vm.current_item
    if current is None:
        st.info("No carousel items available.")
        return

    render_image(current.image_name, assets_dir)

    col_prev, col_dots, col_next = st.columns([1, 6, 1])
    with col_prev:
        st.button("◀", key="carousel_previous", on_click=carousel_vm.previous, use_container_width=True)
    with col_next:
        st.button("▶", key="carousel_next", on_click=carousel_vm.next, use_container_width=True)
    with col_dots:
        dots = " ".join(
            "●" if index == carousel_vm.current_index else "○" for index in range(carousel_vm.page_count)
        )
        st.markdown(
            f"<div style='text-align:center;color:#4f46e5;font-size:1.1rem;letter-spacing:0.3rem;'>{dots}</div>",
            unsafe_allow_html=True,
        )
    st.caption(f"Page {carousel_vm.current_index + 1} of {carousel_vm.page_count}")


def render_list_row(item: ListItem, assets_dir: Path) -> None:
    col_image, col_text = st.columns([1, 4])
    render_image(item.image_name, assets_dir, container=col_image, height=64)
    col_text.markdown(
        f"**{html.escape(item.title)}**<br>"
        f"<span style='color:#6b7280;font-size:0.9rem;'>{html.escape(item.subtitle)}</span>",
        unsafe_allow_html=True,
    )


def render_search_list(list_vm: ListViewModel, assets_dir: Path) -> None:
    """Render the search box and the rows matching it."""
    query = st.text_input(
        "Search",
        placeholder=SEARCH_PLACEHOLDER,
        key=app_state.SEARCH_TEXT_KEY,
        label_visibility="collapsed",
    )
    items = list_vm.set_search_text(query)

    match_count = app_state.get_search_match_count(len(items))
    if query:
        st.caption(f"{match_count} of {len(list_vm.items)} items match '{query}'")

    if not items:
        st.info("No items match your search.")
        return

    for item in items:
        with st.container(border=True):
            render_list_row(item, assets_dir)

    st.download_button(
        label="📥 Download Results (CSV)",
        data=build_items_frame(items).to_csv(index=False),
        file_name="search_results.csv",
        mime="text/csv",
        key="download_search_results",
    )


def render_floating_action_button() -> None:
    """Render the round button pinned to the bottom-right corner."""
    st.markdown(
        f"""
        <style>
        .st-key-{FAB_KEY} {{
            position: fixed;
            right: 1.5rem;
            bottom: 1.5rem;
            z-index: 1000;
            width: auto;
        }}
        .st-key-{FAB_KEY} button {{
            width: 60px;
            height: 60px;
            border-radius: 50%;
            background-color: #4f46e5;
            color: #ffffff;
            font-size: 1.5rem;
            box-shadow: 0 5px 10px rgba(0, 0, 0, 0.3);
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.button(
        "📊",
        key=FAB_KEY,
        help="Show list statistics",
        on_click=app_state.request_statistics_sheet,
    )


def render_statistics_content(stats_vm: StatisticsViewModel, *, key_prefix: str, full_tally: bool = False) -> None:
    """Render list selection, top characters, items and the frequency chart."""
    select_key = f"{key_prefix}_selected_list"
    # Other pages may have changed the selection since this widget last ran.
    if st.session_state.get(select_key) != stats_vm.selected_list:
        st.session_state[select_key] = stats_vm.selected_list
    st.selectbox(
        "Select List",
        options=stats_vm.list_names,
        key=select_key,
        on_change=app_state.sync_selected_list,
        args=(select_key,),
    )

    snapshot = stats_vm.snapshot
    st.markdown(f"### {html.escape(format_list_title(snapshot.list_name, snapshot.item_count))}")

    st.markdown(f"**{TOP_CHARACTERS_HEADER}**")
    if snapshot.top_characters:
        st.markdown("\n".join(f"- `{format_character_count(entry)}`" for entry in snapshot.top_characters))
    else:
        st.caption("No characters to count.")

    st.markdown(f"**{ITEMS_HEADER}**")
    if snapshot.items:
        st.markdown("\n".join(f"- {html.escape(word)}" for word in snapshot.items))
    else:
        st.caption("This list is empty.")

    counts = rank_characters(count_characters(snapshot.items)) if full_tally else snapshot.top_characters
    fig = create_character_frequency_chart(build_character_frame(counts))
    if len(fig.data) > 0:
        st.plotly_chart(fig, use_container_width=True, key=f"{key_prefix}_character_chart")


def render_statistics_sheet(stats_vm: StatisticsViewModel) -> None:
    """Open the statistics sheet as a modal dialog."""

    @st.dialog("List Statistics")
    def _statistics_sheet() -> None:
        if st.button("Back", key="statistics_sheet_back"):
            app_state.trigger_rerun()
        render_statistics_content(stats_vm, key_prefix="sheet")

    _statistics_sheet()
