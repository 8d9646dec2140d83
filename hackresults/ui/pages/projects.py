"""
HackResults - Projects Page.

Fuzzy search over winning projects with sponsor / track filters and sorting.
Every widget change goes through the session's SearchController.
"""
import streamlit as st

from ...search.sorting import SortKey
from ..state import get_controller, open_project
from ..theme import empty_state, hero, inject_css, project_card

SORT_OPTIONS = list(SortKey)


def render():
    inject_css()
    controller = get_controller()

    st.markdown(
        hero("🔍 Projects", "Search by project, builder, sponsor, track or tag"),
        unsafe_allow_html=True,
    )

    # --- Query + sort ---
    col_q, col_sort = st.columns([3, 1])
    with col_q:
        st.text_input(
            "Search projects",
            value=controller.query,
            placeholder="e.g. zcash wallet, shielded, near intents",
            label_visibility="collapsed",
            key="project_query",
            on_change=lambda: controller.set_query(st.session_state.project_query),
        )
    with col_sort:
        st.selectbox(
            "Sort",
            SORT_OPTIONS,
            index=SORT_OPTIONS.index(controller.sort_key),
            format_func=lambda key: key.label,
            label_visibility="collapsed",
            key="project_sort",
            on_change=lambda: controller.set_sort(st.session_state.project_sort),
        )

    _render_filters(controller)

    # --- Results ---
    total = len(controller.records)
    shown = len(controller.results)
    if controller.query.strip() or not controller.selection.is_empty():
        st.caption(f"Showing {shown} of {total}")
    else:
        st.caption(f"Showing all {total}")

    if not controller.results:
        st.markdown(
            empty_state("No projects match. Try a different search or clear the filters."),
            unsafe_allow_html=True,
        )
        return

    for i, record in enumerate(controller.results):
        st.markdown(
            project_card(
                record.display_name,
                tagline=record.short_description,
                total_usd=record.total_award_value,
                award_count=record.award_count,
                sponsors=record.sponsor_names,
                tracks=record.track_names,
                builders=record.people_names,
            ),
            unsafe_allow_html=True,
        )
        if st.button("View project →", key=f"open_{i}_{record.id}"):
            open_project(record.id)


def _render_filters(controller):
    """Sponsor and track toggle chips, prize range and clear button."""
    label = "Filters"
    if controller.active_filter_count:
        label = f"Filters ({controller.active_filter_count})"

    with st.expander(label, expanded=controller.active_filter_count > 0):
        st.markdown("**Sponsors**")
        _chip_row(
            controller.available_sponsors,
            controller.is_selected_sponsor,
            controller.toggle_sponsor,
            key="sponsor",
        )

        st.markdown("**Tracks**")
        _chip_row(
            controller.available_tracks,
            controller.is_selected_track,
            controller.toggle_track,
            key="track",
        )

        st.markdown("**Total prize (USD)**")
        col_min, col_max = st.columns(2)
        min_prize = col_min.number_input(
            "Min", min_value=0, step=500,
            value=int(controller.selection.min_prize or 0),
            key="prize_min",
        )
        max_prize = col_max.number_input(
            "Max (0 = no limit)", min_value=0, step=500,
            value=int(controller.selection.max_prize or 0),
            key="prize_max",
        )
        bounds = (min_prize or None, max_prize or None)
        if bounds != (controller.selection.min_prize, controller.selection.max_prize):
            controller.set_prize_range(*bounds)

        if st.button("Clear filters", disabled=controller.selection.is_empty() and not controller.query):
            controller.clear_filters()
            for widget in ("project_query", "prize_min", "prize_max"):
                st.session_state.pop(widget, None)
            st.rerun()


def _chip_row(values, is_selected, toggle, key):
    cols = st.columns(4)
    for i, value in enumerate(values):
        selected = is_selected(value)
        cols[i % 4].button(
            value,
            key=f"chip_{key}_{value}",
            type="primary" if selected else "secondary",
            use_container_width=True,
            on_click=toggle,
            args=(value,),
        )
