"""
HackResults - Sponsors Page.

Sponsor profile, bounties and the projects that won from them.
"""
import streamlit as st

from ...data.awards import format_amount
from ...data.grouping import group_by_track, sort_by_prize, sponsor_winners
from ...scrapers.devfolio_client import extract_slug_from_url
from ..state import get_dataset, open_project
from ..theme import chips, hero, inject_css, metric_card


def render():
    inject_css()
    dataset = get_dataset()
    sponsors = dataset.sponsors.get_all_sponsors()

    st.markdown(hero("🤝 Sponsors", "Who put up the prizes and who took them home"), unsafe_allow_html=True)

    if not sponsors:
        st.info("No sponsors in sponsors.json.")
        return

    ids = [s.id for s in sponsors]
    default = st.session_state.get("selected_sponsor")
    sponsor_id = st.selectbox(
        "Sponsor",
        ids,
        index=ids.index(default) if default in ids else 0,
        format_func=lambda i: dataset.sponsors.get_sponsor_by_id(i).display_name,
    )
    sponsor = dataset.sponsors.get_sponsor_by_id(sponsor_id)
    st.session_state.selected_sponsor = sponsor_id

    winners = sponsor_winners(dataset.awards, sponsor)
    total_awarded = sum(match.usd for match in winners)

    # --- Header ---
    col_logo, col_about = st.columns([1, 6])
    if sponsor.logo:
        col_logo.image(sponsor.logo, width=80)
    with col_about:
        st.markdown(f"### {sponsor.name}")
        if sponsor.description:
            st.markdown(sponsor.description)
        if sponsor.website:
            st.markdown(f"[{sponsor.website}]({sponsor.website})")

    c1, c2, c3 = st.columns(3)
    c1.markdown(metric_card(sponsor.total_prize or "-", "Prize Pool", gold=True), unsafe_allow_html=True)
    c2.markdown(metric_card(len(winners), "Winners"), unsafe_allow_html=True)
    c3.markdown(metric_card(f"${total_awarded:,.0f}", "Awarded", gold=True), unsafe_allow_html=True)
    if sponsor.prize_note:
        st.caption(sponsor.prize_note)

    # --- Bounties ---
    if sponsor.bounties:
        with st.expander(f"Bounties ({len(sponsor.bounties)})"):
            for bounty in sponsor.bounties:
                st.markdown(f"**{bounty.track}** · {format_amount(bounty.amount) if bounty.amount else 'TBA'}")
                if bounty.description:
                    st.caption(bounty.description)
                for prize in bounty.prizes or []:
                    st.markdown(f"- {prize}")

    st.markdown("---")

    # --- Winners ---
    st.subheader("🏆 Winners")
    if not winners:
        st.caption("No winning projects recorded for this sponsor.")
        return

    view = st.radio("Group", ["By track", "By prize"], horizontal=True, label_visibility="collapsed")
    if view == "By track":
        for track, matches in group_by_track(winners):
            st.markdown(f"#### {track}")
            _render_matches(matches, key=f"{sponsor_id}_{track}")
    else:
        _render_matches(sort_by_prize(winners), key=sponsor_id)


def _render_matches(matches, key):
    for i, match in enumerate(matches):
        col_name, col_amount = st.columns([4, 1])
        slug = extract_slug_from_url(match.project.url)
        if col_name.button(match.project.name, key=f"win_{key}_{i}", use_container_width=True) and slug:
            open_project(slug)
        col_amount.markdown(
            " ".join(format_amount(a.amount) for a in match.awards)
            + chips([a.track for a in match.awards if a.track], "track"),
            unsafe_allow_html=True,
        )
