"""
HackResults - Tracks Page.

Winners per track and the sponsors offering bounties for it.
"""
import streamlit as st

from ...data.awards import format_amount
from ...data.grouping import group_by_sponsor, sort_by_prize
from ...scrapers.devfolio_client import extract_slug_from_url
from ..state import get_dataset, open_project
from ..theme import hero, inject_css, metric_card


def render():
    inject_css()
    dataset = get_dataset()

    st.markdown(hero("🧭 Tracks", "Hackathon tracks, their bounties and winners"), unsafe_allow_html=True)

    # Tracks with winners first, then bounty-only tracks
    tracks = list(dict.fromkeys(dataset.awards.get_all_tracks() + dataset.sponsors.get_all_tracks()))
    if not tracks:
        st.info("No tracks found.")
        return

    default = st.session_state.get("selected_track")
    track = st.selectbox("Track", tracks, index=tracks.index(default) if default in tracks else 0)
    st.session_state.selected_track = track

    winners = dataset.awards.get_projects_by_track(track)
    bounties = dataset.sponsors.get_sponsors_for_track(track)
    total_awarded = sum(match.usd for match in winners)

    c1, c2, c3 = st.columns(3)
    c1.markdown(metric_card(len(winners), "Winners"), unsafe_allow_html=True)
    c2.markdown(metric_card(len(bounties), "Sponsors"), unsafe_allow_html=True)
    c3.markdown(metric_card(f"${total_awarded:,.0f}", "Awarded", gold=True), unsafe_allow_html=True)

    st.markdown("---")

    col_winners, col_bounties = st.columns([2, 1])

    with col_winners:
        st.subheader("🏆 Winners")
        if not winners:
            st.caption("No winners recorded for this track.")
        else:
            view = st.radio("Group", ["By sponsor", "By prize"], horizontal=True, label_visibility="collapsed")
            if view == "By sponsor":
                for sponsor_name, matches in group_by_sponsor(winners):
                    st.markdown(f"#### {sponsor_name}")
                    _render_matches(matches, key=f"{track}_{sponsor_name}", sponsor=sponsor_name)
            else:
                _render_matches(sort_by_prize(winners), key=track)

    with col_bounties:
        st.subheader("💰 Bounties")
        if not bounties:
            st.caption("No sponsor bounties for this track.")
        for item in bounties:
            st.markdown(
                f"**{item.sponsor.display_name}** · "
                f"{format_amount(item.bounty.amount) if item.bounty.amount else 'TBA'}"
            )
            if item.bounty.description:
                st.caption(item.bounty.description)


def _render_matches(matches, key, sponsor=None):
    for i, match in enumerate(matches):
        awards = [a for a in match.awards if sponsor is None or a.sponsor == sponsor]
        col_name, col_amount = st.columns([4, 1])
        slug = extract_slug_from_url(match.project.url)
        if col_name.button(match.project.name, key=f"trk_{key}_{i}", use_container_width=True) and slug:
            open_project(slug)
        col_amount.markdown(" ".join(format_amount(a.amount) for a in awards))
