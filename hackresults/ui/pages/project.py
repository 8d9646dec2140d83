"""
HackResults - Project Detail Page.

Project header, builders, links, description and every award it won.
"""
import streamlit as st

from ...core.config import get_settings
from ...data.awards import format_amount
from ...scrapers.devfolio_client import get_image_url, get_links, get_pictures
from ..state import get_dataset
from ..theme import award_card, chips, hero, inject_css


def render():
    inject_css()
    dataset = get_dataset()

    slug = st.session_state.get("selected_project")
    if not slug:
        slug = st.selectbox(
            "Project",
            [r.id for r in dataset.records],
            format_func=lambda s: dataset.get_record(s).display_name,
        )

    record = dataset.get_record(slug) if slug else None
    if record is None:
        st.warning("Project not found.")
        return

    project = record.project
    assets_url = get_settings().devfolio.assets_url

    if st.button("← All projects"):
        st.session_state.selected_project = None
        st.session_state.nav_page = "🔍 Projects"
        st.rerun()

    # --- Header ---
    col_icon, col_title = st.columns([1, 8])
    favicon = get_image_url(project.favicon, assets_url)
    if favicon:
        col_icon.image(favicon, width=72)
    with col_title:
        st.markdown(hero(project.name, project.tagline or ""), unsafe_allow_html=True)

    st.markdown(
        chips(record.sponsor_names) + chips(record.track_names, "track") + chips(record.tags),
        unsafe_allow_html=True,
    )

    # --- Links ---
    link_cols = st.columns(4)
    links = [
        ("Demo", project.demo_url),
        ("Source", project.source_code_url),
        ("Video", project.video_url),
        ("Devfolio", record.award_record.url if record.award_record else None),
    ]
    for col, (label, url) in zip(link_cols, [(lbl, u) for lbl, u in links if u]):
        col.link_button(label, url, use_container_width=True)

    extra_links = get_links(project.links)
    if extra_links:
        st.caption(" · ".join(extra_links))

    st.markdown("---")

    col_main, col_side = st.columns([2, 1])

    with col_main:
        cover = get_image_url(project.cover_img, assets_url)
        if cover:
            st.image(cover, use_container_width=True)

        for block in project.description or []:
            if block.title:
                st.subheader(block.title)
            if block.subtitle:
                st.caption(block.subtitle)
            st.markdown(block.content)

        pictures = get_pictures(project.pictures, assets_url)
        if pictures:
            st.subheader("📸 Gallery")
            st.image(pictures, width=320)

    with col_side:
        _render_awards(record, dataset.sponsors)
        _render_builders(project.builders, assets_url)


def _render_awards(record, sponsors):
    st.subheader("🏆 Awards")
    if record.award_record is None or not record.award_record.awards:
        st.caption("No award data for this project.")
        return

    st.markdown(
        f'<div class="metric-value gold">${record.total_award_value:,.0f}</div>'
        f'<div class="metric-label">Total prize</div>',
        unsafe_allow_html=True,
    )

    for award in record.award_record.awards:
        bounty = sponsors.get_bounty_for_award(award.sponsor, award.track)
        st.markdown(
            award_card(
                award.sponsor,
                format_amount(award.amount),
                track=award.track,
                bounty_description=bounty.description if bounty else None,
            ),
            unsafe_allow_html=True,
        )
        website = sponsors.get_sponsor_website(award.sponsor)
        if website:
            st.caption(f"[{award.sponsor} website]({website})")

    for prize in record.award_record.other_prizes:
        st.caption(f"+ {prize}")


def _render_builders(builders, assets_url):
    if not builders:
        return
    st.subheader("👥 Builders")
    for builder in builders:
        col_img, col_name = st.columns([1, 4])
        avatar = get_image_url(builder.profile_image, assets_url)
        if avatar:
            col_img.image(avatar, width=40)
        name = builder.full_name or builder.username
        col_name.markdown(f"**{name}**  \n[@{builder.username}](https://devfolio.co/@{builder.username})")
