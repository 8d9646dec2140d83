"""
HackResults - Overview Page.

Headline numbers, the top earning projects and prize totals per sponsor.
"""
import pandas as pd
import streamlit as st

from ...data.awards import parse_amount
from ..state import get_dataset, open_project
from ..theme import hero, inject_css, metric_card


def render():
    inject_css()
    dataset = get_dataset()
    meta = dataset.awards.get_meta()

    st.markdown(hero("🏆 Winners", "Every winning project, award and bounty"), unsafe_allow_html=True)

    c1, c2, c3 = st.columns(3)
    c1.markdown(metric_card(meta.total_projects, "Winning Projects"), unsafe_allow_html=True)
    c2.markdown(metric_card(meta.total_awards, "Awards"), unsafe_allow_html=True)
    c3.markdown(metric_card(f"${meta.total_usd:,.0f}", "Awarded", gold=True), unsafe_allow_html=True)

    st.markdown("---")

    # --- Top projects ---
    st.subheader("🥇 Top Projects")
    top = dataset.awards.get_top_projects(limit=10)
    for i, award_record in enumerate(top):
        col_name, col_prize = st.columns([4, 1])
        slug = next((r.id for r in dataset.records if r.award_record is award_record), None)
        if col_name.button(f"{i + 1}. {award_record.name}", key=f"top_{i}", use_container_width=True) and slug:
            open_project(slug)
        col_prize.markdown(
            f'<div class="award-amount" style="text-align:right">${award_record.total_usd:,.0f}</div>',
            unsafe_allow_html=True,
        )

    st.markdown("---")

    # --- Prize totals per sponsor ---
    st.subheader("📊 Awarded by Sponsor")
    totals: dict[str, int] = {}
    for record in dataset.records:
        for award in record.award_record.awards if record.award_record else []:
            totals[award.sponsor] = totals.get(award.sponsor, 0) + parse_amount(award.amount)

    if totals:
        df = pd.DataFrame(
            sorted(totals.items(), key=lambda x: -x[1]),
            columns=["Sponsor", "USD"],
        )
        st.bar_chart(df.set_index("Sponsor"), color="#f5a623", height=350)
    else:
        st.info("No awards in the dataset yet.")
