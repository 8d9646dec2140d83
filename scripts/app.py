"""
HackResults - Streamlit Application Entry Point.

Browse, search and filter hackathon winners.

Usage:
    streamlit run scripts/app.py
"""
import logging
import sys
from pathlib import Path

# Ensure project root is importable
_PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

import streamlit as st

from hackresults import __version__
from hackresults.core.config import load_dotenv_if_exists
from hackresults.data.files import DataFileError

load_dotenv_if_exists()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S"
)

# ---- Page config (must be first Streamlit call) ----
st.set_page_config(
    page_title="HackResults",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main():
    from hackresults.ui.theme import inject_css

    inject_css()

    # Cross-page navigation support
    nav_options = ["🏆 Overview", "🔍 Projects", "📄 Project", "🤝 Sponsors", "🧭 Tracks"]

    # If another page requested navigation (e.g. "click project → go to Project")
    if "nav_page" in st.session_state and st.session_state.nav_page:
        target = st.session_state.nav_page
        st.session_state.nav_page = None  # consume it
        if target in nav_options:
            st.session_state.nav_radio = target

    # ---- Sidebar navigation ----
    with st.sidebar:
        st.markdown(
            '<div style="text-align:center;margin-bottom:1rem">'
            '<div style="font-size:2.5rem">🏆</div>'
            '<div style="font-size:1.3rem;font-weight:700;color:#00d4aa">HackResults</div>'
            '<div style="font-size:0.75rem;color:#737373">Hackathon winners explorer</div>'
            '</div>',
            unsafe_allow_html=True,
        )

        page = st.radio(
            "Navigation",
            nav_options,
            label_visibility="collapsed",
            key="nav_radio",
        )

        st.markdown("---")
        st.markdown(
            f'<div style="font-size:0.75rem;color:#737373;text-align:center">v{__version__}</div>',
            unsafe_allow_html=True,
        )

    # ---- Route to page ----
    try:
        if page == "🏆 Overview":
            from hackresults.ui.pages.overview import render
            render()
        elif page == "🔍 Projects":
            from hackresults.ui.pages.projects import render
            render()
        elif page == "📄 Project":
            from hackresults.ui.pages.project import render
            render()
        elif page == "🤝 Sponsors":
            from hackresults.ui.pages.sponsors import render
            render()
        elif page == "🧭 Tracks":
            from hackresults.ui.pages.tracks import render
            render()
    except DataFileError as e:
        st.error(f"Could not load data: {e}")
        st.info("Check PROJECTS_JSON and SPONSORS_JSON in your .env")


if __name__ == "__main__":
    main()
