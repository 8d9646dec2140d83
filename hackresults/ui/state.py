"""
Shared app state: the loaded dataset and the project search controller.
"""
import logging

import streamlit as st

from ..core.config import get_settings
from ..data.dataset import Dataset, load_dataset
from ..scrapers.devfolio_client import DevfolioClient
from ..search.controller import SearchController

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner="Loading projects...")
def get_dataset() -> Dataset:
    """Load the dataset once per server process."""
    settings = get_settings()
    client = DevfolioClient.from_settings(settings)
    try:
        return load_dataset(settings, client)
    finally:
        client.close()


def get_controller() -> SearchController:
    """Search controller for this browser session."""
    dataset = get_dataset()
    controller = st.session_state.get("search_controller")

    if controller is None:
        settings = get_settings()
        controller = SearchController(
            dataset.records,
            sort_key=settings.search.default_sort,
            threshold=settings.search.threshold,
        )
        st.session_state.search_controller = controller
    elif controller.records is not dataset.records:
        # Dataset was reloaded (cache cleared)
        controller.set_records(dataset.records)

    return controller


def open_project(slug: str):
    """Navigate to the project detail page."""
    st.session_state.selected_project = slug
    st.session_state.nav_page = "📄 Project"
    st.rerun()
