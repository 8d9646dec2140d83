"""
UI module - Streamlit pages, theme and shared session state.
"""
