"""Streamlit pages. Each module exposes render()."""
