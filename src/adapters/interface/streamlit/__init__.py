"""Streamlit interface package."""

__all__: list[str] = []
