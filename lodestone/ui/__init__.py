"""Streamlit inspector for Lodestone dice specifications."""
