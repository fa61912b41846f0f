"""
Core package for the dashboard customization layer.

Submodules define the configuration schema, the tab registry, chart spec
resolution and bundle assembly consumed by the Streamlit shell in `app.py`.
"""
