"""
Layout helpers for the Streamlit host shell (page setup, branding sidebar,
tab navigation labels).
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

import streamlit as st

from dashcustom.schema import AppConfig, IconRef, TabConfig

# Icon catalog names -> Streamlit material icon shortcodes.
ICON_GLYPHS = {
    "home": ":material/home:",
    "bar-chart-2": ":material/bar_chart:",
    "settings": ":material/settings:",
    "users": ":material/group:",
    "calendar": ":material/calendar_month:",
    "search": ":material/search:",
    "file-text": ":material/description:",
    "filter": ":material/filter_alt:",
}

# Feature flag -> sidebar affordance label.
FEATURE_AFFORDANCES = {
    "dataImport": "Import Data",
    "reporting": "Generate Report",
    "templates": "Browse Templates",
}


def humanize(name: str) -> str:
    """Turn a camelCase chart or tab id into a display title."""
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def icon_glyph(icon: Optional[IconRef]) -> Optional[str]:
    if not icon:
        return None
    return ICON_GLYPHS.get(icon)


def tab_label(tab: TabConfig) -> str:
    glyph = icon_glyph(tab.icon)
    return f"{glyph} {tab.label}" if glyph else tab.label


def tab_labels(tabs: Sequence[TabConfig]) -> List[str]:
    return [tab_label(tab) for tab in tabs]


def enabled_affordances(config: AppConfig) -> List[str]:
    return [label for flag, label in FEATURE_AFFORDANCES.items() if config.feature_enabled(flag)]


def setup_page(config: AppConfig) -> None:
    """Set Streamlit page configuration and brand colors."""
    st.set_page_config(
        page_title=config.title,
        layout="wide",
        page_icon=":bar_chart:",
    )
    st.markdown(
        f"""
        <style>
        .stTabs [aria-selected="true"] {{ color: {config.primary_color}; }}
        .stTabs [data-baseweb="tab-highlight"] {{ background-color: {config.primary_color}; }}
        div.stButton > button[kind="primary"] {{
            background-color: {config.primary_color};
            border-color: {config.secondary_color};
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_logo(logo: str) -> None:
    if logo.startswith(("http://", "https://")):
        st.sidebar.image(logo, use_container_width=True)
    else:
        st.sidebar.caption(f"Logo: {logo}")


def sidebar_branding(config: AppConfig) -> None:
    if config.logo:
        _render_logo(config.logo)
    st.sidebar.markdown(f"### {config.company_name}")
    st.sidebar.caption(f"Signed in as {config.user_name}")

    affordances = enabled_affordances(config)
    if affordances:
        st.sidebar.markdown("#### Actions")
        for label in affordances:
            if st.sidebar.button(label, key=f"affordance_{label}", use_container_width=True):
                st.sidebar.info(f"{label} is not available in this preview.")

    if config.clients:
        with st.sidebar.expander("Clients", expanded=False):
            for client in config.clients:
                st.write(f"- **{client.name}** ({client.industry})")
