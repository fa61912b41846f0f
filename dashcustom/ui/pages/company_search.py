from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import streamlit as st

from dashcustom.schema import AppConfig

logger = logging.getLogger(__name__)

SECTOR_OPTIONS = {
    "": "Select Sector",
    "energy": "Energy Transition",
    "circular": "Circular Economy",
    "built": "Decarbonizing Built Environment",
}

STATE_KEY = "company_search_params"


@dataclass
class SearchParams:
    revenue: str = ""
    growth_rate: str = ""
    sector: str = ""
    keyword: str = ""


def _params() -> SearchParams:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = SearchParams()
    return st.session_state[STATE_KEY]


def handle_search(params: SearchParams) -> None:
    # Simulated search: the parameters are only logged.
    logger.info("Searching with params: %s", asdict(params))


def render(config: AppConfig) -> None:
    st.subheader("Company Search")
    params = _params()

    with st.form("company_search_form"):
        col_left, col_right = st.columns(2)
        with col_left:
            revenue = st.text_input("Min Revenue (£)", value=params.revenue, placeholder="Min Revenue (£)")
            sector = st.selectbox(
                "Sector",
                options=list(SECTOR_OPTIONS),
                index=list(SECTOR_OPTIONS).index(params.sector) if params.sector in SECTOR_OPTIONS else 0,
                format_func=lambda key: SECTOR_OPTIONS[key],
            )
        with col_right:
            growth_rate = st.text_input(
                "Min Growth Rate (%)", value=params.growth_rate, placeholder="Min Growth Rate (%)"
            )
            keyword = st.text_input("Keyword", value=params.keyword, placeholder="Keyword")
        submitted = st.form_submit_button("Search", type="primary", use_container_width=True)

    if submitted:
        params = SearchParams(revenue=revenue, growth_rate=growth_rate, sector=sector, keyword=keyword)
        st.session_state[STATE_KEY] = params
        handle_search(params)
        st.caption(f"Search submitted for {config.company_name}.")
