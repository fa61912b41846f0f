from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd
import streamlit as st

from dashcustom.schema import AppConfig
from dashcustom.ui.components.tables import render_table

SAMPLE_DEALS: List[Dict[str, object]] = [
    {"id": 1, "company": "EcoTech Solutions", "stage": "Initial Contact", "value": 5_000_000},
    {"id": 2, "company": "CircularWare", "stage": "Proposal", "value": 3_000_000},
    {"id": 3, "company": "GreenBuild Systems", "stage": "Negotiation", "value": 7_000_000},
]

STATE_KEY = "deal_pipeline_deals"


def deals_frame(deals: Sequence[Dict[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(list(deals), columns=["id", "company", "stage", "value"])
    return df.rename(columns={"company": "Company", "stage": "Stage", "value": "Value"})[
        ["Company", "Stage", "Value"]
    ]


def render(config: AppConfig) -> None:
    st.subheader("Deal Pipeline")
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = [dict(deal) for deal in SAMPLE_DEALS]

    render_table(
        deals_frame(st.session_state[STATE_KEY]),
        column_config={"Value": {"type": "currency", "currency": "GBP"}},
    )
