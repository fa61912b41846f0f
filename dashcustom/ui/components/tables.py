"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from dashcustom.ui.components.formatting import format_cell


def format_columns(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        formatted_df[column] = formatted_df[column].apply(lambda v, cfg=config: format_cell(v, cfg))
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    kwargs = {"height": height} if height else {}
    st.dataframe(
        format_columns(df, column_config),
        use_container_width=True,
        hide_index=not show_index,
        **kwargs,
    )
