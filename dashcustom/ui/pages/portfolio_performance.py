from __future__ import annotations

from typing import Optional

import streamlit as st

from dashcustom.chart_spec import RenderSpec, resolve_chart
from dashcustom.schema import AppConfig
from dashcustom.ui.components.charts import render_chart
from dashcustom.ui.components.formatting import format_percent

PANELS = (
    ("revenueGrowth", "Revenue Growth"),
    ("carbonReduction", "Carbon Reduction Impact"),
)


def latest_value(spec: RenderSpec) -> Optional[float]:
    if not spec.data or not spec.data_keys:
        return None
    value = spec.data[-1].get(spec.data_keys[0])
    return float(value) if value is not None else None


def render(config: AppConfig) -> None:
    st.subheader("Portfolio Performance")
    charts = config.analytics.charts
    columns = st.columns(2)
    for column, (name, title) in zip(columns, PANELS):
        with column:
            chart = charts.get(name)
            if chart is None:
                st.info(f"{title} chart is not configured.")
                continue
            spec = resolve_chart(chart, name)
            render_chart(spec, title=title)
            if name == "revenueGrowth":
                st.caption(f"Latest growth: {format_percent(latest_value(spec))}")
