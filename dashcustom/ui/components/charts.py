"""
Plotly figures built from resolved RenderSpecs, with consistent styling for
the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from dashcustom.chart_spec import DEFAULT_COLOR_SEQUENCE, RenderSpec, distinct

DEFAULT_TEMPLATE = "plotly_white"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=list(DEFAULT_COLOR_SEQUENCE),
        title=title,
        legend_title=legend_title,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def spec_frame(spec: RenderSpec) -> pd.DataFrame:
    columns = list(spec.data[0].keys()) if spec.data else [spec.category_key, *spec.data_keys]
    return pd.DataFrame(spec.records(), columns=[col for col in columns if col])


def figure_from_spec(spec: RenderSpec, title: Optional[str] = None) -> go.Figure:
    """Build a Plotly figure that draws ``spec`` in declaration order."""
    df = spec_frame(spec)
    x = spec.category_key
    series = list(spec.data_keys)
    category_orders = {x: list(distinct(spec.categories))} if x else None

    if spec.kind == "pie":
        fig = px.pie(
            df,
            names=x,
            values=series[0],
            color=x,
            color_discrete_map=dict(spec.category_colors) if x else None,
            color_discrete_sequence=list(spec.colors),
            category_orders=category_orders,
        )
        fig.update_traces(sort=False)
        return _configure_layout(fig, title)

    if spec.kind == "line":
        fig = px.line(
            df,
            x=x,
            y=series,
            markers=True,
            color_discrete_sequence=list(spec.colors),
            category_orders=category_orders,
        )
        fig.update_layout(hovermode="x unified")
    elif spec.kind == "area":
        fig = px.area(
            df,
            x=x,
            y=series,
            color_discrete_sequence=list(spec.colors),
            category_orders=category_orders,
        )
    else:
        fig = px.bar(
            df,
            x=x,
            y=series,
            barmode="group",
            color_discrete_sequence=list(spec.colors),
            category_orders=category_orders,
        )
    return _configure_layout(fig, title, legend_title="" if len(series) == 1 else None)


def render_chart(spec: RenderSpec, title: Optional[str] = None) -> None:
    render_plotly(figure_from_spec(spec, title))
