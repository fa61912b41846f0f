from dashcustom.bootstrap_env import ensure_env

ensure_env()  # must run before anything reads settings

import streamlit as st  # noqa: E402

from dashcustom.bundle import Bundle  # noqa: E402
from dashcustom.customizations.bridges import build_bundle  # noqa: E402
from dashcustom.errors import TabNotFound, ValidationError  # noqa: E402
from dashcustom.ui.components.charts import render_chart  # noqa: E402
from dashcustom.ui.layout import humanize, setup_page, sidebar_branding, tab_labels  # noqa: E402


def _load_bundle() -> Bundle:
    try:
        return build_bundle()
    except ValidationError as exc:
        st.set_page_config(page_title="Customization error", layout="wide")
        st.error("The dashboard customization is invalid and cannot be loaded.")
        for issue in exc.issues:
            st.write(f"- **{issue.kind}**: {issue.message}")
        st.stop()
        raise


def _overview_charts(bundle: Bundle) -> None:
    charts = list(bundle.dashboard_charts.values())
    if not charts:
        return
    columns = st.columns(len(charts))
    for column, spec in zip(columns, charts):
        with column:
            render_chart(spec, title=humanize(spec.name))


def main() -> None:
    bundle = _load_bundle()
    config = bundle.config

    setup_page(config)
    sidebar_branding(config)
    st.title(config.title)

    _overview_charts(bundle)

    tabs = config.dashboard.tabs
    streamlit_tabs = st.tabs(tab_labels(tabs))
    for streamlit_tab, tab_config in zip(streamlit_tabs, tabs):
        with streamlit_tab:
            if tab_config.description:
                st.caption(tab_config.description)
            try:
                component = bundle.registry.resolve(tab_config.id)
            except TabNotFound as exc:
                st.error(str(exc))
                continue
            component(config)


if __name__ == "__main__":
    main()
