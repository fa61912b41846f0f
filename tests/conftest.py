"""Pytest fixtures shared across the customization tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest

from dashcustom.schema import (
    AnalyticsConfig,
    AppConfig,
    ChartConfig,
    ClientConfig,
    DashboardConfig,
    TabConfig,
)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment settings from leaking into tests."""

    for name in (
        "DASHCUSTOM_LOG_LEVEL",
        "DASHCUSTOM_KNOWN_FEATURES",
        "DASHCUSTOM_STRICT_UNUSED_COMPONENTS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def render_calls() -> List[str]:
    return []


@pytest.fixture
def components(render_calls: List[str]) -> Dict[str, Callable[[AppConfig], None]]:
    """Return one recording component per tab id used by ``make_config``."""

    def overview(config: AppConfig) -> None:
        render_calls.append("overview")

    def pipeline(config: AppConfig) -> None:
        render_calls.append("pipeline")

    return {"overview": overview, "pipeline": pipeline}


@pytest.fixture
def deals_chart() -> ChartConfig:
    return ChartConfig(
        type="bar",
        data_keys=("count",),
        colors=("#4F46E5",),
        data=({"name": "A", "count": 10}, {"name": "B", "count": 5}),
    )


@pytest.fixture
def make_config(deals_chart: ChartConfig) -> Callable[..., AppConfig]:
    """Return a factory building a valid AppConfig, with keyword overrides."""

    def _make(**overrides: Any) -> AppConfig:
        values: Dict[str, Any] = dict(
            title="Example Dashboard",
            company_name="Example Co",
            logo="/static/logo.png",
            primary_color="#4F46E5",
            secondary_color="#818CF8",
            user_name="Alex Doe",
            dashboard=DashboardConfig(
                tabs=(
                    TabConfig("overview", "Overview", "Top-level view", "home"),
                    TabConfig("pipeline", "Pipeline", "Track deals", "file-text"),
                ),
                charts={"dealsByStage": deals_chart},
            ),
            analytics=AnalyticsConfig(
                charts={
                    "growth": ChartConfig(
                        type="line",
                        data_keys=("growth",),
                        colors=("#4F46E5",),
                        data=({"year": "2021", "growth": 25}, {"year": "2022", "growth": 30}),
                    )
                }
            ),
            clients=(
                ClientConfig("acme", "Acme", "Energy Transition"),
                ClientConfig("globex", "Globex", "Circular Economy"),
            ),
            features={"analytics": True, "reporting": False},
        )
        values.update(overrides)
        return AppConfig(**values)

    return _make
