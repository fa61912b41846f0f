"""Tests for the bundled Bridges Fund Management customization."""

from __future__ import annotations

import pytest

from dashcustom.customizations import bridges
from dashcustom.ui.pages import company_search, deal_pipeline, portfolio_performance

pytestmark = pytest.mark.unit


def test_bundle_builds_and_wires_every_tab() -> None:
    bundle = bridges.build_bundle()

    assert bundle.config.dashboard.tab_ids == ("companySearch", "dealPipeline", "portfolioPerformance")
    assert bundle.registry.resolve("companySearch") is company_search.render
    assert bundle.registry.resolve("dealPipeline") is deal_pipeline.render
    assert bundle.registry.resolve("portfolioPerformance") is portfolio_performance.render


def test_bundle_exposes_resolved_charts() -> None:
    bundle = bridges.build_bundle()

    deals = bundle.chart("dashboard", "dealsByStage")
    assert deals.categories == ("Initial Contact", "Proposal", "Negotiation", "Closed")
    assert dict(deals.series_colors) == {"count": "#4F46E5"}

    themes = bundle.chart("dashboard", "investmentByTheme")
    assert themes.kind == "pie"
    assert themes.colors == ("#4F46E5", "#818CF8", "#C7D2FE")

    growth = bundle.chart("analytics", "revenueGrowth")
    assert growth.category_key == "year"
    assert portfolio_performance.latest_value(growth) == 30.0


def test_auxiliary_data_is_kept_as_string_sequences() -> None:
    bundle = bridges.build_bundle()

    assert bundle.auxiliary_data["investmentStages"][0] == "Initial Contact"
    assert "ESG Score" in bundle.auxiliary_data["performanceMetrics"]
    assert set(bundle.auxiliary_data) == {"investmentStages", "investmentThemes", "performanceMetrics"}


def test_all_feature_flags_are_known_to_the_default_host() -> None:
    bundle = bridges.build_bundle()

    assert all(bundle.config.features.values())
