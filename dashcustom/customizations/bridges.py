"""
Bridges Fund Management PE origination dashboard.
"""

from __future__ import annotations

from typing import Collection, Dict, Optional

from dashcustom.bundle import Bundle, build
from dashcustom.registry import TabComponent
from dashcustom.schema import (
    AnalyticsConfig,
    AppConfig,
    AuxiliaryValue,
    ChartConfig,
    ClientConfig,
    DashboardConfig,
    TabConfig,
)
from dashcustom.ui.pages import company_search, deal_pipeline, portfolio_performance

PRIMARY_COLOR = "#4F46E5"
SECONDARY_COLOR = "#818CF8"

# Ordered tab definitions for the dashboard
TABS = (
    TabConfig("companySearch", "Company Search", "Find potential investments", "search"),
    TabConfig("dealPipeline", "Deal Pipeline", "Track potential investments", "file-text"),
    TabConfig("portfolioPerformance", "Portfolio Performance", "Monitor existing investments", "bar-chart-2"),
)

CONFIG = AppConfig(
    title="Bridges Fund Management - PE Origination",
    company_name="Bridges Fund Management",
    logo="/path/to/bridges-logo.png",
    primary_color=PRIMARY_COLOR,
    secondary_color=SECONDARY_COLOR,
    user_name="Kyle Bentwood",
    dashboard=DashboardConfig(
        tabs=TABS,
        charts={
            "dealsByStage": ChartConfig(
                type="bar",
                data_keys=("count",),
                colors=(PRIMARY_COLOR,),
                data=(
                    {"name": "Initial Contact", "count": 10},
                    {"name": "Proposal", "count": 5},
                    {"name": "Negotiation", "count": 3},
                    {"name": "Closed", "count": 2},
                ),
            ),
            "investmentByTheme": ChartConfig(
                type="pie",
                data_keys=("value",),
                colors=(PRIMARY_COLOR, SECONDARY_COLOR, "#C7D2FE"),
                data=(
                    {"name": "Energy Transition", "value": 40},
                    {"name": "Circular Economy", "value": 30},
                    {"name": "Decarbonizing Built Environment", "value": 30},
                ),
            ),
        },
    ),
    analytics=AnalyticsConfig(
        charts={
            "revenueGrowth": ChartConfig(
                type="line",
                data_keys=("growth",),
                colors=(PRIMARY_COLOR,),
                data=(
                    {"year": "2019", "growth": 20},
                    {"year": "2020", "growth": 18},
                    {"year": "2021", "growth": 25},
                    {"year": "2022", "growth": 30},
                ),
            ),
            "carbonReduction": ChartConfig(
                type="bar",
                data_keys=("reduction",),
                colors=(SECONDARY_COLOR,),
                data=(
                    {"year": "2019", "reduction": 1000},
                    {"year": "2020", "reduction": 1500},
                    {"year": "2021", "reduction": 2000},
                    {"year": "2022", "reduction": 2500},
                ),
            ),
        }
    ),
    clients=(
        ClientConfig("ecotech", "EcoTech Solutions", "Energy Transition"),
        ClientConfig("circularware", "CircularWare", "Circular Economy"),
        ClientConfig("greenbuild", "GreenBuild Systems", "Decarbonizing Built Environment"),
    ),
    features={
        "dataImport": True,
        "analytics": True,
        "reporting": True,
        "templates": True,
    },
)

COMPONENTS: Dict[str, TabComponent] = {
    "companySearch": company_search.render,
    "dealPipeline": deal_pipeline.render,
    "portfolioPerformance": portfolio_performance.render,
}

AUXILIARY_DATA: Dict[str, AuxiliaryValue] = {
    "investmentStages": ("Initial Contact", "Proposal", "Negotiation", "Due Diligence", "Closed"),
    "investmentThemes": ("Energy Transition", "Circular Economy", "Decarbonizing Built Environment"),
    "performanceMetrics": ("Revenue Growth", "Carbon Reduction Impact", "Jobs Created", "ESG Score"),
}


def build_bundle(known_features: Optional[Collection[str]] = None) -> Bundle:
    return build(CONFIG, COMPONENTS, AUXILIARY_DATA, known_features=known_features)
