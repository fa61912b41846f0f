"""Tests for the configuration schema types."""

from __future__ import annotations

import copy
import dataclasses

import pytest

from dashcustom.errors import MalformedConfig, ValidationError
from dashcustom.schema import AppConfig, ChartConfig, TabConfig

pytestmark = pytest.mark.unit

RAW_CONFIG = {
    "title": "PE Origination",
    "companyName": "Bridges Fund Management",
    "logo": "/path/to/logo.png",
    "primaryColor": "#4F46E5",
    "secondaryColor": "#818CF8",
    "userName": "Kyle Bentwood",
    "dashboard": {
        "tabs": [
            {"id": "companySearch", "label": "Company Search", "description": "Find", "icon": "search"},
        ],
        "charts": {
            "dealsByStage": {
                "type": "bar",
                "dataKeys": ["count"],
                "colors": ["#4F46E5"],
                "data": [{"name": "Initial Contact", "count": 10}],
            }
        },
    },
    "analytics": {"charts": {}},
    "clients": [{"id": "ecotech", "name": "EcoTech Solutions", "industry": "Energy Transition"}],
    "features": {"dataImport": True, "templates": 0},
}


def test_from_mapping_reads_camel_case_keys() -> None:
    """Accept configuration literals written with camelCase keys."""

    config = AppConfig.from_mapping(RAW_CONFIG)

    assert config.company_name == "Bridges Fund Management"
    assert config.user_name == "Kyle Bentwood"
    assert config.dashboard.tab_ids == ("companySearch",)
    assert config.dashboard.tabs[0].icon == "search"
    chart = config.dashboard.charts["dealsByStage"]
    assert chart.data_keys == ("count",)
    assert chart.data[0]["name"] == "Initial Contact"
    assert config.clients[0].industry == "Energy Transition"
    assert config.features == {"dataImport": True, "templates": 0}


def test_feature_enabled_defaults_to_false() -> None:
    config = AppConfig.from_mapping(RAW_CONFIG)

    assert config.feature_enabled("dataImport") is True
    assert config.feature_enabled("templates") is False
    assert config.feature_enabled("unknown") is False


def test_configuration_is_immutable() -> None:
    """Expose no setters after construction."""

    config = AppConfig.from_mapping(RAW_CONFIG)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.title = "changed"  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.features["dataImport"] = False  # type: ignore[index]
    with pytest.raises(TypeError):
        config.dashboard.charts["new"] = None  # type: ignore[index]
    with pytest.raises(TypeError):
        config.dashboard.charts["dealsByStage"].data[0]["count"] = 99  # type: ignore[index]


def test_chart_rows_are_copied_from_the_source_literal() -> None:
    row = {"name": "A", "count": 1}
    chart = ChartConfig(type="bar", data_keys=["count"], colors=["#000"], data=[row])
    row["count"] = 2

    assert chart.data[0]["count"] == 1
    assert isinstance(chart.data_keys, tuple)


def test_tab_defaults() -> None:
    tab = TabConfig.from_mapping({"id": "x", "label": "X"})

    assert tab.description == ""
    assert tab.icon is None


def test_feature_values_are_kept_as_authored() -> None:
    """A non-bool flag value is stored untouched and never reads as enabled."""

    config = AppConfig.from_mapping({**RAW_CONFIG, "features": {"analytics": "false", "reporting": "true"}})

    assert config.features == {"analytics": "false", "reporting": "true"}
    assert config.feature_enabled("analytics") is False
    assert config.feature_enabled("reporting") is False


def test_missing_tab_id_is_reported_with_its_path() -> None:
    raw = copy.deepcopy(RAW_CONFIG)
    raw["dashboard"]["tabs"] = [{"label": "No id"}]

    with pytest.raises(ValidationError) as excinfo:
        AppConfig.from_mapping(raw)

    assert excinfo.value.of_kind(MalformedConfig) == [
        MalformedConfig(path="dashboard.tabs[0]", detail="missing required key 'id'")
    ]


def test_string_data_keys_are_rejected_instead_of_split() -> None:
    """``dataKeys: "count"`` would otherwise become the series ("c", "o", "u", "n", "t")."""

    raw = copy.deepcopy(RAW_CONFIG)
    raw["dashboard"]["charts"]["dealsByStage"]["dataKeys"] = "count"

    with pytest.raises(ValidationError) as excinfo:
        AppConfig.from_mapping(raw)

    issues = excinfo.value.of_kind(MalformedConfig)
    assert [issue.path for issue in issues] == ["dashboard.charts.dealsByStage.dataKeys"]


def test_non_mapping_chart_row_is_rejected() -> None:
    raw = copy.deepcopy(RAW_CONFIG)
    raw["dashboard"]["charts"]["dealsByStage"]["data"] = [{"name": "A", "count": 1}, ["B", 2]]

    with pytest.raises(ValidationError) as excinfo:
        AppConfig.from_mapping(raw)

    assert [issue.path for issue in excinfo.value.of_kind(MalformedConfig)] == [
        "dashboard.charts.dealsByStage.data[1]"
    ]


def test_malformed_input_is_aggregated_into_one_validation_error() -> None:
    """Parse failures surface as one ValidationError, never as a bare KeyError or TypeError."""

    raw = copy.deepcopy(RAW_CONFIG)
    raw["dashboard"]["tabs"] = [{"label": "No id"}, "overview"]
    raw["dashboard"]["charts"]["dealsByStage"]["colors"] = "#4F46E5"
    raw["analytics"] = {"charts": {"growth": ["line"]}}
    raw["clients"] = [{"name": "No id"}]
    raw["features"] = ["dataImport"]

    with pytest.raises(ValidationError) as excinfo:
        AppConfig.from_mapping(raw)

    assert [issue.path for issue in excinfo.value.of_kind(MalformedConfig)] == [
        "dashboard.tabs[0]",
        "dashboard.tabs[1]",
        "dashboard.charts.dealsByStage.colors",
        "analytics.charts.growth",
        "clients[0]",
        "features",
    ]


def test_chart_constructor_rejects_string_sequences() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ChartConfig(type="bar", data_keys="count")  # type: ignore[arg-type]

    assert excinfo.value.of_kind(MalformedConfig)[0].path == "chart.dataKeys"


def test_non_mapping_config_is_malformed() -> None:
    with pytest.raises(ValidationError) as excinfo:
        AppConfig.from_mapping(["not", "a", "mapping"])

    assert excinfo.value.of_kind(MalformedConfig) == [
        MalformedConfig(path="config", detail="expected a mapping, got list")
    ]
