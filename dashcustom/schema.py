"""
Schema types for a dashboard customization.

A customization is described by one immutable AppConfig instance. Plain
nested dicts (using the camelCase keys customization authors write, e.g.
``companyName`` or ``dataKeys``) can be turned into the typed form with the
``from_mapping`` constructors; malformed input raises a ValidationError
listing every MalformedConfig issue found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from dashcustom.errors import MalformedConfig, ValidationError, ValidationIssue

# Symbolic name from an external icon catalog (e.g. "search", "bar-chart-2").
# Stored and forwarded to the host, never interpreted here.
IconRef = str

ChartType = str
SUPPORTED_CHART_TYPES: Tuple[ChartType, ...] = ("bar", "line", "area", "pie")

AuxiliaryValue = Union[str, int, float, Tuple[str, ...]]

Row = Mapping[str, Any]

T = TypeVar("T")


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _require_mapping(raw: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ValidationError([MalformedConfig(path, f"expected a mapping, got {_type_name(raw)}")])
    return raw


def _collect(issues: List[ValidationIssue], parse: Callable[[Any, str], T], raw: Any, path: str) -> Optional[T]:
    try:
        return parse(raw, path)
    except ValidationError as exc:
        issues.extend(exc.issues)
        return None


def _chart_shape_issues(data_keys: Any, colors: Any, data: Any, path: str) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if not _is_sequence(data_keys):
        issues.append(MalformedConfig(f"{path}.dataKeys", f"expected a list of field names, got {_type_name(data_keys)}"))
    if not _is_sequence(colors):
        issues.append(MalformedConfig(f"{path}.colors", f"expected a list of colors, got {_type_name(colors)}"))
    if not _is_sequence(data):
        issues.append(MalformedConfig(f"{path}.data", f"expected a list of rows, got {_type_name(data)}"))
    else:
        for idx, row in enumerate(data):
            if not isinstance(row, Mapping):
                issues.append(MalformedConfig(f"{path}.data[{idx}]", f"expected a mapping, got {_type_name(row)}"))
    return issues


@dataclass(frozen=True)
class TabConfig:
    id: str
    label: str
    description: str = ""
    icon: Optional[IconRef] = None

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "tab") -> "TabConfig":
        raw = _require_mapping(raw, path)
        if "id" not in raw:
            raise ValidationError([MalformedConfig(path, "missing required key 'id'")])
        return cls(
            id=str(raw["id"]),
            label=str(raw.get("label", "")),
            description=str(raw.get("description", "")),
            icon=raw.get("icon"),
        )


@dataclass(frozen=True)
class ChartConfig:
    """Declarative chart definition.

    Args:
        type: Chart kind, one of SUPPORTED_CHART_TYPES for a valid chart.
        data_keys: Ordered series fields; the order is the legend/stacking order.
        colors: Ordered palette, assigned by series index (by distinct category for pie charts).
        data: Ordered rows; rendered in declaration order.
        category_key: Field used for the x axis / pie labels. Inferred when omitted.

    Raises:
        ValidationError: data_keys, colors or data is a string or not a sequence,
            or a row is not a mapping.
    """

    type: ChartType
    data_keys: Tuple[str, ...]
    colors: Tuple[str, ...] = ()
    data: Tuple[Row, ...] = ()
    category_key: Optional[str] = None

    def __post_init__(self) -> None:
        issues = _chart_shape_issues(self.data_keys, self.colors, self.data, "chart")
        if issues:
            raise ValidationError(issues)
        object.__setattr__(self, "data_keys", tuple(self.data_keys))
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "data", tuple(MappingProxyType(dict(row)) for row in self.data))

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "chart") -> "ChartConfig":
        raw = _require_mapping(raw, path)
        data_keys = raw.get("dataKeys", raw.get("data_keys", ()))
        colors = raw.get("colors", ())
        data = raw.get("data", ())
        issues = _chart_shape_issues(data_keys, colors, data, path)
        if issues:
            raise ValidationError(issues)
        return cls(
            type=str(raw.get("type", "")),
            data_keys=tuple(data_keys),
            colors=tuple(colors),
            data=tuple(data),
            category_key=raw.get("categoryKey", raw.get("category_key")),
        )


@dataclass(frozen=True)
class ClientConfig:
    id: str
    name: str
    industry: str = ""

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "client") -> "ClientConfig":
        raw = _require_mapping(raw, path)
        if "id" not in raw:
            raise ValidationError([MalformedConfig(path, "missing required key 'id'")])
        return cls(id=str(raw["id"]), name=str(raw.get("name", "")), industry=str(raw.get("industry", "")))


def _charts_from_mapping(raw: Any, path: str) -> Mapping[str, ChartConfig]:
    raw = _require_mapping(raw if raw is not None else {}, path)
    issues: List[ValidationIssue] = []
    charts: Dict[str, ChartConfig] = {}
    for name, chart in raw.items():
        if isinstance(chart, ChartConfig):
            charts[name] = chart
            continue
        parsed = _collect(issues, ChartConfig.from_mapping, chart, f"{path}.{name}")
        if parsed is not None:
            charts[name] = parsed
    if issues:
        raise ValidationError(issues)
    return MappingProxyType(charts)


@dataclass(frozen=True)
class DashboardConfig:
    tabs: Tuple[TabConfig, ...] = ()
    charts: Mapping[str, ChartConfig] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "tabs", tuple(self.tabs))
        object.__setattr__(self, "charts", MappingProxyType(dict(self.charts)))

    @property
    def tab_ids(self) -> Tuple[str, ...]:
        return tuple(tab.id for tab in self.tabs)

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "dashboard") -> "DashboardConfig":
        raw = _require_mapping(raw, path)
        issues: List[ValidationIssue] = []
        raw_tabs = raw.get("tabs", ())
        tabs: List[TabConfig] = []
        if not _is_sequence(raw_tabs):
            issues.append(MalformedConfig(f"{path}.tabs", f"expected a list of tabs, got {_type_name(raw_tabs)}"))
        else:
            for idx, tab in enumerate(raw_tabs):
                parsed = tab if isinstance(tab, TabConfig) else _collect(
                    issues, TabConfig.from_mapping, tab, f"{path}.tabs[{idx}]"
                )
                if parsed is not None:
                    tabs.append(parsed)
        charts = _collect(issues, _charts_from_mapping, raw.get("charts"), f"{path}.charts")
        if issues:
            raise ValidationError(issues)
        return cls(tabs=tuple(tabs), charts=charts or {})


@dataclass(frozen=True)
class AnalyticsConfig:
    charts: Mapping[str, ChartConfig] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "charts", MappingProxyType(dict(self.charts)))

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "analytics") -> "AnalyticsConfig":
        raw = _require_mapping(raw, path)
        return cls(charts=_charts_from_mapping(raw.get("charts"), f"{path}.charts"))


@dataclass(frozen=True)
class AppConfig:
    title: str
    company_name: str
    logo: str
    primary_color: str
    secondary_color: str
    user_name: str
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    clients: Tuple[ClientConfig, ...] = ()
    # Values are kept as authored; non-bool values are reported at bundle build.
    features: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "clients", tuple(self.clients))
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))

    def feature_enabled(self, name: str) -> bool:
        return self.features.get(name) is True

    @classmethod
    def from_mapping(cls, raw: Any, path: str = "config") -> "AppConfig":
        raw = _require_mapping(raw, path)
        issues: List[ValidationIssue] = []

        dashboard = _collect(issues, DashboardConfig.from_mapping, raw.get("dashboard", {}), "dashboard")
        analytics = _collect(issues, AnalyticsConfig.from_mapping, raw.get("analytics", {}), "analytics")

        clients: List[ClientConfig] = []
        raw_clients = raw.get("clients", ())
        if not _is_sequence(raw_clients):
            issues.append(MalformedConfig("clients", f"expected a list of clients, got {_type_name(raw_clients)}"))
        else:
            for idx, client in enumerate(raw_clients):
                parsed = client if isinstance(client, ClientConfig) else _collect(
                    issues, ClientConfig.from_mapping, client, f"clients[{idx}]"
                )
                if parsed is not None:
                    clients.append(parsed)

        features = raw.get("features", {})
        if not isinstance(features, Mapping):
            issues.append(MalformedConfig("features", f"expected a mapping, got {_type_name(features)}"))

        if issues:
            raise ValidationError(issues)
        return cls(
            title=str(raw.get("title", "")),
            company_name=str(raw.get("companyName", raw.get("company_name", ""))),
            logo=str(raw.get("logo", "")),
            primary_color=str(raw.get("primaryColor", raw.get("primary_color", ""))),
            secondary_color=str(raw.get("secondaryColor", raw.get("secondary_color", ""))),
            user_name=str(raw.get("userName", raw.get("user_name", ""))),
            dashboard=dashboard or DashboardConfig(),
            analytics=analytics or AnalyticsConfig(),
            clients=tuple(clients),
            features=dict(features),
        )


# Display fields that must be non-empty strings.
DISPLAY_FIELDS: Tuple[str, ...] = ("title", "company_name", "user_name")
