"""
Customization bundle assembly.

``build()`` validates a configuration against its tab registry and the
host's known feature flags, resolves every chart definition up front, and
returns the single object handed to the host shell. Any defect aborts the
build with one ValidationError listing all of them.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Collection, Dict, List, Mapping, Optional, Union

from dashcustom.chart_spec import RenderSpec, qualify, resolve_chart, validate_chart
from dashcustom.errors import (
    DuplicateClientId,
    DuplicateTabId,
    EmptyDisplayField,
    InvalidAuxiliaryValue,
    InvalidFeatureFlagValue,
    UnknownFeatureFlag,
    UnregisteredTabId,
    UnusedComponent,
    ValidationError,
    ValidationIssue,
)
from dashcustom.registry import TabComponent, TabRegistry
from dashcustom.schema import DISPLAY_FIELDS, AppConfig, AuxiliaryValue
from dashcustom.settings import load_settings

logger = logging.getLogger(__name__)

CHART_SECTIONS = ("dashboard", "analytics")


@dataclass(frozen=True)
class Bundle:
    config: AppConfig
    registry: TabRegistry
    auxiliary_data: Mapping[str, AuxiliaryValue] = field(default_factory=lambda: MappingProxyType({}))
    dashboard_charts: Mapping[str, RenderSpec] = field(default_factory=lambda: MappingProxyType({}))
    analytics_charts: Mapping[str, RenderSpec] = field(default_factory=lambda: MappingProxyType({}))

    def chart(self, section: str, name: str) -> RenderSpec:
        if section == "dashboard":
            return self.dashboard_charts[name]
        if section == "analytics":
            return self.analytics_charts[name]
        raise KeyError(f"unknown chart section '{section}'")


def _duplicates(values: List[str]) -> List[str]:
    counts = Counter(values)
    seen = set()
    dupes = []
    for value in values:
        if counts[value] > 1 and value not in seen:
            seen.add(value)
            dupes.append(value)
    return dupes


def _normalize_auxiliary(key: str, value: Any) -> Union[AuxiliaryValue, InvalidAuxiliaryValue]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return InvalidAuxiliaryValue(key=key, value_type=type(value).__name__)


def validate_config(
    config: AppConfig,
    registry: TabRegistry,
    known_features: Optional[Collection[str]] = None,
    *,
    strict_unused: bool = False,
) -> List[ValidationIssue]:
    """Collect every schema violation in ``config`` wired to ``registry``."""
    issues: List[ValidationIssue] = []

    for attr in DISPLAY_FIELDS:
        value = getattr(config, attr)
        if not isinstance(value, str) or not value.strip():
            issues.append(EmptyDisplayField(field=attr))

    tab_ids = list(config.dashboard.tab_ids)
    issues.extend(DuplicateTabId(tab_id=tab_id) for tab_id in _duplicates(tab_ids))
    seen_missing = set()
    for tab_id in registry.missing(tab_ids):
        if tab_id not in seen_missing:
            seen_missing.add(tab_id)
            issues.append(UnregisteredTabId(tab_id=tab_id))

    unused = registry.unused(tab_ids)
    if strict_unused:
        issues.extend(UnusedComponent(tab_id=tab_id) for tab_id in unused)
    else:
        for tab_id in unused:
            logger.warning("Component registered for '%s' but no tab declares it", tab_id)

    if known_features is not None:
        known = set(known_features)
        issues.extend(UnknownFeatureFlag(flag=flag) for flag in config.features if flag not in known)
    for flag, value in config.features.items():
        if not isinstance(value, bool):
            issues.append(InvalidFeatureFlagValue(flag=flag, value_type=type(value).__name__))

    for section in CHART_SECTIONS:
        charts = getattr(config, section).charts
        for name, chart in charts.items():
            issues.extend(validate_chart(qualify(section, name), chart))

    client_ids = [client.id for client in config.clients]
    issues.extend(DuplicateClientId(client_id=client_id) for client_id in _duplicates(client_ids))
    return issues


def build(
    config: AppConfig,
    components: Union[TabRegistry, Mapping[str, TabComponent]],
    auxiliary_data: Optional[Mapping[str, Any]] = None,
    *,
    known_features: Optional[Collection[str]] = None,
    strict_unused: Optional[bool] = None,
) -> Bundle:
    """Validate and assemble a Bundle.

    Args:
        config: The customization's configuration.
        components: Tab id -> component mapping literal, or a populated TabRegistry.
        auxiliary_data: Extra reference data (str, number or sequence of str values).
        known_features: Feature flag names the host understands. Defaults to settings.
        strict_unused: Treat components without a declared tab as errors. Defaults to settings.

    Raises:
        ValidationError: listing every defect found. No partial bundle is returned.
    """
    settings = load_settings()
    if known_features is None:
        known_features = settings.known_features
    if strict_unused is None:
        strict_unused = settings.strict_unused_components

    registry = components if isinstance(components, TabRegistry) else TabRegistry.from_mapping(components)
    issues = validate_config(config, registry, known_features, strict_unused=strict_unused)

    aux: Dict[str, AuxiliaryValue] = {}
    for key, value in (auxiliary_data or {}).items():
        normalized = _normalize_auxiliary(key, value)
        if isinstance(normalized, InvalidAuxiliaryValue):
            issues.append(normalized)
        else:
            aux[key] = normalized

    if issues:
        for issue in issues:
            logger.warning("Customization issue: %s", issue)
        raise ValidationError(issues)

    bundle = Bundle(
        config=config,
        registry=registry.bind(config.dashboard.tabs),
        auxiliary_data=MappingProxyType(aux),
        dashboard_charts=MappingProxyType(
            {name: resolve_chart(chart, name, "dashboard") for name, chart in config.dashboard.charts.items()}
        ),
        analytics_charts=MappingProxyType(
            {name: resolve_chart(chart, name, "analytics") for name, chart in config.analytics.charts.items()}
        ),
    )
    logger.info(
        "Built customization bundle for %s: %d tabs, %d charts",
        config.company_name,
        len(config.dashboard.tabs),
        len(bundle.dashboard_charts) + len(bundle.analytics_charts),
    )
    return bundle
