"""
Error taxonomy for customization bundles.

Authoring defects are collected as immutable issue records and raised
together in a single ValidationError so a customization author sees every
problem in one pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Type


class ConfigurationError(Exception):
    """Base class for customization/configuration defects."""


@dataclass(frozen=True)
class ValidationIssue:
    kind = "ValidationIssue"

    @property
    def message(self) -> str:
        return self.kind

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass(frozen=True)
class EmptyDisplayField(ValidationIssue):
    field: str
    kind = "EmptyDisplayField"

    @property
    def message(self) -> str:
        return f"display field '{self.field}' must be a non-empty string"


@dataclass(frozen=True)
class DuplicateTabId(ValidationIssue):
    tab_id: str
    kind = "DuplicateTabId"

    @property
    def message(self) -> str:
        return f"tab id '{self.tab_id}' is declared more than once"


@dataclass(frozen=True)
class UnregisteredTabId(ValidationIssue):
    tab_id: str
    kind = "UnregisteredTabId"

    @property
    def message(self) -> str:
        return f"tab id '{self.tab_id}' has no registered component"


@dataclass(frozen=True)
class UnusedComponent(ValidationIssue):
    tab_id: str
    kind = "UnusedComponent"

    @property
    def message(self) -> str:
        return f"component registered for '{self.tab_id}' but no tab declares it"


@dataclass(frozen=True)
class UnknownFeatureFlag(ValidationIssue):
    flag: str
    kind = "UnknownFeatureFlag"

    @property
    def message(self) -> str:
        return f"feature flag '{self.flag}' is not known to the host"


@dataclass(frozen=True)
class InvalidFeatureFlagValue(ValidationIssue):
    flag: str
    value_type: str
    kind = "InvalidFeatureFlagValue"

    @property
    def message(self) -> str:
        return f"feature flag '{self.flag}' must be a bool, got {self.value_type}"


@dataclass(frozen=True)
class MalformedConfig(ValidationIssue):
    path: str
    detail: str
    kind = "MalformedConfig"

    @property
    def message(self) -> str:
        return f"{self.path}: {self.detail}"


@dataclass(frozen=True)
class UnsupportedChartType(ValidationIssue):
    chart: str
    chart_type: str
    kind = "UnsupportedChartType"

    @property
    def message(self) -> str:
        return f"chart '{self.chart}' uses unsupported type '{self.chart_type}'"


@dataclass(frozen=True)
class ChartFieldMismatch(ValidationIssue):
    chart: str
    field: str
    row: int
    kind = "ChartFieldMismatch"

    @property
    def message(self) -> str:
        return f"chart '{self.chart}' data key '{self.field}' is missing from row {self.row}"


@dataclass(frozen=True)
class EmptyChartSeries(ValidationIssue):
    chart: str
    kind = "EmptyChartSeries"

    @property
    def message(self) -> str:
        return f"chart '{self.chart}' declares no data keys"


@dataclass(frozen=True)
class DuplicateClientId(ValidationIssue):
    client_id: str
    kind = "DuplicateClientId"

    @property
    def message(self) -> str:
        return f"client id '{self.client_id}' is declared more than once"


@dataclass(frozen=True)
class InvalidAuxiliaryValue(ValidationIssue):
    key: str
    value_type: str
    kind = "InvalidAuxiliaryValue"

    @property
    def message(self) -> str:
        return (
            f"auxiliary value '{self.key}' has type {self.value_type}; "
            "expected str, number or a sequence of str"
        )


class ValidationError(ConfigurationError):
    """Aggregate failure listing every issue found while building a bundle."""

    def __init__(self, issues: Iterable[ValidationIssue]):
        self.issues: Tuple[ValidationIssue, ...] = tuple(issues)
        lines = [str(issue) for issue in self.issues]
        summary = f"{len(self.issues)} customization issue(s)"
        super().__init__(summary + (":\n- " + "\n- ".join(lines) if lines else ""))

    def of_kind(self, issue_type: Type[ValidationIssue]) -> List[ValidationIssue]:
        return [issue for issue in self.issues if isinstance(issue, issue_type)]

    def has(self, issue_type: Type[ValidationIssue]) -> bool:
        return bool(self.of_kind(issue_type))


class TabNotFound(ConfigurationError, KeyError):
    def __init__(self, tab_id: str, reason: Optional[str] = None):
        self.tab_id = tab_id
        self.reason = reason or "not declared"
        super().__init__(f"tab '{tab_id}' cannot be resolved: {self.reason}")

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateRegistration(ConfigurationError):
    def __init__(self, tab_id: str):
        self.tab_id = tab_id
        super().__init__(f"a component is already registered for tab '{tab_id}'")


class RegistryFrozen(ConfigurationError):
    """Raised when registering after the one-time population step."""
