"""
Tab registry: maps a tab id to the component rendered in the main content
area when that tab is active.

Registries are built once from a static mapping literal and are read-only
afterwards. Lookups that cannot be satisfied raise TabNotFound instead of
returning a blank component.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from dashcustom.errors import DuplicateRegistration, RegistryFrozen, TabNotFound
from dashcustom.schema import AppConfig, TabConfig

logger = logging.getLogger(__name__)

# A tab component renders itself from the configuration it is given.
TabComponent = Callable[[AppConfig], None]


class TabRegistry:
    def __init__(self, declared_ids: Optional[Iterable[str]] = None):
        self._components: Dict[str, TabComponent] = {}
        self._declared: Optional[FrozenSet[str]] = (
            frozenset(declared_ids) if declared_ids is not None else None
        )
        self._frozen = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, TabComponent]) -> "TabRegistry":
        registry = cls()
        for tab_id, component in mapping.items():
            registry.register(tab_id, component)
        registry.freeze()
        return registry

    def register(self, tab_id: str, component: TabComponent) -> None:
        if self._frozen:
            raise RegistryFrozen(f"cannot register '{tab_id}': registry is read-only")
        if tab_id in self._components:
            raise DuplicateRegistration(tab_id)
        if not callable(component):
            raise TypeError(f"component for tab '{tab_id}' must be callable")
        self._components[tab_id] = component
        logger.debug("Registered tab component %r -> %s", tab_id, getattr(component, "__qualname__", component))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def bind(self, tabs: Iterable[TabConfig]) -> "TabRegistry":
        """Return a frozen copy that only resolves ids declared by ``tabs``."""
        bound = TabRegistry(declared_ids=[tab.id for tab in tabs])
        bound._components = dict(self._components)
        bound.freeze()
        return bound

    def resolve(self, tab_id: str) -> TabComponent:
        if self._declared is not None and tab_id not in self._declared:
            raise TabNotFound(tab_id, "no tab declares this id")
        component = self._components.get(tab_id)
        if component is None:
            raise TabNotFound(tab_id, "no component is registered for this id")
        return component

    def missing(self, tab_ids: Iterable[str]) -> List[str]:
        """Declared ids with no registered component, in declaration order."""
        return [tab_id for tab_id in tab_ids if tab_id not in self._components]

    def unused(self, tab_ids: Iterable[str]) -> List[str]:
        """Registered ids that none of ``tab_ids`` declares."""
        declared = set(tab_ids)
        return [tab_id for tab_id in self._components if tab_id not in declared]

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._components)

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TabRegistry):
            return NotImplemented
        return self._components == other._components and self._declared == other._declared

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TabRegistry(ids={list(self._components)!r}, frozen={self._frozen})"
