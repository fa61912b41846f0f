"""
Application-wide settings read from the environment.

Values come from os.environ after ``bootstrap_env.ensure_env()`` has bridged
Streamlit secrets and loaded ``.env``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

DEFAULT_KNOWN_FEATURES: FrozenSet[str] = frozenset({"dataImport", "analytics", "reporting", "templates"})

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    known_features: FrozenSet[str] = DEFAULT_KNOWN_FEATURES
    strict_unused_components: bool = False


def _parse_features(raw: Optional[str]) -> FrozenSet[str]:
    if raw is None or not raw.strip():
        return DEFAULT_KNOWN_FEATURES
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=env.get("DASHCUSTOM_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        known_features=_parse_features(env.get("DASHCUSTOM_KNOWN_FEATURES")),
        strict_unused_components=env.get("DASHCUSTOM_STRICT_UNUSED_COMPONENTS", "").strip().lower() in _TRUTHY,
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
