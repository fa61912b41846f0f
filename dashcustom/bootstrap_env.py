"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- Load .env (without overriding existing env vars)
- Configure logging from the resulting settings
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterator, Mapping, MutableMapping, Optional, Tuple

import streamlit as st
from dotenv import load_dotenv
from streamlit.errors import StreamlitAPIException

from dashcustom.settings import configure_logging, load_settings


def _sanitize_key(key: str) -> str:
    # Uppercase and replace non-alphanumeric with underscores
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(val, Mapping):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def bridge_secrets(
    secrets: Optional[Mapping[str, Any]],
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """Copy secrets into ``environ`` without overriding values already set."""
    env = os.environ if environ is None else environ
    for key, value in (secrets or {}).items():
        for flat_k, flat_v in _flatten_secrets(key, value):
            env.setdefault(flat_k, flat_v)


def _streamlit_secrets() -> Optional[Mapping[str, Any]]:
    try:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return None
        return secrets.to_dict()
    except (FileNotFoundError, StreamlitAPIException):
        return None


def ensure_env() -> None:
    """Idempotent: make sure env vars are available and logging is configured."""
    bridge_secrets(_streamlit_secrets())
    # load_dotenv will not override existing env vars by default
    load_dotenv()
    configure_logging(load_settings())
