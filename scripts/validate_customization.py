"""Quick validation script for the bundled customization.

Run with `python scripts/validate_customization.py` to ensure the
configuration, tab registry and chart definitions wire together.
"""

from __future__ import annotations

from dashcustom.customizations.bridges import build_bundle
from dashcustom.errors import ValidationError
from dashcustom.settings import configure_logging


def main() -> None:
    configure_logging()
    try:
        bundle = build_bundle()
    except ValidationError as exc:
        raise SystemExit(str(exc))

    for tab in bundle.config.dashboard.tabs:
        component = bundle.registry.resolve(tab.id)
        print(f"{tab.id:<24} -> {component.__module__}.{component.__name__}")
    for section in ("dashboard", "analytics"):
        charts = getattr(bundle, f"{section}_charts")
        for name, spec in charts.items():
            print(f"{section}.{name:<18} {spec.kind:<5} series={list(spec.data_keys)} colors={list(spec.colors)}")

    print("Customization validation passed.")


if __name__ == "__main__":
    main()
