"""Entry point for the fastsale Textual app."""

from __future__ import annotations

import sys

from fastsale.composition import AddonSelection
from fastsale.config import CATALOG_PATH
from fastsale.data import DEMO_CATALOG, Catalog, CatalogError, load_catalog
from fastsale.event_context import EventContext
from fastsale.ledger import CartLedger
from fastsale.pos_app import FastSaleApp


def build_app(catalog_path: str | None = CATALOG_PATH) -> FastSaleApp:
    """Wire the catalog, basket and composition state into the app."""
    catalog: Catalog = DEMO_CATALOG if catalog_path is None else load_catalog(catalog_path)
    return FastSaleApp(
        catalog=catalog,
        ledger=CartLedger(),
        event_context=EventContext(),
        addon_selection=AddonSelection(),
    )


def main() -> None:
    """Run the Textual application."""
    try:
        app = build_app()
    except CatalogError as exc:
        print(f"fastsale: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    app.run()


if __name__ == "__main__":
    main()
