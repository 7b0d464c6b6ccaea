"""Runtime configuration defaults for catalog loading, display and debug logging."""

from __future__ import annotations

import os

_CATALOG_PATH_ENV = "FASTSALE_CATALOG_PATH"
_CURRENCY_SYMBOL_ENV = "FASTSALE_CURRENCY_SYMBOL"
_DEBUG_LOG_ENV = "FASTSALE_DEBUG_LOG"

# JSON export of the catalog service. The built-in demo catalog is used when unset.
CATALOG_PATH: str | None = os.environ.get(_CATALOG_PATH_ENV) or None

CURRENCY_SYMBOL = os.environ.get(_CURRENCY_SYMBOL_ENV, "R$")
FREE_LABEL = "Free"

DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "/tmp/fastsale-debug.log")
