"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory comes from ``PRODORDERS_DATA_DIR`` when set; the CLI
can override it per invocation through ``configure()``.
"""

from __future__ import annotations

import os
from pathlib import Path

from prodorders.infrastructure.persistence.json_item_repository import (
    JsonItemRepository,
)
from prodorders.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "PRODORDERS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_data_dir = Path(os.getenv(DATA_DIR_ENV) or _DEFAULT_DATA_DIR)


def configure(data_dir: str | Path | None) -> None:
    """Point every repository factory at *data_dir* (None keeps the current one)."""
    global _data_dir
    if data_dir is not None:
        _data_dir = Path(data_dir)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(_data_dir / "orders.json")


def item_repository() -> JsonItemRepository:
    return JsonItemRepository(_data_dir / "order_items.json")
