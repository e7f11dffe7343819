"""JSON-file-backed implementation of ItemRepository.

The file holds every item of every order plus a monotonic ``last_id``
counter, so IDs of deleted items are never handed out again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from prodorders.domain.exceptions import DomainException, StoreError
from prodorders.domain.model.item import ProductionOrderItem
from prodorders.domain.model.value_objects import Millimeters, Quantity
from prodorders.domain.repository.item_repository import ItemRepository
from prodorders.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonItemRepository(ItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={"last_id": 0, "items": []})
        # In-memory copy of the file while inside atomic(); None otherwise
        self._pending: dict | None = None

    # --- ItemRepository interface ---------------------------------------------

    def find_by_order_id(self, order_id: int) -> list[ProductionOrderItem]:
        with self._file.lock:
            data = self._read()
        return [self._to_domain(raw) for raw in data["items"] if raw.get("orderId") == order_id]

    def delete_by_order_id(self, order_id: int) -> None:
        with self._file.lock:
            data = self._read()
            kept = [raw for raw in data["items"] if raw.get("orderId") != order_id]
            logger.debug(
                "Deleting %d item(s) of order #%s", len(data["items"]) - len(kept), order_id
            )
            data["items"] = kept
            self._write(data)

    def save(self, item: ProductionOrderItem) -> None:
        with self._file.lock:
            data = self._read()
            data["last_id"] += 1
            item.id = data["last_id"]
            data["items"].append(self._to_raw(item))
            self._write(data)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._file.lock:
            if self._pending is not None:
                # Already inside an atomic block on this thread
                yield
                return
            self._pending = self._file.load()
            try:
                yield
                self._file.persist(self._pending)
            finally:
                self._pending = None

    # --- Buffer helpers -------------------------------------------------------

    def _read(self) -> dict:
        if self._pending is not None:
            return self._pending
        return self._file.load()

    def _write(self, data: dict) -> None:
        if self._pending is not None:
            self._pending = data
        else:
            self._file.persist(data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: ProductionOrderItem) -> dict:
        return {
            "id": item.id,
            "orderId": item.order_id,
            "productType": item.product_type,
            "widthMm": item.width_mm.value,
            "heightMm": item.height_mm.value,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductionOrderItem:
        try:
            return ProductionOrderItem(
                id=raw["id"],
                order_id=raw["orderId"],
                product_type=raw["productType"],
                width_mm=Millimeters(raw["widthMm"]),
                height_mm=Millimeters(raw["heightMm"]),
                quantity=Quantity(raw["quantity"]),
            )
        except (KeyError, TypeError, DomainException) as exc:
            raise StoreError(f"Malformed item record {raw!r}: {exc!r}") from exc
