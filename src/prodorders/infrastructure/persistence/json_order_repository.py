"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import uuid
from pathlib import Path

from prodorders.domain.exceptions import (
    ConcurrentModificationError,
    DomainException,
    StoreError,
)
from prodorders.domain.model.order import OrderStatus, ProductionOrder
from prodorders.domain.repository.order_repository import OrderRepository
from prodorders.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.load()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> ProductionOrder | None:
        for raw in self._file.load():
            if raw.get("id") == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ProductionOrder]:
        return [self._to_domain(raw) for raw in sorted(self._file.load(), key=lambda o: o.get("id") or 0)]

    def save(
        self,
        order: ProductionOrder,
        expected_status: OrderStatus | None = None,
    ) -> None:
        with self._file.lock:
            orders = self._file.load()

            if order.id is None:
                order.id = self.next_id()

            index = next(
                (i for i, raw in enumerate(orders) if raw["id"] == order.id), None
            )

            if expected_status is not None:
                stored = orders[index]["statusId"] if index is not None else None
                if stored != int(expected_status):
                    raise ConcurrentModificationError(
                        f"Order #{order.id} changed concurrently: "
                        f"expected status {int(expected_status)}, found {stored}"
                    )

            # Upsert: replace if exists, otherwise append
            if index is not None:
                orders[index] = self._to_raw(order)
            else:
                orders.append(self._to_raw(order))

            self._file.persist(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: ProductionOrder) -> dict:
        return {
            "id": order.id,
            "orderUUID": str(order.order_uuid),
            "orderNumber": order.order_number,
            "customerId": order.customer_id,
            "teamId": order.team_id,
            "statusId": int(order.status),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductionOrder:
        try:
            return ProductionOrder(
                id=raw["id"],
                order_uuid=uuid.UUID(raw["orderUUID"]),
                order_number=raw["orderNumber"],
                customer_id=raw["customerId"],
                team_id=raw.get("teamId"),
                status=OrderStatus(raw["statusId"]),
            )
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise StoreError(f"Malformed order record {raw!r}: {exc!r}") from exc
