"""Application service: Add Items use case.

Replace-all semantics: the order's current items are deleted and the
given specs are inserted in order, as one atomic unit against the item
repository.  An empty list clears the order.  There is no status
precondition.
"""

from __future__ import annotations

import logging

from prodorders.application.dto import ItemSpec
from prodorders.domain.exceptions import NotFoundError
from prodorders.domain.model.item import ProductionOrderItem
from prodorders.domain.repository.item_repository import ItemRepository
from prodorders.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AddItemsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo

    def handle(self, order_id: int, specs: list[ItemSpec]) -> None:
        if self._order_repo.get_by_id(order_id) is None:
            raise NotFoundError(f"Order #{order_id} not found")

        # Validate everything before touching the store
        items = [
            ProductionOrderItem.create(
                order_id=order_id,
                product_type=spec.product_type,
                width_mm=spec.width_mm,
                height_mm=spec.height_mm,
                quantity=spec.quantity,
            )
            for spec in specs
        ]

        with self._item_repo.atomic():
            self._item_repo.delete_by_order_id(order_id)
            for item in items:
                self._item_repo.save(item)

        logger.info("Replaced items of order #%s (%d item(s))", order_id, len(items))
