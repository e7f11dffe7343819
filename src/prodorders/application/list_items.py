"""Application service: List Items use case (query)."""

from __future__ import annotations

from prodorders.application.dto import ItemDTO
from prodorders.domain.exceptions import NotFoundError
from prodorders.domain.repository.item_repository import ItemRepository
from prodorders.domain.repository.order_repository import OrderRepository


class ListItemsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo

    def handle(self, order_id: int) -> list[ItemDTO]:
        if self._order_repo.get_by_id(order_id) is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return [ItemDTO.from_domain(item) for item in self._item_repo.find_by_order_id(order_id)]
