"""Abstract repository for production order line items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from prodorders.domain.model.item import ProductionOrderItem


class ItemRepository(ABC):

    @abstractmethod
    def find_by_order_id(self, order_id: int) -> list[ProductionOrderItem]:
        """Return the items of an order in stored (insertion) order."""

    @abstractmethod
    def delete_by_order_id(self, order_id: int) -> None:
        """Remove every item belonging to an order."""

    @abstractmethod
    def save(self, item: ProductionOrderItem) -> None:
        """Insert an item, assigning a fresh ``id``."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group the calls made inside the block into one all-or-nothing write.

        Readers see either the state before the block or the state after
        it.  If the block raises, nothing inside it is applied.
        """
