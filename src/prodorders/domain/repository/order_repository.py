"""Abstract repository for the ProductionOrder aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from prodorders.domain.model.order import OrderStatus, ProductionOrder


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> ProductionOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[ProductionOrder]:
        """Return every order, in ID order."""

    @abstractmethod
    def save(
        self,
        order: ProductionOrder,
        expected_status: OrderStatus | None = None,
    ) -> None:
        """Persist a new or updated order.

        When *expected_status* is given the write is conditional: it only
        happens if the stored order still has that status, checked and
        written as one atomic step.  Otherwise ConcurrentModificationError
        is raised and nothing is written.
        """
