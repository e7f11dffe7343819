"""Application service: order lifecycle transitions.

confirm, start, finish and deliver share one flow:

1. Load the order (NotFoundError if missing).
2. Let the aggregate validate and apply the transition.
3. Persist with a conditional write keyed on the status that was
   checked, so two concurrent calls on the same order cannot both
   succeed from the same precondition.

Nothing else is touched; in particular the order's items are left alone.
"""

from __future__ import annotations

import logging

from prodorders.application.dto import OrderDTO
from prodorders.domain.exceptions import InvalidStateError, NotFoundError
from prodorders.domain.model.order import (
    DEFAULT_TRANSITIONS,
    Transition,
    TransitionTable,
)
from prodorders.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class TransitionOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        transitions: TransitionTable = DEFAULT_TRANSITIONS,
    ) -> None:
        self._order_repo = order_repo
        self._transitions = transitions

    def handle(self, order_id: int, transition: Transition) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        try:
            previous = order.apply(transition, self._transitions)
        except InvalidStateError as exc:
            logger.warning("Rejected %s on order #%s: %s", transition.value, order_id, exc)
            raise

        self._order_repo.save(order, expected_status=previous)

        logger.info(
            "Order #%s %s: %s -> %s",
            order_id,
            transition.value,
            previous.name,
            order.status.name,
        )
        return OrderDTO.from_domain(order)

    # --- Named operations -----------------------------------------------------

    def confirm(self, order_id: int) -> OrderDTO:
        return self.handle(order_id, Transition.CONFIRM)

    def start(self, order_id: int) -> OrderDTO:
        return self.handle(order_id, Transition.START)

    def finish(self, order_id: int) -> OrderDTO:
        return self.handle(order_id, Transition.FINISH)

    def deliver(self, order_id: int) -> OrderDTO:
        return self.handle(order_id, Transition.DELIVER)
