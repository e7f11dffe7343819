"""Application service: Create Order use case.

New orders always start in IN_PROGRESS; the ID is assigned by the
repository and the external UUID by the aggregate factory.
"""

from __future__ import annotations

import logging

from prodorders.application.dto import OrderDTO, OrderSpec
from prodorders.domain.model.order import ProductionOrder
from prodorders.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, spec: OrderSpec) -> OrderDTO:
        order = ProductionOrder.create(
            order_number=spec.order_number,
            customer_id=spec.customer_id,
            team_id=spec.team_id,
        )
        self._order_repo.save(order)

        logger.info(
            "Created production order #%s (%s) for customer %s",
            order.id,
            order.order_number,
            order.customer_id,
        )
        return OrderDTO.from_domain(order)
