"""ProductionOrder aggregate and its manufacturing lifecycle.

The lifecycle is a fixed, small state machine.  Status codes are exposed
on the wire, so the numeric values of ``OrderStatus`` must never change.
Transitions are described by an explicit table rather than by a chain of
conditionals, which keeps the graph inspectable and exhaustively testable.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType

from prodorders.domain.exceptions import InvalidStateError, ValidationError


class OrderStatus(IntEnum):
    IN_PROGRESS = 1
    SCHEDULED = 2
    FOR_DELIVERY = 3
    COMPLETED = 4


class Transition(Enum):
    CONFIRM = "confirm"
    START = "start"
    FINISH = "finish"
    DELIVER = "deliver"


# (required status, resulting status) per transition.
# IN_PROGRESS appears both as the drafting state and as the state reached
# through ``start``; the engine only compares numeric codes.
TransitionTable = Mapping[Transition, tuple[OrderStatus, OrderStatus]]

DEFAULT_TRANSITIONS: TransitionTable = MappingProxyType(
    {
        Transition.CONFIRM: (OrderStatus.IN_PROGRESS, OrderStatus.SCHEDULED),
        Transition.START: (OrderStatus.SCHEDULED, OrderStatus.IN_PROGRESS),
        Transition.FINISH: (OrderStatus.IN_PROGRESS, OrderStatus.FOR_DELIVERY),
        Transition.DELIVER: (OrderStatus.FOR_DELIVERY, OrderStatus.COMPLETED),
    }
)


@dataclass
class ProductionOrder:
    """Aggregate root for a window/door production order.

    Use ``ProductionOrder.create()`` for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.

    Line items are *not* held here: the item repository is the sole keeper
    of the order -> item relationship.
    """

    id: int | None
    order_uuid: uuid.UUID
    order_number: str
    customer_id: int
    team_id: int | None = None
    status: OrderStatus = OrderStatus.IN_PROGRESS

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_number: str,
        customer_id: int | None,
        team_id: int | None = None,
    ) -> ProductionOrder:
        """Create a new order in IN_PROGRESS with a fresh external UUID."""
        if not order_number or not order_number.strip():
            raise ValidationError("Order number is required")
        if customer_id is None:
            raise ValidationError("Customer ID is required")

        return ProductionOrder(
            id=None,
            order_uuid=uuid.uuid4(),
            order_number=order_number.strip(),
            customer_id=customer_id,
            team_id=team_id,
        )

    # --- State transitions ----------------------------------------------------

    def required_status(
        self,
        transition: Transition,
        table: TransitionTable = DEFAULT_TRANSITIONS,
    ) -> OrderStatus:
        """Return the status this order must be in for *transition*."""
        try:
            return table[transition][0]
        except KeyError:
            raise InvalidStateError(
                f"Transition '{transition.value}' is not allowed for order "
                f"#{self.id}. Expected=none, Actual={int(self.status)}",
                expected=None,
                actual=int(self.status),
            ) from None

    def apply(
        self,
        transition: Transition,
        table: TransitionTable = DEFAULT_TRANSITIONS,
    ) -> OrderStatus:
        """Move the order along *transition* and return the previous status.

        Raises InvalidStateError (and leaves the order unmodified) when the
        current status is not exactly the one the table requires.
        """
        required = self.required_status(transition, table)
        if self.status != required:
            raise InvalidStateError(
                f"Cannot {transition.value} order #{self.id}: invalid status. "
                f"Expected={int(required)}, Actual={int(self.status)}",
                expected=int(required),
                actual=int(self.status),
            )
        previous = self.status
        self.status = table[transition][1]
        return previous
