"""Line items of a production order."""

from __future__ import annotations

from dataclasses import dataclass

from prodorders.domain.exceptions import ValidationError
from prodorders.domain.model.value_objects import Millimeters, Quantity


@dataclass
class ProductionOrderItem:
    """One product specification (type, size, count) belonging to an order.

    Items are never updated in place.  The whole set for an order is
    replaced on every change, so ``id`` is only stable until the next
    replacement.
    """

    id: int | None
    order_id: int
    product_type: str
    width_mm: Millimeters
    height_mm: Millimeters
    quantity: Quantity

    @staticmethod
    def create(
        order_id: int,
        product_type: str,
        width_mm: int,
        height_mm: int,
        quantity: int,
    ) -> ProductionOrderItem:
        """Build a new, not-yet-persisted item stamped with *order_id*."""
        if not product_type or not product_type.strip():
            raise ValidationError("Product type is required")
        return ProductionOrderItem(
            id=None,
            order_id=order_id,
            product_type=product_type.strip(),
            width_mm=Millimeters(width_mm),
            height_mm=Millimeters(height_mm),
            quantity=Quantity(quantity),
        )
