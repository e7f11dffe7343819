"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the outer surfaces (CLI, or an HTTP layer) and
the application layer without exposing domain internals.  ``to_wire()``
produces the camelCase field names external clients rely on; those names
must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from prodorders.domain.exceptions import ValidationError
from prodorders.domain.model.item import ProductionOrderItem
from prodorders.domain.model.order import ProductionOrder


@dataclass(frozen=True)
class OrderSpec:
    """Input: the fields a caller supplies to create an order."""

    order_number: str
    customer_id: int | None
    team_id: int | None = None

    @staticmethod
    def from_wire(raw: dict[str, Any]) -> OrderSpec:
        return OrderSpec(
            order_number=raw.get("orderNumber", ""),
            customer_id=raw.get("customerId"),
            team_id=raw.get("teamId"),
        )


@dataclass(frozen=True)
class ItemSpec:
    """Input: one line item as requested (type, dimensions, quantity)."""

    product_type: str
    width_mm: int
    height_mm: int
    quantity: int

    @staticmethod
    def from_wire(raw: dict[str, Any]) -> ItemSpec:
        try:
            return ItemSpec(
                product_type=raw["productType"],
                width_mm=raw["widthMm"],
                height_mm=raw["heightMm"],
                quantity=raw["quantity"],
            )
        except KeyError as exc:
            raise ValidationError(f"Missing item field: {exc.args[0]}") from exc


@dataclass(frozen=True)
class OrderDTO:
    """Output: a production order as exposed to callers."""

    id: int
    order_uuid: str
    order_number: str
    customer_id: int
    team_id: int | None
    status_id: int
    status: str  # human-readable status name, e.g. "SCHEDULED"

    @staticmethod
    def from_domain(order: ProductionOrder) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_uuid=str(order.order_uuid),
            order_number=order.order_number,
            customer_id=order.customer_id,
            team_id=order.team_id,
            status_id=int(order.status),
            status=order.status.name,
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "orderUUID": self.order_uuid,
            "orderNumber": self.order_number,
            "customerId": self.customer_id,
            "teamId": self.team_id,
            "statusId": self.status_id,
        }


@dataclass(frozen=True)
class ItemDTO:
    """Output: a stored line item."""

    id: int
    order_id: int
    product_type: str
    width_mm: int
    height_mm: int
    quantity: int

    @staticmethod
    def from_domain(item: ProductionOrderItem) -> ItemDTO:
        return ItemDTO(
            id=item.id,  # type: ignore[arg-type]
            order_id=item.order_id,
            product_type=item.product_type,
            width_mm=item.width_mm.value,
            height_mm=item.height_mm.value,
            quantity=item.quantity.value,
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "orderId": self.order_id,
            "productType": self.product_type,
            "widthMm": self.width_mm,
            "heightMm": self.height_mm,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class ItemSummaryDTO:
    """Output: one line item with its rounded material figures."""

    id: int
    product_type: str
    width_mm: int
    height_mm: int
    quantity: int
    profile_meters: float
    glass_square_meters: float
    hardware_units: int

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "productType": self.product_type,
            "widthMm": self.width_mm,
            "heightMm": self.height_mm,
            "quantity": self.quantity,
            "profileMeters": self.profile_meters,
            "glassSquareMeters": self.glass_square_meters,
            "hardwareUnits": self.hardware_units,
        }


@dataclass(frozen=True)
class RequirementsDTO:
    """Output: material totals across every item of an order."""

    total_profile_meters: float
    total_glass_square_meters: float
    total_hardware_units: int

    def to_wire(self) -> dict[str, Any]:
        return {
            "totalProfileMeters": self.total_profile_meters,
            "totalGlassSquareMeters": self.total_glass_square_meters,
            "totalHardwareUnits": self.total_hardware_units,
        }


@dataclass(frozen=True)
class SummaryDTO:
    """Output: derived material summary of an order (never persisted)."""

    order_id: int
    items: list[ItemSummaryDTO]
    requirements: RequirementsDTO

    def to_wire(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "items": [item.to_wire() for item in self.items],
            "requirements": self.requirements.to_wire(),
        }
