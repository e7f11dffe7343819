"""Application service: Build Summary use case (query).

Derives the material requirements of an order from whatever item set is
stored at call time.  Nothing is cached or persisted.

Each per-item figure is rounded to 3 decimals (half-up); the totals are
the sum of those rounded figures, rounded again.
"""

from __future__ import annotations

from prodorders.application.dto import ItemSummaryDTO, RequirementsDTO, SummaryDTO
from prodorders.domain.exceptions import NotFoundError
from prodorders.domain.repository.item_repository import ItemRepository
from prodorders.domain.repository.order_repository import OrderRepository
from prodorders.domain.service.material_calculator import (
    MaterialFigures,
    calculate_materials,
    total_figures,
)


class BuildSummaryHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        item_repo: ItemRepository,
    ) -> None:
        self._order_repo = order_repo
        self._item_repo = item_repo

    def handle(self, order_id: int) -> SummaryDTO:
        if self._order_repo.get_by_id(order_id) is None:
            raise NotFoundError(f"Order #{order_id} not found")

        item_summaries: list[ItemSummaryDTO] = []
        per_item: list[MaterialFigures] = []

        for item in self._item_repo.find_by_order_id(order_id):
            figures = calculate_materials(
                width_mm=item.width_mm.value,
                height_mm=item.height_mm.value,
                quantity=item.quantity.value,
            ).rounded()
            per_item.append(figures)
            item_summaries.append(
                ItemSummaryDTO(
                    id=item.id,  # type: ignore[arg-type]
                    product_type=item.product_type,
                    width_mm=item.width_mm.value,
                    height_mm=item.height_mm.value,
                    quantity=item.quantity.value,
                    profile_meters=float(figures.profile_meters),
                    glass_square_meters=float(figures.glass_square_meters),
                    hardware_units=figures.hardware_units,
                )
            )

        totals = total_figures(per_item)
        return SummaryDTO(
            order_id=order_id,
            items=item_summaries,
            requirements=RequirementsDTO(
                total_profile_meters=float(totals.profile_meters),
                total_glass_square_meters=float(totals.glass_square_meters),
                total_hardware_units=totals.hardware_units,
            ),
        )
