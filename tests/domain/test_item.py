"""Unit tests for ProductionOrderItem."""

import pytest

from prodorders.domain.exceptions import ValidationError
from prodorders.domain.model.item import ProductionOrderItem


class TestItemCreation:

    def test_happy_path(self):
        item = ProductionOrderItem.create(50, "Window", 1000, 1200, 2)
        assert item.id is None  # assigned by repository
        assert item.order_id == 50
        assert item.product_type == "Window"
        assert item.width_mm.value == 1000
        assert item.height_mm.value == 1200
        assert item.quantity.value == 2

    def test_product_type_is_free_form(self):
        item = ProductionOrderItem.create(1, "Skylight", 600, 600, 1)
        assert item.product_type == "Skylight"

    def test_blank_product_type_rejected(self):
        with pytest.raises(ValidationError, match="Product type"):
            ProductionOrderItem.create(1, "  ", 600, 600, 1)

    def test_non_positive_width_rejected(self):
        with pytest.raises(ValidationError, match="Dimension"):
            ProductionOrderItem.create(1, "Door", 0, 2100, 1)

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Quantity"):
            ProductionOrderItem.create(1, "Door", 900, 2100, 0)
