"""Unit tests for Millimeters and Quantity value objects."""

import pytest

from prodorders.domain.exceptions import ValidationError
from prodorders.domain.model.value_objects import Millimeters, Quantity


class TestMillimeters:

    def test_valid(self):
        assert Millimeters(1200).value == 1200

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Millimeters(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Millimeters(-900)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Millimeters(1000.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Millimeters(True)

    def test_str(self):
        assert str(Millimeters(900)) == "900mm"


class TestQuantity:

    def test_valid(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("3")

    def test_equality(self):
        assert Quantity(2) == Quantity(2)
        assert Quantity(2) != Quantity(3)

    def test_immutability(self):
        q = Quantity(2)
        with pytest.raises(AttributeError):
            q.value = 3  # type: ignore[misc]
