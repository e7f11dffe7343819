"""Integration tests for creating, listing and showing orders."""

import pytest

from prodorders.application.create_order import CreateOrderHandler
from prodorders.application.dto import OrderSpec
from prodorders.application.list_orders import ListOrdersHandler
from prodorders.application.show_order import ShowOrderHandler
from prodorders.domain.exceptions import NotFoundError, ValidationError
from prodorders.domain.model.order import OrderStatus
from tests.fakes import FakeOrderRepository


class TestCreateOrder:

    def test_new_order_is_in_progress(self):
        repo = FakeOrderRepository()
        dto = CreateOrderHandler(repo).handle(OrderSpec("ORD-2026-10", customer_id=10, team_id=5))

        assert dto.id == 1
        assert dto.status_id == 1
        assert dto.status == "IN_PROGRESS"
        assert dto.customer_id == 10
        assert dto.team_id == 5
        assert repo.get_by_id(1).status == OrderStatus.IN_PROGRESS

    def test_ids_are_sequential(self):
        repo = FakeOrderRepository()
        handler = CreateOrderHandler(repo)
        first = handler.handle(OrderSpec("ORD-1", customer_id=1))
        second = handler.handle(OrderSpec("ORD-2", customer_id=1))
        assert (first.id, second.id) == (1, 2)
        assert first.order_uuid != second.order_uuid

    def test_invalid_spec_not_persisted(self):
        repo = FakeOrderRepository()
        with pytest.raises(ValidationError):
            CreateOrderHandler(repo).handle(OrderSpec("", customer_id=1))
        assert repo.list_all() == []

    def test_wire_representation(self):
        dto = CreateOrderHandler(FakeOrderRepository()).handle(
            OrderSpec.from_wire({"orderNumber": "ORD-2026-10", "customerId": 10, "teamId": 5})
        )
        wire = dto.to_wire()
        assert set(wire) == {"id", "orderUUID", "orderNumber", "customerId", "teamId", "statusId"}
        assert wire["orderNumber"] == "ORD-2026-10"
        assert wire["statusId"] == 1


class TestShowAndListOrders:

    def test_show_existing(self):
        repo = FakeOrderRepository()
        created = CreateOrderHandler(repo).handle(OrderSpec("ORD-7", customer_id=10))
        dto = ShowOrderHandler(repo).handle(created.id)
        assert dto == created

    def test_show_missing(self):
        with pytest.raises(NotFoundError, match="Order #7 not found"):
            ShowOrderHandler(FakeOrderRepository()).handle(7)

    def test_list_all_in_id_order(self):
        repo = FakeOrderRepository()
        create = CreateOrderHandler(repo)
        create.handle(OrderSpec("ORD-1", customer_id=10))
        create.handle(OrderSpec("ORD-2", customer_id=11))

        dtos = ListOrdersHandler(repo).handle()

        assert [d.order_number for d in dtos] == ["ORD-1", "ORD-2"]
        assert [d.customer_id for d in dtos] == [10, 11]

    def test_list_empty(self):
        assert ListOrdersHandler(FakeOrderRepository()).handle() == []
