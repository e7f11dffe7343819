"""CLI commands for the ProductionOrder aggregate."""

from __future__ import annotations

import json

import click

from prodorders.application.build_summary import BuildSummaryHandler
from prodorders.application.create_order import CreateOrderHandler
from prodorders.application.dto import OrderDTO, OrderSpec, SummaryDTO
from prodorders.application.list_orders import ListOrdersHandler
from prodorders.application.show_order import ShowOrderHandler
from prodorders.application.transition_order import TransitionOrderHandler
from prodorders.domain.exceptions import DomainException
from prodorders.domain.model.order import Transition
from prodorders.infrastructure.bootstrap import item_repository, order_repository


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  {dto.order_number}  (status={dto.status}/{dto.status_id})")
    click.echo(f"UUID:     {dto.order_uuid}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Team:     {dto.team_id if dto.team_id is not None else '-'}")


def _display_summary(dto: SummaryDTO) -> None:
    click.echo(f"Material summary for order #{dto.order_id}")
    click.echo()
    click.echo(
        f"  {'Type':<12} {'Width':>6} {'Height':>6} {'Qty':>4} "
        f"{'Profile m':>10} {'Glass m2':>10} {'Hardware':>9}"
    )
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_type:<12} {item.width_mm:>6} {item.height_mm:>6} {item.quantity:>4} "
            f"{item.profile_meters:>10.3f} {item.glass_square_meters:>10.3f} {item.hardware_units:>9}"
        )
    click.echo(f"  {'-'*63}")
    req = dto.requirements
    click.echo(
        f"  {'Total':<31} {req.total_profile_meters:>10.3f} "
        f"{req.total_glass_square_meters:>10.3f} {req.total_hardware_units:>9}"
    )


@click.command("create")
@click.option("--number", "order_number", required=True, help="Human-readable order number.")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--team", "team_id", default=None, type=int, help="Production team ID.")
def order_create(order_number: str, customer_id: int, team_id: int | None) -> None:
    """Create a new production order (starts IN_PROGRESS)."""
    handler = CreateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(
            OrderSpec(order_number=order_number, customer_id=customer_id, team_id=team_id)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print wire JSON.")
def order_list(as_json: bool) -> None:
    """List every production order."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        dtos = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json([dto.to_wire() for dto in dtos])
        return

    if not dtos:
        click.echo("No orders.")
        return
    click.echo(f"  {'ID':>4} {'Number':<16} {'Customer':>8} {'Status':<14}")
    click.echo(f"  {'-'*45}")
    for dto in dtos:
        click.echo(f"  {dto.id:>4} {dto.order_number:<16} {dto.customer_id:>8} {dto.status:<14}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print wire JSON.")
def order_show(order_id: int, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto.to_wire())
    else:
        _display_order(dto)


def _transition_command(transition: Transition, help_text: str) -> click.Command:
    @click.command(transition.value, help=help_text)
    @click.option("--id", "order_id", required=True, type=int, help="Order ID.")
    def command(order_id: int) -> None:
        handler = TransitionOrderHandler(order_repo=order_repository())

        try:
            dto = handler.handle(order_id, transition)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"Order #{dto.id} is now {dto.status} ({dto.status_id}).")

    return command


order_confirm = _transition_command(
    Transition.CONFIRM, "Confirm an IN_PROGRESS order (moves it to SCHEDULED)."
)
order_start = _transition_command(
    Transition.START, "Start manufacturing a SCHEDULED order (back to IN_PROGRESS)."
)
order_finish = _transition_command(
    Transition.FINISH, "Finish an IN_PROGRESS order (moves it to FOR_DELIVERY)."
)
order_deliver = _transition_command(
    Transition.DELIVER, "Deliver a FOR_DELIVERY order (moves it to COMPLETED)."
)


@click.command("summary")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print wire JSON.")
def order_summary(order_id: int, as_json: bool) -> None:
    """Show material requirements derived from an order's items."""
    handler = BuildSummaryHandler(
        order_repo=order_repository(),
        item_repo=item_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto.to_wire())
    else:
        _display_summary(dto)
