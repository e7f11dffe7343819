"""CLI commands for production order line items."""

from __future__ import annotations

import json

import click

from prodorders.application.add_items import AddItemsHandler
from prodorders.application.dto import ItemSpec
from prodorders.application.list_items import ListItemsHandler
from prodorders.domain.exceptions import DomainException
from prodorders.infrastructure.bootstrap import item_repository, order_repository


def _parse_items(raw: str) -> list[ItemSpec]:
    """Parse 'Window:1000x1200:2,Door:900x2100:1' into an ItemSpec list."""
    specs: list[ItemSpec] = []
    for part in raw.split(","):
        part = part.strip()
        fields = part.split(":")
        if len(fields) != 3 or "x" not in fields[1]:
            raise click.BadParameter(
                f"Invalid item format '{part}'. Expected 'Type:WIDTHxHEIGHT:Qty'."
            )
        product_type, size, qty_str = fields
        width_str, height_str = size.split("x", 1)
        try:
            width, height, qty = int(width_str), int(height_str), int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid number in '{part}'. Dimensions and quantity must be integers."
            )
        specs.append(
            ItemSpec(product_type=product_type.strip(), width_mm=width, height_mm=height, quantity=qty)
        )
    return specs


@click.command("set")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--items", "items_str", required=True, help="Items as 'Type:WIDTHxHEIGHT:Qty,...'."
)
def items_set(order_id: int, items_str: str) -> None:
    """Replace every item of an order with the given ones."""
    specs = _parse_items(items_str)

    handler = AddItemsHandler(
        order_repo=order_repository(),
        item_repo=item_repository(),
    )

    try:
        handler.handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Items added successfully ({len(specs)} item(s) on order #{order_id}).")


@click.command("clear")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def items_clear(order_id: int) -> None:
    """Remove every item of an order."""
    handler = AddItemsHandler(
        order_repo=order_repository(),
        item_repo=item_repository(),
    )

    try:
        handler.handle(order_id, [])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Items of order #{order_id} cleared.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print wire JSON.")
def items_show(order_id: int, as_json: bool) -> None:
    """Show the items of an order."""
    handler = ListItemsHandler(
        order_repo=order_repository(),
        item_repo=item_repository(),
    )

    try:
        dtos = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps([dto.to_wire() for dto in dtos], indent=2))
        return

    if not dtos:
        click.echo(f"Order #{order_id} has no items.")
        return
    click.echo(f"  {'ID':>4} {'Type':<12} {'Width':>6} {'Height':>6} {'Qty':>4}")
    click.echo(f"  {'-'*36}")
    for dto in dtos:
        click.echo(
            f"  {dto.id:>4} {dto.product_type:<12} {dto.width_mm:>6} {dto.height_mm:>6} {dto.quantity:>4}"
        )
