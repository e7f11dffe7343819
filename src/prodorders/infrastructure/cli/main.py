import logging

import click

from prodorders.infrastructure import bootstrap
from prodorders.infrastructure.cli.item_commands import items_clear, items_set, items_show
from prodorders.infrastructure.cli.order_commands import (
    order_confirm,
    order_create,
    order_deliver,
    order_finish,
    order_list,
    order_show,
    order_start,
    order_summary,
)


@click.group()
@click.option(
    "--data-dir",
    envvar=bootstrap.DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding orders.json and order_items.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(data_dir: str | None, verbose: bool) -> None:
    """Production Orders: windows/doors fabrication lifecycle"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    bootstrap.configure(data_dir)


@cli.group()
def order() -> None:
    """Manage production orders."""


@cli.group()
def items() -> None:
    """Manage the line items of an order."""


# Register subcommands
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_deliver)
order.add_command(order_finish)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_start)
order.add_command(order_summary)
items.add_command(items_clear)
items.add_command(items_set)
items.add_command(items_show)
