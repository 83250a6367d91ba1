import logging

import click

from shopmanager.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from shopmanager.infrastructure.cli.order_commands import order_create, order_show
from shopmanager.infrastructure.cli.product_commands import (
    product_add,
    product_admin_list,
    product_delete,
    product_list,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Shop Manager: product catalog, cart and checkout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage a shopping cart."""


@cli.group()
def order() -> None:
    """Place and view orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_admin_list)
product.add_command(product_delete)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_create)
order.add_command(order_show)
