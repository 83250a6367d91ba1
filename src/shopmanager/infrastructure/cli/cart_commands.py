"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from shopmanager.application.show_cart import ShowCartHandler
from shopmanager.infrastructure.bootstrap import order_service
from shopmanager.infrastructure.cli.options import session_option


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@session_option
def cart_add(product_id: int, session_id: str) -> None:
    """Add one unit of a product to the cart."""
    if not order_service().add_to_cart(session_id, product_id):
        raise click.ClickException(f"Product #{product_id} is not in the catalog.")

    click.echo(f"Product #{product_id} added to cart.")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@session_option
def cart_remove(product_id: int, session_id: str) -> None:
    """Remove a product's line from the cart."""
    order_service().remove_from_cart(session_id, product_id)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("show")
@session_option
def cart_show(session_id: str) -> None:
    """Show the cart's lines and totals."""
    dto = ShowCartHandler(order_service()).handle(session_id)

    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'#':<4} {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*52}")
    for line in dto.lines:
        click.echo(
            f"  {line.line_id:<4} {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Items':<32} {dto.item_count:>20}")
    click.echo(f"  {'Total':<32} {dto.total:>20}")
    click.echo(f"  {'Average':<32} {dto.average:>20}")
