"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopmanager.application.dto import ProductForm
from shopmanager.application.messages import message_for
from shopmanager.domain.exceptions import DomainException, ValidationError
from shopmanager.domain.model.product import Product
from shopmanager.infrastructure.bootstrap import product_service


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 45)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10} {p.quantity:>6}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    _print_products(product_service().list_products())


@click.command("admin-list")
def product_admin_list() -> None:
    """List products, newest first."""
    _print_products(product_service().list_admin_products())


@click.command("add")
@click.option("--name", default="", help="Product name.")
@click.option("--price", default="", help="Price (e.g. 9.99).")
@click.option("--quantity", default="", help="Units in stock.")
@click.option("--description", default="", help="Short description.")
@click.option("--details", default="", help="Longer details.")
def product_add(
    name: str, price: str, quantity: str, description: str, details: str
) -> None:
    """Add a new product to the catalog."""
    form = ProductForm(
        name=name,
        price=price,
        quantity=quantity,
        description=description,
        details=details,
    )

    try:
        product = product_service().create_product(form)
    except ValidationError as exc:
        if not exc.codes:
            raise click.ClickException(str(exc))
        for code in exc.codes:
            click.echo(f"  - {message_for(code)}", err=True)
        raise click.ClickException("Product not added.")

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product from the catalog and from every cart."""
    try:
        product_service().delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
