"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shopmanager.application.dto import OrderDTO
from shopmanager.application.messages import message_for
from shopmanager.application.show_order import ShowOrderHandler
from shopmanager.domain.exceptions import DomainException
from shopmanager.domain.model.order import Order
from shopmanager.domain.service.stock_reconciliation_service import (
    ReconciliationOutcome,
)
from shopmanager.infrastructure.bootstrap import order_service
from shopmanager.infrastructure.cli.options import session_option


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@session_option
def order_create(session_id: str) -> None:
    """Place an order for everything in the cart."""
    service = order_service()

    try:
        result = service.create_order(session_id, Order())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.ok:
        raise click.ClickException(
            "; ".join(message_for(code) for code in result.errors)
        )

    _display_order(ShowOrderHandler.to_dto(result.order))  # type: ignore[arg-type]

    removed = [
        s.product_id
        for s in result.stock
        if s.outcome is ReconciliationOutcome.DELETED
    ]
    if removed:
        click.echo()
        click.echo(
            "Sold out and removed from catalog: "
            + ", ".join(f"#{pid}" for pid in removed)
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_service())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
