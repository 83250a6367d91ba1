"""Options shared by the cart and order commands."""

from __future__ import annotations

import click

session_option = click.option(
    "--session",
    "session_id",
    envvar="SHOPMANAGER_SESSION",
    default="default",
    show_default=True,
    help="Shopper session whose cart to use.",
)
