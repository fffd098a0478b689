"""CLI commands for stock levels and prices."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import App


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units received.")
@click.pass_obj
def stock_add(app: App, product_id: int, amount: int) -> None:
    """Add units to a product's stock."""
    try:
        dto = app.controller.add_stock(product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.quantity}")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units taken out.")
@click.pass_obj
def stock_remove(app: App, product_id: int, amount: int) -> None:
    """Remove units from a product's stock."""
    try:
        dto = app.controller.remove_stock(product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.quantity}")


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New unit price (e.g. 29.99).")
@click.pass_obj
def stock_price(app: App, product_id: int, price: str) -> None:
    """Change a product's unit price."""
    try:
        dto = app.controller.update_price(product_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price of '{dto.name}' updated to {dto.unit_price}")
