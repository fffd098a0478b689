"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from ims.application.dto import ProductDTO
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import App


def display_product(dto: ProductDTO) -> None:
    """Shared formatting for a single product."""
    click.echo(f"Product #{dto.id}")
    click.echo(f"  Name:       {dto.name}")
    click.echo(f"  Quantity:   {dto.quantity}")
    click.echo(f"  Unit price: {dto.unit_price}")
    click.echo(f"  Stock value: {dto.stock_value}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Quantity in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 99.90).")
@click.pass_obj
def product_add(app: App, name: str, quantity: int, price: str) -> None:
    """Add a new product to the catalog."""
    try:
        dto = app.controller.create(name=name, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added: {dto.quantity} at {dto.unit_price}")


@click.command("list")
@click.pass_obj
def product_list(app: App) -> None:
    """List all products in the catalog."""
    try:
        products = app.controller.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Quantity':>9} {'Unit price':>12}")
    click.echo("-" * 54)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.quantity:>9} {p.unit_price:>12}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(app: App, product_id: int) -> None:
    """Show a single product."""
    try:
        dto = app.controller.find_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.option("--price", required=True, help="New unit price.")
@click.pass_obj
def product_update(app: App, product_id: int, name: str, quantity: int, price: str) -> None:
    """Replace name, quantity and price of a product."""
    try:
        dto = app.controller.update(
            product_id=product_id, name=name, quantity=quantity, price=price
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated.")
    display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(app: App, product_id: int) -> None:
    """Delete a product from the catalog."""
    try:
        app.controller.delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
