import click

from ims.infrastructure.bootstrap import App, build_app
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from ims.infrastructure.cli.stock_commands import stock_add, stock_price, stock_remove
from ims.infrastructure.config import get_settings
from ims.infrastructure.log import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """IMS — Inventory Management System

    Run `ims init-db` once to create the products table before using the
    other commands.
    """
    if ctx.obj is None:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_json)
        ctx.obj = build_app(settings)
        ctx.call_on_close(ctx.obj.database.dispose)


@cli.command("init-db")
@click.pass_obj
def init_db(app: App) -> None:
    """Create the products table if it does not exist."""
    app.database.create_schema()
    click.echo("Database schema is ready.")


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Adjust stock levels and prices."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_price)
stock.add_command(stock_remove)
