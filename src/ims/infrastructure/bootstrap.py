"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.application.product_service import ProductService
from ims.infrastructure.cli.controller import ProductController
from ims.infrastructure.config import Settings
from ims.infrastructure.persistence.database import Database
from ims.infrastructure.persistence.sql_product_repository import SqlProductRepository


@dataclass(frozen=True)
class App:
    database: Database
    controller: ProductController


def build_app(settings: Settings) -> App:
    """Create the database once and hand it down the layers."""
    database = Database(settings.database_config())
    service = ProductService(product_repo=SqlProductRepository(database))
    return App(database=database, controller=ProductController(service))
