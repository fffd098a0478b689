"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError

from ims.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    PersistenceError,
)
from ims.domain.model.product import Product, ProductField
from ims.domain.repository.product_repository import ProductRepository, resolve_fields
from ims.infrastructure.persistence.database import Database, products

logger = structlog.get_logger(__name__)

_RETRY_LATER = "Try again later."


class SqlProductRepository(ProductRepository):

    def __init__(self, database: Database) -> None:
        self._database = database

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        statement = insert(products).values(**self._to_params(product))
        try:
            with self._database.connect() as conn:
                new_id = conn.execute(statement).inserted_primary_key[0]
                conn.commit()
        except SQLAlchemyError as exc:
            logger.error("create_failed", name=product.name, error=str(exc))
            raise PersistenceError(f"Could not create product. {_RETRY_LATER}") from exc

        product.id = new_id
        logger.info("product_inserted", product_id=product.id)
        return product

    def create_in_transaction(self, product: Product) -> Product:
        statement = insert(products).values(**self._to_params(product))
        try:
            with self._database.connect() as conn:
                transaction = conn.begin()
                try:
                    result = conn.execute(statement)
                    new_id = result.inserted_primary_key[0]
                    transaction.commit()
                except SQLAlchemyError:
                    self._rollback(transaction)
                    raise
        except SQLAlchemyError as exc:
            logger.error("transactional_create_failed", name=product.name, error=str(exc))
            raise PersistenceError(
                f"Could not create product (transaction rolled back). {_RETRY_LATER}"
            ) from exc

        product.id = new_id
        logger.info("product_inserted", product_id=product.id, transactional=True)
        return product

    def update(self, product: Product) -> Product:
        if not product.is_persisted:
            raise InvalidArgumentError("Cannot update a product that has no ID")

        statement = (
            update(products)
            .where(products.c.id == product.id)
            .values(**self._to_params(product))
        )
        rows = self._execute_write(statement, action="update", product_id=product.id)
        if rows == 0:
            raise EntityNotFoundError(f"Product with ID {product.id} not found for update")

        logger.info("product_row_updated", product_id=product.id)
        return product

    def delete(self, product_id: int) -> None:
        statement = delete(products).where(products.c.id == product_id)
        rows = self._execute_write(statement, action="delete", product_id=product_id)
        if rows == 0:
            raise EntityNotFoundError(f"Product with ID {product_id} not found for deletion")

        logger.info("product_row_deleted", product_id=product_id)

    def find_by_id(self, product_id: int) -> Product | None:
        statement = select(products).where(products.c.id == product_id)
        try:
            with self._database.connect() as conn:
                row = conn.execute(statement).first()
        except SQLAlchemyError as exc:
            logger.error("find_failed", product_id=product_id, error=str(exc))
            raise PersistenceError(f"Could not look up product. {_RETRY_LATER}") from exc

        if row is None:
            logger.debug("product_row_missing", product_id=product_id)
            return None
        return self._to_domain(row)

    def list_all(self) -> list[Product]:
        statement = select(products).order_by(products.c.id)
        try:
            with self._database.connect() as conn:
                rows = conn.execute(statement).all()
        except SQLAlchemyError as exc:
            logger.error("list_failed", error=str(exc))
            raise PersistenceError(f"Could not list products. {_RETRY_LATER}") from exc

        logger.debug("product_rows_listed", count=len(rows))
        return [self._to_domain(row) for row in rows]

    def partial_update(
        self, product_id: int, fields: Mapping[ProductField | str, Any]
    ) -> Product:
        resolved = resolve_fields(fields)
        values = {field.value: value for field, value in resolved.items()}

        statement = update(products).where(products.c.id == product_id).values(**values)
        rows = self._execute_write(statement, action="partial_update", product_id=product_id)
        if rows == 0:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        logger.info("product_row_patched", product_id=product_id, fields=sorted(values))
        product = self.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} vanished after update")
        return product

    # --- Helpers --------------------------------------------------------------

    def _execute_write(self, statement, *, action: str, product_id: int) -> int:
        """Run a single UPDATE/DELETE, commit, and return the affected row count."""
        try:
            with self._database.connect() as conn:
                rows = conn.execute(statement).rowcount
                conn.commit()
        except SQLAlchemyError as exc:
            logger.error(f"{action}_failed", product_id=product_id, error=str(exc))
            raise PersistenceError(
                f"Could not {action.replace('_', ' ')} product {product_id}. {_RETRY_LATER}"
            ) from exc
        return rows

    @staticmethod
    def _rollback(transaction) -> None:
        try:
            transaction.rollback()
            logger.info("transaction_rolled_back")
        except SQLAlchemyError as exc:
            logger.error("rollback_failed", error=str(exc))

    # --- Row mapping ----------------------------------------------------------

    @staticmethod
    def _to_params(product: Product) -> dict[str, Any]:
        return {
            "quantity": product.quantity,
            "name": product.name,
            "unit_price": product.unit_price,
        }

    @staticmethod
    def _to_domain(row: Row) -> Product:
        mapping = row._mapping
        price = mapping["unit_price"]
        return Product(
            id=mapping["id"],
            quantity=mapping["quantity"],
            name=mapping["name"],
            unit_price=Decimal(price) if price is not None else Decimal("0"),
        )
