"""Application service: the product catalog use cases.

This is the single place where business rules are enforced: field
validation, the existence gate before every mutation, and stock
adjustments. Repositories only persist; the CLI only translates input.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from functools import wraps
from typing import Any, TypeVar

import structlog

from ims.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ServiceError,
    ValidationError,
)
from ims.domain.model.product import Product, ProductField
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.validation import (
    ValidationOutcome,
    validate_price,
    validate_product,
)

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _service_operation(action: str) -> Callable[[F], F]:
    """Let domain errors through unchanged and wrap anything else in ServiceError."""

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except DomainException as exc:
                logger.warning("operation_rejected", action=action, error=str(exc))
                raise
            except Exception as exc:
                logger.exception("operation_failed", action=action)
                raise ServiceError(f"Unexpected error while trying to {action}") from exc

        return wrapper  # type: ignore[return-value]

    return decorator


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    # --- CRUD -----------------------------------------------------------------

    @_service_operation("create product")
    def create(self, name: str, quantity: int, unit_price: Decimal) -> Product:
        """Validate and persist a new product."""
        logger.info("creating_product", name=name, quantity=quantity, unit_price=str(unit_price))

        product = Product(name=name, quantity=quantity, unit_price=unit_price)
        self._ensure_valid(product)
        product.name = product.name.strip()

        created = self._product_repo.create(product)
        logger.info("product_created", product_id=created.id, name=created.name)
        return created

    @_service_operation("update product")
    def update(self, product_id: int, name: str, quantity: int, unit_price: Decimal) -> Product:
        """Replace every field of an existing product except its ID."""
        logger.info("updating_product", product_id=product_id)

        self.ensure_exists(product_id)
        product = Product(id=product_id, name=name, quantity=quantity, unit_price=unit_price)
        self._ensure_valid(product)
        product.name = product.name.strip()

        updated = self._product_repo.update(product)
        logger.info("product_updated", product_id=updated.id)
        return updated

    @_service_operation("delete product")
    def delete(self, product_id: int) -> None:
        logger.info("deleting_product", product_id=product_id)

        self.ensure_exists(product_id)
        self._product_repo.delete(product_id)

        logger.info("product_deleted", product_id=product_id)

    @_service_operation("find product")
    def find_by_id(self, product_id: int) -> Product:
        logger.debug("finding_product", product_id=product_id)
        return self.ensure_exists(product_id)

    @_service_operation("list products")
    def list_all(self) -> tuple[Product, ...]:
        products = tuple(self._product_repo.list_all())
        logger.debug("products_listed", count=len(products))
        return products

    # --- Stock and price ------------------------------------------------------

    @_service_operation("add stock")
    def add_stock(self, product_id: int, amount: int) -> Product:
        """Increase the quantity on hand by *amount* (zero is allowed)."""
        if amount < 0:
            raise ValidationError(
                ValidationOutcome.INVALID_QUANTITY,
                f"Amount to add must not be negative, got {amount}",
            )

        product = self.ensure_exists(product_id)
        updated = self._product_repo.partial_update(
            product_id, {ProductField.QUANTITY: product.quantity + amount}
        )
        logger.info("stock_added", product_id=product_id, amount=amount, quantity=updated.quantity)
        return updated

    @_service_operation("remove stock")
    def remove_stock(self, product_id: int, amount: int) -> Product:
        """Decrease the quantity on hand; never lets it go below zero."""
        if amount <= 0:
            raise ValidationError(
                ValidationOutcome.INVALID_QUANTITY,
                f"Amount to remove must be positive, got {amount}",
            )

        product = self.ensure_exists(product_id)
        if product.quantity < amount:
            raise InsufficientStockError(available=product.quantity, requested=amount)

        updated = self._product_repo.partial_update(
            product_id, {ProductField.QUANTITY: product.quantity - amount}
        )
        logger.info("stock_removed", product_id=product_id, amount=amount, quantity=updated.quantity)
        return updated

    @_service_operation("update price")
    def update_price(self, product_id: int, new_price: Decimal | None) -> Product:
        outcome = validate_price(new_price)
        if not outcome.is_ok:
            raise ValidationError(outcome)

        self.ensure_exists(product_id)
        updated = self._product_repo.partial_update(
            product_id, {ProductField.UNIT_PRICE: new_price}
        )
        logger.info("price_updated", product_id=product_id, unit_price=str(updated.unit_price))
        return updated

    # --- Gates ----------------------------------------------------------------

    def ensure_exists(self, product_id: int) -> Product:
        """Existence gate used before every read-by-id and mutation."""
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            logger.warning("product_not_found", product_id=product_id)
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product

    @staticmethod
    def _ensure_valid(product: Product) -> None:
        outcome = validate_product(product)
        if not outcome.is_ok:
            raise ValidationError(outcome)
