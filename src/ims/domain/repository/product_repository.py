"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ims.domain.exceptions import InvalidArgumentError
from ims.domain.model.product import Product, ProductField


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Insert a new product and return it with its generated ID."""

    @abstractmethod
    def create_in_transaction(self, product: Product) -> Product:
        """Same as ``create`` but all-or-nothing inside an explicit transaction."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Replace name, quantity and price of an existing product.

        Raises EntityNotFoundError if no row was affected.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Hard-delete a product. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, ordered by ascending ID."""

    @abstractmethod
    def partial_update(
        self, product_id: int, fields: Mapping[ProductField | str, Any]
    ) -> Product:
        """Change only the given fields and return the re-read product.

        Raises InvalidArgumentError for an empty or unknown field set and
        EntityNotFoundError if the product does not exist.
        """


def resolve_fields(fields: Mapping[ProductField | str, Any] | None) -> dict[ProductField, Any]:
    """Normalise a partial-update field set against the ProductField allow-list."""
    if not fields:
        raise InvalidArgumentError("No fields given for partial update")

    resolved: dict[ProductField, Any] = {}
    for key, value in fields.items():
        if isinstance(key, ProductField):
            resolved[key] = value
            continue
        try:
            resolved[ProductField(key)] = value
        except ValueError:
            raise InvalidArgumentError(f"Unknown product field: {key!r}") from None
    return resolved
