"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI without
exposing domain entities to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$99.90"
    stock_value: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            quantity=product.quantity,
            unit_price=f"${product.unit_price:.2f}",
            stock_value=f"${product.unit_price * product.quantity:.2f}",
        )
