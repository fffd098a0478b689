"""Controller between the CLI and the product service.

Takes primitive values as typed by the user, turns them into the types
the service expects and returns DTOs. No business rules live here.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ims.application.dto import ProductDTO
from ims.application.product_service import ProductService
from ims.domain.exceptions import ValidationError
from ims.domain.validation import ValidationOutcome


def parse_price(raw: str | None) -> Decimal | None:
    """Parse a user-typed price such as ``"99.90"`` into a Decimal."""
    if raw is None:
        return None
    try:
        price = Decimal(raw.strip().replace(",", "."))
    except InvalidOperation:
        raise ValidationError(
            ValidationOutcome.INVALID_PRICE, f"Invalid price: {raw!r}"
        ) from None
    if not price.is_finite():
        raise ValidationError(ValidationOutcome.INVALID_PRICE, f"Invalid price: {raw!r}")
    return price


class ProductController:

    def __init__(self, service: ProductService) -> None:
        self._service = service

    def create(self, name: str, quantity: int, price: str) -> ProductDTO:
        product = self._service.create(name, quantity, parse_price(price))
        return ProductDTO.from_product(product)

    def update(self, product_id: int, name: str, quantity: int, price: str) -> ProductDTO:
        product = self._service.update(product_id, name, quantity, parse_price(price))
        return ProductDTO.from_product(product)

    def delete(self, product_id: int) -> None:
        self._service.delete(product_id)

    def find_by_id(self, product_id: int) -> ProductDTO:
        return ProductDTO.from_product(self._service.find_by_id(product_id))

    def list_all(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._service.list_all()]

    def add_stock(self, product_id: int, amount: int) -> ProductDTO:
        return ProductDTO.from_product(self._service.add_stock(product_id, amount))

    def remove_stock(self, product_id: int, amount: int) -> ProductDTO:
        return ProductDTO.from_product(self._service.remove_stock(product_id, amount))

    def update_price(self, product_id: int, price: str) -> ProductDTO:
        product = self._service.update_price(product_id, parse_price(price))
        return ProductDTO.from_product(product)
