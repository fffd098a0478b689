"""Field-level validation for products.

Validation returns a classified outcome instead of raising; the service
decides whether a non-OK outcome becomes a ValidationError.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from ims.domain.model.product import Product


class ValidationOutcome(Enum):
    OK = "Valid product"
    INVALID_NAME = "Product name must not be empty"
    INVALID_QUANTITY = "Quantity must not be negative"
    INVALID_PRICE = "Unit price must be set, must not be negative and must have at most 2 decimal places"

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_ok(self) -> bool:
        return self is ValidationOutcome.OK


def validate_name(name: str | None) -> ValidationOutcome:
    if name is None or not name.strip():
        return ValidationOutcome.INVALID_NAME
    return ValidationOutcome.OK


def validate_quantity(quantity: int) -> ValidationOutcome:
    if quantity < 0:
        return ValidationOutcome.INVALID_QUANTITY
    return ValidationOutcome.OK


# Matches the scale of the unit_price column.
PRICE_DECIMAL_PLACES = 2


def validate_price(price: Decimal | None) -> ValidationOutcome:
    if price is None or not price.is_finite() or price < 0:
        return ValidationOutcome.INVALID_PRICE
    if price.as_tuple().exponent < -PRICE_DECIMAL_PLACES:
        return ValidationOutcome.INVALID_PRICE
    return ValidationOutcome.OK


def validate_product(product: Product) -> ValidationOutcome:
    """Check name, quantity and price in that order.

    Returns the first failing outcome, or ``ValidationOutcome.OK``.
    """
    for outcome in (
        validate_name(product.name),
        validate_quantity(product.quantity),
        validate_price(product.unit_price),
    ):
        if not outcome.is_ok:
            return outcome
    return ValidationOutcome.OK
