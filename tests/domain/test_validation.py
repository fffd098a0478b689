"""Unit tests for product validation."""

from decimal import Decimal

import pytest

from ims.domain.model.product import Product
from ims.domain.validation import (
    ValidationOutcome,
    validate_price,
    validate_product,
)


def _product(name="Moisturizer", quantity=89, price="99.90"):
    return Product(
        name=name,
        quantity=quantity,
        unit_price=Decimal(price) if price is not None else None,
    )


class TestValidateProduct:

    def test_valid_product(self):
        assert validate_product(_product()) is ValidationOutcome.OK

    def test_zero_quantity_and_price_are_valid(self):
        assert validate_product(_product(quantity=0, price="0")) is ValidationOutcome.OK

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        assert validate_product(_product(name=name)) is ValidationOutcome.INVALID_NAME

    def test_negative_quantity_rejected(self):
        assert validate_product(_product(quantity=-1)) is ValidationOutcome.INVALID_QUANTITY

    def test_negative_price_rejected(self):
        assert validate_product(_product(price="-0.01")) is ValidationOutcome.INVALID_PRICE

    def test_missing_price_rejected(self):
        assert validate_product(_product(price=None)) is ValidationOutcome.INVALID_PRICE

    @pytest.mark.parametrize("price", ["0.125", "99.999", "0.001"])
    def test_more_than_two_decimal_places_rejected(self, price):
        assert validate_product(_product(price=price)) is ValidationOutcome.INVALID_PRICE

    @pytest.mark.parametrize("price", ["0.12", "7.5", "100", "1E+2"])
    def test_up_to_two_decimal_places_accepted(self, price):
        assert validate_product(_product(price=price)) is ValidationOutcome.OK

    def test_name_checked_before_quantity_and_price(self):
        product = _product(name="", quantity=-1, price="-1")
        assert validate_product(product) is ValidationOutcome.INVALID_NAME

    def test_quantity_checked_before_price(self):
        product = _product(quantity=-1, price="-1")
        assert validate_product(product) is ValidationOutcome.INVALID_QUANTITY


class TestValidationOutcome:

    def test_only_ok_is_ok(self):
        assert ValidationOutcome.OK.is_ok
        assert not ValidationOutcome.INVALID_PRICE.is_ok

    def test_message_names_the_rule(self):
        assert "name" in ValidationOutcome.INVALID_NAME.message

    def test_validate_price_alone(self):
        assert validate_price(Decimal("10")) is ValidationOutcome.OK
        assert validate_price(None) is ValidationOutcome.INVALID_PRICE
