"""Tests for stock adjustments and price changes."""

from decimal import Decimal

import pytest

from ims.application.product_service import ProductService
from ims.domain.exceptions import EntityNotFoundError, InsufficientStockError, ValidationError
from ims.domain.model.product import Product
from ims.domain.validation import ValidationOutcome
from tests.fakes import FakeProductRepository


def _setup(quantity=10, price="5.00"):
    repo = FakeProductRepository(
        [Product(name="Widget", quantity=quantity, unit_price=Decimal(price))]
    )
    return ProductService(repo), repo


class TestAddStock:

    def test_add_increases_quantity(self):
        service, repo = _setup(quantity=10)
        assert service.add_stock(1, 5).quantity == 15
        assert repo.find_by_id(1).quantity == 15

    def test_add_zero_is_allowed(self):
        service, _ = _setup(quantity=10)
        assert service.add_stock(1, 0).quantity == 10

    def test_add_negative_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            service.add_stock(1, -1)
        assert exc_info.value.outcome is ValidationOutcome.INVALID_QUANTITY

    def test_add_to_missing_product_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.add_stock(99, 1)


class TestRemoveStock:

    def test_remove_decreases_quantity(self):
        service, _ = _setup(quantity=10)
        assert service.remove_stock(1, 4).quantity == 6

    def test_remove_everything(self):
        service, _ = _setup(quantity=10)
        assert service.remove_stock(1, 10).quantity == 0

    def test_remove_more_than_available_rejected(self):
        service, repo = _setup(quantity=10)

        with pytest.raises(InsufficientStockError) as exc_info:
            service.remove_stock(1, 11)

        assert exc_info.value.available == 10
        assert exc_info.value.requested == 11
        assert "available: 10, requested: 11" in str(exc_info.value)
        assert repo.find_by_id(1).quantity == 10

    @pytest.mark.parametrize("amount", [0, -3])
    def test_remove_non_positive_rejected(self, amount):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.remove_stock(1, amount)

    def test_add_then_remove_restores_quantity(self):
        service, _ = _setup(quantity=7)
        service.add_stock(1, 13)
        assert service.remove_stock(1, 13).quantity == 7


class TestUpdatePrice:

    def test_price_is_changed(self):
        service, repo = _setup(price="5.00")
        assert service.update_price(1, Decimal("6.75")).unit_price == Decimal("6.75")
        assert repo.find_by_id(1).quantity == 10

    @pytest.mark.parametrize("price", [None, Decimal("-1"), Decimal("6.755")])
    def test_invalid_price_rejected(self, price):
        service, repo = _setup(price="5.00")

        with pytest.raises(ValidationError) as exc_info:
            service.update_price(1, price)

        assert exc_info.value.outcome is ValidationOutcome.INVALID_PRICE
        assert repo.find_by_id(1).unit_price == Decimal("5.00")

    def test_price_of_missing_product_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.update_price(2, Decimal("1"))
