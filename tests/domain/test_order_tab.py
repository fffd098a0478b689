"""Unit tests for the OrderTab aggregate."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from ims.domain.model.order_tab import OrderTab
from ims.domain.model.product import Product


def _product(product_id, price):
    return Product(id=product_id, name=f"Item {product_id}", quantity=10, unit_price=Decimal(price))


class TestOrderTab:

    def test_open_starts_empty(self):
        tab = OrderTab.open(4)
        assert tab.table_number == 4
        assert tab.products == []
        assert tab.total_amount == Decimal("0")

    def test_open_rejects_non_positive_table(self):
        with pytest.raises(InvalidArgumentError, match="Table number"):
            OrderTab.open(0)

    def test_adding_products_keeps_running_total(self):
        tab = OrderTab.open(1)
        tab.add_product(_product(1, "12.50"))
        tab.add_product(_product(2, "7.25"))
        tab.add_product(_product(1, "12.50"))

        assert tab.item_count == 3
        assert tab.total_amount == Decimal("32.25")

    def test_remove_product_subtracts_its_price(self):
        tab = OrderTab.open(1)
        tab.add_product(_product(1, "12.50"))
        tab.add_product(_product(2, "7.25"))

        removed = tab.remove_product(1)

        assert removed.id == 1
        assert tab.item_count == 1
        assert tab.total_amount == Decimal("7.25")

    def test_remove_missing_product_rejected(self):
        tab = OrderTab.open(1)
        with pytest.raises(EntityNotFoundError, match="not on the tab"):
            tab.remove_product(99)
