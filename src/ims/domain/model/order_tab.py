"""OrderTab aggregate: a table's running tab of products.

Kept in memory only; there is no repository for tabs yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ims.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from ims.domain.model.product import Product


@dataclass
class OrderTab:
    """Aggregate root for a table's tab.

    Invariant: ``total_amount`` always equals the sum of the unit prices
    of ``products``.
    """

    table_number: int
    products: list[Product] = field(default_factory=list)
    total_amount: Decimal = Decimal("0.00")
    id: int | None = None

    @staticmethod
    def open(table_number: int) -> OrderTab:
        """Open an empty tab for a table."""
        if table_number < 1:
            raise InvalidArgumentError(
                f"Table number must be positive, got {table_number}"
            )
        return OrderTab(table_number=table_number)

    def add_product(self, product: Product) -> None:
        self.products.append(product)
        self.total_amount += product.unit_price

    def remove_product(self, product_id: int) -> Product:
        """Remove the first entry for *product_id* and return it."""
        for index, product in enumerate(self.products):
            if product.id == product_id:
                del self.products[index]
                self.total_amount -= product.unit_price
                return product
        raise EntityNotFoundError(
            f"Product with ID {product_id} is not on the tab of table {self.table_number}"
        )

    @property
    def item_count(self) -> int:
        return len(self.products)
