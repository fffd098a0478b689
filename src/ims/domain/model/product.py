"""Product entity.

The only durable record in the catalog. Business rules live in the
service layer; the entity itself is a plain data holder.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ProductField(Enum):
    """Columns that may be changed through a partial update.

    Values double as the column names, so a partial update can never
    reference a column outside this list.
    """

    NAME = "name"
    QUANTITY = "quantity"
    UNIT_PRICE = "unit_price"


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the store assigns one on creation and never
    changes afterwards. ``unit_price`` is a Decimal to keep currency
    amounts exact.
    """

    name: str
    quantity: int
    unit_price: Decimal
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
