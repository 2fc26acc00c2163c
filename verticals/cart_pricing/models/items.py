"""Cart item value records."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class ItemType(str, Enum):
    ELECTRONIC = "electronic"
    OTHER = "other"


Money = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class Item:
    """One cart line: category, name, quantity and unit price.

    Unit prices are stored as Decimal; floats are converted through str()
    so ``Item(..., 20.0)`` holds exactly ``Decimal("20.0")``.
    """

    type: ItemType
    name: str
    quantity: int
    price_per_unit: Decimal

    def __post_init__(self):
        if not isinstance(self.type, ItemType):
            object.__setattr__(self, "type", ItemType(self.type))
        if not isinstance(self.price_per_unit, Decimal):
            object.__setattr__(
                self, "price_per_unit", Decimal(str(self.price_per_unit))
            )
        if self.quantity < 0:
            raise ValueError(f"Item quantity must be >= 0, got {self.quantity}")
        if self.price_per_unit < 0:
            raise ValueError(
                f"Item price must be >= 0, got {self.price_per_unit}"
            )

    @property
    def line_total(self) -> Decimal:
        return self.price_per_unit * self.quantity
