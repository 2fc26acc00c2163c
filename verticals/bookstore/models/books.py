"""Bookstore value records: books, purchases and purchase summaries."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Book:
    """A catalog entry. Equality and hashing use the ISBN only."""

    isbn: str
    price: int = field(compare=False)
    quantity: int = field(compare=False)  # units in stock

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Book price must be >= 0, got {self.price}")
        if self.quantity < 0:
            raise ValueError(f"Book stock must be >= 0, got {self.quantity}")


@dataclass(frozen=True)
class Purchase:
    """One call to a BuyBookProcess."""

    book: Book
    quantity: int


@dataclass(frozen=True)
class PurchaseSummary:
    """Total charged for an order plus the units that could not be supplied.

    `unavailable` maps Book -> shortfall and never holds a zero shortfall.
    """

    total_price: int = 0
    unavailable: Mapping[Book, int] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self):
        # Copy so callers cannot mutate the summary through their own dict
        object.__setattr__(
            self, "unavailable", MappingProxyType(dict(self.unavailable))
        )

    def get_total_price(self) -> int:
        return self.total_price

    def get_unavailable(self) -> Mapping[Book, int]:
        return self.unavailable
