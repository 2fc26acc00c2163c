"""Bookstore business rules — pure functions.

Decides how much of an order line the current stock can supply.
"""

from dataclasses import dataclass

from verticals.bookstore.models.books import Book


@dataclass(frozen=True)
class LineFulfilment:
    """How an order line splits into bought and missing units."""

    available: int
    shortfall: int

    @property
    def fully_stocked(self) -> bool:
        return self.shortfall == 0


def fulfil_line(book: Book, requested: int) -> LineFulfilment:
    """Buy what stock allows; the rest is shortfall.

    Pure function: takes the book + requested quantity, returns the split.
    """
    available = min(book.quantity, requested)
    return LineFulfilment(available=available, shortfall=requested - available)
