"""Purchase processes, the side-effect sink of the ordering engine.

The engine calls buy_book() once per order line, including lines where
nothing could be bought (quantity 0).
"""

from typing import Protocol, runtime_checkable

from core.observability.log_setup import get_logger
from verticals.bookstore.models.books import Book, Purchase
from verticals.bookstore.repository import SqlBookDatabase

logger = get_logger(__name__)


@runtime_checkable
class BuyBookProcess(Protocol):
    def buy_book(self, book: Book, quantity: int) -> None:
        ...


class RecordingBuyBookProcess:
    """Keeps every purchase in call order."""

    def __init__(self):
        self.purchases: list[Purchase] = []

    def buy_book(self, book: Book, quantity: int) -> None:
        self.purchases.append(Purchase(book=book, quantity=quantity))


class StockDecrementingBuyBookProcess:
    """Takes bought units out of a SqlBookDatabase."""

    def __init__(self, database: SqlBookDatabase):
        self.database = database

    def buy_book(self, book: Book, quantity: int) -> None:
        if quantity == 0:
            return
        updated = self.database.decrement_stock(book.isbn, quantity)
        logger.info(
            "bookstore.stock_decremented",
            isbn=book.isbn,
            quantity=quantity,
            remaining=updated.quantity,
        )
