"""Book ordering engine.

Prices an order (ISBN -> requested quantity) against the book database,
buys whatever stock allows, and reports the units it could not supply.
"""

from typing import Mapping

from core.observability.log_setup import get_logger
from verticals.bookstore.models.books import Book, PurchaseSummary
from verticals.bookstore.models.schemas import OrderLine
from verticals.bookstore.process import BuyBookProcess
from verticals.bookstore.repository import BookDatabase
from verticals.bookstore.rules import fulfil_line

logger = get_logger(__name__)


class OrderingEngine:
    """Drives a purchase for every line of an order.

    Usage::

        shop = BarnesAndNoble(database, process)
        summary = shop.get_price_for_cart({"ISBN1": 2, "ISBN2": 5})
        summary.total_price, dict(summary.unavailable)
    """

    def __init__(self, database: BookDatabase, process: BuyBookProcess):
        self.database = database
        self.process = process

    def get_price_for_cart(self, order: Mapping[str, int] | None) -> PurchaseSummary | None:
        """Price and buy `order`.

        Returns None for a None order. Every line triggers exactly one
        buy_book() call with min(stock, requested), even when that is 0.
        Raises pydantic.ValidationError (a ValueError) for a negative
        quantity, before anything is looked up or bought, and
        BookNotFoundError for an unknown ISBN.
        """
        if order is None:
            return None

        lines = [OrderLine(isbn=isbn, quantity=qty) for isbn, qty in order.items()]

        total = 0
        unavailable: dict[Book, int] = {}
        for line in lines:
            book = self.database.find_by_isbn(line.isbn)
            fulfilment = fulfil_line(book, line.quantity)
            total += fulfilment.available * book.price
            if not fulfilment.fully_stocked:
                unavailable[book] = unavailable.get(book, 0) + fulfilment.shortfall
            self.process.buy_book(book, fulfilment.available)
            logger.debug(
                "bookstore.line_priced",
                isbn=line.isbn,
                requested=line.quantity,
                bought=fulfilment.available,
                shortfall=fulfilment.shortfall,
            )

        logger.info(
            "bookstore.order_priced",
            lines=len(lines),
            total_price=total,
            unavailable=len(unavailable),
        )
        return PurchaseSummary(total_price=total, unavailable=unavailable)


BarnesAndNoble = OrderingEngine
