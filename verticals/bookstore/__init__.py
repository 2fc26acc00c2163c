"""Bookstore vertical — a Barnes-style book ordering engine.

Demonstrates the patterns working together in one domain:
- Book lookup behind a database protocol (in-memory or SQLAlchemy)
- Repository with stock queries
- Pure-function fulfilment rule
- Injected purchase process for side effects
- Pydantic schemas for seed data and summaries
"""

from verticals.bookstore.engine import BarnesAndNoble, OrderingEngine
from verticals.bookstore.models.books import Book, Purchase, PurchaseSummary
from verticals.bookstore.process import (
    BuyBookProcess,
    RecordingBuyBookProcess,
    StockDecrementingBuyBookProcess,
)
from verticals.bookstore.repository import (
    BookDatabase,
    BookNotFoundError,
    InMemoryBookDatabase,
    SqlBookDatabase,
)

__all__ = [
    "BarnesAndNoble",
    "Book",
    "BookDatabase",
    "BookNotFoundError",
    "BuyBookProcess",
    "InMemoryBookDatabase",
    "OrderingEngine",
    "Purchase",
    "PurchaseSummary",
    "RecordingBuyBookProcess",
    "SqlBookDatabase",
    "StockDecrementingBuyBookProcess",
]
