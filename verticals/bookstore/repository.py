"""Bookstore repository: book lookup by ISBN.

BookDatabase is the seam the ordering engine depends on. Two
implementations:
- InMemoryBookDatabase: a dict of Book records, for fixtures and scripts
- SqlBookDatabase: SQLAlchemy-backed catalog with stock updates and
  low-stock queries
"""

from typing import Iterable, Protocol, runtime_checkable

from sqlalchemy import Engine, select

from core.database import (
    build_engine,
    build_session_factory,
    close_db,
    init_db,
    session_scope,
)
from core.observability.log_setup import get_logger
from patterns.repository import BaseRepository
from verticals.bookstore.config import config
from verticals.bookstore.models.books import Book
from verticals.bookstore.models.db_models import BookRow
from verticals.bookstore.models.schemas import BookCreate

logger = get_logger(__name__)


class BookNotFoundError(LookupError):
    """No book with the requested ISBN."""

    def __init__(self, isbn: str):
        super().__init__(f"Book not found: {isbn}")
        self.isbn = isbn


@runtime_checkable
class BookDatabase(Protocol):
    def find_by_isbn(self, isbn: str) -> Book:
        ...


# ---------------------------------------------------------------------------
# In-memory database
# ---------------------------------------------------------------------------

class InMemoryBookDatabase:
    def __init__(self, books: Iterable[Book] = ()):
        self._books: dict[str, Book] = {}
        for book in books:
            self.add(book)

    def add(self, book: Book) -> None:
        self._books[book.isbn] = book

    def find_by_isbn(self, isbn: str) -> Book:
        try:
            return self._books[isbn]
        except KeyError:
            raise BookNotFoundError(isbn) from None


# ---------------------------------------------------------------------------
# SQL database
# ---------------------------------------------------------------------------

class BookRepository(BaseRepository[BookRow]):
    """Repository for book lookups and stock levels."""

    model = BookRow

    def get_by_isbn(self, isbn: str) -> BookRow | None:
        return self.get_by(isbn=isbn)

    def get_low_stock(self, threshold: int) -> list[BookRow]:
        """Books with 0 < stock <= threshold, lowest stock first."""
        stmt = select(BookRow).where(
            BookRow.stock_quantity <= threshold,
            BookRow.stock_quantity > 0,
        ).order_by(BookRow.stock_quantity, BookRow.isbn)
        return list(self.session.scalars(stmt))


class SqlBookDatabase:
    """BookDatabase over the books table.

    Usage::

        db = SqlBookDatabase()
        db.add_book(BookCreate(isbn="ISBN1", price=10, stock_quantity=5))
        db.find_by_isbn("ISBN1")
    """

    def __init__(self, url: str | None = None, engine: Engine | None = None):
        self._owns_engine = engine is None
        self._engine = engine or build_engine(url)
        self._session_factory = build_session_factory(self._engine)
        init_db(self._engine, [BookRow.__table__])

    def add_book(self, data: BookCreate | dict) -> Book:
        record = data if isinstance(data, BookCreate) else BookCreate(**data)
        with session_scope(self._session_factory) as session:
            row = BookRepository(session).create(record.model_dump())
            return row.to_book()

    def find_by_isbn(self, isbn: str) -> Book:
        with session_scope(self._session_factory) as session:
            row = BookRepository(session).get_by_isbn(isbn)
            if row is None:
                raise BookNotFoundError(isbn)
            return row.to_book()

    def decrement_stock(self, isbn: str, quantity: int) -> Book:
        """Remove `quantity` units from stock and return the updated book."""
        if quantity < 0:
            raise ValueError(f"Cannot remove a negative quantity: {quantity}")
        with session_scope(self._session_factory) as session:
            repo = BookRepository(session)
            row = repo.get_by_isbn(isbn)
            if row is None:
                raise BookNotFoundError(isbn)
            if row.stock_quantity < quantity:
                raise ValueError(
                    f"Insufficient stock for {isbn}: "
                    f"{row.stock_quantity} available, {quantity} requested"
                )
            repo.update(row, {"stock_quantity": row.stock_quantity - quantity})
            return row.to_book()

    def low_stock(self, threshold: int | None = None) -> list[dict]:
        threshold = config.low_stock_threshold if threshold is None else threshold
        with session_scope(self._session_factory) as session:
            return [row.to_dict() for row in BookRepository(session).get_low_stock(threshold)]

    def close(self) -> None:
        """Dispose the engine unless it was passed in by the caller."""
        if self._owns_engine:
            close_db(self._engine)
        logger.debug("book_database.closed")
