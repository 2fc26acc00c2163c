"""SQLAlchemy models for the bookstore vertical.

The books table is keyed by ISBN. The to_book() method converts a row
into the Book value record used by the ordering engine.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, RecordMixin
from verticals.bookstore.models.books import Book


class BookRow(RecordMixin, Base):
    """A book in the catalog."""

    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def to_book(self) -> Book:
        return Book(isbn=self.isbn, price=self.price, quantity=self.stock_quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "isbn": self.isbn,
            "price": self.price,
            "stock_quantity": self.stock_quantity,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
