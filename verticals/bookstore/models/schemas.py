"""Pydantic schemas for bookstore seed data and summary serialisation."""

from pydantic import BaseModel, Field

from verticals.bookstore.models.books import Book, PurchaseSummary


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BookCreate(BaseModel):
    isbn: str = Field(..., min_length=1, max_length=20)
    price: int = Field(..., ge=0)
    stock_quantity: int = Field(0, ge=0)

    def to_book(self) -> Book:
        return Book(isbn=self.isbn, price=self.price, quantity=self.stock_quantity)


class OrderLine(BaseModel):
    isbn: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class PurchaseSummaryResponse(BaseModel):
    total_price: int
    unavailable: dict[str, int] = Field(default_factory=dict)  # isbn -> shortfall

    @classmethod
    def from_summary(cls, summary: PurchaseSummary) -> "PurchaseSummaryResponse":
        return cls(
            total_price=summary.total_price,
            unavailable={book.isbn: short for book, short in summary.unavailable.items()},
        )
