"""SQLAlchemy models for the cart pricing vertical.

One row per cart line. Rows convert back to the Item value record
so the rest of the vertical never sees ORM objects.
"""

from decimal import Decimal

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, RecordMixin
from verticals.cart_pricing.models.items import Item, ItemType


class CartItemRow(RecordMixin, Base):
    """A line in the shopping cart table."""

    __tablename__ = "shopping_cart"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # str(Decimal) keeps every digit; SQLite has no exact decimal type
    price_per_unit: Mapped[str] = mapped_column(String(64), nullable=False)

    def to_item(self) -> Item:
        return Item(
            type=ItemType(self.type),
            name=self.name,
            quantity=self.quantity,
            price_per_unit=Decimal(self.price_per_unit),
        )
