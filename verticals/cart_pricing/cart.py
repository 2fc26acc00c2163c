"""Shopping carts.

ShoppingCart is the seam the pricing engine depends on. Two
implementations:
- ShoppingCartAdaptor: persists lines through a CartStore
- InMemoryShoppingCart: a plain list, for scripts and unit tests
"""

from typing import Protocol, runtime_checkable

from patterns.repository import BaseRepository
from verticals.cart_pricing.models.db_models import CartItemRow
from verticals.cart_pricing.models.items import Item
from verticals.cart_pricing.store import CartStore


@runtime_checkable
class ShoppingCart(Protocol):
    def add(self, item: Item) -> None:
        ...

    def get_items(self) -> list[Item]:
        ...


class CartItemRepository(BaseRepository[CartItemRow]):
    """Repository for cart lines; list() is insertion order."""

    model = CartItemRow


class ShoppingCartAdaptor:
    """ShoppingCart backed by the shopping_cart table of a CartStore."""

    def __init__(self, store: CartStore):
        self.store = store

    def add(self, item: Item) -> None:
        with self.store.session() as session:
            CartItemRepository(session).create(
                {
                    "name": item.name,
                    "type": item.type.value,
                    "quantity": item.quantity,
                    "price_per_unit": str(item.price_per_unit),
                }
            )

    def get_items(self) -> list[Item]:
        """Snapshot of every line, oldest first."""
        with self.store.session() as session:
            return [row.to_item() for row in CartItemRepository(session).list()]

    def number_of_items(self) -> int:
        with self.store.session() as session:
            return CartItemRepository(session).count()


class InMemoryShoppingCart:
    def __init__(self, items: list[Item] | None = None):
        self._items: list[Item] = list(items or [])

    def add(self, item: Item) -> None:
        self._items.append(item)

    def get_items(self) -> list[Item]:
        return list(self._items)

    def number_of_items(self) -> int:
        return len(self._items)
