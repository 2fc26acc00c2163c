"""Cart pricing vertical — an Amazon-style price calculator.

Demonstrates the patterns working together in one domain:
- SQLAlchemy-backed cart store with reset/close lifecycle
- Repository over cart lines
- Pure-function price rules composed by an engine
- Dataclass configuration for fees
"""

from verticals.cart_pricing.cart import (
    InMemoryShoppingCart,
    ShoppingCart,
    ShoppingCartAdaptor,
)
from verticals.cart_pricing.engine import Amazon, PricingEngine
from verticals.cart_pricing.models.items import Item, ItemType
from verticals.cart_pricing.rules import (
    DeliveryPrice,
    ExtraCostForElectronics,
    RegularCost,
    default_rules,
)
from verticals.cart_pricing.store import CartStore

__all__ = [
    "Amazon",
    "CartStore",
    "DeliveryPrice",
    "ExtraCostForElectronics",
    "InMemoryShoppingCart",
    "Item",
    "ItemType",
    "PricingEngine",
    "RegularCost",
    "ShoppingCart",
    "ShoppingCartAdaptor",
    "default_rules",
]
