"""Cart pricing engine.

Holds a cart and an ordered list of price rules; the final price is the
sum of every rule's contribution over the same snapshot of cart lines.
"""

from decimal import Decimal
from typing import Sequence

from core.observability.log_setup import get_logger
from patterns.rules_engine import PriceBreakdown, PriceRule, evaluate_price_rules
from verticals.cart_pricing.cart import ShoppingCart
from verticals.cart_pricing.models.items import Item

logger = get_logger(__name__)


class PricingEngine:
    """Composes independent price rules over a shopping cart.

    Usage::

        amazon = Amazon(ShoppingCartAdaptor(store), default_rules())
        amazon.add_to_cart(Item(ItemType.OTHER, "Book", 1, 20.0))
        amazon.calculate()  # Decimal("25.0")
    """

    def __init__(self, cart: ShoppingCart, rules: Sequence[PriceRule]):
        self.cart = cart
        self.rules = tuple(rules)

    def add_to_cart(self, item: Item) -> None:
        self.cart.add(item)

    def breakdown(self) -> PriceBreakdown:
        """Per-rule contributions, in rule order."""
        items = self.cart.get_items()
        result = evaluate_price_rules(self.rules, items)
        logger.debug(
            "pricing.calculated",
            lines=len(items),
            rules=len(self.rules),
            total=str(result.total),
        )
        return result

    def calculate(self) -> Decimal:
        return self.breakdown().total


Amazon = PricingEngine
