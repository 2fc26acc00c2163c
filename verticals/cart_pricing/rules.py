"""Cart price rules: pure functions over item lines.

Each rule implements the PriceRule capability from the rules engine
pattern. Fees come from CartPricingConfig so they can be overridden
without touching the rules.
"""

from decimal import Decimal
from typing import Sequence

from patterns.domain_config import CartPricingConfig
from patterns.rules_engine import PriceRule
from verticals.cart_pricing.config import config as vertical_config
from verticals.cart_pricing.models.items import Item, ItemType


class RegularCost:
    """Sum of quantity × unit price over every line."""

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        return sum((item.line_total for item in items), Decimal("0"))


class DeliveryPrice:
    """Flat fee stepped on the number of lines, not the summed quantity.

    0 lines → 0.0, 1-3 → 5.0, 4-10 → 12.5, 11+ → 20.0 with the default config.
    Without `config`, fees come from the environment-resolved vertical config.
    """

    def __init__(self, config: CartPricingConfig | None = None):
        self.config = config or vertical_config

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        return self.config.delivery_fee(len(items))


class ExtraCostForElectronics:
    """Surcharge once per cart holding any electronic line."""

    def __init__(self, config: CartPricingConfig | None = None):
        self.config = config or vertical_config

    def price_to_aggregate(self, items: Sequence[Item]) -> Decimal:
        if any(item.type == ItemType.ELECTRONIC for item in items):
            return self.config.electronics_surcharge
        return Decimal("0.0")


def default_rules(config: CartPricingConfig | None = None) -> list[PriceRule]:
    """Regular cost, delivery and electronics surcharge, in that order.

    Without `config`, fees come from the environment-resolved vertical config.
    """
    config = config or vertical_config
    return [RegularCost(), DeliveryPrice(config), ExtraCostForElectronics(config)]
