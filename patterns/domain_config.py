"""Dataclass-based domain configuration pattern.

Each vertical defines its fees, thresholds, and limits as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars or test fixtures)

Example domains: cart pricing fees and bookstore inventory.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal


# ---------------------------------------------------------------------------
# Cart pricing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeliveryBand:
    """Flat delivery fee for carts whose line count is in [min_lines, max_lines]."""

    min_lines: int
    max_lines: int
    fee: Decimal

    def covers(self, line_count: int) -> bool:
        return self.min_lines <= line_count <= self.max_lines


def _default_delivery_bands() -> tuple[DeliveryBand, ...]:
    return (
        DeliveryBand(0, 0, Decimal("0.0")),
        DeliveryBand(1, 3, Decimal("5.0")),
        DeliveryBand(4, 10, Decimal("12.5")),
    )


@dataclass(frozen=True)
class CartPricingConfig:
    """Fees applied by the cart price rules.

    Usage::

        config = CartPricingConfig.default()
        fee = config.delivery_fee(len(items))
    """

    delivery_bands: tuple[DeliveryBand, ...] = field(default_factory=_default_delivery_bands)
    delivery_fee_above: Decimal = Decimal("20.0")  # beyond the last band
    electronics_surcharge: Decimal = Decimal("7.50")

    def delivery_fee(self, line_count: int) -> Decimal:
        for band in self.delivery_bands:
            if band.covers(line_count):
                return band.fee
        return self.delivery_fee_above

    @classmethod
    def default(cls) -> "CartPricingConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "CART_PRICING_") -> "CartPricingConfig":
        """Create config from environment variables.

        Example: CART_PRICING_ELECTRONICS_SURCHARGE=9.99
        """
        overrides = {}
        surcharge = os.getenv(f"{prefix}ELECTRONICS_SURCHARGE")
        if surcharge:
            overrides["electronics_surcharge"] = Decimal(surcharge)
        above = os.getenv(f"{prefix}DELIVERY_FEE_ABOVE")
        if above:
            overrides["delivery_fee_above"] = Decimal(above)

        return cls(**overrides)


# ---------------------------------------------------------------------------
# Bookstore
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BookstoreConfig:
    """Inventory thresholds for the bookstore vertical."""

    low_stock_threshold: int = 5

    @classmethod
    def default(cls) -> "BookstoreConfig":
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "BOOKSTORE_") -> "BookstoreConfig":
        """Create config from environment variables.

        Example: BOOKSTORE_LOW_STOCK_THRESHOLD=3
        """
        overrides = {}
        threshold = os.getenv(f"{prefix}LOW_STOCK_THRESHOLD")
        if threshold:
            overrides["low_stock_threshold"] = int(threshold)

        return cls(**overrides)
