"""Pure-function rules engine pattern.

Price rules are stateless objects: items -> contribution.
No database, no side effects. This makes them:
- Trivially testable (pure input/output)
- Composable (an engine sums an ordered list of them)
- Auditable (every contribution is recorded by rule name)

Example domain: a shopping cart whose final price is regular cost plus fees.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Protocol, Sequence, runtime_checkable


# ---------------------------------------------------------------------------
# Rule capability
# ---------------------------------------------------------------------------

@runtime_checkable
class PriceRule(Protocol):
    """Anything that maps item lines to an amount added to the final price."""

    def price_to_aggregate(self, items: Sequence[Any]) -> Decimal:
        ...


def rule_name(rule: Any) -> str:
    """Stable display name for a rule (class name unless it sets `name`)."""
    name = getattr(rule, "name", None)
    return name if isinstance(name, str) and name else type(rule).__name__


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RuleContribution:
    """Outcome of a single rule evaluation."""

    rule_name: str
    amount: Decimal


@dataclass
class PriceBreakdown:
    """Aggregate outcome of an ordered list of rules."""

    contributions: list[RuleContribution] = field(default_factory=list)
    total: Decimal = Decimal("0")

    def __post_init__(self):
        total = Decimal("0")
        for contribution in self.contributions:
            total += contribution.amount
        self.total = total

    def amount_for(self, name: str) -> Decimal:
        """Summed contribution of every rule named `name`."""
        return sum(
            (c.amount for c in self.contributions if c.rule_name == name),
            Decimal("0"),
        )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def to_decimal(amount: Any) -> Decimal:
    """Normalise a rule result; floats go through str() to keep 12.5 as 12.5."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def evaluate_price_rules(
    rules: Iterable[PriceRule], items: Sequence[Any]
) -> PriceBreakdown:
    """Apply `rules` in order to the same item snapshot.

    Example::

        breakdown = evaluate_price_rules(
            [RegularCost(), DeliveryPrice()],
            cart.get_items(),
        )
        breakdown.total
    """
    return PriceBreakdown(
        contributions=[
            RuleContribution(
                rule_name=rule_name(rule),
                amount=to_decimal(rule.price_to_aggregate(items)),
            )
            for rule in rules
        ],
    )
