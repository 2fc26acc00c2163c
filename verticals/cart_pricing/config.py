"""Cart pricing vertical configuration.

Re-exports CartPricingConfig from the patterns module, resolved from the
environment once at import.
"""

from patterns.domain_config import CartPricingConfig

config = CartPricingConfig.from_env()
