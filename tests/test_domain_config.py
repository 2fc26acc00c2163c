"""Test domain configuration and logging setup."""
import logging
from decimal import Decimal

import pytest
import structlog

from core.observability import log_setup
from patterns.domain_config import BookstoreConfig, CartPricingConfig
from verticals.cart_pricing.cart import InMemoryShoppingCart
from verticals.cart_pricing.engine import Amazon
from verticals.cart_pricing.models.items import Item, ItemType
from verticals.cart_pricing.rules import RegularCost


def test_cart_pricing_defaults():
    config = CartPricingConfig.default()
    assert config.delivery_fee(0) == 0
    assert config.delivery_fee(3) == Decimal("5.0")
    assert config.delivery_fee(4) == Decimal("12.5")
    assert config.delivery_fee(10) == Decimal("12.5")
    assert config.delivery_fee(11) == Decimal("20.0")
    assert config.electronics_surcharge == Decimal("7.50")


def test_cart_pricing_from_env(monkeypatch):
    monkeypatch.setenv("CART_PRICING_ELECTRONICS_SURCHARGE", "9.99")
    monkeypatch.setenv("CART_PRICING_DELIVERY_FEE_ABOVE", "25")
    config = CartPricingConfig.from_env()
    assert config.electronics_surcharge == Decimal("9.99")
    assert config.delivery_fee(50) == Decimal("25")
    assert config.delivery_fee(2) == Decimal("5.0")


def test_config_is_frozen():
    config = CartPricingConfig.default()
    with pytest.raises(AttributeError):
        config.electronics_surcharge = Decimal("0")


def test_bookstore_from_env(monkeypatch):
    assert BookstoreConfig.from_env().low_stock_threshold == 5
    monkeypatch.setenv("BOOKSTORE_LOW_STOCK_THRESHOLD", "2")
    assert BookstoreConfig.from_env().low_stock_threshold == 2


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging() run again; restore structlog and root logging after."""
    saved = structlog.get_config()
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(log_setup, "_CONFIGURED", False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    yield
    structlog.configure(**saved)


def test_configure_logging_is_one_shot(fresh_logging, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    log_setup.configure_logging("debug")
    first = structlog.get_config()["processors"][-1]
    log_setup.configure_logging("info")

    assert isinstance(first, structlog.processors.JSONRenderer)
    assert structlog.get_config()["processors"][-1] is first


def test_get_logger_configures_logging(fresh_logging, capsys):
    logger = log_setup.get_logger("tests")
    assert log_setup._CONFIGURED

    logger.info("hello", answer=42)
    logger.debug("hidden")

    out = capsys.readouterr().out
    assert "hello" in out
    assert "component=tests" in out
    assert "hidden" not in out


def test_calculate_is_silent_at_default_level(fresh_logging, capsys):
    log_setup.get_logger("tests")
    amazon = Amazon(InMemoryShoppingCart([Item(ItemType.OTHER, "Book", 1, 20.0)]), [RegularCost()])

    assert amazon.calculate() == 20
    assert capsys.readouterr().out == ""


def test_debug_level_shows_pricing_events(fresh_logging, monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    log_setup.get_logger("tests")

    Amazon(InMemoryShoppingCart(), [RegularCost()]).calculate()

    assert "pricing.calculated" in capsys.readouterr().out
