"""Shared fixtures for the retail verticals."""
import pytest

from verticals.bookstore.models.books import Book
from verticals.cart_pricing.cart import ShoppingCartAdaptor
from verticals.cart_pricing.store import CartStore


@pytest.fixture
def cart_store():
    store = CartStore()
    store.reset_database()
    yield store
    store.close()


@pytest.fixture
def shopping_cart(cart_store):
    return ShoppingCartAdaptor(cart_store)


@pytest.fixture
def book_in_stock():
    return Book("ISBN1", 10, 5)


@pytest.fixture
def book_partial_stock():
    return Book("ISBN2", 20, 3)
