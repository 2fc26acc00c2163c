"""Test the book ordering engine against mocked collaborators."""
from unittest.mock import ANY, create_autospec

import pytest
from pydantic import ValidationError

from verticals.bookstore.engine import BarnesAndNoble, OrderingEngine
from verticals.bookstore.models.books import Book
from verticals.bookstore.process import BuyBookProcess
from verticals.bookstore.repository import BookDatabase, BookNotFoundError


@pytest.fixture
def book_database():
    return create_autospec(BookDatabase, instance=True)


@pytest.fixture
def process():
    return create_autospec(BuyBookProcess, instance=True)


@pytest.fixture
def barnes_and_noble(book_database, process):
    return BarnesAndNoble(book_database, process)


def _stock(book_database, *books):
    catalog = {book.isbn: book for book in books}
    book_database.find_by_isbn.side_effect = lambda isbn: catalog[isbn]


def test_barnes_alias():
    assert BarnesAndNoble is OrderingEngine


def test_get_price_null_cart(barnes_and_noble, book_database, process):
    assert barnes_and_noble.get_price_for_cart(None) is None
    book_database.find_by_isbn.assert_not_called()
    process.buy_book.assert_not_called()


def test_get_price_empty_cart(barnes_and_noble, process):
    summary = barnes_and_noble.get_price_for_cart({})

    assert summary.get_total_price() == 0
    assert summary.get_unavailable() == {}
    process.buy_book.assert_not_called()


def test_get_price_single_book_in_stock(barnes_and_noble, book_database, process, book_in_stock):
    _stock(book_database, book_in_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN1": 2})

    assert summary.get_total_price() == 20
    assert len(summary.get_unavailable()) == 0
    process.buy_book.assert_called_once_with(book_in_stock, 2)


def test_get_price_single_book_partial_stock(
    barnes_and_noble, book_database, process, book_partial_stock
):
    _stock(book_database, book_partial_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN2": 5})

    assert summary.get_total_price() == 60
    assert dict(summary.get_unavailable()) == {book_partial_stock: 2}
    process.buy_book.assert_called_once_with(book_partial_stock, 3)


def test_get_price_single_book_out_of_stock(barnes_and_noble, book_database, process):
    out_of_stock = Book("ISBN1", 10, 0)
    _stock(book_database, out_of_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN1": 2})

    assert summary.get_total_price() == 0
    assert dict(summary.get_unavailable()) == {out_of_stock: 2}
    process.buy_book.assert_called_once_with(out_of_stock, 0)


def test_get_price_multiple_books_mixed_stock(
    barnes_and_noble, book_database, process, book_in_stock, book_partial_stock
):
    _stock(book_database, book_in_stock, book_partial_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN1": 2, "ISBN2": 5})

    assert summary.get_total_price() == 80
    assert dict(summary.get_unavailable()) == {book_partial_stock: 2}
    process.buy_book.assert_any_call(book_in_stock, 2)
    process.buy_book.assert_any_call(book_partial_stock, 3)
    assert process.buy_book.call_count == 2


def test_total_is_order_invariant(book_database, process, book_in_stock, book_partial_stock):
    _stock(book_database, book_in_stock, book_partial_stock)
    engine = OrderingEngine(book_database, process)

    forward = engine.get_price_for_cart({"ISBN1": 7, "ISBN2": 5})
    backward = engine.get_price_for_cart({"ISBN2": 5, "ISBN1": 7})

    assert forward == backward
    assert forward.total_price == 5 * 10 + 3 * 20


def test_exact_stock_is_not_unavailable(barnes_and_noble, book_database, book_partial_stock):
    _stock(book_database, book_partial_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN2": 3})

    assert summary.total_price == 60
    assert book_partial_stock not in summary.unavailable


def test_zero_requested_buys_nothing(barnes_and_noble, book_database, process, book_in_stock):
    _stock(book_database, book_in_stock)

    summary = barnes_and_noble.get_price_for_cart({"ISBN1": 0})

    assert summary.total_price == 0
    assert summary.unavailable == {}
    process.buy_book.assert_called_once_with(book_in_stock, 0)


def test_negative_quantity_rejected_before_buying(
    barnes_and_noble, book_database, process, book_in_stock
):
    _stock(book_database, book_in_stock)

    with pytest.raises(ValidationError):
        barnes_and_noble.get_price_for_cart({"ISBN1": 2, "ISBN2": -1})

    book_database.find_by_isbn.assert_not_called()
    process.buy_book.assert_not_called()


def test_unknown_isbn_propagates(barnes_and_noble, book_database, process):
    book_database.find_by_isbn.side_effect = BookNotFoundError("MISSING")

    with pytest.raises(BookNotFoundError, match="MISSING"):
        barnes_and_noble.get_price_for_cart({"MISSING": 1})

    process.buy_book.assert_not_called()


def test_equal_books_collapse_in_unavailable(book_database, process):
    # Two lookups returning distinct Book objects with the same ISBN
    first = Book("ISBN9", 10, 1)
    second = Book("ISBN9", 10, 1)
    book_database.find_by_isbn.side_effect = [first, second]
    engine = OrderingEngine(book_database, process)

    summary = engine.get_price_for_cart({"a": 3, "b": 2})

    assert dict(summary.unavailable) == {first: 3}
    assert summary.total_price == 20
    process.buy_book.assert_called_with(ANY, 1)


def test_summary_is_read_only(barnes_and_noble, book_database, book_partial_stock):
    _stock(book_database, book_partial_stock)
    summary = barnes_and_noble.get_price_for_cart({"ISBN2": 5})

    with pytest.raises(TypeError):
        summary.unavailable[book_partial_stock] = 0
