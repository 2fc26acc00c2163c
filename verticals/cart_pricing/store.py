"""Cart store: the database behind ShoppingCartAdaptor.

Owns one SQLAlchemy engine and session factory. Tests create a store,
call reset_database() before each case and close() after it.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from core.database import (
    build_engine,
    build_session_factory,
    close_db,
    drop_db,
    init_db,
    session_scope,
)
from core.observability.log_setup import get_logger
from verticals.cart_pricing.models.db_models import CartItemRow

logger = get_logger(__name__)

_TABLES = [CartItemRow.__table__]


class CartStore:
    """Synchronous store for cart lines.

    Usage::

        with CartStore() as store:
            store.reset_database()
            cart = ShoppingCartAdaptor(store)
    """

    def __init__(self, url: str | None = None, engine: Engine | None = None):
        # Only engines built here are disposed on close
        self._owns_engine = engine is None
        self._engine = engine or build_engine(url)
        self._session_factory = build_session_factory(self._engine)
        self._closed = False
        init_db(self._engine, _TABLES)

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Transactional session; commits on success, rolls back on error."""
        self._ensure_open()
        with session_scope(self._session_factory) as session:
            yield session

    def reset_database(self) -> None:
        """Drop and re-create the cart table. The store stays usable."""
        self._ensure_open()
        drop_db(self._engine, _TABLES)
        init_db(self._engine, _TABLES)
        logger.debug("cart_store.reset")

    def close(self) -> None:
        """Release the engine if this store built it. Safe to call more than once."""
        if self._closed:
            return
        if self._owns_engine:
            close_db(self._engine)
        self._closed = True
        logger.debug("cart_store.closed")

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("CartStore is closed")

    def __enter__(self) -> "CartStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
