"""Repository pattern for database access.

Provides a generic base repository with the CRUD operations the retail
verticals share: insert, ordered listing, count, lookup by column, and
update. Verticals subclass this to add domain-specific queries.

Example: BookRepository extending BaseRepository.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.models.base import Base

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic repository over a single mapped model.

    Subclass and set `model` to your SQLAlchemy model::

        class BookRepository(BaseRepository[BookRow]):
            model = BookRow

            def low_stock(self, threshold: int):
                stmt = select(self.model).where(self.model.stock_quantity <= threshold)
                return list(self.session.scalars(stmt))
    """

    model: type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # -- List in insertion order --

    def list(self) -> list[ModelT]:
        """All rows, oldest first."""
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.scalars(stmt))

    # -- Count --

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self.session.scalar(stmt) or 0

    # -- Get by column --

    def get_by(self, **filters: Any) -> ModelT | None:
        """Single row matching every `column=value` filter, or None."""
        stmt = select(self.model)
        for col_name, value in filters.items():
            stmt = stmt.where(getattr(self.model, col_name) == value)
        return self.session.scalars(stmt).one_or_none()

    # -- Create --

    def create(self, data: dict[str, Any]) -> ModelT:
        """Insert a new row and flush so its id is assigned."""
        row = self.model(**data)
        self.session.add(row)
        self.session.flush()
        return row

    # -- Update --

    def update(self, row: ModelT, data: dict[str, Any]) -> ModelT:
        for key, value in data.items():
            if hasattr(row, key) and key not in ("id", "created_at"):
                setattr(row, key, value)
        self.session.flush()
        return row
