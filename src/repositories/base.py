"""Repository contract shared by every entity."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Query, Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
RecordT = TypeVar("RecordT")


class Repository(ABC, Generic[ModelT, RecordT]):
    """Data access for one entity over an injected session.

    Subclasses declare ``model``, restrict queries to an owner and shape ORM
    rows into records. Lookups constrained by an owner report a row that
    belongs to someone else exactly like a missing row.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    @abstractmethod
    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        """Restrict a query on ``model`` to rows reachable from ``owner_id``."""

    @abstractmethod
    def _shape(self, row: ModelT) -> RecordT:
        """Convert a row into the record handed to callers."""

    def _get_row(self, entity_id: int, owner_id: int | None = None) -> ModelT | None:
        query = self.db.query(self.model).filter(self.model.id == entity_id)
        if owner_id is not None:
            query = self._filter_owner(query, owner_id)
        return query.first()

    def find_by_id(self, entity_id: int, owner_id: int | None = None) -> RecordT | None:
        """Get a record by id, optionally only if it belongs to ``owner_id``."""
        row = self._get_row(entity_id, owner_id)
        if row is None:
            return None
        return self._shape(row)

    def exists(self, entity_id: int, owner_id: int | None = None) -> bool:
        """Check whether a row exists (and is reachable from ``owner_id``)."""
        return self._get_row(entity_id, owner_id) is not None

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> RecordT | None:
        """Apply only the given fields and bump ``updated_at``."""
        row = self._get_row(entity_id, owner_id)
        if row is None:
            return None

        for name, value in fields.items():
            setattr(row, name, value)
        row.touch()

        self.db.commit()
        self.db.refresh(row)
        return self._shape(row)

    def delete(self, entity_id: int, owner_id: int | None = None) -> bool:
        """Delete a row and its dependents. Returns False if nothing matched."""
        row = self._get_row(entity_id, owner_id)
        if row is None:
            return False

        self.db.delete(row)
        self.db.commit()
        logger.info(f"Deleted {self.model.__tablename__} row {entity_id}")
        return True
