"""Subtask repository."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Query

from src.models.todo import Subtask, Todo
from src.repositories.base import Repository
from src.schemas.todo import SubtaskResponse

logger = logging.getLogger(__name__)


class SubtaskRepository(Repository[Subtask, SubtaskResponse]):
    """Subtasks, owned transitively through their todo."""

    model = Subtask

    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        return query.join(Todo, Subtask.todo_id == Todo.id).filter(Todo.owner_id == owner_id)

    def _shape(self, row: Subtask) -> SubtaskResponse:
        return SubtaskResponse.model_validate(row)

    def _get_row(
        self,
        entity_id: int,
        owner_id: int | None = None,
        todo_id: int | None = None,
    ) -> Subtask | None:
        query = self.db.query(Subtask).filter(Subtask.id == entity_id)
        if todo_id is not None:
            query = query.filter(Subtask.todo_id == todo_id)
        if owner_id is not None:
            query = self._filter_owner(query, owner_id)
        return query.first()

    def find_by_id(
        self,
        entity_id: int,
        owner_id: int | None = None,
        todo_id: int | None = None,
    ) -> SubtaskResponse | None:
        """Get a subtask, optionally only under ``todo_id`` and ``owner_id``."""
        row = self._get_row(entity_id, owner_id, todo_id)
        if row is None:
            return None
        return self._shape(row)

    def create(self, todo_id: int, fields: Mapping[str, Any]) -> SubtaskResponse:
        """Add a subtask to a todo."""
        subtask = Subtask(
            title=fields["title"],
            completed=bool(fields.get("completed", False)),
            todo_id=todo_id,
        )
        self.db.add(subtask)
        self.db.commit()
        self.db.refresh(subtask)

        logger.info(f"Created subtask {subtask.id} on todo {todo_id}")
        return self._shape(subtask)

    def find_many(self, todo_id: int) -> list[SubtaskResponse]:
        """List a todo's subtasks, oldest first."""
        subtasks = (
            self.db.query(Subtask)
            .filter(Subtask.todo_id == todo_id)
            .order_by(Subtask.created_at.asc(), Subtask.id.asc())
            .all()
        )
        return [self._shape(subtask) for subtask in subtasks]

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> SubtaskResponse | None:
        allowed = {
            name: value for name, value in fields.items() if name in ("title", "completed")
        }
        return super().update(entity_id, allowed, owner_id)

    def count(self, owner_id: int, completed: bool | None = None) -> int:
        """Count subtasks across all of a user's todos."""
        query = self._filter_owner(self.db.query(Subtask), owner_id)
        if completed is not None:
            query = query.filter(Subtask.completed.is_(completed))
        return query.count()
