"""Todo repository."""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from sqlalchemy.orm import Query, Session

from src.models.enums import TodoInclude, TodoOrder
from src.models.todo import Note, Subtask, Todo
from src.repositories.base import Repository
from src.repositories.note import NoteRepository
from src.repositories.subtask import SubtaskRepository
from src.schemas.todo import TodoResponse

logger = logging.getLogger(__name__)

TODO_ORDERING = {
    TodoOrder.CREATED_DESC: (Todo.created_at.desc(), Todo.id.desc()),
    TodoOrder.CREATED_ASC: (Todo.created_at.asc(), Todo.id.asc()),
    TodoOrder.UPDATED_DESC: (Todo.updated_at.desc(), Todo.id.desc()),
    TodoOrder.DUE_DATE_ASC: (Todo.due_date.is_(None), Todo.due_date.asc(), Todo.id.asc()),
}


class TodoRepository(Repository[Todo, TodoResponse]):
    """Todos owned by users, with subtasks and notes embedded on request."""

    model = Todo

    def __init__(self, db: Session):
        super().__init__(db)
        self.subtasks = SubtaskRepository(db)
        self.notes = NoteRepository(db)

    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        return query.filter(Todo.owner_id == owner_id)

    def _shape(self, row: Todo, include: TodoInclude = TodoInclude.ALL) -> TodoResponse:
        return TodoResponse(
            id=row.id,
            title=row.title,
            description=row.description,
            completed=bool(row.completed),
            due_date=row.due_date,
            owner_id=row.owner_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
            subtasks=self.subtasks.find_many(row.id) if include & TodoInclude.SUBTASKS else [],
            notes=self.notes.find_many(row.id) if include & TodoInclude.NOTES else [],
        )

    def create(self, owner_id: int, fields: Mapping[str, Any]) -> TodoResponse:
        """Create a todo, plus any nested ``subtasks``/``notes`` given in ``fields``."""
        todo = Todo(
            title=fields["title"],
            description=fields.get("description"),
            completed=bool(fields.get("completed", False)),
            due_date=fields.get("due_date"),
            owner_id=owner_id,
        )
        for subtask in fields.get("subtasks") or []:
            todo.subtasks.append(
                Subtask(title=subtask["title"], completed=bool(subtask.get("completed", False)))
            )
        for note in fields.get("notes") or []:
            todo.notes.append(Note(content=note["content"]))

        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)

        logger.info(f"Created todo {todo.id} for user {owner_id}")
        return self._shape(todo)

    def find_by_id(
        self,
        entity_id: int,
        owner_id: int | None = None,
        include: TodoInclude = TodoInclude.ALL,
    ) -> TodoResponse | None:
        row = self._get_row(entity_id, owner_id)
        if row is None:
            return None
        return self._shape(row, include)

    def find_many(
        self,
        owner_id: int,
        include: TodoInclude = TodoInclude.ALL,
        order: TodoOrder = TodoOrder.CREATED_DESC,
        completed: bool | None = None,
        with_due_date: bool | None = None,
        limit: int | None = None,
    ) -> list[TodoResponse]:
        """List a user's todos.

        ``completed`` and ``with_due_date`` filter when not None; ``include``
        picks which collections are fetched for every todo.
        """
        query = self._filter_owner(self.db.query(Todo), owner_id)
        if completed is not None:
            query = query.filter(Todo.completed.is_(completed))
        if with_due_date is True:
            query = query.filter(Todo.due_date.is_not(None))
        elif with_due_date is False:
            query = query.filter(Todo.due_date.is_(None))

        query = query.order_by(*TODO_ORDERING[order])
        if limit is not None:
            query = query.limit(limit)

        return [self._shape(todo, include) for todo in query.all()]

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> TodoResponse | None:
        allowed = {
            name: value
            for name, value in fields.items()
            if name in ("title", "description", "completed", "due_date")
        }
        return super().update(entity_id, allowed, owner_id)

    def count(
        self,
        owner_id: int,
        completed: bool | None = None,
        due_before: date | None = None,
    ) -> int:
        """Count a user's todos, optionally by completion and due date."""
        query = self._filter_owner(self.db.query(Todo), owner_id)
        if completed is not None:
            query = query.filter(Todo.completed.is_(completed))
        if due_before is not None:
            query = query.filter(Todo.due_date.is_not(None), Todo.due_date < due_before)
        return query.count()
