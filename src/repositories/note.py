"""Note repository."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Query

from src.models.todo import Note, Todo
from src.repositories.base import Repository
from src.schemas.todo import NoteResponse

logger = logging.getLogger(__name__)


class NoteRepository(Repository[Note, NoteResponse]):
    """Notes, owned transitively through their todo."""

    model = Note

    def _filter_owner(self, query: Query, owner_id: int) -> Query:
        return query.join(Todo, Note.todo_id == Todo.id).filter(Todo.owner_id == owner_id)

    def _shape(self, row: Note) -> NoteResponse:
        return NoteResponse.model_validate(row)

    def _get_row(
        self,
        entity_id: int,
        owner_id: int | None = None,
        todo_id: int | None = None,
    ) -> Note | None:
        query = self.db.query(Note).filter(Note.id == entity_id)
        if todo_id is not None:
            query = query.filter(Note.todo_id == todo_id)
        if owner_id is not None:
            query = self._filter_owner(query, owner_id)
        return query.first()

    def find_by_id(
        self,
        entity_id: int,
        owner_id: int | None = None,
        todo_id: int | None = None,
    ) -> NoteResponse | None:
        row = self._get_row(entity_id, owner_id, todo_id)
        if row is None:
            return None
        return self._shape(row)

    def create(self, todo_id: int, fields: Mapping[str, Any]) -> NoteResponse:
        """Attach a note to a todo."""
        note = Note(content=fields["content"], todo_id=todo_id)
        self.db.add(note)
        self.db.commit()
        self.db.refresh(note)

        logger.info(f"Created note {note.id} on todo {todo_id}")
        return self._shape(note)

    def find_many(self, todo_id: int) -> list[NoteResponse]:
        notes = (
            self.db.query(Note)
            .filter(Note.todo_id == todo_id)
            .order_by(Note.created_at.asc(), Note.id.asc())
            .all()
        )
        return [self._shape(note) for note in notes]

    def update(
        self,
        entity_id: int,
        fields: Mapping[str, Any],
        owner_id: int | None = None,
    ) -> NoteResponse | None:
        allowed = {name: value for name, value in fields.items() if name == "content"}
        return super().update(entity_id, allowed, owner_id)

    def count(self, owner_id: int) -> int:
        return self._filter_owner(self.db.query(Note), owner_id).count()
