"""Todo, subtask and note schemas."""

from datetime import date, datetime

from pydantic import Field, computed_field, field_validator

from src.schemas.base import CamelModel


def _reject_null(value, field_name: str):
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value


class SubtaskCreate(CamelModel):
    """Create a subtask."""

    title: str = Field(..., min_length=1, max_length=255)
    completed: bool = False


class SubtaskUpdate(CamelModel):
    """Partially update a subtask."""

    title: str | None = Field(None, min_length=1, max_length=255)
    completed: bool | None = None

    @field_validator("title", "completed")
    @classmethod
    def not_null(cls, value, info):
        return _reject_null(value, info.field_name)


class SubtaskResponse(CamelModel):
    """Subtask response."""

    id: int
    title: str
    completed: bool
    todo_id: int
    created_at: datetime
    updated_at: datetime


class NoteCreate(CamelModel):
    """Create a note."""

    content: str = Field(..., min_length=1, max_length=10000)


class NoteUpdate(CamelModel):
    """Partially update a note."""

    content: str | None = Field(None, min_length=1, max_length=10000)

    @field_validator("content")
    @classmethod
    def not_null(cls, value, info):
        return _reject_null(value, info.field_name)


class NoteResponse(CamelModel):
    """Note response."""

    id: int
    content: str
    todo_id: int
    created_at: datetime
    updated_at: datetime


class TodoCreate(CamelModel):
    """Create a todo, optionally with initial subtasks and notes."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    due_date: date | None = None
    subtasks: list[SubtaskCreate] = Field(default_factory=list)
    notes: list[NoteCreate] = Field(default_factory=list)


class TodoUpdate(CamelModel):
    """Partially update a todo.

    Only fields present in the request body are applied. ``description`` and
    ``dueDate`` may be set to null to clear them.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    due_date: date | None = None
    completed: bool | None = None

    @field_validator("title", "completed")
    @classmethod
    def not_null(cls, value, info):
        return _reject_null(value, info.field_name)


class TodoResponse(CamelModel):
    """Todo response with embedded subtasks and notes."""

    id: int
    title: str
    description: str | None
    completed: bool
    due_date: date | None
    owner_id: int
    created_at: datetime
    updated_at: datetime
    subtasks: list[SubtaskResponse] = Field(default_factory=list)
    notes: list[NoteResponse] = Field(default_factory=list)

    @computed_field(alias="isOverdue")
    @property
    def is_overdue(self) -> bool:
        """Whether the todo is still open past its due date."""
        return not self.completed and self.due_date is not None and self.due_date < date.today()
