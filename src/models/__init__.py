"""SQLAlchemy models."""

from src.models.post import Post
from src.models.todo import Note, Subtask, Todo
from src.models.user import User

__all__ = [
    "User",
    "Todo",
    "Subtask",
    "Note",
    "Post",
]
