"""Repositories: the data-access layer between the API and the database."""

from src.repositories.base import Repository
from src.repositories.note import NoteRepository
from src.repositories.post import PostRepository
from src.repositories.subtask import SubtaskRepository
from src.repositories.todo import TodoRepository
from src.repositories.user import UserAlreadyExistsError, UserRepository

__all__ = [
    "Repository",
    "UserRepository",
    "UserAlreadyExistsError",
    "TodoRepository",
    "SubtaskRepository",
    "NoteRepository",
    "PostRepository",
]
