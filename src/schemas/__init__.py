"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from src.schemas.calendar import CalendarDay, CalendarMonth
from src.schemas.post import PostAuthor, PostCreate, PostResponse, PostUpdate
from src.schemas.stats import RecentlyCompletedTodo, StatsResponse
from src.schemas.todo import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    SubtaskCreate,
    SubtaskResponse,
    SubtaskUpdate,
    TodoCreate,
    TodoResponse,
    TodoUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "SubtaskCreate",
    "SubtaskUpdate",
    "SubtaskResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "StatsResponse",
    "RecentlyCompletedTodo",
    "CalendarDay",
    "CalendarMonth",
    "PostAuthor",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
]
