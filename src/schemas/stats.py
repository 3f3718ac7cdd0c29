"""Statistics schemas."""

from datetime import datetime

from src.schemas.base import CamelModel


class RecentlyCompletedTodo(CamelModel):
    """A completed todo shown on the dashboard."""

    id: int
    title: str
    updated_at: datetime


class StatsResponse(CamelModel):
    """Aggregated progress for the current user."""

    total_todos: int
    completed_todos: int
    pending_todos: int
    overdue_todos: int
    total_subtasks: int
    completed_subtasks: int
    pending_subtasks: int
    completion_rate: float
    recently_completed: list[RecentlyCompletedTodo]
