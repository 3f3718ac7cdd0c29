"""Progress statistics for the dashboard."""

import math
from datetime import date

from sqlalchemy.orm import Session

from src.models.enums import TodoInclude, TodoOrder
from src.repositories.subtask import SubtaskRepository
from src.repositories.todo import TodoRepository
from src.schemas.stats import RecentlyCompletedTodo, StatsResponse

RECENTLY_COMPLETED_LIMIT = 5


def completion_rate(completed: int, total: int) -> float:
    """Percentage of completed tasks, rounded half up to two decimals (0 when there are none)."""
    if total == 0:
        return 0
    return math.floor(completed / total * 100 * 100 + 0.5) / 100


class StatsService:
    """Aggregates todo and subtask counts for a user."""

    def __init__(self, db: Session):
        self.todos = TodoRepository(db)
        self.subtasks = SubtaskRepository(db)

    def overview(self, user_id: int, today: date | None = None) -> StatsResponse:
        today = today or date.today()

        total_todos = self.todos.count(user_id)
        completed_todos = self.todos.count(user_id, completed=True)
        overdue_todos = self.todos.count(user_id, completed=False, due_before=today)
        total_subtasks = self.subtasks.count(user_id)
        completed_subtasks = self.subtasks.count(user_id, completed=True)

        recent = self.todos.find_many(
            user_id,
            include=TodoInclude.NONE,
            order=TodoOrder.UPDATED_DESC,
            completed=True,
            limit=RECENTLY_COMPLETED_LIMIT,
        )

        return StatsResponse(
            total_todos=total_todos,
            completed_todos=completed_todos,
            pending_todos=total_todos - completed_todos,
            overdue_todos=overdue_todos,
            total_subtasks=total_subtasks,
            completed_subtasks=completed_subtasks,
            pending_subtasks=total_subtasks - completed_subtasks,
            completion_rate=completion_rate(
                completed_todos + completed_subtasks,
                total_todos + total_subtasks,
            ),
            recently_completed=[
                RecentlyCompletedTodo(id=todo.id, title=todo.title, updated_at=todo.updated_at)
                for todo in recent
            ],
        )
