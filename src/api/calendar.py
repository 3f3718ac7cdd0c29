"""Calendar API endpoints.

These routes share the ``/todos`` prefix, so the router is registered before
the todos router to keep ``/todos/calendar`` from matching ``/todos/{todo_id}``.
"""

from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import CurrentUser, Todos
from src.models.enums import TodoOrder
from src.schemas.calendar import CalendarMonth
from src.schemas.todo import TodoResponse
from src.services.calendar import build_month

router = APIRouter(prefix="/api/v1/todos", tags=["calendar"])


@router.get("/calendar", response_model=CalendarMonth)
def get_calendar(
    current_user: CurrentUser,
    todos: Todos,
    year: int | None = Query(default=None, ge=1, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
):
    """Get a month grid of todos by due date (defaults to the current month)."""
    today = date.today()
    try:
        return build_month(
            todos.find_many(current_user.id, order=TodoOrder.DUE_DATE_ASC),
            year or today.year,
            month or today.month,
            today=today,
        )
    except ValueError as e:
        # Grids for January of year 1 and December 9999 spill past date.min/date.max
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Month is outside the supported calendar range",
        ) from e


@router.get("/upcoming", response_model=list[TodoResponse])
def get_upcoming(
    current_user: CurrentUser,
    todos: Todos,
    limit: int = Query(default=10, ge=1, le=100),
):
    """Get open todos with a due date, earliest first."""
    return todos.find_many(
        current_user.id,
        order=TodoOrder.DUE_DATE_ASC,
        completed=False,
        with_due_date=True,
        limit=limit,
    )
