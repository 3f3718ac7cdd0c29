"""Calendar schemas."""

from datetime import date

from src.schemas.base import CamelModel
from src.schemas.todo import TodoResponse


class CalendarDay(CamelModel):
    """A single cell of the month grid."""

    day: date
    in_month: bool
    is_today: bool
    todos: list[TodoResponse]


class CalendarMonth(CamelModel):
    """Todos bucketed by due date over a month grid (weeks start on Sunday)."""

    year: int
    month: int
    label: str
    weeks: list[list[CalendarDay]]
    undated_count: int
