"""Calendar views over todo due dates."""

import calendar
from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from src.schemas.calendar import CalendarDay, CalendarMonth
from src.schemas.todo import TodoResponse

# Weeks start on Sunday
month_calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)


def group_by_due_date(todos: Iterable[TodoResponse]) -> dict[date, list[TodoResponse]]:
    """Bucket todos by due date. Todos without one are left out."""
    buckets: dict[date, list[TodoResponse]] = defaultdict(list)
    for todo in todos:
        if todo.due_date is not None:
            buckets[todo.due_date].append(todo)
    return buckets


def build_month(
    todos: Iterable[TodoResponse],
    year: int,
    month: int,
    today: date | None = None,
) -> CalendarMonth:
    """Lay out a month grid with each day's todos."""
    today = today or date.today()
    todos = list(todos)
    buckets = group_by_due_date(todos)

    weeks = [
        [
            CalendarDay(
                day=day,
                in_month=day.month == month,
                is_today=day == today,
                todos=buckets.get(day, []),
            )
            for day in week
        ]
        for week in month_calendar.monthdatescalendar(year, month)
    ]

    return CalendarMonth(
        year=year,
        month=month,
        label=f"{calendar.month_name[month]} {year}",
        weeks=weeks,
        undated_count=sum(1 for todo in todos if todo.due_date is None),
    )
