"""Day, week and month lookups over a list of tasks.

A due task belongs to the calendar day of its due date. Otherwise a task
recurs on the weekdays listed in `days`. Weeks start on Sunday.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from tasker.models import WEEKDAYS, Task

DayLike = Union[date, datetime]


def _as_date(day: DayLike) -> date:
    return day.date() if isinstance(day, datetime) else day


def weekday_name(day: DayLike) -> str:
    # date.weekday() is Monday=0; WEEKDAYS starts on Sunday.
    return WEEKDAYS[(_as_date(day).weekday() + 1) % 7]


def occurs_on(task: Task, day: DayLike) -> bool:
    if task.due_date is not None:
        return task.due_date.date() == _as_date(day)
    if task.days is not None:
        return weekday_name(day) in task.days
    return False


def tasks_for_day(tasks: Iterable[Task], day: DayLike) -> List[Task]:
    return [t for t in tasks if occurs_on(t, day)]


def due_tasks(tasks: Iterable[Task], day: DayLike) -> List[Task]:
    """Open tasks with a deadline on `day`."""
    return [t for t in tasks_for_day(tasks, day) if t.due_date is not None and not t.is_completed]


def scheduled_items(tasks: Iterable[Task], day: DayLike) -> List[Task]:
    """Open tasks with a time range occurring on `day`."""
    return [
        t for t in tasks_for_day(tasks, day)
        if t.begin_time is not None and t.end_time is not None and not t.is_completed
    ]


def is_in_hour(task: Task, hour: int) -> bool:
    if task.begin_time is None or task.end_time is None:
        return False
    return task.begin_time.hour <= hour < task.end_time.hour


def tasks_in_hour(tasks: Iterable[Task], day: DayLike, hour: int) -> List[Task]:
    out = []
    name = weekday_name(day)
    for t in tasks:
        recurring = bool(t.days) and name in t.days and is_in_hour(t, hour)
        due_now = (
            t.due_date is not None
            and t.due_date.date() == _as_date(day)
            and t.due_date.hour == hour
        )
        if recurring or due_now:
            out.append(t)
    return out


def start_of_week(day: DayLike) -> date:
    d = _as_date(day)
    return d - timedelta(days=(d.weekday() + 1) % 7)


def week_of(day: DayLike) -> List[date]:
    start = start_of_week(day)
    return [start + timedelta(days=i) for i in range(7)]


def week_range_label(day: DayLike) -> str:
    days = week_of(day)

    def fmt(d: date) -> str:
        return f"{d.strftime('%b')} {d.day}"

    return f"{fmt(days[0])} - {fmt(days[-1])}"


def month_grid(day: DayLike) -> List[Optional[date]]:
    """Dates of the month, preceded by None for each leading weekday slot."""
    d = _as_date(day)
    first = d.replace(day=1)
    _, n_days = calendar.monthrange(d.year, d.month)
    leading = (first.weekday() + 1) % 7
    grid: List[Optional[date]] = [None] * leading
    grid.extend(first + timedelta(days=i) for i in range(n_days))
    return grid


def has_tasks(tasks: Iterable[Task], day: DayLike) -> bool:
    return any(occurs_on(t, day) for t in tasks)


def days_with_tasks(tasks: Iterable[Task], year: int, month: int) -> List[date]:
    tasks = list(tasks)
    return [d for d in month_grid(date(year, month, 1)) if d is not None and has_tasks(tasks, d)]
