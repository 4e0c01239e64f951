import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, ValidationError

from api.dependencies import get_task_store
from api.metrics import REQUESTS_TOTAL, TASKS_GAUGE
from scheduling import agenda
from storage.task_store import TaskStore
from tasker.models import CategoryColor, Task, normalize_due_date

router = APIRouter()
logger = logging.getLogger(__name__)


class TaskCreateIn(BaseModel):
    name: str
    begin_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    days: Optional[List[str]] = None
    due_date: Optional[datetime] = None
    due_at_end_of_day: bool = False  # move due_date to 23:59 of its day
    category: CategoryColor = "blue"


class TaskUpdateIn(BaseModel):
    is_completed: bool


def _validation_detail(e: ValidationError) -> list:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]


@router.get("/tasks", response_model=List[Task])
async def list_tasks(
    day: Optional[date] = None,
    store: TaskStore = Depends(get_task_store),
) -> List[Task]:
    """All tasks, or only those occurring on `day` (YYYY-MM-DD)."""
    if day is None:
        return store.list()
    return agenda.tasks_for_day(store, day)


@router.post("/tasks", status_code=201, response_model=Task)
async def create_task(
    payload: TaskCreateIn,
    store: TaskStore = Depends(get_task_store),
) -> Task:
    due_date = payload.due_date
    if due_date is not None and payload.due_at_end_of_day:
        due_date = normalize_due_date(due_date)

    try:
        task = Task(
            name=payload.name,
            begin_time=payload.begin_time,
            end_time=payload.end_time,
            days=payload.days,
            due_date=due_date,
            category=payload.category,
        )
    except ValidationError as e:
        REQUESTS_TOTAL.labels(endpoint="/tasks", status="invalid").inc()
        raise HTTPException(status_code=422, detail=_validation_detail(e))

    store.add(task)
    TASKS_GAUGE.set(len(store))
    REQUESTS_TOTAL.labels(endpoint="/tasks", status="created").inc()
    return task


@router.get("/tasks/{task_id}", response_model=Task)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Task:
    return store.get(task_id)


@router.patch("/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    payload: TaskUpdateIn,
    store: TaskStore = Depends(get_task_store),
) -> Task:
    return store.set_completed(task_id, payload.is_completed)


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> dict:
    store.remove(task_id)
    TASKS_GAUGE.set(len(store))
    REQUESTS_TOTAL.labels(endpoint="/tasks", status="deleted").inc()
    return {"status": "deleted", "id": task_id}


@router.get("/agenda/{day}")
async def get_agenda(day: date, store: TaskStore = Depends(get_task_store)) -> dict:
    """Open due tasks and scheduled items for one day."""
    tasks = store.list()
    return {
        "date": day.isoformat(),
        "weekday": agenda.weekday_name(day),
        "due": agenda.due_tasks(tasks, day),
        "scheduled": agenda.scheduled_items(tasks, day),
    }


@router.get("/week/{day}")
async def get_week(day: date, store: TaskStore = Depends(get_task_store)) -> dict:
    """Sunday-first week around `day`, each day broken into 24 hour slots."""
    try:
        label = agenda.week_range_label(day)
        days = agenda.week_of(day)
    except OverflowError:
        raise HTTPException(status_code=422, detail=f"week of {day.isoformat()} is out of range")

    tasks = store.list()
    return {
        "label": label,
        "days": [
            {
                "date": d.isoformat(),
                "weekday": agenda.weekday_name(d),
                "tasks": agenda.tasks_for_day(tasks, d),
                "hours": [
                    {"hour": hour, "tasks": agenda.tasks_in_hour(tasks, d, hour)}
                    for hour in range(24)
                ],
            }
            for d in days
        ],
    }


@router.get("/calendar/{year}/{month}")
async def get_calendar(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    store: TaskStore = Depends(get_task_store),
) -> dict:
    first = date(year, month, 1)
    return {
        "year": year,
        "month": month,
        "label": first.strftime("%B %Y"),
        "grid": [d.isoformat() if d else None for d in agenda.month_grid(first)],
        "days_with_tasks": [
            d.isoformat() for d in agenda.days_with_tasks(store.list(), year, month)
        ],
    }
