from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, List
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


CategoryColor = Literal["blue", "red", "green", "yellow"]

CATEGORY_COLORS: tuple[str, ...] = ("blue", "red", "green", "yellow")
DEFAULT_CATEGORY: CategoryColor = "yellow"

# Sunday-first, matching the week layout used by the agenda queries.
WEEKDAYS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def normalize_due_date(value: datetime) -> datetime:
    """Move a due timestamp to 23:59:00 of its calendar day."""
    return value.replace(hour=23, minute=59, second=0, microsecond=0)


class Task(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(..., min_length=1)

    begin_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    days: Optional[List[str]] = None

    due_date: Optional[datetime] = None

    category: CategoryColor = DEFAULT_CATEGORY
    is_completed: bool = False

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("days")
    @classmethod
    def days_are_weekdays(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        unknown = [d for d in v if d not in WEEKDAYS]
        if unknown:
            raise ValueError(f"unknown weekday names: {', '.join(unknown)}")
        return v

    @property
    def is_due(self) -> bool:
        return self.due_date is not None

    @property
    def is_scheduled(self) -> bool:
        has_range = self.begin_time is not None and self.end_time is not None
        return has_range or bool(self.days)
