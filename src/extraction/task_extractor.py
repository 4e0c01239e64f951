from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from llm.llm_client import LLMClient
from tasker.errors import MissingTaskNameError
from tasker.models import (
    CATEGORY_COLORS,
    DEFAULT_CATEGORY,
    CategoryColor,
    Task,
    normalize_due_date,
)

logger = logging.getLogger(__name__)

DUE_DATE_MARKER = re.compile(r"^\* due date:", re.IGNORECASE)
TASK_NAME_MARKER = re.compile(r"^\* task name:", re.IGNORECASE)
COLOR_MARKER = re.compile(r"color:", re.IGNORECASE)
DUE_DATE_FORMAT = "%m/%d/%Y"


class ExtractionResult(BaseModel):
    """Fields recognised in a completion response, before they become a Task."""

    name: Optional[str] = None
    due_date: Optional[datetime] = None
    category: CategoryColor = DEFAULT_CATEGORY

    def to_task(self) -> Task:
        if not self.name:
            raise MissingTaskNameError()
        return Task(
            name=self.name,
            begin_time=None,
            end_time=None,
            days=None,
            due_date=self.due_date,
            category=self.category,
            is_completed=False,
        )


def parse_due_date(value: str) -> Optional[datetime]:
    try:
        return normalize_due_date(datetime.strptime(value.strip(), DUE_DATE_FORMAT))
    except ValueError:
        return None


def resolve_category(value: str) -> CategoryColor:
    color = value.strip().lower()
    if color in CATEGORY_COLORS:
        return color  # type: ignore[return-value]
    return DEFAULT_CATEGORY


def parse_extraction(text: str) -> ExtractionResult:
    """
    Map the free-text answer of the completion service to an ExtractionResult.

    Recognised lines (markers are case-insensitive, later lines win):
      * Due date: MM/DD/YYYY   -> due at 23:59 that day, dropped if unparseable
      * Task name: <name>
      ... color: <color>       -> blue/red/green/yellow, anything else is yellow
    """
    result = ExtractionResult()

    for line in (raw.strip() for raw in text.splitlines()):
        # Offsets come from the original line; lower() may change its length.
        due = DUE_DATE_MARKER.match(line)
        name = TASK_NAME_MARKER.match(line)
        color = COLOR_MARKER.search(line)
        if due:
            raw_date = line[due.end():]
            result.due_date = parse_due_date(raw_date)
            if result.due_date is None:
                logger.debug("Ignoring unparseable due date %r", raw_date.strip())
        elif name:
            result.name = line[name.end():].strip()
        elif color:
            result.category = resolve_category(line[color.end():])

    return result


class TaskExtractor:

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or LLMClient()

    def extract(self, text: str) -> Task:
        content = self.llm_client.extract_entities(text)
        return self._to_task(content)

    async def extract_async(self, text: str) -> Task:
        content = await self.llm_client.extract_entities_async(text)
        return self._to_task(content)

    def _to_task(self, content: str) -> Task:
        result = parse_extraction(content)
        try:
            return result.to_task()
        except MissingTaskNameError:
            logger.warning("Extraction produced no task name")
            raise
