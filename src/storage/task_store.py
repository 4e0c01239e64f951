from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from tasker.errors import TaskNotFoundError
from tasker.models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory task collection for one session.

    The owner creates it and hands it to whoever appends or removes tasks.
    Insertion order is preserved.
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}

    def add(self, task: Task) -> Task:
        self._tasks[task.id] = task
        logger.info(f"Added task {task.id} ({task.name!r})")
        return task

    def get(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def remove(self, task_id: str) -> Task:
        task = self._tasks.pop(task_id, None)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Removed task {task_id}")
        return task

    def set_completed(self, task_id: str, completed: bool = True) -> Task:
        task = self.get(task_id)
        task.is_completed = completed
        return task

    def list(self) -> List[Task]:
        return list(self._tasks.values())

    def clear(self) -> None:
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list())
