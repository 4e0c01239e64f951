class TaskerError(Exception):
    """Base class for errors surfaced to the user."""


class ExtractionFailedError(TaskerError):
    """The completion service could not be reached or returned an unusable body."""

    def __init__(self, cause: str):
        super().__init__(cause)
        self.cause = cause

    @property
    def user_message(self) -> str:
        return f"Failed to process input: {self.cause}"


class MissingTaskNameError(TaskerError):
    def __init__(self, message: str = "Task name is missing."):
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return str(self)


class TaskNotFoundError(TaskerError, KeyError):
    def __init__(self, task_id: str):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"task {self.task_id} not found"
