import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import assistant, ops, tasks
from llm.llm_client import LLMClient
from storage.task_store import TaskStore
from tasker.errors import TaskNotFoundError

# Logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    store: Optional[TaskStore] = None,
    llm_client: Optional[LLMClient] = None,
) -> FastAPI:
    """Build the service around one task store and one extraction client."""
    app = FastAPI(title="Tasker")
    app.state.task_store = store if store is not None else TaskStore()
    app.state.llm_client = llm_client if llm_client is not None else LLMClient()

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found(_request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    app.include_router(tasks.router)
    app.include_router(assistant.router)
    app.include_router(ops.router)
    return app


app = create_app()
