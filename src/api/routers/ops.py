import os
import logging
from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api.dependencies import get_task_store
from api.metrics import TASKS_GAUGE
from storage.task_store import TaskStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(store: TaskStore = Depends(get_task_store)) -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "llm_provider": os.getenv("LLM_PROVIDER", "groq"),
        "tasks": len(store),
    }


@router.get("/metrics")
async def metrics(store: TaskStore = Depends(get_task_store)) -> Response:
    """
    Prometheus scrape endpoint.
    """
    TASKS_GAUGE.set(len(store))
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
