import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.dependencies import get_task_extractor, get_task_store
from api.metrics import EXTRACTIONS_TOTAL, REQUEST_LATENCY_SECONDS, REQUESTS_TOTAL, TASKS_GAUGE
from extraction.task_extractor import TaskExtractor
from storage.task_store import TaskStore
from tasker.errors import ExtractionFailedError, MissingTaskNameError
from tasker.models import Task

router = APIRouter()
logger = logging.getLogger(__name__)

ENDPOINT = "/assistant/tasks"


class PromptIn(BaseModel):
    text: str


@router.post(ENDPOINT, status_code=201, response_model=Task)
async def create_task_from_prompt(
    payload: PromptIn,
    store: TaskStore = Depends(get_task_store),
    extractor: TaskExtractor = Depends(get_task_extractor),
) -> Task:
    """Turn a natural-language prompt into a task and add it to the store."""
    start = time.time()
    logger.info(f"Received prompt: {payload.text[:50]}...")

    try:
        task = await extractor.extract_async(payload.text)
    except ExtractionFailedError as e:
        logger.error(f"Error processing prompt: {e.cause}")
        EXTRACTIONS_TOTAL.labels(outcome="failed").inc()
        REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="failed").inc()
        raise HTTPException(status_code=502, detail=e.user_message)
    except MissingTaskNameError as e:
        EXTRACTIONS_TOTAL.labels(outcome="missing_name").inc()
        REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="invalid").inc()
        raise HTTPException(status_code=422, detail=e.user_message)
    finally:
        REQUEST_LATENCY_SECONDS.labels(endpoint=ENDPOINT).observe(time.time() - start)

    store.add(task)

    EXTRACTIONS_TOTAL.labels(outcome="created").inc()
    REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="created").inc()
    TASKS_GAUGE.set(len(store))
    return task
