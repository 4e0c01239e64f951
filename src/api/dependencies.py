from fastapi import Request

from extraction.task_extractor import TaskExtractor
from llm.llm_client import LLMClient
from storage.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm_client


def get_task_extractor(request: Request) -> TaskExtractor:
    return TaskExtractor(llm_client=get_llm_client(request))
