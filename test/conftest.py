import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from llm.llm_client import LLMClient
from storage.task_store import TaskStore

class FakeProvider:
    def __init__(self, response_text: str):
        self._response_text = response_text
        self.calls = []

    def generate(self, *, system: str, user: str) -> str:
        self.calls.append({"system": system, "user": user})
        return self._response_text

class RaisingProvider:
    def __init__(self, exc: Exception):
        self._exc = exc

    def generate(self, *, system: str, user: str) -> str:
        raise self._exc

@pytest.fixture
def fake_provider_factory():
    def _make(response_text: str):
        return FakeProvider(response_text)
    return _make

@pytest.fixture
def raising_provider_factory():
    def _make(exc: Exception):
        return RaisingProvider(exc)
    return _make

@pytest.fixture
def store():
    return TaskStore()

@pytest.fixture
def client_factory(store):
    def _make(provider=None):
        app = create_app(store=store, llm_client=LLMClient(provider=provider))
        return TestClient(app)
    return _make
