from __future__ import annotations
import logging
import os
from typing import Optional

import httpx

from llm.schemas import ChatCompletionRequest, ChatCompletionResponse, Message
from .base import LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3-8b-8192"
DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


class GroqProvider(LLMProvider):
    """Chat-completion provider for Groq's OpenAI-compatible endpoint.

    The API key is never baked in: pass it explicitly or export GROQ_API_KEY.
    `transport` lets tests swap in an `httpx.MockTransport`.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = (api_key if api_key is not None else os.getenv("GROQ_API_KEY", "")).strip()
        self.model = (model or os.getenv("GROQ_MODEL", DEFAULT_MODEL)).strip()
        self.base_url = (base_url or os.getenv("GROQ_BASE_URL", DEFAULT_BASE_URL)).strip().rstrip("/")
        self._transport = transport

        if not self.api_key:
            raise RuntimeError("GROQ_API_KEY is missing")

    def build_request(self, *, system: str, user: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=[
                Message(role="system", content=system),
                Message(role="user", content=user),
            ],
        )

    def generate(self, *, system: str, user: str) -> str:
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_request(system=system, user=user).model_dump()

        logger.debug("POST %s model=%s", url, self.model)
        with httpx.Client(transport=self._transport) as client:
            r = client.post(url, headers=headers, json=payload)
            r.raise_for_status()
            data = ChatCompletionResponse.model_validate(r.json())

        content = data.first_content()
        if content is None:
            raise ValueError("No content in response")
        return content
