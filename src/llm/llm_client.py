import asyncio
import json
import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from llm.prompts import EXTRACTION_SYSTEM_PROMPT
from llm.providers.base import LLMProvider
from tasker.errors import ExtractionFailedError

logger = logging.getLogger(__name__)


def get_provider(name: Optional[str] = None) -> LLMProvider:
    """Build the provider named by `name` or the LLM_PROVIDER env var."""
    name = (name or os.getenv("LLM_PROVIDER", "groq")).strip().lower()
    if name == "mock":
        from llm.providers.mock_provider import MockProvider
        return MockProvider()
    if name == "groq":
        from llm.providers.groq_provider import GroqProvider
        return GroqProvider()
    raise RuntimeError(f"Unknown LLM_PROVIDER: {name}")


class LLMClient:
    """Sends free text to the completion service and returns its raw answer.

    Every way the round trip can go wrong is reported as a single
    ExtractionFailedError with a readable cause; nothing is retried.
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self._provider = provider

    @property
    def provider(self) -> LLMProvider:
        if self._provider is None:
            self._provider = get_provider()
        return self._provider

    def extract_entities(self, text: str) -> str:
        try:
            provider = self.provider
        except RuntimeError as e:
            logger.error(f"LLM provider is not configured: {e}")
            raise ExtractionFailedError(str(e)) from e

        try:
            content = provider.generate(system=EXTRACTION_SYSTEM_PROMPT, user=text)
        except httpx.HTTPStatusError as e:
            cause = f"service responded with HTTP {e.response.status_code}"
            logger.warning(f"Extraction request failed: {cause}")
            raise ExtractionFailedError(cause) from e
        except httpx.HTTPError as e:
            cause = str(e) or type(e).__name__
            logger.warning(f"Extraction request failed: {cause}")
            raise ExtractionFailedError(cause) from e
        except json.JSONDecodeError as e:
            logger.warning("Extraction response is not JSON: %s", e)
            raise ExtractionFailedError("response body is not valid JSON") from e
        except ValidationError as e:
            logger.warning("Extraction response has unexpected shape: %s", e)
            raise ExtractionFailedError("unexpected response format") from e
        except ValueError as e:
            logger.warning("Extraction response unusable: %s", e)
            raise ExtractionFailedError(str(e)) from e

        if not content or not content.strip():
            logger.warning("Extraction response has empty content")
            raise ExtractionFailedError("No content in response")

        logger.debug("Extracted info: %r", content)
        return content

    async def extract_entities_async(self, text: str) -> str:
        return await asyncio.to_thread(self.extract_entities, text)
