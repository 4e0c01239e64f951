from __future__ import annotations
from datetime import date, timedelta
from llm.providers.base import LLMProvider

class MockProvider(LLMProvider):
    def generate(self, *, system: str, user: str) -> str:
        """
        Returns a canned extraction in the line format the task extractor expects.
        The user text becomes the task name; the task is due tomorrow.
        """
        name = user.strip().splitlines()[0] if user.strip() else ""
        lower_user = user.lower()

        color = "yellow"
        if "work" in lower_user or "meeting" in lower_user:
            color = "blue"
        elif "urgent" in lower_user or "bill" in lower_user:
            color = "red"
        elif "gym" in lower_user or "run" in lower_user:
            color = "green"

        due = date.today() + timedelta(days=1)
        return "\n".join([
            "Here is the extracted information:",
            f"* Task name: {name}",
            f"* Due date: {due.strftime('%m/%d/%Y')}",
            f"* Category color: {color}",
        ])
