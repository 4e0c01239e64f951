from __future__ import annotations
from typing import Optional, List, Literal
from pydantic import BaseModel, Field

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    role: Role
    content: str


class ChatCompletionRequest(BaseModel):
    model: str = Field(..., min_length=1)
    messages: List[Message]


class ResponseMessage(BaseModel):
    role: str = "assistant"
    content: Optional[str] = None


class Choice(BaseModel):
    message: ResponseMessage


class ChatCompletionResponse(BaseModel):
    choices: List[Choice]

    def first_content(self) -> Optional[str]:
        if not self.choices:
            return None
        return self.choices[0].message.content
