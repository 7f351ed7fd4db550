from pydantic import BaseModel, Field
from typing import List, Literal
from datetime import datetime, timezone


class ChatMessage(BaseModel):
    id: int
    sender: Literal["user", "assistant"]
    text: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    history: List[ChatMessage] = []


class ChatResponse(BaseModel):
    status: str
    reply: str
    messages: List[ChatMessage]
    fallbackUsed: bool = False
