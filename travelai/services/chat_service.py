import logging
from typing import List, Optional

from travelai.config import settings
from travelai.models.chat import ChatMessage, ChatResponse
from travelai.services.llm_service import (
    ChatCompletionLLMService,
    LLMConfig,
    SystemInstructions,
    get_llm_service,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

APOLOGY = "I'm sorry, I'm having trouble connecting right now. Please try again later."

_ROLES = {"user": "user", "assistant": "assistant"}


class ChatService:
    """Travel assistant chat. The caller owns the history; only the latest window is sent."""

    def __init__(self, llm_service: Optional[ChatCompletionLLMService] = None):
        self.llm_service = llm_service or get_llm_service()

    def build_messages(self, message: str, history: List[ChatMessage]):
        window = history[-settings.chat_history_window:] if settings.chat_history_window > 0 else []
        messages = [{"role": "system", "content": SystemInstructions.chat_assistant()}]
        messages.extend({"role": _ROLES[m.sender], "content": m.text} for m in window)
        messages.append({"role": "user", "content": message})
        return messages

    def reply(self, message: str, history: List[ChatMessage]) -> ChatResponse:
        response = self.llm_service.generate_content(
            self.build_messages(message, history),
            LLMConfig(temperature=0.7, max_tokens=800, json_mode=False),
        )

        fallback_used = not response.success or not response.content.strip()
        if fallback_used:
            logger.error(f"Chat call failed: {response.error}")
            text = APOLOGY
        else:
            text = response.content.strip()

        next_id = max((m.id for m in history), default=0) + 1
        messages = list(history) + [
            ChatMessage(id=next_id, sender="user", text=message),
            ChatMessage(id=next_id + 1, sender="assistant", text=text),
        ]
        return ChatResponse(
            status="error" if fallback_used else "success",
            reply=text,
            messages=messages,
            fallbackUsed=fallback_used,
        )


def get_chat_service() -> ChatService:
    return ChatService()
