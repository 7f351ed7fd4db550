from fastapi import APIRouter, Depends
import logging

from travelai.models.chat import ChatRequest, ChatResponse
from travelai.services.chat_service import ChatService, get_chat_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatResponse)
def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
):
    """
    Chat endpoint. The client sends its transcript; only the latest
    messages are forwarded as context.
    """
    return service.reply(request.message, request.history)
