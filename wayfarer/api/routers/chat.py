from fastapi import APIRouter, Depends

from wayfarer.api.models.schemas import ChatbotInput, ChatbotResponse
from wayfarer.dependencies import get_chat_service
from wayfarer.domain.services.chat_service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatbotResponse)
async def chat(body: ChatbotInput, chat_svc: ChatService = Depends(get_chat_service)):
    return await chat_svc.reply(body)
