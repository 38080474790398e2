from __future__ import annotations

from typing import Any, Mapping, Optional

from openai import AsyncOpenAI

from wayfarer.ai.flows import multilingual_chatbot
from wayfarer.api.models.schemas import ChatbotInput, ChatbotResponse


class ChatService:
    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self.client = client

    async def reply(self, payload: ChatbotInput | Mapping[str, Any]) -> ChatbotResponse:
        request = multilingual_chatbot.validate_input(payload)
        result = await multilingual_chatbot.run(request, client=self.client)
        # The reply is flagged with the language it was requested in; the text itself is not checked.
        return ChatbotResponse(translatedResponse=result.translatedResponse, language=request.userLanguage)
