from typing import Optional

from fastapi import APIRouter, Depends
from openai import AsyncOpenAI

from wayfarer.ai import flows
from wayfarer.api.models.schemas import SuggestItineraryInput, SuggestItineraryOutput
from wayfarer.dependencies import get_openai_client

router = APIRouter(prefix="/itineraries", tags=["itineraries"])


@router.post("/suggest", response_model=SuggestItineraryOutput)
async def suggest_itinerary(body: SuggestItineraryInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.suggest_itinerary.run(body, client=client)
