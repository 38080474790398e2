from typing import Optional

from fastapi import APIRouter, Depends
from openai import AsyncOpenAI

from wayfarer.ai import flows
from wayfarer.api.models.schemas import (
    LocationDetailsInput,
    LocationDetailsOutput,
    ReverseGeocodeInput,
    ReverseGeocodeOutput,
)
from wayfarer.dependencies import get_openai_client

router = APIRouter(prefix="/locations", tags=["locations"])


@router.post("/details", response_model=LocationDetailsOutput)
async def location_details(body: LocationDetailsInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.generate_location_details.run(body, client=client)


@router.post("/reverse-geocode", response_model=ReverseGeocodeOutput)
async def reverse_geocode(body: ReverseGeocodeInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.reverse_geocode.run(body, client=client)
