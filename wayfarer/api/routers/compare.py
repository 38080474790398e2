from typing import Optional

from fastapi import APIRouter, Depends
from openai import AsyncOpenAI

from wayfarer.ai import flows
from wayfarer.api.models.schemas import (
    CompareAccommodationsInput,
    CompareAccommodationsOutput,
    CompareBusesInput,
    CompareBusesOutput,
    CompareFlightsInput,
    CompareFlightsOutput,
    CompareTrainsInput,
    CompareTrainsOutput,
)
from wayfarer.dependencies import get_openai_client

router = APIRouter(prefix="/compare", tags=["compare"])


@router.post("/flights", response_model=CompareFlightsOutput)
async def compare_flights(body: CompareFlightsInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.compare_flights.run(body, client=client)


@router.post("/trains", response_model=CompareTrainsOutput)
async def compare_trains(body: CompareTrainsInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.compare_trains.run(body, client=client)


@router.post("/buses", response_model=CompareBusesOutput)
async def compare_buses(body: CompareBusesInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)):
    return await flows.compare_buses.run(body, client=client)


@router.post("/accommodations", response_model=CompareAccommodationsOutput)
async def compare_accommodations(
    body: CompareAccommodationsInput, client: Optional[AsyncOpenAI] = Depends(get_openai_client)
):
    return await flows.compare_accommodations.run(body, client=client)
