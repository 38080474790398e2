from fastapi import APIRouter, Depends, status

from wayfarer.api.models.schemas import (
    SampleRequest,
    SampleResponse,
    StartTrackingRequest,
    StartTrackingResponse,
    StopTrackingResponse,
    UploadTripDataInput,
    UploadTripDataOutput,
)
from wayfarer.core.errors import NotFoundError
from wayfarer.dependencies import get_session_context, get_trip_service
from wayfarer.domain.services.trip_service import TripService
from wayfarer.domain.session import SessionContext

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("/upload", response_model=UploadTripDataOutput)
async def upload_trip(
    body: UploadTripDataInput,
    context: SessionContext = Depends(get_session_context),
    svc: TripService = Depends(get_trip_service),
):
    return await svc.upload_trip(context, body)


@router.post("/tracking", response_model=StartTrackingResponse, status_code=status.HTTP_201_CREATED)
async def start_tracking(
    body: StartTrackingRequest,
    context: SessionContext = Depends(get_session_context),
    svc: TripService = Depends(get_trip_service),
):
    session = await svc.start_tracking(context, body.mode)
    return StartTrackingResponse(
        trackingId=session.id,
        anonymousId=context.anonymous_id,
        startedAt=session.started_at,
    )


@router.post("/tracking/{tracking_id}/samples", response_model=SampleResponse)
async def add_sample(
    tracking_id: str,
    body: SampleRequest,
    context: SessionContext = Depends(get_session_context),
    svc: TripService = Depends(get_trip_service),
):
    try:
        session = await svc.add_sample(tracking_id, context, body.latitude, body.longitude, body.timestamp)
    except KeyError:
        raise NotFoundError("Tracking session not found")
    return SampleResponse(trackingId=session.id, sampleCount=len(session.samples))


@router.post("/tracking/{tracking_id}/stop", response_model=StopTrackingResponse)
async def stop_tracking(
    tracking_id: str,
    upload: bool = False,
    context: SessionContext = Depends(get_session_context),
    svc: TripService = Depends(get_trip_service),
):
    try:
        return await svc.stop_tracking(tracking_id, context, upload=upload)
    except KeyError:
        raise NotFoundError("Tracking session not found")
