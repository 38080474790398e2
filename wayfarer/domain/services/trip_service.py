from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from wayfarer.ai.flow import validate_request
from wayfarer.api.models.schemas import (
    StopTrackingResponse,
    TransportMode,
    UploadTripDataInput,
    UploadTripDataOutput,
)
from wayfarer.core.errors import ConflictError, ConsentRequiredError
from wayfarer.domain.repositories import TrackingRepository
from wayfarer.domain.session import SessionContext
from wayfarer.domain.tracker import ManualPositionSource, TrackingError, TrackingSession
from wayfarer.external.telemetry_client import TripTelemetryClient

logger = logging.getLogger(__name__)


class TripService:
    def __init__(self, repo: TrackingRepository, telemetry: TripTelemetryClient):
        self.repo = repo
        self.telemetry = telemetry

    async def upload_trip(
        self, context: SessionContext, payload: UploadTripDataInput | Mapping[str, Any]
    ) -> UploadTripDataOutput:
        payload = validate_request(UploadTripDataInput, payload)
        if not context.consent:
            raise ConsentRequiredError()
        return await self.telemetry.upload(payload)

    async def start_tracking(self, context: SessionContext, mode: TransportMode = "other") -> TrackingSession:
        session = TrackingSession(context, ManualPositionSource(), mode=mode)
        session.start()
        return await self.repo.save(session)

    async def _owned_session(self, tracking_id: str, context: SessionContext) -> TrackingSession:
        session = await self.repo.get(tracking_id)
        # Another client's session answers exactly like a missing one.
        if session.context.anonymous_id != context.anonymous_id:
            raise KeyError("Tracking session not found")
        return session

    async def add_sample(
        self,
        tracking_id: str,
        context: SessionContext,
        latitude: float,
        longitude: float,
        timestamp: Optional[datetime] = None,
    ) -> TrackingSession:
        session = await self._owned_session(tracking_id, context)
        if not session.active:
            raise ConflictError("Tracking session is not active", {"trackingId": tracking_id})
        session.source.push(latitude, longitude, timestamp)
        return session

    async def stop_tracking(
        self, tracking_id: str, context: SessionContext, upload: bool = False
    ) -> StopTrackingResponse:
        session = await self._owned_session(tracking_id, context)
        consent = context.consent or session.context.consent
        if upload and not consent:
            raise ConsentRequiredError()

        await self.repo.remove(tracking_id)
        try:
            trip = session.stop()
        except TrackingError as exc:
            raise ConflictError(str(exc), {"trackingId": tracking_id, "samples": len(session.samples)}) from exc

        result = None
        if upload:
            result = await self.telemetry.upload(trip.to_upload_input())
        logger.info("Tracking session %s produced trip %s", tracking_id, trip.tripNumber)
        return StopTrackingResponse(trip=trip, upload=result)
