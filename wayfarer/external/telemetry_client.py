from __future__ import annotations

import logging
import time
from typing import Protocol

from wayfarer.api.models.schemas import UploadTripDataInput, UploadTripDataOutput
from wayfarer.core.config import settings

logger = logging.getLogger(__name__)


class TripTelemetryClient(Protocol):
    async def upload(self, trip: UploadTripDataInput) -> UploadTripDataOutput: ...


class StubTelemetryClient:
    """
    Placeholder for the authenticated upload of anonymised trips to the
    research backend. Nothing leaves the process; every upload succeeds with
    a reference id derived from the current time.
    """

    def __init__(self, reference_prefix: str | None = None):
        self.reference_prefix = reference_prefix or settings.telemetry_reference_prefix

    async def upload(self, trip: UploadTripDataInput) -> UploadTripDataOutput:
        logger.info(
            "Received trip data for upload: user=%s %s -> %s (%s, %d path points)",
            trip.userId,
            trip.origin,
            trip.destination,
            trip.mode,
            len(trip.path or []),
        )
        reference_id = f"{self.reference_prefix}-{int(time.time() * 1000)}"
        return UploadTripDataOutput(success=True, referenceId=reference_id)
