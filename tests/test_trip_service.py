"""Tests for trip uploads, tracking through the service and the chat service."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from conftest import FakeOpenAI
from wayfarer.api.models.schemas import UploadTripDataInput, UploadTripDataOutput
from wayfarer.core.errors import ConflictError, ConsentRequiredError, FlowFailedError, RequestValidationFailed
from wayfarer.domain.repositories import InMemoryTrackingRepository
from wayfarer.domain.services.chat_service import ChatService
from wayfarer.domain.services.trip_service import TripService
from wayfarer.domain.session import SessionContext
from wayfarer.domain.tracker import ManualPositionSource, TrackingSession
from wayfarer.external.telemetry_client import StubTelemetryClient


T0 = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)

TRIP = {
    "userId": "anon_test",
    "origin": "Kochi",
    "destination": "Munnar",
    "startTime": "2026-01-05T08:00:00Z",
    "endTime": "2026-01-05T12:30:00Z",
    "mode": "bus",
}


class RecordingTelemetry:
    def __init__(self) -> None:
        self.uploads: List[UploadTripDataInput] = []

    async def upload(self, trip: UploadTripDataInput) -> UploadTripDataOutput:
        self.uploads.append(trip)
        return UploadTripDataOutput(success=True, referenceId="REF-1")


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture
def service(telemetry) -> TripService:
    return TripService(repo=InMemoryTrackingRepository(), telemetry=telemetry)


@pytest.mark.asyncio
async def test_stub_telemetry_always_succeeds_with_reference_id() -> None:
    client = StubTelemetryClient(reference_prefix="NATPAC")

    result = await client.upload(UploadTripDataInput.model_validate(TRIP))

    assert result.success is True
    assert result.referenceId.startswith("NATPAC-")
    assert result.referenceId.split("-", 1)[1].isdigit()


@pytest.mark.asyncio
async def test_upload_requires_consent(service, telemetry) -> None:
    with pytest.raises(ConsentRequiredError):
        await service.upload_trip(SessionContext(anonymous_id="anon_test", consent=False), TRIP)

    assert telemetry.uploads == []


@pytest.mark.asyncio
async def test_upload_with_consent(service, telemetry) -> None:
    result = await service.upload_trip(SessionContext(anonymous_id="anon_test", consent=True), TRIP)

    assert result.referenceId == "REF-1"
    assert telemetry.uploads[0].mode == "bus"
    assert telemetry.uploads[0].endTime - telemetry.uploads[0].startTime == timedelta(hours=4, minutes=30)


@pytest.mark.asyncio
async def test_upload_rejects_unknown_mode(service, telemetry) -> None:
    with pytest.raises(RequestValidationFailed) as exc_info:
        await service.upload_trip(SessionContext(anonymous_id="anon_test", consent=True), {**TRIP, "mode": "boat"})

    assert exc_info.value.field == "mode"
    assert telemetry.uploads == []


@pytest.mark.asyncio
async def test_tracking_round_trip_uploads_trip(service, telemetry) -> None:
    context = SessionContext(anonymous_id="anon_track", consent=True)
    session = await service.start_tracking(context, "walk")
    await service.add_sample(session.id, context, 9.9312, 76.2673, T0)
    await service.add_sample(session.id, context, 9.9658, 76.2421, T0 + timedelta(minutes=30))

    response = await service.stop_tracking(session.id, context, upload=True)

    assert response.trip.origin == "9.9312, 76.2673"
    assert response.trip.destination == "9.9658, 76.2421"
    assert response.trip.travelers == ["anon_track"]
    assert response.upload.success is True
    assert telemetry.uploads[0].userId == "anon_track"
    assert len(telemetry.uploads[0].path) == 2
    with pytest.raises(KeyError):
        await service.repo.get(session.id)


@pytest.mark.asyncio
async def test_stop_tracking_with_too_few_samples_is_a_conflict(service) -> None:
    context = SessionContext(anonymous_id="anon_track")
    session = await service.start_tracking(context)
    await service.add_sample(session.id, context, 9.9312, 76.2673, T0)

    with pytest.raises(ConflictError):
        await service.stop_tracking(session.id, context)

    assert not session.active


@pytest.mark.asyncio
async def test_unknown_tracking_id(service) -> None:
    with pytest.raises(KeyError):
        await service.add_sample("trk_missing", SessionContext(anonymous_id="a"), 1.0, 2.0)


@pytest.mark.asyncio
async def test_release_all_drops_live_sessions(service) -> None:
    first = await service.start_tracking(SessionContext(anonymous_id="a"))
    second = await service.start_tracking(SessionContext(anonymous_id="b"))

    released = await service.repo.release_all()

    assert released == 2
    assert not first.active and not second.active


@pytest.mark.asyncio
async def test_stop_with_upload_without_consent_keeps_the_session(service, telemetry) -> None:
    context = SessionContext(anonymous_id="anon_x", consent=False)
    session = await service.start_tracking(context, "bus")
    await service.add_sample(session.id, context, 9.9312, 76.2673, T0)
    await service.add_sample(session.id, context, 9.9658, 76.2421, T0 + timedelta(minutes=30))

    with pytest.raises(ConsentRequiredError):
        await service.stop_tracking(session.id, context, upload=True)

    assert session.active
    assert telemetry.uploads == []
    response = await service.stop_tracking(session.id, context)
    assert response.trip.travelers == ["anon_x"]
    assert response.upload is None


@pytest.mark.asyncio
async def test_consent_given_at_start_covers_the_upload_on_stop(service, telemetry) -> None:
    session = await service.start_tracking(SessionContext(anonymous_id="anon_x", consent=True))
    later = SessionContext(anonymous_id="anon_x", consent=False)
    await service.add_sample(session.id, later, 9.9312, 76.2673, T0)
    await service.add_sample(session.id, later, 9.9658, 76.2421, T0 + timedelta(minutes=30))

    response = await service.stop_tracking(session.id, later, upload=True)

    assert response.upload.success is True
    assert telemetry.uploads[0].userId == "anon_x"


@pytest.mark.asyncio
async def test_other_clients_cannot_touch_a_session(service, telemetry) -> None:
    owner = SessionContext(anonymous_id="anon_owner", consent=False)
    stranger = SessionContext(anonymous_id="anon_other", consent=True)
    session = await service.start_tracking(owner)
    await service.add_sample(session.id, owner, 9.9312, 76.2673, T0)
    await service.add_sample(session.id, owner, 9.9658, 76.2421, T0 + timedelta(minutes=30))

    with pytest.raises(KeyError):
        await service.add_sample(session.id, stranger, 1.0, 2.0, T0)
    with pytest.raises(KeyError):
        await service.stop_tracking(session.id, stranger, upload=True)

    assert len(session.samples) == 2
    assert session.active
    assert telemetry.uploads == []


@pytest.mark.asyncio
async def test_idle_sessions_are_released_on_next_access() -> None:
    now = [T0]
    clock = lambda: now[0]
    repo = InMemoryTrackingRepository(idle_timeout=60, clock=clock)
    source = ManualPositionSource()
    idle = TrackingSession(SessionContext(anonymous_id="anon_idle"), source, clock=clock).start()
    busy = TrackingSession(SessionContext(anonymous_id="anon_busy"), ManualPositionSource(), clock=clock).start()
    await repo.save(idle)
    await repo.save(busy)

    now[0] = T0 + timedelta(seconds=45)
    busy.record(9.9312, 76.2673)
    now[0] = T0 + timedelta(seconds=90)

    assert await repo.get(busy.id) is busy
    with pytest.raises(KeyError):
        await repo.get(idle.id)
    assert not idle.active
    assert source.subscriber_count == 0


@pytest.mark.asyncio
async def test_chat_reply_is_flagged_with_language() -> None:
    client = FakeOpenAI({"translatedResponse": "नमस्ते! मैं आपकी यात्रा में कैसे मदद कर सकता हूँ?"})

    reply = await ChatService(client=client).reply({"userMessage": "नमस्ते", "userLanguage": "HI"})

    assert reply.translatedResponse
    assert reply.language == "hi"
    assert reply.translated is True


@pytest.mark.asyncio
async def test_chat_failure_uses_static_message() -> None:
    client = FakeOpenAI("not json")

    with pytest.raises(FlowFailedError) as exc_info:
        await ChatService(client=client).reply({"userMessage": "hello", "userLanguage": "en"})

    assert exc_info.value.detail == "Sorry, I am having trouble connecting. Please try again later."
