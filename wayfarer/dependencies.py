from typing import Optional

from fastapi import Depends, Header, Response
from openai import AsyncOpenAI

from wayfarer.ai.openai_client import get_client
from wayfarer.core.config import settings
from wayfarer.domain.repositories import InMemoryTrackingRepository, TrackingRepository
from wayfarer.domain.services.chat_service import ChatService
from wayfarer.domain.services.trip_service import TripService
from wayfarer.domain.session import SessionContext
from wayfarer.external.telemetry_client import StubTelemetryClient, TripTelemetryClient

_tracking_repo: TrackingRepository = InMemoryTrackingRepository()
_telemetry_client: TripTelemetryClient = StubTelemetryClient()


def get_openai_client() -> Optional[AsyncOpenAI]:
    return get_client()


def get_tracking_repo() -> TrackingRepository:
    return _tracking_repo


def get_telemetry_client() -> TripTelemetryClient:
    return _telemetry_client


def get_session_context(
    response: Response,
    x_anonymous_id: Optional[str] = Header(default=None),
    x_telemetry_consent: Optional[str] = Header(default=None),
) -> SessionContext:
    context = SessionContext.from_headers(x_anonymous_id, x_telemetry_consent)
    response.headers["X-Anonymous-Id"] = context.anonymous_id
    return context


def get_chat_service(client: Optional[AsyncOpenAI] = Depends(get_openai_client)) -> ChatService:
    return ChatService(client=client)


def get_trip_service(
    repo: TrackingRepository = Depends(get_tracking_repo),
    telemetry: TripTelemetryClient = Depends(get_telemetry_client),
) -> TripService:
    return TripService(repo=repo, telemetry=telemetry)


__all__ = [
    "get_openai_client",
    "get_tracking_repo",
    "get_telemetry_client",
    "get_session_context",
    "get_chat_service",
    "get_trip_service",
    "settings",
]
