from __future__ import annotations

import itertools
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Protocol
from uuid import uuid4

from wayfarer.api.models.schemas import PathPoint, TransportMode, TripRecord
from wayfarer.domain.session import SessionContext

logger = logging.getLogger(__name__)

PositionCallback = Callable[[float, float, Optional[datetime]], None]
Unsubscribe = Callable[[], None]

_trip_numbers = itertools.count(1)


class TrackingError(RuntimeError):
    pass


class PositionSource(Protocol):
    def subscribe(self, callback: PositionCallback) -> Unsubscribe: ...


class ManualPositionSource:
    """Position stream fed by explicit ``push`` calls (e.g. samples posted over HTTP)."""

    def __init__(self):
        self._subscribers: Dict[int, PositionCallback] = {}
        self._ids = itertools.count()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: PositionCallback) -> Unsubscribe:
        token = next(self._ids)
        self._subscribers[token] = callback

        def _unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return _unsubscribe

    def push(self, latitude: float, longitude: float, timestamp: Optional[datetime] = None) -> None:
        for callback in list(self._subscribers.values()):
            callback(latitude, longitude, timestamp)


def _format_coords(point: PathPoint) -> str:
    return f"{point.latitude:.4f}, {point.longitude:.4f}"


class TrackingSession:
    """
    Live subscription to a position source. Samples are appended in arrival
    order while active; ``stop`` releases the subscription and bundles the
    samples into a single trip record. Use it as a context manager to make
    sure the subscription is released on every exit path.
    """

    def __init__(
        self,
        context: SessionContext,
        source: PositionSource,
        mode: TransportMode = "other",
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.id = f"trk_{uuid4().hex[:10]}"
        self.context = context
        self.source = source
        self.mode = mode
        self._clock = clock
        self._unsubscribe: Optional[Unsubscribe] = None
        self._stopped = False
        self.samples: List[PathPoint] = []
        self.started_at: Optional[datetime] = None
        self.last_activity: Optional[datetime] = None
        self.trip: Optional[TripRecord] = None

    @property
    def active(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> "TrackingSession":
        if self.active or self._stopped:
            raise TrackingError("Tracking session has already been started")
        self.started_at = self.last_activity = self._clock()
        self._unsubscribe = self.source.subscribe(self.record)
        logger.info("Tracking session %s started for %s", self.id, self.context.anonymous_id)
        return self

    def record(self, latitude: float, longitude: float, timestamp: Optional[datetime] = None) -> PathPoint:
        if not self.active:
            raise TrackingError("Tracking session is not active")
        now = self._clock()
        point = PathPoint(latitude=latitude, longitude=longitude, timestamp=timestamp or now)
        self.samples.append(point)
        self.last_activity = now
        return point

    def release(self) -> None:
        """Drop the position subscription; safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            self._stopped = True
            logger.info("Tracking session %s released after %d samples", self.id, len(self.samples))

    def stop(self) -> TripRecord:
        if not self.active:
            raise TrackingError("Tracking session is not active")
        self.release()
        if len(self.samples) < 2:
            raise TrackingError("At least two position samples are needed to build a trip")

        first, last = self.samples[0], self.samples[-1]
        self.trip = TripRecord(
            id=f"trip_{uuid4().hex[:10]}",
            tripNumber=f"TRK-{next(_trip_numbers):03d}",
            origin=_format_coords(first),
            destination=_format_coords(last),
            startTime=first.timestamp,
            endTime=last.timestamp,
            mode=self.mode,
            travelers=[self.context.anonymous_id],
            status="Completed",
            path=list(self.samples),
        )
        return self.trip

    def __enter__(self) -> "TrackingSession":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
