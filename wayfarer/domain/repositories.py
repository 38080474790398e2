import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from wayfarer.core.config import settings
from wayfarer.domain.tracker import TrackingSession

logger = logging.getLogger(__name__)


class TrackingRepository(ABC):
    @abstractmethod
    async def save(self, session: TrackingSession) -> TrackingSession:
        raise NotImplementedError

    @abstractmethod
    async def get(self, tracking_id: str) -> TrackingSession:
        raise NotImplementedError

    @abstractmethod
    async def remove(self, tracking_id: str) -> TrackingSession:
        raise NotImplementedError

    @abstractmethod
    async def release_all(self) -> int:
        raise NotImplementedError


class InMemoryTrackingRepository(TrackingRepository):
    """
    Live tracking sessions of this process; nothing outlives a restart.
    Sessions with no start or sample for ``idle_timeout`` seconds are released
    and dropped on the next access, so abandoned tracks do not hold their
    subscription until shutdown.
    """

    def __init__(
        self,
        idle_timeout: Optional[float] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._store: Dict[str, TrackingSession] = {}
        self.idle_timeout = settings.tracking_idle_timeout_seconds if idle_timeout is None else idle_timeout
        self._clock = clock

    def _release_idle(self) -> None:
        cutoff = self._clock() - timedelta(seconds=self.idle_timeout)
        for tracking_id, session in list(self._store.items()):
            if session.last_activity is not None and session.last_activity < cutoff:
                session.release()
                del self._store[tracking_id]
                logger.info("Dropped idle tracking session %s", tracking_id)

    async def save(self, session: TrackingSession) -> TrackingSession:
        self._release_idle()
        self._store[session.id] = session
        return session

    async def get(self, tracking_id: str) -> TrackingSession:
        self._release_idle()
        if tracking_id not in self._store:
            raise KeyError("Tracking session not found")
        return self._store[tracking_id]

    async def remove(self, tracking_id: str) -> TrackingSession:
        if tracking_id not in self._store:
            raise KeyError("Tracking session not found")
        return self._store.pop(tracking_id)

    async def release_all(self) -> int:
        sessions: List[TrackingSession] = list(self._store.values())
        for session in sessions:
            session.release()
        self._store.clear()
        return len(sessions)
