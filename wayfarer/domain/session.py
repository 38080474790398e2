from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

_TRUTHY = {"1", "true", "yes", "on"}


def new_anonymous_id() -> str:
    return f"anon_{uuid4().hex[:16]}"


@dataclass(frozen=True)
class SessionContext:
    """Per-client settings that the web app keeps in local storage."""

    anonymous_id: str
    consent: bool = False

    @classmethod
    def from_headers(cls, anonymous_id: str | None, consent: str | None) -> "SessionContext":
        anonymous_id = (anonymous_id or "").strip() or new_anonymous_id()
        return cls(anonymous_id=anonymous_id, consent=(consent or "").strip().lower() in _TRUTHY)
