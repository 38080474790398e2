from __future__ import annotations

from functools import lru_cache
from typing import Optional

from openai import AsyncOpenAI

from wayfarer.core.config import settings


@lru_cache
def get_client() -> Optional[AsyncOpenAI]:
    """
    Shared AsyncOpenAI client, or None when no API key is configured.
    SDK retries are disabled: a failed generation is reported to the caller,
    who resubmits by hand.
    """
    if not settings.openai_api_key:
        return None
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )
