from typing import get_args

from fastapi import APIRouter

from wayfarer.api.models.schemas import TransportMode
from wayfarer.core.config import settings

router = APIRouter(prefix="/meta", tags=["meta"])

_LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "es": "Spanish",
    "fr": "French",
    "bn": "Bengali",
    "ta": "Tamil",
}


@router.get("/languages")
async def list_languages():
    return [{"code": code, "name": _LANGUAGE_NAMES.get(code, code)} for code in settings.supported_languages]


@router.get("/transport-modes")
async def list_transport_modes():
    return list(get_args(TransportMode))
