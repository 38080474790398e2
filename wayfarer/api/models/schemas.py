from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Literal, Optional
from urllib.parse import urlparse

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, field_validator

from wayfarer.core.config import settings

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _check_price(value: str) -> str:
    symbol = settings.currency_symbol
    if not value.startswith(symbol):
        raise ValueError(f"price must be formatted with '{symbol}'")
    return value


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")
    return value


Price = Annotated[NonEmptyStr, AfterValidator(_check_price)]
Url = Annotated[NonEmptyStr, AfterValidator(_check_url)]
Rating = Annotated[float, Field(ge=1, le=5)]

TransportMode = Literal["flight", "train", "bus", "car", "walk", "bicycle", "other"]
WeatherIcon = Literal["Sun", "Cloud", "CloudRain"]


# ---------- Flights / Trains / Buses ----------


class CompareFlightsInput(BaseModel):
    origin: NonEmptyStr
    destination: NonEmptyStr
    departureDate: NonEmptyStr


class FlightOption(BaseModel):
    airline: NonEmptyStr
    flightNumber: NonEmptyStr
    departure: str
    arrival: str
    duration: str
    platform: NonEmptyStr
    price: Price
    url: Url


class CompareFlightsOutput(BaseModel):
    results: List[FlightOption] = Field(min_length=1)


class CompareTrainsInput(BaseModel):
    origin: NonEmptyStr
    destination: NonEmptyStr
    journeyDate: NonEmptyStr


class TrainOption(BaseModel):
    trainName: NonEmptyStr
    trainNumber: NonEmptyStr
    departure: str
    arrival: str
    duration: str
    platform: NonEmptyStr
    price: Price
    url: Url


class CompareTrainsOutput(BaseModel):
    results: List[TrainOption] = Field(min_length=1)


class CompareBusesInput(BaseModel):
    origin: NonEmptyStr
    destination: NonEmptyStr
    journeyDate: NonEmptyStr


class BusOption(BaseModel):
    operator: NonEmptyStr
    busType: NonEmptyStr
    departure: str
    arrival: str
    duration: str
    platform: NonEmptyStr
    price: Price
    url: Url


class CompareBusesOutput(BaseModel):
    results: List[BusOption] = Field(min_length=1)


# ---------- Accommodations ----------


class CompareAccommodationsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    searchTerm: NonEmptyStr = Field(validation_alias=AliasChoices("searchTerm", "location"))
    checkInDate: NonEmptyStr
    checkOutDate: NonEmptyStr


class PlatformPrice(BaseModel):
    platform: NonEmptyStr
    price: Price
    url: Url


class AccommodationOption(BaseModel):
    name: NonEmptyStr
    rating: Rating
    imageUrl: Url
    imageHint: str
    platforms: List[PlatformPrice] = Field(min_length=1)


class CompareAccommodationsOutput(BaseModel):
    results: List[AccommodationOption] = Field(min_length=1)


# ---------- Location details ----------


class LocationDetailsInput(BaseModel):
    location: NonEmptyStr


class LocationAccommodation(BaseModel):
    name: NonEmptyStr
    price: Price
    platform: NonEmptyStr
    rating: Rating


class WeatherDay(BaseModel):
    day: NonEmptyStr
    temp: NonEmptyStr
    condition: NonEmptyStr
    icon: WeatherIcon


class NewsItem(BaseModel):
    title: NonEmptyStr
    source: NonEmptyStr
    url: Url


class TouristPlace(BaseModel):
    name: NonEmptyStr
    imageHint: str
    description: NonEmptyStr


class LocationDetailsOutput(BaseModel):
    name: NonEmptyStr
    description: NonEmptyStr
    heroImageHint: str
    accommodations: List[LocationAccommodation] = Field(min_length=1)
    weather: List[WeatherDay] = Field(min_length=3, max_length=3)
    news: List[NewsItem] = Field(min_length=1)
    touristPlaces: List[TouristPlace] = Field(min_length=1)


# ---------- Chatbot ----------


class ChatbotInput(BaseModel):
    userMessage: NonEmptyStr
    userLanguage: NonEmptyStr

    @field_validator("userLanguage")
    @classmethod
    def _supported_language(cls, value: str) -> str:
        code = value.lower()
        if code not in settings.supported_languages:
            raise ValueError(f"unsupported language code '{value}'")
        return code


class ChatbotReply(BaseModel):
    translatedResponse: NonEmptyStr


class ChatbotResponse(ChatbotReply):
    language: str
    translated: bool = True


# ---------- Reverse geocoding ----------


class ReverseGeocodeInput(BaseModel):
    latitude: float
    longitude: float


class ReverseGeocodeOutput(BaseModel):
    placeName: NonEmptyStr


# ---------- Itinerary ----------


class SuggestItineraryInput(BaseModel):
    location: NonEmptyStr
    preferences: str = "No specific preferences"

    @field_validator("preferences")
    @classmethod
    def _default_preferences(cls, value: str) -> str:
        return value.strip() or "No specific preferences"


class SuggestItineraryOutput(BaseModel):
    itinerary: NonEmptyStr


# ---------- Trips ----------


class PathPoint(BaseModel):
    latitude: float
    longitude: float
    timestamp: datetime


class UploadTripDataInput(BaseModel):
    userId: NonEmptyStr
    origin: NonEmptyStr
    destination: NonEmptyStr
    startTime: datetime
    endTime: datetime
    mode: TransportMode
    path: Optional[List[PathPoint]] = None


class UploadTripDataOutput(BaseModel):
    success: bool
    referenceId: Optional[str] = None


class TripRecord(BaseModel):
    id: str
    tripNumber: str
    origin: str
    destination: str
    startTime: datetime
    endTime: datetime
    mode: TransportMode
    travelers: List[str]
    status: Literal["Completed", "Upcoming", "In Progress"] = "Completed"
    path: List[PathPoint] = Field(default_factory=list)

    def to_upload_input(self) -> UploadTripDataInput:
        return UploadTripDataInput(
            userId=self.travelers[0],
            origin=self.origin,
            destination=self.destination,
            startTime=self.startTime,
            endTime=self.endTime,
            mode=self.mode,
            path=self.path,
        )


# ---------- Tracking API ----------


class StartTrackingRequest(BaseModel):
    mode: TransportMode = "other"


class StartTrackingResponse(BaseModel):
    trackingId: str
    anonymousId: str
    startedAt: datetime


class SampleRequest(BaseModel):
    latitude: float
    longitude: float
    timestamp: Optional[datetime] = None


class SampleResponse(BaseModel):
    trackingId: str
    sampleCount: int


class StopTrackingResponse(BaseModel):
    trip: TripRecord
    upload: Optional[UploadTripDataOutput] = None
