"""Flow instances, one per travel vertical."""

from wayfarer.ai import prompts
from wayfarer.ai.flow import Flow
from wayfarer.api.models.schemas import (
    ChatbotInput,
    ChatbotReply,
    CompareAccommodationsInput,
    CompareAccommodationsOutput,
    CompareBusesInput,
    CompareBusesOutput,
    CompareFlightsInput,
    CompareFlightsOutput,
    CompareTrainsInput,
    CompareTrainsOutput,
    LocationDetailsInput,
    LocationDetailsOutput,
    ReverseGeocodeInput,
    ReverseGeocodeOutput,
    SuggestItineraryInput,
    SuggestItineraryOutput,
)
from wayfarer.core.config import settings

compare_flights = Flow(
    "compareFlights",
    prompts.COMPARE_FLIGHTS_PROMPT,
    CompareFlightsInput,
    CompareFlightsOutput,
    failure_message="Failed to fetch flight prices. Please try again.",
)

compare_trains = Flow(
    "compareTrains",
    prompts.COMPARE_TRAINS_PROMPT,
    CompareTrainsInput,
    CompareTrainsOutput,
    failure_message="Failed to fetch train prices. Please try again.",
)

compare_buses = Flow(
    "compareBuses",
    prompts.COMPARE_BUSES_PROMPT,
    CompareBusesInput,
    CompareBusesOutput,
    failure_message="Failed to fetch bus prices. Please try again.",
)

compare_accommodations = Flow(
    "compareAccommodations",
    prompts.COMPARE_ACCOMMODATIONS_PROMPT,
    CompareAccommodationsInput,
    CompareAccommodationsOutput,
    failure_message="Failed to fetch accommodation prices. Please try again.",
)

generate_location_details = Flow(
    "generateLocationDetails",
    prompts.LOCATION_DETAILS_PROMPT,
    LocationDetailsInput,
    LocationDetailsOutput,
    failure_message="Failed to load location details. Please try again.",
)

multilingual_chatbot = Flow(
    "multilingualChatbot",
    prompts.CHATBOT_PROMPT,
    ChatbotInput,
    ChatbotReply,
    failure_message="Sorry, I am having trouble connecting. Please try again later.",
    model=settings.openai_model_chat,
)

reverse_geocode = Flow(
    "reverseGeocode",
    prompts.REVERSE_GEOCODE_PROMPT,
    ReverseGeocodeInput,
    ReverseGeocodeOutput,
    failure_message="Failed to resolve the location name. Please try again.",
)

suggest_itinerary = Flow(
    "suggestItinerary",
    prompts.ITINERARY_PROMPT,
    SuggestItineraryInput,
    SuggestItineraryOutput,
    failure_message="Failed to generate itinerary. Please try again.",
)

ALL_FLOWS = [
    compare_flights,
    compare_trains,
    compare_buses,
    compare_accommodations,
    generate_location_details,
    multilingual_chatbot,
    reverse_geocode,
    suggest_itinerary,
]
