"""Shared test helpers: a stand-in for the AsyncOpenAI client and sample model replies."""
from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Dict, List


class FakeCompletions:
    def __init__(self, replies: List[Any]):
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        content = reply if isinstance(reply, str) or reply is None else json.dumps(reply, ensure_ascii=False)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeOpenAI:
    """Mimics ``client.chat.completions.create`` and records every call."""

    def __init__(self, *replies: Any):
        self.completions = FakeCompletions(list(replies) or [{}])
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.completions.calls


def flight_results() -> Dict[str, Any]:
    rows = [
        ("IndiGo", "6E 204", "08:30", "10:45", "2h 15m", "MakeMyTrip", "₹5,500", "https://www.makemytrip.com/flights/"),
        ("IndiGo", "6E 204", "08:30", "10:45", "2h 15m", "EaseMyTrip", "₹5,450", "https://www.easemytrip.com/"),
        ("Vistara", "UK 987", "09:15", "11:20", "2h 05m", "Goibibo", "₹6,200", "https://www.goibibo.com/flights/"),
        ("Vistara", "UK 987", "09:15", "11:20", "2h 05m", "Vistara Official", "₹6,150", "https://www.airvistara.com/"),
        ("Air India", "AI 665", "13:00", "15:10", "2h 10m", "Skyscanner", "₹4,980", "https://www.skyscanner.co.in/"),
    ]
    keys = ["airline", "flightNumber", "departure", "arrival", "duration", "platform", "price", "url"]
    return {"results": [dict(zip(keys, row)) for row in rows]}


def train_results() -> Dict[str, Any]:
    return {
        "results": [
            {
                "trainName": "Mumbai Rajdhani",
                "trainNumber": "12951",
                "departure": "17:00",
                "arrival": "08:32",
                "duration": "15h 32m",
                "platform": "IRCTC Official",
                "price": "₹3,500",
                "url": "https://www.irctc.co.in/",
            }
        ]
    }


def bus_results() -> Dict[str, Any]:
    return {
        "results": [
            {
                "operator": "VRL Travels",
                "busType": "A/C Sleeper (2+1)",
                "departure": "20:00",
                "arrival": "06:00",
                "duration": "10h 00m",
                "platform": "RedBus",
                "price": "₹1,200",
                "url": "https://www.redbus.in/",
            }
        ]
    }


def accommodation_results() -> Dict[str, Any]:
    return {
        "results": [
            {
                "name": "The Taj Mahal Palace",
                "rating": 4.8,
                "imageUrl": "https://source.unsplash.com/800x600/?luxury-hotel-mumbai",
                "imageHint": "luxury hotel",
                "platforms": [
                    {"platform": "Booking.com", "price": "₹25,000", "url": "https://www.booking.com/"},
                    {"platform": "Agoda", "price": "₹24,300", "url": "https://www.agoda.com/"},
                ],
            }
        ]
    }


def location_details() -> Dict[str, Any]:
    return {
        "name": "Goa, India",
        "description": "Beaches, churches and a relaxed coastal pace.",
        "heroImageHint": "goa beach",
        "accommodations": [
            {"name": "Taj Exotica", "price": "₹18,000", "platform": "Booking.com", "rating": 4.7},
        ],
        "weather": [
            {"day": "Today", "temp": "31°C", "condition": "Sunny", "icon": "Sun"},
            {"day": "Tomorrow", "temp": "30°C", "condition": "Cloudy", "icon": "Cloud"},
            {"day": "Friday", "temp": "28°C", "condition": "Light Rain", "icon": "CloudRain"},
        ],
        "news": [
            {"title": "Goa gears up for the season", "source": "The Times of India", "url": "https://timesofindia.indiatimes.com/goa"},
        ],
        "touristPlaces": [
            {"name": "Basilica of Bom Jesus", "imageHint": "historic church", "description": "A UNESCO world heritage church."},
        ],
    }
