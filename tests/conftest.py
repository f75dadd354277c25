from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_places_client
from app.main import app
from app.services.google_places import PlacesServiceClient

TEST_API_KEY = "test-key"


def make_place(
    index: int,
    rating: Optional[float] = 4.5,
    photos: int = 1,
    open_now: Optional[bool] = True,
    **extra: Any,
) -> Dict[str, Any]:
    """A searchText/details record shaped like the Places API (New)."""
    place: Dict[str, Any] = {
        "id": f"ChIJplace{index}",
        "displayName": {"text": f"Restaurant {index}", "languageCode": "sv"},
        "formattedAddress": f"Drottninggatan {index}, 111 51 Stockholm, Sweden",
        "userRatingCount": 100 + index,
        "location": {"latitude": 59.33 + index / 1000, "longitude": 18.06},
        "photos": [
            {"name": f"places/ChIJplace{index}/photos/photo{n}", "widthPx": 4000}
            for n in range(photos)
        ],
    }
    if rating is not None:
        place["rating"] = rating
    if open_now is not None:
        place["currentOpeningHours"] = {"openNow": open_now}
    place.update(extra)
    return place


class FakePlacesUpstream:
    """In-memory stand-in for places.googleapis.com, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.search_status = 200
        self.search_payload: Any = {"places": []}
        self.detail_status = 200
        self.detail_payload: Any = make_place(1)
        self.photo_status = 200
        self.photo_content = b"\xff\xd8\xff\xe0fake-jpeg"
        self.photo_headers = {"content-type": "image/jpeg", "cache-control": "public, max-age=86400"}

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/places:searchText"):
            return self._respond(self.search_status, self.search_payload)
        if path.endswith("/media"):
            if self.photo_status >= 400:
                return httpx.Response(self.photo_status, text="photo not found")
            return httpx.Response(
                self.photo_status,
                content=self.photo_content,
                headers=self.photo_headers,
            )
        if path.startswith("/v1/places/"):
            return self._respond(self.detail_status, self.detail_payload)
        return httpx.Response(404, text="unknown endpoint")

    @staticmethod
    def _respond(status: int, payload: Any) -> httpx.Response:
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)


@pytest.fixture
def upstream() -> FakePlacesUpstream:
    return FakePlacesUpstream()


@pytest.fixture
def places_client(upstream) -> PlacesServiceClient:
    return PlacesServiceClient(api_key=TEST_API_KEY, transport=httpx.MockTransport(upstream.handle))


@pytest.fixture
def client(places_client):
    app.dependency_overrides[get_places_client] = lambda: places_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
