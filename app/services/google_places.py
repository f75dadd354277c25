"""Client for the Google Places API (New), scoped to Stockholm.

The proxy never exposes the API key to the frontend. It translates the
simplified frontend requests into upstream calls and reshapes the
responses into the models in ``app.models.restaurants``.
"""
import logging
from typing import Iterable, List, Optional
from urllib.parse import quote

import httpx

from app.config import ConfigurationError
from app.models.restaurants import (
    LatLng,
    PhotoMedia,
    PhotoRef,
    RestaurantDetail,
    RestaurantSummary,
    UpstreamPlace,
    UpstreamSearchResponse,
)

logger = logging.getLogger(__name__)

PLACES_API_BASE_URL = "https://places.googleapis.com/v1"

DEFAULT_QUERY = "restaurants"
DEFAULT_LIMIT = 20

# Stockholm city centre; every search is biased to this circle
STOCKHOLM_CENTER = {"latitude": 59.3293, "longitude": 18.0686}
SEARCH_RADIUS_METERS = 30000.0

LIST_PHOTO_WIDTH = 400
DETAIL_PHOTO_WIDTH = 800
CAROUSEL_PHOTO_WIDTH = 1200

SEARCH_FIELD_MASK = ",".join([
    "places.id",
    "places.displayName",
    "places.formattedAddress",
    "places.rating",
    "places.userRatingCount",
    "places.photos",
    "places.location",
    "places.currentOpeningHours.openNow",
])

DETAIL_FIELD_MASK = ",".join([
    "id",
    "displayName",
    "formattedAddress",
    "nationalPhoneNumber",
    "websiteUri",
    "rating",
    "regularOpeningHours.weekdayDescriptions",
    "location",
    "photos",
])

# httpx returns a decoded body, so framing headers from upstream no longer apply
_DROPPED_PHOTO_HEADERS = {"content-length", "content-encoding", "transfer-encoding", "connection"}


class PlacesAPIError(Exception):
    """Non-success response from the Places API."""

    operation = "request"

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{self.operation} failed ({status_code}) {body}".rstrip())


class UpstreamSearchError(PlacesAPIError):
    operation = "Places v1 search"


class UpstreamDetailError(PlacesAPIError):
    operation = "Place v1 details"


class PhotoFetchError(PlacesAPIError):
    operation = "Photo v1 fetch"


def build_text_query(q: Optional[str], page: int) -> str:
    """
    Build the upstream text query for a page of results.

    searchText has no pagination cursor, so each page gets a distinct
    query by appending a page marker. The query is always scoped to
    Stockholm.
    """
    q = q or DEFAULT_QUERY
    if "stockholm" in q.lower():
        return f"{q} page {page}"
    return f"{q} in Stockholm page {page}"


def photo_proxy_url(photo_name: str, maxwidth: int) -> str:
    """Relative URL of this proxy's photo endpoint for an upstream photo."""
    return f"/photos/v1/{quote(photo_name, safe='')}?maxwidth={maxwidth}"


def _location(place: UpstreamPlace) -> Optional[LatLng]:
    if place.location is None:
        return None
    return LatLng(lat=place.location.latitude, lng=place.location.longitude)


def _display_name(place: UpstreamPlace) -> str:
    if place.display_name and place.display_name.text:
        return place.display_name.text
    return "Unknown"


def map_search_place(place: UpstreamPlace) -> RestaurantSummary:
    """Map one searchText record to a list item."""
    photo_url = None
    if place.photos:
        photo_url = photo_proxy_url(place.photos[0].name, LIST_PHOTO_WIDTH)

    open_now = False
    if place.current_opening_hours and place.current_opening_hours.open_now is not None:
        open_now = place.current_opening_hours.open_now

    return RestaurantSummary(
        place_id=place.id or "",
        name=_display_name(place),
        address=place.formatted_address,
        rating=place.rating,
        user_ratings_total=place.user_rating_count,
        open_now=open_now,
        location=_location(place),
        photo_url=photo_url,
    )


def map_place_details(place: UpstreamPlace, requested_id: str) -> RestaurantDetail:
    """Map a details record, keeping upstream photo order."""
    photos = [
        PhotoRef(name=photo.name, url=photo_proxy_url(photo.name, CAROUSEL_PHOTO_WIDTH))
        for photo in place.photos
    ]
    photo_url = None
    if place.photos:
        photo_url = photo_proxy_url(place.photos[0].name, DETAIL_PHOTO_WIDTH)

    opening_hours: List[str] = []
    if place.regular_opening_hours:
        opening_hours = list(place.regular_opening_hours.weekday_descriptions)

    return RestaurantDetail(
        place_id=place.id or requested_id,
        name=_display_name(place),
        address=place.formatted_address,
        phone=place.national_phone_number,
        website=place.website_uri,
        rating=place.rating,
        opening_hours=opening_hours,
        location=_location(place),
        photo_url=photo_url,
        photos=photos,
    )


def filter_min_rating(
    restaurants: Iterable[RestaurantSummary], min_rating: float
) -> List[RestaurantSummary]:
    """Keep restaurants rated at least ``min_rating``; unrated counts as 0."""
    return [r for r in restaurants if (r.rating or 0) >= min_rating]


class PlacesServiceClient:
    """HTTP client wrapper for the Google Places API (New)."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = PLACES_API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("Missing GOOGLE_MAPS_API_KEY")
        return self.api_key

    def _client(self, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, **kwargs)

    async def search_restaurants(
        self,
        q: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        page: int = 1,
        min_rating: Optional[float] = None,
    ) -> List[RestaurantSummary]:
        """
        Text search for restaurants in Stockholm.

        Args:
            q: Free-text query, defaults to "restaurants"
            limit: Maximum number of results returned (not sent upstream)
            page: Page number, folded into the query text
            min_rating: Optional minimum rating, applied before the limit

        Returns:
            Mapped list items in upstream order
        """
        api_key = self._require_api_key()
        text_query = build_text_query(q, page)
        body = {
            "textQuery": text_query,
            "locationBias": {
                "circle": {
                    "center": STOCKHOLM_CENTER,
                    "radius": SEARCH_RADIUS_METERS,
                },
            },
        }
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": api_key,
            "X-Goog-FieldMask": SEARCH_FIELD_MASK,
        }

        logger.info(f"Places search: text_query={text_query!r}, limit={limit}")
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/places:searchText",
                json=body,
                headers=headers,
            )
        if not response.is_success:
            raise UpstreamSearchError(response.status_code, response.text)

        payload = UpstreamSearchResponse.model_validate(response.json())
        restaurants = [map_search_place(place) for place in payload.places]
        if min_rating is not None:
            restaurants = filter_min_rating(restaurants, min_rating)
        return restaurants[:limit]

    async def get_restaurant_details(self, place_id: str) -> RestaurantDetail:
        """Get detailed info for one restaurant by its opaque place id."""
        api_key = self._require_api_key()
        headers = {
            "X-Goog-Api-Key": api_key,
            "X-Goog-FieldMask": DETAIL_FIELD_MASK,
        }

        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/places/{quote(place_id, safe='')}",
                headers=headers,
            )
        if not response.is_success:
            raise UpstreamDetailError(response.status_code, response.text)

        place = UpstreamPlace.model_validate(response.json())
        return map_place_details(place, place_id)

    async def fetch_photo(self, photo_name: str, maxwidth: int = LIST_PHOTO_WIDTH) -> PhotoMedia:
        """
        Download a photo by its opaque upstream name.

        The media endpoint is the only one authenticated with a ``key``
        query parameter, and it answers with a redirect to the image.
        The whole body is buffered in memory.
        """
        api_key = self._require_api_key()
        params = {"maxWidthPx": maxwidth, "key": api_key}

        async with self._client(follow_redirects=True) as client:
            response = await client.get(
                f"{self.base_url}/{quote(photo_name, safe='/')}/media",
                params=params,
            )
        if not response.is_success:
            raise PhotoFetchError(response.status_code, response.text)

        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in _DROPPED_PHOTO_HEADERS
        }
        return PhotoMedia(
            status_code=response.status_code,
            headers=headers,
            content=response.content,
        )
