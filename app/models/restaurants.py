"""Pydantic models for restaurants.

Two families live here: the stable schema this proxy serves to the
frontend (camelCase on the wire), and the subset of the Google Places
API (New) payloads we read. Defaults are applied once, when an upstream
place is mapped into the public schema.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Public schema
# ---------------------------------------------------------------------------


class LatLng(BaseModel):
    """Geographic position."""
    lat: float
    lng: float


class PhotoRef(BaseModel):
    """Opaque upstream photo name plus the proxy URL serving it."""
    name: str
    url: str


class RestaurantSummary(BaseModel):
    """List item returned by GET /restaurants."""
    place_id: str = Field(..., alias="placeId")
    name: str = "Unknown"
    address: Optional[str] = None
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = Field(None, alias="userRatingsTotal")
    open_now: bool = Field(False, alias="openNow")
    location: Optional[LatLng] = None
    photo_url: Optional[str] = Field(None, alias="photoUrl")

    class Config:
        populate_by_name = True


class RestaurantDetail(BaseModel):
    """Detail payload returned by GET /restaurants/{placeId}."""
    place_id: str = Field(..., alias="placeId")
    name: str = "Unknown"
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    rating: Optional[float] = None
    opening_hours: List[str] = Field(default_factory=list, alias="openingHours")
    location: Optional[LatLng] = None

    # First photo at preview width, plus every photo for the carousel
    photo_url: Optional[str] = Field(None, alias="photoUrl")
    photos: List[PhotoRef] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class PhotoMedia(BaseModel):
    """Photo bytes fetched from upstream, ready to be relayed."""
    status_code: int
    headers: dict = Field(default_factory=dict)
    content: bytes = b""


# ---------------------------------------------------------------------------
# Upstream (Places API New) payloads
# ---------------------------------------------------------------------------


class LocalizedText(BaseModel):
    text: Optional[str] = None


class UpstreamLocation(BaseModel):
    latitude: float
    longitude: float


class UpstreamPhoto(BaseModel):
    name: str


class CurrentOpeningHours(BaseModel):
    open_now: Optional[bool] = Field(None, alias="openNow")


class RegularOpeningHours(BaseModel):
    weekday_descriptions: List[str] = Field(default_factory=list, alias="weekdayDescriptions")


class UpstreamPlace(BaseModel):
    """A place record as returned by searchText or a details fetch."""
    id: Optional[str] = None
    display_name: Optional[LocalizedText] = Field(None, alias="displayName")
    formatted_address: Optional[str] = Field(None, alias="formattedAddress")
    national_phone_number: Optional[str] = Field(None, alias="nationalPhoneNumber")
    website_uri: Optional[str] = Field(None, alias="websiteUri")
    rating: Optional[float] = None
    user_rating_count: Optional[int] = Field(None, alias="userRatingCount")
    location: Optional[UpstreamLocation] = None
    photos: List[UpstreamPhoto] = Field(default_factory=list)
    current_opening_hours: Optional[CurrentOpeningHours] = Field(None, alias="currentOpeningHours")
    regular_opening_hours: Optional[RegularOpeningHours] = Field(None, alias="regularOpeningHours")


class UpstreamSearchResponse(BaseModel):
    places: List[UpstreamPlace] = Field(default_factory=list)
