"""Photo list and map link helpers for the restaurant detail page."""
from typing import Iterable, List, Optional, Sequence
from urllib.parse import quote

from app.models.restaurants import PhotoRef, RestaurantDetail

GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/"


def absolute_url(url: str, base_url: str = "") -> str:
    """Prefix proxy-relative paths (``/photos/...``) with the API base URL."""
    if base_url and url.startswith("/"):
        return f"{base_url.rstrip('/')}{url}"
    return url


def dedupe_urls(urls: Iterable[str]) -> List[str]:
    """Drop repeated URLs, keeping first-occurrence order."""
    return list(dict.fromkeys(urls))


def carousel_photo_urls(
    photo_url: Optional[str],
    photos: Sequence[PhotoRef],
    base_url: str = "",
) -> List[str]:
    """
    Build the carousel slides for a restaurant.

    The preview photo goes first, followed by the full photo list.
    Duplicates are judged on the final URL only, so the same upstream
    photo rendered at two widths shows up twice.
    """
    candidates = [absolute_url(photo.url, base_url) for photo in photos if photo.name]
    if photo_url:
        candidates.insert(0, absolute_url(photo_url, base_url))
    return dedupe_urls(candidates)


def maps_link(detail: RestaurantDetail) -> Optional[str]:
    """Google Maps deep link for the restaurant, when it has a position."""
    if detail.location is None:
        return None
    query = quote(f"{detail.name} {detail.address or ''}", safe="")
    return (
        f"{GOOGLE_MAPS_SEARCH_URL}?api=1&query={query}"
        f"&query_place_id={quote(detail.place_id, safe='')}"
    )
