"""Client for this proxy's HTTP surface, as used by the frontend."""
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from app.models.restaurants import RestaurantDetail, RestaurantSummary

PAGE_SIZE = 30
DEFAULT_RADIUS = 5000


class ProxyRequestError(Exception):
    """Any non-success answer from the proxy; carries its raw message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def build_search_params(
    query: str = "",
    category: str = "",
    min_rating: float = 0,
    page: int = 1,
    limit: int = PAGE_SIZE,
    radius: int = DEFAULT_RADIUS,
) -> Dict[str, Any]:
    """Query parameters for GET /restaurants. A category chip overrides free text."""
    params: Dict[str, Any] = {}
    q = category or query
    if q:
        params["q"] = q
    if min_rating > 0:
        params["minRating"] = str(min_rating)
    params["page"] = str(page)
    params["limit"] = str(limit)
    params["radius"] = str(radius)
    return params


class RestaurantsApiClient:
    """HTTP client wrapper for the restaurants proxy."""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            response = await client.get(path, params=params)
        if not response.is_success:
            raise ProxyRequestError(response.status_code, _error_message(response))
        return response.json()

    async def health(self) -> bool:
        data = await self._get("/health")
        return bool(data.get("ok"))

    async def search(self, **kwargs) -> List[RestaurantSummary]:
        """Fetch one page of restaurants; kwargs as in ``build_search_params``."""
        data = await self._get("/restaurants", params=build_search_params(**kwargs))
        return [RestaurantSummary.model_validate(item) for item in data]

    async def get_details(self, place_id: str) -> RestaurantDetail:
        data = await self._get(f"/restaurants/{quote(place_id, safe='')}")
        return RestaurantDetail.model_validate(data)


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or f"Request failed ({response.status_code})"
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return f"Request failed ({response.status_code})"
