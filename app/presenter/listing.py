"""
List view state: accumulate pages, filter and sort.

Sorting and the open-now filter are purely presentational. They run over
whatever has been accumulated and never change what is fetched or how
pagination advances.
"""
from enum import Enum
from typing import Iterable, List, Optional

from app.models.restaurants import RestaurantSummary
from app.presenter.api_client import DEFAULT_RADIUS, PAGE_SIZE, RestaurantsApiClient


class SortOption(str, Enum):
    """Sort orders offered in the list toolbar."""
    BEST = "best"
    CLOSEST = "closest"
    REVIEWED = "reviewed"


def filter_open_now(
    restaurants: Iterable[RestaurantSummary], open_now_only: bool
) -> List[RestaurantSummary]:
    if not open_now_only:
        return list(restaurants)
    return [r for r in restaurants if r.open_now]


def _latitude(restaurant: RestaurantSummary) -> float:
    return restaurant.location.lat if restaurant.location else 0


def sort_restaurants(
    restaurants: Iterable[RestaurantSummary], sort_by: SortOption
) -> List[RestaurantSummary]:
    """
    Stable sort of list items.

    ``CLOSEST`` is an approximation: it orders by raw latitude, ascending,
    with no reference point and no longitude. It is not a distance.
    """
    if sort_by == SortOption.BEST:
        return sorted(restaurants, key=lambda r: -(r.rating or 0))
    if sort_by == SortOption.REVIEWED:
        return sorted(restaurants, key=lambda r: -(r.user_ratings_total or 0))
    if sort_by == SortOption.CLOSEST:
        return sorted(restaurants, key=_latitude)
    return list(restaurants)


class RestaurantAccumulator:
    """Client-held list that grows with "load more" and resets on a new search."""

    def __init__(self) -> None:
        self.items: List[RestaurantSummary] = []

    def apply_page(self, page: int, results: Iterable[RestaurantSummary]) -> List[RestaurantSummary]:
        if page == 1:
            self.items = list(results)
        else:
            self.items = self.items + list(results)
        return self.items


class RestaurantFeed:
    """Filter state plus accumulated results for the list page."""

    def __init__(self, api: RestaurantsApiClient, page_size: int = PAGE_SIZE) -> None:
        self.api = api
        self.page_size = page_size
        self.accumulator = RestaurantAccumulator()
        self._reset_filters()

    def _reset_filters(self) -> None:
        self.query = ""
        self.category = ""
        self.min_rating = 0.0
        self.radius = DEFAULT_RADIUS
        self.sort_by = SortOption.BEST
        self.open_now_only = False
        self.page = 1

    async def clear_filters(self) -> List[RestaurantSummary]:
        """Reset every filter and refetch page 1, replacing the accumulated list."""
        self._reset_filters()
        return await self._fetch(1)

    async def _fetch(self, page: int) -> List[RestaurantSummary]:
        results = await self.api.search(
            query=self.query,
            category=self.category,
            min_rating=self.min_rating,
            page=page,
            limit=self.page_size,
            radius=self.radius,
        )
        self.page = page
        return self.accumulator.apply_page(page, results)

    async def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        min_rating: Optional[float] = None,
        radius: Optional[int] = None,
    ) -> List[RestaurantSummary]:
        """Start a new search from page 1. Unset arguments keep their current value."""
        if query is not None:
            self.query = query
        if category is not None:
            self.category = category
        if min_rating is not None:
            self.min_rating = min_rating
        if radius is not None:
            self.radius = radius
        return await self._fetch(1)

    async def load_more(self) -> List[RestaurantSummary]:
        """Fetch the next page and append it. A failed fetch leaves the page unchanged."""
        return await self._fetch(self.page + 1)

    @property
    def items(self) -> List[RestaurantSummary]:
        return self.accumulator.items

    def visible(self) -> List[RestaurantSummary]:
        return sort_restaurants(filter_open_now(self.items, self.open_now_only), self.sort_by)
