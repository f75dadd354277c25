"""
Result presenter: client-side logic consuming the proxy's schema.

Covers opening-hours normalization, carousel photo lists, and the list
view's accumulate/filter/sort behaviour.
"""

from .api_client import (
    ProxyRequestError,
    RestaurantsApiClient,
    build_search_params,
)
from .carousel import (
    absolute_url,
    carousel_photo_urls,
    dedupe_urls,
    maps_link,
)
from .listing import (
    RestaurantAccumulator,
    RestaurantFeed,
    SortOption,
    filter_open_now,
    sort_restaurants,
)
from .opening_hours import (
    HoursRow,
    build_hours_table,
    normalize_day,
    parse_opening_hours,
    today_name,
)

__all__ = [
    "ProxyRequestError",
    "RestaurantsApiClient",
    "build_search_params",
    "absolute_url",
    "carousel_photo_urls",
    "dedupe_urls",
    "maps_link",
    "RestaurantAccumulator",
    "RestaurantFeed",
    "SortOption",
    "filter_open_now",
    "sort_restaurants",
    "HoursRow",
    "build_hours_table",
    "normalize_day",
    "parse_opening_hours",
    "today_name",
]
