"""Restaurants router proxying the Google Places API (New)."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.dependencies import get_places_client
from app.models.restaurants import RestaurantDetail, RestaurantSummary
from app.services.google_places import DEFAULT_LIMIT, PlacesServiceClient

router = APIRouter(prefix="/restaurants", tags=["restaurants"])
logger = logging.getLogger(__name__)

DETAIL_ERROR_HINT = "Check billing, Places API (New) enabled, and key restrictions."


@router.get(
    "",
    response_model=List[RestaurantSummary],
    response_model_exclude_none=True,
)
async def search_restaurants(
    q: Optional[str] = None,
    radius: Optional[int] = Query(None, description="Accepted for compatibility, not applied"),
    limit: int = Query(DEFAULT_LIMIT, ge=0),
    page: int = Query(1, ge=1),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    places: PlacesServiceClient = Depends(get_places_client),
):
    """
    Search restaurants in Stockholm.

    Every search is biased to a fixed 30 km circle around the city centre,
    so ``radius`` is ignored here. ``minRating`` is applied before ``limit``.
    """
    try:
        return await places.search_restaurants(
            q=q,
            limit=limit,
            page=page,
            min_rating=min_rating,
        )
    except Exception as exc:
        logger.exception(f"Restaurant search failed: q={q!r}, page={page}")
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or "Search failed"},
        )


@router.get(
    "/{place_id}",
    response_model=RestaurantDetail,
    response_model_exclude_none=True,
)
async def get_restaurant_details(
    place_id: str,
    places: PlacesServiceClient = Depends(get_places_client),
):
    """Retrieve one restaurant, with every photo for the carousel."""
    try:
        return await places.get_restaurant_details(place_id)
    except Exception as exc:
        logger.exception(f"Restaurant details failed: place_id={place_id}")
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc) or "Details failed",
                "hint": DETAIL_ERROR_HINT,
            },
        )
