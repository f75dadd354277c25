"""
Photo proxy router.

Serves upstream photos by their opaque name so the API key never reaches
the browser. The name arrives URL-encoded in the path; Starlette decodes
the path before it is captured here.
"""
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from app.dependencies import get_places_client
from app.services.google_places import LIST_PHOTO_WIDTH, PlacesServiceClient

router = APIRouter(prefix="/photos", tags=["photos"])
logger = logging.getLogger(__name__)


@router.get("/v1/{photo_name:path}")
async def get_photo(
    photo_name: str,
    maxwidth: int = Query(LIST_PHOTO_WIDTH, description="Maximum width in pixels"),
    places: PlacesServiceClient = Depends(get_places_client),
):
    """
    Relay a photo from the Places media endpoint.

    Upstream status and headers are passed through; Content-Length is
    recomputed for the buffered body.
    """
    try:
        media = await places.fetch_photo(photo_name, maxwidth)
    except Exception as exc:
        logger.exception(f"Photo fetch failed: maxwidth={maxwidth}")
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or "Photo fetch failed"},
        )

    return Response(
        content=media.content,
        status_code=media.status_code,
        headers=media.headers,
    )
