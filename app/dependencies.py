"""Dependencies for FastAPI routes."""
from app.config import settings
from app.services.google_places import PlacesServiceClient


def get_places_client() -> PlacesServiceClient:
    """
    Build the Places API client from process-wide settings.

    Tests override this dependency to point the client at a fake upstream.
    """
    return PlacesServiceClient(
        api_key=settings.google_maps_api_key,
        base_url=settings.places_api_base_url,
    )
