import logging
import math
from typing import AsyncIterator, Optional, Tuple

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.sun_model import SimplifiedResponse
from app.services.Sunsethue_service import SunsethueService
from app.core.config import Settings, get_settings
from app.core.errors import BadRequestError, ConfigurationError, SkylightError
from app.core.logger import logs

router = APIRouter()

# --- Dependency Injection ---
async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.SUNSETHUE_TIMEOUT) as client:
        yield client

# --- Validation ---
def resolve_api_key(settings: Settings) -> str:
    if not settings.SUNSETHUE_API_KEY:
        raise ConfigurationError("SUNSETHUE_API_KEY not configured")
    return settings.SUNSETHUE_API_KEY

def parse_coordinates(lat: Optional[str], lon: Optional[str]) -> Tuple[float, float]:
    """Parse and range-check the raw query values. Raises BadRequestError."""
    if lat is None or lon is None:
        raise BadRequestError("Missing required parameters: lat and lon")

    # float() also takes Python digit separators such as "4_0"
    if "_" in lat or "_" in lon:
        raise BadRequestError("Parameters lat and lon must be numbers")

    try:
        latitude, longitude = float(lat), float(lon)
    except ValueError:
        raise BadRequestError("Parameters lat and lon must be numbers")

    # NaN fails every comparison, so it is rejected here too
    if math.isnan(latitude) or not -90 <= latitude <= 90:
        raise BadRequestError("Latitude must be between -90 and 90")
    if math.isnan(longitude) or not -180 <= longitude <= 180:
        raise BadRequestError("Longitude must be between -180 and 180")

    return latitude, longitude

# --- The Endpoint ---
@router.get("/sunrise", response_model=SimplifiedResponse)
async def get_sunrise_endpoint(
    lat: Optional[str] = Query(None, description="Latitude in degrees, -90 to 90"),
    lon: Optional[str] = Query(None, description="Longitude in degrees, -180 to 180"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Returns today's sunrise and sunset for the given coordinates.
    """
    try:
        api_key = resolve_api_key(settings)
        latitude, longitude = parse_coordinates(lat, lon)

        service = SunsethueService(api_key, client, settings.SUNSETHUE_BASE_URL)
        return await service.get_todays_sun_events(latitude, longitude)
    except SkylightError as e:
        logs.log(logging.WARNING, f"GET /sunrise failed with {e.status_code}: {e.reason}", {"lat": lat, "lon": lon})
        raise HTTPException(status_code=e.status_code, detail=e.reason)
