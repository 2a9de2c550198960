import httpx
import logging
from pydantic import ValidationError
from app.models.sun_model import ForecastResponse, SimplifiedResponse
from app.services.simplifier import simplify
from app.core.errors import UpstreamError
from app.core.logger import logs

DEFAULT_BASE_URL = "https://api.sunsethue.com"

class SunsethueService:
    """
    Client for the Sunsethue forecast API.

    Holds no state between calls: every method makes exactly one request
    through the given httpx client and never retries.
    """
    def __init__(self, api_key: str, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL):
        self.api_key = api_key
        self.client = client
        self.forecast_url = f"{base_url.rstrip('/')}/forecast"

    async def get_forecast(self, latitude: float, longitude: float, days: int = 1) -> ForecastResponse:
        # Upstream documents days <= 3; left for the API to enforce
        params = {"latitude": latitude, "longitude": longitude, "days": days}
        logs.log(logging.INFO, f"Calling Sunsethue API for {round(latitude, 2)}, {round(longitude, 2)} ({days} day(s))")

        try:
            resp = await self.client.get(
                self.forecast_url,
                params=params,
                headers={"x-api-key": self.api_key},
            )
        except httpx.TimeoutException as e:
            logs.log(logging.ERROR, f"Sunsethue API timed out: {type(e).__name__}")
            raise UpstreamError("Sunsethue API timed out", status_code=504) from e
        except httpx.HTTPError as e:
            logs.log(logging.ERROR, f"Sunsethue API unreachable: {type(e).__name__}: {e}")
            raise UpstreamError("Could not reach Sunsethue API") from e

        if not resp.is_success:
            logs.log(logging.ERROR, f"Sunsethue API returned status {resp.status_code}")
            raise UpstreamError(
                f"Sunsethue API returned status {resp.status_code}",
                upstream_status=resp.status_code,
            )

        try:
            forecast = ForecastResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logs.log(logging.ERROR, f"Could not decode Sunsethue response: {str(e)}")
            raise UpstreamError("Invalid response from Sunsethue API") from e

        logs.log(logging.INFO, f"Sunsethue returned {len(forecast.data)} event(s)")
        return forecast

    async def get_todays_sun_events(self, latitude: float, longitude: float) -> SimplifiedResponse:
        """Fetch a one-day forecast and keep only its sunrise and sunset."""
        forecast = await self.get_forecast(latitude, longitude, days=1)
        result = simplify(forecast)

        logs.log(
            logging.INFO,
            "Simplified Sunsethue forecast",
            {"sunrise": result.sunrise is not None, "sunset": result.sunset is not None},
        )
        return result
