from datetime import datetime, timezone
from typing import Iterable, Optional

from app.models.sun_model import ForecastResponse, SimplifiedResponse, SunEvent, SunEventType

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def first_event(events: Iterable[SunEvent], kind: SunEventType) -> Optional[SunEvent]:
    """Return the first event of ``kind`` in sequence order, or None."""
    return next((event for event in events if event.type == kind), None)


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(ISO_FORMAT)


def simplify(forecast: ForecastResponse, now: Optional[datetime] = None) -> SimplifiedResponse:
    """
    Reduce a full forecast to the sunrise and sunset the mobile client shows.

    Only the first event of each kind is kept. With a multi-day forecast
    that is whichever day the upstream listed first, not necessarily today.
    """
    return SimplifiedResponse(
        location=forecast.location,
        sunrise=first_event(forecast.data, SunEventType.SUNRISE),
        sunset=first_event(forecast.data, SunEventType.SUNSET),
        fetched_at=format_timestamp(now or datetime.now(timezone.utc)),
    )
