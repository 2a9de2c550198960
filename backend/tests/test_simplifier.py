from datetime import datetime, timedelta, timezone

from app.models.sun_model import ForecastResponse, SunEventType
from app.services.simplifier import format_timestamp, simplify
from conftest import make_event, make_forecast


def build(events):
    return ForecastResponse.model_validate(make_forecast(events))


def test_selects_both_kinds_regardless_of_order():
    forecast = build([
        make_event("sunset", time="2026-10-19T17:58:00Z"),
        make_event("sunrise", time="2026-10-19T06:12:00Z"),
    ])

    result = simplify(forecast)

    assert result.sunrise.type == SunEventType.SUNRISE
    assert result.sunrise.time == "2026-10-19T06:12:00Z"
    assert result.sunset.type == SunEventType.SUNSET
    assert result.sunset.time == "2026-10-19T17:58:00Z"


def test_missing_sunrise_is_not_an_error():
    result = simplify(build([make_event("sunset")]))

    assert result.sunrise is None
    assert result.sunset is not None


def test_empty_forecast_yields_no_events():
    result = simplify(build([]))

    assert result.sunrise is None
    assert result.sunset is None


def test_first_event_of_each_kind_wins():
    forecast = build([
        make_event("sunrise", time="2026-10-19T06:12:00Z"),
        make_event("sunset", time="2026-10-19T17:58:00Z"),
        make_event("sunrise", time="2026-10-20T06:13:00Z"),
        make_event("sunset", time="2026-10-20T17:56:00Z"),
    ])

    result = simplify(forecast)

    assert result.sunrise.time == "2026-10-19T06:12:00Z"
    assert result.sunset.time == "2026-10-19T17:58:00Z"


def test_location_comes_from_forecast_not_grid():
    forecast = build([])

    result = simplify(forecast)

    assert result.location == forecast.location
    assert result.location != forecast.grid_location


def test_fetched_at_is_utc_iso8601():
    now = datetime(2026, 10, 19, 14, 30, 5, 123456, tzinfo=timezone(timedelta(hours=2)))

    result = simplify(build([]), now=now)

    assert result.fetched_at == "2026-10-19T12:30:05Z"


def test_fetched_at_defaults_to_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)

    result = simplify(build([]))

    fetched = datetime.strptime(result.fetched_at, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert before <= fetched <= datetime.now(timezone.utc)


def test_naive_timestamps_are_taken_as_utc():
    assert format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05Z"
