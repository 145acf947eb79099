import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_UP, Decimal

from vacation_planner import config
from vacation_planner.core.errors import MalformedResponseError
from vacation_planner.core.models import Coordinates, WeatherDay
from vacation_planner.services.http import get_json

logger = logging.getLogger(__name__)

_SERVICE = "weather"


def fetch_day(coordinates: Coordinates, time: int | None = None) -> WeatherDay:
    """
    Daily summary for one day. With `time` (unix timestamp) the time-machine
    variant of the endpoint is called, otherwise the current forecast.
    """
    key = config.require("WEATHER_API_KEY")
    point = f"{coordinates.lat},{coordinates.lng}"
    if time is not None:
        point = f"{point},{time}"
    body = get_json(f"{config.WEATHER_BASE_URL}/{key}/{point}", _SERVICE)

    try:
        raw = body["daily"]["data"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(_SERVICE, "no daily block in response") from e
    return to_weather_day(raw)


def to_weather_day(raw: dict) -> WeatherDay:
    try:
        day = dt.datetime.fromtimestamp(raw["time"], tz=dt.timezone.utc)
        avg = (raw["temperatureHigh"] + raw["temperatureLow"]) / 2
        # halves round away from zero: 70.5 -> 71, -2.5 -> -3
        avg = int(Decimal(avg).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (KeyError, TypeError, ArithmeticError) as e:
        raise MalformedResponseError(_SERVICE, f"incomplete daily entry ({e})") from e

    icon = raw.get("icon") or "undefined"
    return WeatherDay(
        date=day.strftime("%a %b %d"),
        summary=raw.get("summary", ""),
        temperature_avg=avg,
        precip_type=raw.get("precipType"),
        icon_ref=f"img/icons/{icon}.png",
    )


def fetch_days(coordinates: Coordinates,
               days: list[int],
               max_workers: int | None = None) -> list[WeatherDay]:
    """
    One fetch per day, all submitted before any result is read, joined in
    day order. All or nothing: the first failure cancels the fetches that
    have not started yet and is raised, no partial list is returned.
    """
    if not days:
        return []

    workers = min(max_workers or config.WEATHER_MAX_WORKERS, len(days))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(fetch_day, coordinates, day) for day in days]
        try:
            weather = [f.result() for f in futures]
        except Exception:
            for f in futures:
                f.cancel()
            raise

    logger.info("Fetched weather for %d day(s)", len(weather))
    return weather
