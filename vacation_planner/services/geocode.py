# services/geocode.py

import logging

from vacation_planner import config
from vacation_planner.core.errors import MalformedResponseError, NotFoundError, UpstreamError
from vacation_planner.core.models import Coordinates, Location
from vacation_planner.services.http import get_json

logger = logging.getLogger(__name__)

_SERVICE = "geocode"


def locate(city: str) -> Location:
    """
    Convert a free-text city into a Location with the Google Geocoding API.
    Only the first candidate is used.
    """
    body = get_json(
        config.GEOCODE_BASE_URL,
        _SERVICE,
        params={"address": city, "key": config.require("GEOCODE_API_KEY")},
    )
    if not isinstance(body, dict):
        raise MalformedResponseError(_SERVICE, "expected a JSON object")

    # Google answers 200 even when the key is refused
    status = body.get("status", "OK")
    if status not in ("OK", "ZERO_RESULTS"):
        raise UpstreamError(_SERVICE, body.get("error_message") or status)

    results = body.get("results") or []
    if not results:
        raise NotFoundError(f"Location not found: {city}")

    location = to_location(results[0])
    logger.info("Geocoded %r to %s, %s", city, location.display_city, location.country_code)
    return location


def to_location(result: dict) -> Location:
    try:
        display_city = result["formatted_address"].split(",")[0]
        point = result["geometry"]["location"]
        coordinates = Coordinates(lat=float(point["lat"]), lng=float(point["lng"]))
        country = next(
            (c for c in result["address_components"] if (c.get("types") or [None])[0] == "country"),
            None,
        )
        if country is None:
            raise MalformedResponseError(_SERVICE, "no country in address components")
        country_code = country["short_name"]
        country_name = country["long_name"]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(_SERVICE, f"incomplete result ({e})") from e

    return Location(
        display_city=display_city,
        coordinates=coordinates,
        country_code=country_code,
        country_name=country_name,
    )
