# services/countries.py

import logging

from vacation_planner import config
from vacation_planner.core.errors import MalformedResponseError
from vacation_planner.core.models import CountryInfo
from vacation_planner.services.http import get_json

logger = logging.getLogger(__name__)

_SERVICE = "countries"


def fetch_country(code: str) -> CountryInfo:
    """Country metadata (REST Countries v2) for an ISO alpha-2 or alpha-3 code."""
    body = get_json(
        f"{config.COUNTRIES_BASE_URL}/alpha/{code}",
        _SERVICE,
        params={"fullText": "true"},
        not_found=f"Unknown country code: {code}",
    )
    country = to_country(body)
    logger.info("Country %s: %d currency(ies)", country.name, len(country.currency_codes))
    return country


def to_country(body: dict) -> CountryInfo:
    try:
        currencies = body["currencies"]
        return CountryInfo(
            name=body["name"],
            capital=body.get("capital", ""),
            population=int(body.get("population", 0)),
            # island states come without a borders list
            borders=tuple(body.get("borders") or ()),
            currency_names=tuple(c.get("name") or c["code"] for c in currencies),
            currency_codes=tuple(c["code"] for c in currencies),
            languages=tuple(lang["name"] for lang in body["languages"]),
            flag_url=body.get("flag", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(_SERVICE, f"incomplete country record ({e})") from e
