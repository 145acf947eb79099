# services/currency.py

import logging
from typing import List, Sequence

from vacation_planner import config
from vacation_planner.core.errors import MalformedResponseError
from vacation_planner.core.models import CountryInfo, CurrencyDisplay, CurrencyLine, Rate
from vacation_planner.services.http import get_json

logger = logging.getLogger(__name__)

_SERVICE = "currency"
BASE_CURRENCY = "USD"


def fetch_rates(codes: Sequence[str]) -> List[Rate]:
    """
    Exchange rates against BASE_CURRENCY for `codes`, in the same order.
    One call fetches the whole table; a code missing from it maps to False.
    """
    body = get_json(
        config.CURRENCY_BASE_URL,
        _SERVICE,
        params={"app_id": config.require("CURRENCY_API_KEY"), "base": BASE_CURRENCY},
    )
    rates = body.get("rates") if isinstance(body, dict) else None
    if not isinstance(rates, dict):
        raise MalformedResponseError(_SERVICE, "no rates table in response")

    try:
        result: List[Rate] = [f"{rates[c]:.2f}" if rates.get(c) else False for c in codes]
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(_SERVICE, f"unreadable rate ({e})") from e
    missing = [c for c, r in zip(codes, result) if r is False]
    if missing:
        logger.warning("No %s rate published for %s", BASE_CURRENCY, ", ".join(missing))
    return result


def build_display(country: CountryInfo, rates: Sequence[Rate]) -> CurrencyDisplay:
    """Pair each currency of `country` with its rate; order and count follow the country."""
    return CurrencyDisplay(
        lines=tuple(
            CurrencyLine(name=name, code=code, rate=rate, base=BASE_CURRENCY)
            for name, code, rate in zip(country.currency_names, country.currency_codes, rates)
        )
    )
