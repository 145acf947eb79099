"""
Builds the result page of one vacation request.

Steps, in order: geocode the city, list the vacation days, fetch the
country record, its exchange rates, the weather of every day (in parallel),
then the packing items. Any failure raises a PlannerError and stops the
request; nothing partial is returned.
"""

import calendar
import datetime as dt
import logging
from typing import Any, List

from vacation_planner.core.models import Itinerary, VacationRequest
from vacation_planner.services import countries, currency, geocode, weather
from vacation_planner.services.packing import PackingStore

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def vacation_days(start: dt.date, end: dt.date) -> List[int]:
    """
    Unix timestamps of UTC midnight for every day from `start` to `end`
    inclusive. An inverted range gives an empty list.
    """
    first = calendar.timegm(start.timetuple())
    count = max(0, (end - start).days + 1)
    return [first + SECONDS_PER_DAY * i for i in range(count)]


def plan(req: VacationRequest, store: PackingStore, user: Any = None) -> Itinerary:
    location = geocode.locate(req.city)

    days = vacation_days(req.start_date, req.end_date)
    if not days:
        logger.warning("End date %s is before start date %s, no weather to fetch",
                       req.end_date, req.start_date)

    country = countries.fetch_country(location.country_code)
    rates = currency.fetch_rates(country.currency_codes)
    display = currency.build_display(country, rates)

    forecast = weather.fetch_days(location.coordinates, days)
    items = store.items_for(req.activity_type, req.vacation_type)

    logger.info("Planned %s, %s: %d day(s), %d item(s)",
                location.display_city, location.country_name, len(forecast), len(items))
    return Itinerary(
        city=location.display_city,
        country=location.country_name,
        weather=forecast,
        country_data=country,
        currency=display,
        request=req,
        items=items,
        user=user,
        trip_id=False,
    )
