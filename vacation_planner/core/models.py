# core/models.py

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Tuple, Union

# A rate formatted to two decimals, or False when the currency has no published rate
Rate = Union[str, bool]


@dataclass
class VacationRequest:
    city: str
    start_date: date
    end_date: date
    activity_type: str
    vacation_type: str


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Location:
    display_city: str
    coordinates: Coordinates
    country_code: str
    country_name: str


@dataclass
class WeatherDay:
    date: str
    summary: str
    temperature_avg: int
    precip_type: Optional[str]
    icon_ref: str


@dataclass(frozen=True)
class CountryInfo:
    name: str
    capital: str
    population: int
    borders: Tuple[str, ...]
    currency_names: Tuple[str, ...]
    currency_codes: Tuple[str, ...]
    languages: Tuple[str, ...]
    flag_url: str


@dataclass(frozen=True)
class CurrencyLine:
    name: str
    code: str
    rate: Rate = False
    base: str = "USD"

    @property
    def note(self) -> str:
        """`1 USD = 0.92 EUR`, or an empty string when there is no rate."""
        if not self.rate:
            return ""
        return f"1 {self.base} = {self.rate} {self.code}"


@dataclass(frozen=True)
class CurrencyDisplay:
    lines: Tuple[CurrencyLine, ...] = ()

    def __str__(self) -> str:
        return ", ".join(
            f"{l.name} ({l.note})" if l.note else l.name for l in self.lines
        )


@dataclass
class Itinerary:
    city: str
    country: str
    weather: List[WeatherDay]
    country_data: CountryInfo
    currency: CurrencyDisplay
    request: VacationRequest
    items: List[str] = field(default_factory=list)
    user: Any = None
    trip_id: Union[int, bool] = False
