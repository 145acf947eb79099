# tests/conftest.py

import re
import sqlite3

import pytest

from vacation_planner import config
from vacation_planner.services import http
from vacation_planner.services.packing import PackingStore


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def text(self):
        return str(self._payload)

    def json(self):
        if isinstance(self._payload, str):
            raise ValueError("not JSON")
        return self._payload


class FakeApi:
    """
    Stands in for requests.get. Routes are matched on a URL fragment;
    a route answers with a payload, a FakeResponse, an exception to raise,
    or a callable (url, params) returning one of those.
    """

    def __init__(self):
        self.routes = []
        self.calls = []

    def add(self, fragment, answer):
        self.routes.append((fragment, answer))

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        for fragment, answer in self.routes:
            if fragment in url:
                if callable(answer):
                    answer = answer(url, params)
                if isinstance(answer, Exception):
                    raise answer
                if isinstance(answer, FakeResponse):
                    return answer
                return FakeResponse(answer)
        raise AssertionError(f"unexpected GET {url}")

    def urls(self, fragment=""):
        return [u for u, _ in self.calls if fragment in u]


@pytest.fixture
def api(monkeypatch):
    fake = FakeApi()
    monkeypatch.setattr(http.requests, "get", fake.get)
    monkeypatch.setattr(config, "GEOCODE_API_KEY", "geo-key")
    monkeypatch.setattr(config, "WEATHER_API_KEY", "weather-key")
    monkeypatch.setattr(config, "CURRENCY_API_KEY", "rates-key")
    monkeypatch.setattr(config, "GEOCODE_BASE_URL", "https://geo.test/json")
    monkeypatch.setattr(config, "WEATHER_BASE_URL", "https://weather.test/forecast")
    monkeypatch.setattr(config, "COUNTRIES_BASE_URL", "https://countries.test/v2")
    monkeypatch.setattr(config, "CURRENCY_BASE_URL", "https://rates.test/latest.json")
    return fake


@pytest.fixture
def store():
    # TestClient runs handlers in a worker thread
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    s = PackingStore(conn, placeholder="?")
    s.init_schema(seed=True)
    yield s
    s.close()


# ──────────────────────────────────────────────────────────────────────────────
# Sample upstream payloads
# ──────────────────────────────────────────────────────────────────────────────
PARIS = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Paris, France",
            "geometry": {"location": {"lat": 48.8566, "lng": 2.3522}},
            "address_components": [
                {"long_name": "Paris", "short_name": "Paris", "types": ["locality", "political"]},
                {"long_name": "Île-de-France", "short_name": "IDF",
                 "types": ["administrative_area_level_1", "political"]},
                {"long_name": "France", "short_name": "FR", "types": ["country", "political"]},
            ],
        }
    ],
}

NO_RESULTS = {"status": "ZERO_RESULTS", "results": []}

FRANCE = {
    "name": "France",
    "capital": "Paris",
    "population": 67391582,
    "borders": ["AND", "BEL", "DEU", "ITA", "LUX", "MCO", "ESP", "CHE"],
    "currencies": [{"code": "EUR", "name": "Euro", "symbol": "€"}],
    "languages": [{"iso639_1": "fr", "name": "French"}],
    "flag": "https://flagcdn.com/fr.svg",
}

RATES = {"base": "USD", "rates": {"EUR": 0.9214, "CHF": 0.8861, "GBP": 0.7902}}


def weather_answer(url, params=None):
    """Daily block for the timestamp at the end of a time-machine URL."""
    m = re.search(r",(\d+)$", url)
    time = int(m.group(1)) if m else 1780272000
    return {
        "daily": {
            "data": [
                {
                    "time": time,
                    "summary": "Clear throughout the day.",
                    "temperatureHigh": 70.4,
                    "temperatureLow": 55.1,
                    "precipType": "rain",
                    "icon": "clear-day",
                }
            ]
        }
    }


@pytest.fixture
def paris(api):
    """Every upstream answering for a trip to Paris."""
    api.add("geo.test", PARIS)
    api.add("countries.test", FRANCE)
    api.add("rates.test", RATES)
    api.add("weather.test", weather_answer)
    return api
