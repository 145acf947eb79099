import os
from dotenv import load_dotenv

from vacation_planner.core.errors import ConfigurationError

# .env at the repository root (next to pyproject.toml), then the process environment
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))

# API keys
GEOCODE_API_KEY = os.getenv("GEOCODE_API_KEY")
WEATHER_API_KEY = os.getenv("WEATHER_API_KEY")
CURRENCY_API_KEY = os.getenv("CURRENCY_API_KEY")

# Upstream endpoints
GEOCODE_BASE_URL = os.getenv("GEOCODE_BASE_URL", "https://maps.googleapis.com/maps/api/geocode/json")
# Dark Sky compatible (Pirate Weather keeps the same URL scheme and payload)
WEATHER_BASE_URL = os.getenv("WEATHER_BASE_URL", "https://api.pirateweather.net/forecast")
COUNTRIES_BASE_URL = os.getenv("COUNTRIES_BASE_URL", "https://restcountries.com/v2")
CURRENCY_BASE_URL = os.getenv("CURRENCY_BASE_URL", "https://openexchangerates.org/api/latest.json")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
WEATHER_MAX_WORKERS = int(os.getenv("WEATHER_MAX_WORKERS", "8"))

# Database
DATABASE_URL = os.getenv("DATABASE_URL")

# Web server
PORT = int(os.getenv("PORT", "3000"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def require(name: str) -> str:
    """
    Value of the setting `name`, read from this module so that tests can
    monkeypatch it. Raises ConfigurationError when it is missing or empty.
    """
    value = globals().get(name)
    if not value:
        raise ConfigurationError(f"{name} missing or empty.")
    return value
