"""Data model definitions — explicit boundaries between input, lookup, and render layers."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class GeoResult:
    """First geocoding match. Input to the forecast lookup."""

    latitude: float  # Decimal degrees
    longitude: float  # Decimal degrees
    resolved_name: str  # Display name returned by the geocoder ("São Paulo")
    region: str | None  # First-level admin area ("SP"), absent for some places
    country_code: str  # ISO 3166-1 alpha-2 ("BR")


@dataclass(frozen=True)
class WeatherReading:
    """Terminal result of a successful lookup."""

    city: str
    region: str | None
    country: str
    temperature_celsius: int  # Rounded half-up
    weather_code: int  # WMO weather interpretation code


class WeatherIcon(str, Enum):
    """Icon names (Material Design Icons naming)."""

    SUNNY = "weather-sunny"
    PARTLY_CLOUDY = "weather-partly-cloudy"
    FOG = "weather-fog"
    RAINY = "weather-rainy"
    SNOWY = "weather-snowy"
    POURING = "weather-pouring"
    LIGHTNING = "weather-lightning"


@dataclass(frozen=True)
class WeatherPresentation:
    """Derived view of a weather code. Recomputed on demand."""

    icon: WeatherIcon
    label: str
    color: str  # CSS hex color
