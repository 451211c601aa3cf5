"""Lookup layer — geocoding a city name, then fetching its current weather."""

import logging
import math
from typing import Any

import httpx

from weathernow.config import Config
from weathernow.models import GeoResult, WeatherReading

logger = logging.getLogger(__name__)


class WeatherLookupError(Exception):
    """Base class for lookup failures shown to the user."""


class NotFoundError(WeatherLookupError):
    """Geocoder returned no match for the query."""


class NetworkFailure(WeatherLookupError):
    """Transport error, HTTP error status, or undecodable body."""


class MalformedResponse(WeatherLookupError):
    """Response decoded but lacks the fields a reading needs."""


def normalize_query(raw: str | None) -> str | None:
    """Trim a user-entered place name. Returns None if nothing is left."""
    if raw is None:
        return None
    query = raw.strip()
    return query or None


def _get_json(client: httpx.Client, url: str, params: dict[str, Any]) -> Any:
    """Single GET returning the decoded JSON body. Raises NetworkFailure."""
    try:
        resp = client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as e:
        raise NetworkFailure(_status_message(e.response)) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NetworkFailure(str(e) or type(e).__name__) from e
    except ValueError as e:
        raise NetworkFailure(f"Invalid JSON from {url}") from e


def _status_message(resp: httpx.Response) -> str:
    """Open-Meteo puts a human-readable ``reason`` in its error bodies."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return f"HTTP {resp.status_code} from {resp.request.url.host}"


def _is_number(value: Any) -> bool:
    """Finite int or float. NaN and Infinity decode from JSON but are not readings."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, x.5 toward +infinity (21.5 → 22, -2.5 → -2)."""
    return math.floor(value + 0.5)


def geocode(client: httpx.Client, query: str, config: Config) -> GeoResult:
    """Resolve a place name to its first geocoding match.

    Args:
        client: HTTP client to send the request with.
        query: Trimmed, non-empty place name.
        config: Endpoint and language settings.

    Returns:
        GeoResult for the first match.

    Raises:
        NetworkFailure: On transport or decode failure.
        NotFoundError: When the geocoder returns no results.
        MalformedResponse: When the body or first result has the wrong shape.
    """
    params = {
        "name": query,
        "count": 1,
        "language": config.language,
        "format": "json",
    }
    data = _get_json(client, config.geocoding_url, params)
    if not isinstance(data, dict):
        raise MalformedResponse("Geocoding response is not an object")
    results = data.get("results")
    if results is not None and not isinstance(results, list):
        raise MalformedResponse("Geocoding results is not a list")
    if not results:
        logger.info("No geocoding match for %r", query)
        raise NotFoundError(f"City not found: {query}")

    r = results[0]
    if not isinstance(r, dict):
        raise MalformedResponse("Geocoding result is not an object")
    lat, lng, name = r.get("latitude"), r.get("longitude"), r.get("name")
    if not (_is_number(lat) and _is_number(lng) and name):
        raise MalformedResponse("Geocoding result lacks latitude, longitude or name")

    geo = GeoResult(
        latitude=float(lat),
        longitude=float(lng),
        resolved_name=str(name),
        region=r.get("admin1") or None,
        country_code=str(r.get("country_code") or ""),
    )
    logger.debug("Geocoded %r → %s (%s, %s)", query, geo.resolved_name, lat, lng)
    return geo


def fetch_current(
    client: httpx.Client, geo: GeoResult, config: Config
) -> tuple[float, int]:
    """Fetch current temperature (°C) and WMO weather code at a location.

    Returns:
        (temperature_2m, weather_code) exactly as reported.

    Raises:
        NetworkFailure: On transport or decode failure.
        MalformedResponse: When ``current`` or either field is missing.
    """
    params = {
        "latitude": geo.latitude,
        "longitude": geo.longitude,
        "current": "temperature_2m,weather_code",
        "timezone": "auto",
    }
    data = _get_json(client, config.forecast_url, params)
    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        raise MalformedResponse("Forecast response has no current conditions")

    temp, code = current.get("temperature_2m"), current.get("weather_code")
    if not (_is_number(temp) and _is_number(code)):
        raise MalformedResponse("Forecast response lacks temperature or weather code")
    return float(temp), int(code)


def lookup(
    query: str,
    client: httpx.Client | None = None,
    config: Config | None = None,
) -> WeatherReading:
    """Top-level entry point: city name in, current weather out.

    Sends exactly one geocoding request, then (only if it matched) one
    forecast request. Nothing is returned unless both succeed.

    Args:
        query: Place name; surrounding whitespace is stripped. Blank is a caller error.
        client: HTTP client to reuse. A short-lived one is created if None.
        config: Endpoint/timeout settings. Defaults to ``Config()``.

    Returns:
        WeatherReading with rounded temperature.

    Raises:
        ValueError: If query is empty.
        WeatherLookupError: NotFoundError, NetworkFailure or MalformedResponse.
    """
    normalized = normalize_query(query)
    if normalized is None:
        raise ValueError("query must be a non-empty place name")
    query = normalized
    config = config or Config()

    if client is None:
        with httpx.Client(timeout=config.timeout) as own_client:
            return lookup(query, client=own_client, config=config)

    logger.info("Looking up weather for %r", query)
    geo = geocode(client, query, config)
    temp, code = fetch_current(client, geo, config)
    reading = WeatherReading(
        city=geo.resolved_name,
        region=geo.region,
        country=geo.country_code,
        temperature_celsius=round_half_up(temp),
        weather_code=code,
    )
    logger.info(
        "%s: %d°C, code %d", reading.city, reading.temperature_celsius, code
    )
    return reading
