"""CLI entry point for a one-shot weather lookup.

    uv run weathernow "sao paulo"
"""

import argparse
import sys

from dotenv import load_dotenv

from weathernow.config import load_config
from weathernow.logging_config import setup_logging
from weathernow.lookup import WeatherLookupError, lookup, normalize_query
from weathernow.models import WeatherReading
from weathernow.presentation import classify
from weathernow.state import error_message


def format_reading(reading: WeatherReading, lang: str = "en") -> str:
    """One-line summary, e.g. ``São Paulo, SP (BR): 21°C, Partly cloudy``."""
    place = ", ".join(p for p in (reading.city, reading.region) if p)
    if reading.country:
        place += f" ({reading.country})"
    label = classify(reading.weather_code, lang).label
    return f"{place}: {reading.temperature_celsius}°C, {label}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathernow", description="Show current weather for a city."
    )
    parser.add_argument("city", nargs="+", help="City name, e.g. sao paulo")
    parser.add_argument("--lang", default="en", choices=("en", "pt"))
    args = parser.parse_args(argv)

    load_dotenv()
    config = load_config()
    setup_logging(config.log_level)

    query = normalize_query(" ".join(args.city))
    if query is None:
        print("weathernow: empty city name", file=sys.stderr)
        return 2

    try:
        reading = lookup(query, config=config)
    except WeatherLookupError as e:
        print(f"weathernow: {error_message(e, args.lang)}", file=sys.stderr)
        return 1

    print(format_reading(reading, args.lang))
    return 0


if __name__ == "__main__":
    sys.exit(main())
