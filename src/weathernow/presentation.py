"""WMO weather code → icon/label/color lookup table."""

from weathernow.i18n import t
from weathernow.models import WeatherIcon, WeatherPresentation

# (low, high, icon, i18n key, color), tested top to bottom; first match wins.
_CODE_TABLE: tuple[tuple[int, int, WeatherIcon, str, str], ...] = (
    (0, 0, WeatherIcon.SUNNY, "weather_clear", "#FDB813"),
    (1, 3, WeatherIcon.PARTLY_CLOUDY, "weather_partly_cloudy", "#A0A0A0"),
    (45, 48, WeatherIcon.FOG, "weather_fog", "#787878"),
    (51, 67, WeatherIcon.RAINY, "weather_rain", "#4299E1"),
    (71, 77, WeatherIcon.SNOWY, "weather_snow", "#90CDF4"),
    (80, 82, WeatherIcon.POURING, "weather_showers", "#2B6CB0"),
    (95, 99, WeatherIcon.LIGHTNING, "weather_thunderstorm", "#805AD5"),
)

_DEFAULT = _CODE_TABLE[0]


def classify(code: int, lang: str = "en") -> WeatherPresentation:
    """Map a WMO weather code to its display presentation.

    Total: codes outside every range (negative, gaps, above 99) fall back
    to the clear-sky entry.

    Args:
        code: WMO weather interpretation code.
        lang: Language code for the label ('pt' or 'en').

    Returns:
        WeatherPresentation with icon, translated label and hex color.
    """
    row = next(
        (r for r in _CODE_TABLE if r[0] <= code <= r[1]),
        _DEFAULT,
    )
    _, _, icon, key, color = row
    return WeatherPresentation(icon=icon, label=t(key, lang), color=color)
