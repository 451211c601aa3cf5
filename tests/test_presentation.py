import pytest

from weathernow.models import WeatherIcon, WeatherPresentation
from weathernow.presentation import classify

CLEAR = WeatherPresentation(icon=WeatherIcon.SUNNY, label="Clear sky", color="#FDB813")


@pytest.mark.parametrize(
    "code, icon, label, color",
    [
        (0, WeatherIcon.SUNNY, "Clear sky", "#FDB813"),
        (1, WeatherIcon.PARTLY_CLOUDY, "Partly cloudy", "#A0A0A0"),
        (3, WeatherIcon.PARTLY_CLOUDY, "Partly cloudy", "#A0A0A0"),
        (45, WeatherIcon.FOG, "Fog", "#787878"),
        (48, WeatherIcon.FOG, "Fog", "#787878"),
        (51, WeatherIcon.RAINY, "Rain", "#4299E1"),
        (67, WeatherIcon.RAINY, "Rain", "#4299E1"),
        (71, WeatherIcon.SNOWY, "Snow", "#90CDF4"),
        (77, WeatherIcon.SNOWY, "Snow", "#90CDF4"),
        (80, WeatherIcon.POURING, "Rain showers", "#2B6CB0"),
        (82, WeatherIcon.POURING, "Rain showers", "#2B6CB0"),
        (95, WeatherIcon.LIGHTNING, "Thunderstorm", "#805AD5"),
        (99, WeatherIcon.LIGHTNING, "Thunderstorm", "#805AD5"),
    ],
)
def test_range_boundaries(code, icon, label, color):
    assert classify(code) == WeatherPresentation(icon=icon, label=label, color=color)


@pytest.mark.parametrize("code", [-5, -1, 4, 44, 49, 50, 68, 70, 78, 79, 83, 94, 100, 10_000])
def test_unmapped_codes_fall_back_to_clear_sky(code):
    assert classify(code) == CLEAR


def test_zero_negative_and_over_range_agree():
    assert classify(0) == classify(-5) == classify(100)


def test_total_and_deterministic_over_wmo_range():
    for code in range(0, 100):
        first = classify(code)
        assert isinstance(first.icon, WeatherIcon)
        assert first == classify(code)


def test_partly_cloudy_for_code_3():
    assert classify(3).icon is WeatherIcon.PARTLY_CLOUDY


def test_portuguese_labels():
    assert classify(0, "pt").label == "Céu Limpo"
    assert classify(81, "pt").label == "Pancadas de Chuva"
    assert classify(96, "pt").label == "Tempestade"


def test_unknown_language_uses_english():
    assert classify(61, "fr").label == "Rain"


def test_icon_values_use_mdi_names():
    assert WeatherIcon.PARTLY_CLOUDY.value == "weather-partly-cloudy"
