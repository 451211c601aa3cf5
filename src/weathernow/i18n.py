"""Simple two-language (pt/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "pt": "Previsão do Tempo",
        "en": "Weather Now",
    },
    "label_city": {
        "pt": "Cidade",
        "en": "City",
    },
    "placeholder_city": {
        "pt": "Digite o nome da cidade",
        "en": "Enter a city name",
    },
    "btn_search": {
        "pt": "Buscar",
        "en": "Search",
    },
    "loading": {
        "pt": "Buscando o tempo",
        "en": "Fetching the weather",
    },
    "empty_state": {
        "pt": "Pesquise uma cidade para ver o tempo agora",
        "en": "Search for a city to see the current weather",
    },
    "error_not_found": {
        "pt": "Cidade não encontrada.",
        "en": "City not found.",
    },
    "error_generic": {
        "pt": "Erro ao buscar dados.",
        "en": "Error fetching data.",
    },
    "weather_clear": {
        "pt": "Céu Limpo",
        "en": "Clear sky",
    },
    "weather_partly_cloudy": {
        "pt": "Parcialmente Nublado",
        "en": "Partly cloudy",
    },
    "weather_fog": {
        "pt": "Nevoeiro",
        "en": "Fog",
    },
    "weather_rain": {
        "pt": "Chuva",
        "en": "Rain",
    },
    "weather_snow": {
        "pt": "Neve",
        "en": "Snow",
    },
    "weather_showers": {
        "pt": "Pancadas de Chuva",
        "en": "Rain showers",
    },
    "weather_thunderstorm": {
        "pt": "Tempestade",
        "en": "Thunderstorm",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def detect_lang(browser_lang: str | None) -> str:
    """Map a navigator.language value ("pt-BR", "en-US") to a supported code."""
    if browser_lang and browser_lang.lower().startswith("pt"):
        return "pt"
    return "en"
