"""Weather Now — Streamlit app showing current weather for a city."""

import functools
import html
import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from weathernow.config import load_config  # noqa: E402
from weathernow.i18n import detect_lang, t  # noqa: E402
from weathernow.logging_config import setup_logging  # noqa: E402
from weathernow.lookup import lookup  # noqa: E402
from weathernow.models import WeatherIcon, WeatherReading  # noqa: E402
from weathernow.presentation import classify  # noqa: E402
from weathernow.state import (  # noqa: E402
    LookupState,
    Status,
    abort,
    error_message,
    finish,
    start,
)

_config = load_config()
setup_logging(_config.log_level)
logger = logging.getLogger(__name__)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = detect_lang(_browser_lang)

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="⛅",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "lookup_state" not in st.session_state:
    st.session_state.lookup_state = LookupState.idle()

_ICON_GLYPHS: dict[WeatherIcon, str] = {
    WeatherIcon.SUNNY: "☀️",
    WeatherIcon.PARTLY_CLOUDY: "⛅",
    WeatherIcon.FOG: "🌫️",
    WeatherIcon.RAINY: "🌧️",
    WeatherIcon.SNOWY: "🌨️",
    WeatherIcon.POURING: "🌧️",
    WeatherIcon.LIGHTNING: "⛈️",
}

st.markdown(
    """
    <style>
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .app-header {
        background-color: #2563EB;
        color: #ffffff;
        padding: 1.2rem 1.6rem;
        border-radius: 0 0 12px 12px;
        font-size: 1.4rem;
        font-weight: 700;
        text-align: center;
        margin-bottom: 1.2rem;
    }
    .error-box {
        background-color: #FEE2E2;
        color: #B91C1C;
        border-radius: 8px;
        padding: 0.8rem 1.2rem;
        margin-top: 0.8rem;
    }
    .result-card {
        background-color: #ffffff;
        border-radius: 16px;
        padding: 1.6rem;
        margin-top: 1.2rem;
        text-align: center;
        box-shadow: 0 2px 8px rgba(0,0,0,0.08);
    }
    .result-card .city { font-size: 1.6rem; font-weight: 700; color: #1F2937; }
    .result-card .region { color: #6B7280; margin-bottom: 1rem; }
    .result-card .icon { font-size: 4.5rem; line-height: 1.2; }
    .result-card .temp { font-size: 3rem; font-weight: 700; color: #111827; }
    .result-card .label { font-size: 1.2rem; font-weight: 600; }
    .empty-state { color: #9CA3AF; text-align: center; margin-top: 3rem; }
    </style>
    """,
    unsafe_allow_html=True,
)


def _render_result(reading: WeatherReading) -> None:
    presentation = classify(reading.weather_code, _lang)
    region = ", ".join(p for p in (reading.region, reading.country) if p)
    st.markdown(
        f"<div class='result-card'>"
        f"<div class='city'>{html.escape(reading.city)}</div>"
        f"<div class='region'>{html.escape(region)}</div>"
        f"<div class='icon'>{_ICON_GLYPHS[presentation.icon]}</div>"
        f"<div class='temp'>{reading.temperature_celsius}°C</div>"
        f"<div class='label' style='color:{presentation.color};'>"
        f"{html.escape(presentation.label)}</div>"
        f"</div>",
        unsafe_allow_html=True,
    )


st.markdown(f"<div class='app-header'>{t('page_title', _lang)}</div>", unsafe_allow_html=True)

_state: LookupState = st.session_state.lookup_state

# --- Input (Enter submits the form) ---
with st.form("search", clear_on_submit=False, border=False):
    col1, col2 = st.columns([4, 1], vertical_alignment="bottom")
    with col1:
        city = st.text_input(
            t("label_city", _lang),
            placeholder=t("placeholder_city", _lang),
            label_visibility="collapsed",
        )
    with col2:
        submitted = st.form_submit_button(
            t("btn_search", _lang),
            disabled=_state.is_loading,
            use_container_width=True,
        )

# --- Form submission handler ---
if submitted:
    loading = start(_state, city)
    if loading is not None:
        st.session_state.lookup_state = loading
        st.rerun()

# A rerun that interrupts the fetch lands back here and fetches again.
if _state.is_loading:
    with st.spinner(t("loading", _lang)):
        try:
            st.session_state.lookup_state = finish(
                _state, functools.partial(lookup, config=_config)
            )
        except Exception as e:
            logger.exception("Lookup for %r crashed", _state.query)
            st.session_state.lookup_state = abort(_state, e)
    st.rerun()

# --- Error message ---
if _state.status is Status.FAILED and _state.error is not None:
    st.markdown(
        f"<div class='error-box'>{html.escape(error_message(_state.error, _lang))}</div>",
        unsafe_allow_html=True,
    )

# --- Result ---
if _state.status is Status.SUCCESS and _state.reading is not None:
    _render_result(_state.reading)
elif _state.status is Status.IDLE:
    st.markdown(
        f"<div class='empty-state'>{t('empty_state', _lang)}</div>",
        unsafe_allow_html=True,
    )
