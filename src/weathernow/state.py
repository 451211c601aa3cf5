"""Per-session lookup state owned by the presentation layer.

States: idle → loading → success | failed, and from success/failed back
to loading on the next search. A search submitted while one is loading
is ignored, as is an empty search.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from weathernow.i18n import t
from weathernow.lookup import (
    NetworkFailure,
    NotFoundError,
    WeatherLookupError,
    normalize_query,
)
from weathernow.models import WeatherReading

logger = logging.getLogger(__name__)


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupState:
    """Snapshot of one session's search. Each transition returns a new value."""

    status: Status = Status.IDLE
    query: str = ""
    reading: WeatherReading | None = None
    error: WeatherLookupError | None = None

    @classmethod
    def idle(cls) -> "LookupState":
        return cls()

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING


def start(state: LookupState, raw_query: str | None) -> LookupState | None:
    """Begin a lookup. Returns None when the search should be ignored."""
    query = normalize_query(raw_query)
    if query is None:
        return None
    if state.is_loading:
        logger.debug("Ignoring %r: lookup for %r still in flight", query, state.query)
        return None
    return LookupState(status=Status.LOADING, query=query)


def succeed(state: LookupState, reading: WeatherReading) -> LookupState:
    return replace(state, status=Status.SUCCESS, reading=reading, error=None)


def fail(state: LookupState, error: WeatherLookupError) -> LookupState:
    return replace(state, status=Status.FAILED, reading=None, error=error)


def abort(state: LookupState, exc: BaseException) -> LookupState:
    """Leave a loading state after an unexpected error so the user can search again."""
    error = WeatherLookupError(f"{type(exc).__name__}: {exc}")
    error.__cause__ = exc
    return fail(state, error)


def run_lookup(
    state: LookupState,
    raw_query: str | None,
    lookup_fn: Callable[[str], WeatherReading],
) -> LookupState:
    """Drive one search to completion.

    Args:
        state: Current session state.
        raw_query: Text as typed by the user.
        lookup_fn: Performs the network lookup for a trimmed query.

    Returns:
        The unchanged state if the search was ignored, otherwise a
        success or failed state. Exceptions other than
        WeatherLookupError propagate.
    """
    loading = start(state, raw_query)
    if loading is None:
        return state
    return finish(loading, lookup_fn)


def finish(
    loading: LookupState, lookup_fn: Callable[[str], WeatherReading]
) -> LookupState:
    """Run the lookup for a loading state and return its terminal state."""
    if not loading.is_loading:
        raise ValueError(f"cannot finish a lookup in state {loading.status.value}")
    try:
        reading = lookup_fn(loading.query)
    except WeatherLookupError as e:
        logger.warning("Lookup for %r failed: %s: %s", loading.query, type(e).__name__, e)
        return fail(loading, e)
    return succeed(loading, reading)


def error_message(error: WeatherLookupError, lang: str = "en") -> str:
    """User-facing text for a failed lookup."""
    if isinstance(error, NotFoundError):
        return t("error_not_found", lang)
    if isinstance(error, NetworkFailure) and str(error):
        return str(error)
    return t("error_generic", lang)
