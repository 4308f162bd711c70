"""Predicates over htmx request headers.

htmx sends ``HX-Request: true`` on every request it issues and adds
``HX-Boosted: true`` when the request comes from a boosted link or form.
A boosted request expects a full page, so ``is_htmx_request`` excludes it.
"""

from hyperview.htmx.headers import (
    HX_BOOSTED,
    HX_CURRENT_URL,
    HX_HISTORY_RESTORE_REQUEST,
    HX_PROMPT,
    HX_REQUEST,
    HX_TARGET,
    HX_TRIGGER,
    HX_TRIGGER_NAME,
)
from hyperview.http.request import Request


def _flag(request: Request, name: str) -> bool:
    value = request.headers.get(name)
    return value is not None and value.strip().lower() == "true"


def is_htmx_request(request: Request) -> bool:
    """True for an htmx request that is not boosted."""
    return _flag(request, HX_REQUEST) and not _flag(request, HX_BOOSTED)


def is_boosted_request(request: Request) -> bool:
    """True for a request issued by an ``hx-boost`` link or form."""
    return _flag(request, HX_BOOSTED)


def is_any_htmx_request(request: Request) -> bool:
    """True for any htmx-issued request, boosted or not."""
    return _flag(request, HX_REQUEST) or _flag(request, HX_BOOSTED)


def is_history_restore_request(request: Request) -> bool:
    """True when htmx is restoring history after a cache miss."""
    return _flag(request, HX_HISTORY_RESTORE_REQUEST)


def htmx_target(request: Request) -> str | None:
    """The id of the target element, if it has one."""
    return request.headers.get(HX_TARGET)


def htmx_trigger(request: Request) -> str | None:
    """The id of the triggering element, if it has one."""
    return request.headers.get(HX_TRIGGER)


def htmx_trigger_name(request: Request) -> str | None:
    """The name of the triggering element, if it has one."""
    return request.headers.get(HX_TRIGGER_NAME)


def htmx_current_url(request: Request) -> str | None:
    """The browser URL at the time of the request."""
    return request.headers.get(HX_CURRENT_URL)


def htmx_prompt(request: Request) -> str | None:
    """The user's answer to an ``hx-prompt``."""
    return request.headers.get(HX_PROMPT)
