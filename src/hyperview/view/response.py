"""Fluent, per-request response builder.

A ``ViewResponse`` accumulates what a renderer needs (template path,
layout, status, headers, page data and htmx triggers) and is handed
to ``HyperView.render()`` once::

    view = (
        ViewResponse("users/show")
        .title("Profile")
        .data(user=user)
        .hx_trigger("profileLoaded")
        .no_cache_strict()
    )
    return hyperview.render(request, view)

Every setter mutates in place and returns ``self``. A builder belongs to
one request: create it in the handler and drop it after rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import Any

from hyperview.htmx.headers import (
    HX_LOCATION,
    HX_PUSH_URL,
    HX_REDIRECT,
    HX_REFRESH,
    HX_REPLACE_URL,
    HX_RESELECT,
    HX_RESWAP,
    HX_RETARGET,
)
from hyperview.htmx.location import Location
from hyperview.htmx.swap import Swap
from hyperview.htmx.triggers import Triggers
from hyperview.http.request import Request
from hyperview.http.response import header_url
from hyperview.view.data import ViewData


class ViewResponse:
    """Mutable description of a response that has not been rendered yet."""

    __slots__ = ("_headers", "_layout", "_path", "_status", "_triggers", "_view_data")

    def __init__(self, path: str = "", *, layout: str = "") -> None:
        self._path = path
        self._layout = layout
        self._status = 0
        self._headers: dict[str, str] = {}
        self._triggers = Triggers()
        self._view_data: ViewData | None = None

    def _view(self) -> ViewData:
        if self._view_data is None:
            self._view_data = ViewData()
        return self._view_data

    # -- Template selection --

    def path(self, path: str) -> ViewResponse:
        """Set the template path, optionally with an extension (``"users.json"``).

        The extension selects the adapter and is stripped before rendering.
        """
        self._path = path
        return self

    def layout(self, layout: str) -> ViewResponse:
        self._layout = layout
        return self

    def title(self, title: str) -> ViewResponse:
        self._view().title = title
        return self

    # -- Status --

    def status(self, code: int) -> ViewResponse:
        self._status = code
        return self

    def status_if_unset(self, code: int) -> ViewResponse:
        """Set *code* only when no status has been chosen yet."""
        if self._status == 0:
            self._status = code
        return self

    def status_ok(self) -> ViewResponse:
        return self.status(200)

    def status_created(self) -> ViewResponse:
        return self.status(201)

    def status_unauthorized(self) -> ViewResponse:
        return self.status(401)

    def status_forbidden(self) -> ViewResponse:
        return self.status(403)

    def status_not_found(self) -> ViewResponse:
        return self.status(404)

    def status_method_not_allowed(self) -> ViewResponse:
        return self.status(405)

    def status_error(self) -> ViewResponse:
        return self.status(500)

    def status_maintenance(self) -> ViewResponse:
        return self.status(503)

    # -- Page data --

    def data(self, data: Mapping[str, Any] | None = None, /, **items: Any) -> ViewResponse:
        """Merge page data; new keys overwrite existing ones."""
        view = self._view()
        if data:
            view.add(data)
        if items:
            view.add(items)
        return self

    def data_item(self, key: str, value: Any) -> ViewResponse:
        self._view().add_item(key, value)
        return self

    def errors(self, message: str, field_errors: Mapping[str, str] | None = None) -> ViewResponse:
        """Attach a form-level error message and per-field messages."""
        self._view().add_errors(message, field_errors)
        return self

    # -- Headers --

    def header(self, name: str, value: str) -> ViewResponse:
        """Set a header, replacing any existing value (case-insensitive)."""
        lowered = name.lower()
        for existing in [key for key in self._headers if key.lower() == lowered]:
            del self._headers[existing]
        self._headers[name] = value
        return self

    def no_cache_strict(self) -> ViewResponse:
        return self.header("Cache-Control", "no-cache, no-store, must-revalidate")

    def cache_control(self, value: str) -> ViewResponse:
        return self.header("Cache-Control", value)

    def etag(self, etag: str) -> ViewResponse:
        return self.header("ETag", etag)

    def last_modified(self, value: str | datetime) -> ViewResponse:
        """Set ``Last-Modified``; datetimes are formatted as HTTP dates."""
        if isinstance(value, datetime):
            # Naive datetimes are taken as UTC
            moment = value.astimezone(UTC) if value.tzinfo else value.replace(tzinfo=UTC)
            value = format_datetime(moment, usegmt=True)
        return self.header("Last-Modified", value)

    # -- htmx response headers --

    def hx_location(self, path: str, **options: Any) -> ViewResponse:
        """Navigate without a full reload (``HX-Location``).

        Keyword options (``target``, ``swap``, ``values``, ...) are sent as
        the JSON form of the header.
        """
        return self.header(HX_LOCATION, Location(path, **options).header_value())

    def hx_push_url(self, url: str) -> ViewResponse:
        return self.header(HX_PUSH_URL, header_url(url))

    def hx_no_push_url(self) -> ViewResponse:
        return self.header(HX_PUSH_URL, "false")

    def hx_redirect(self, url: str) -> ViewResponse:
        """Full-page client-side redirect (``HX-Redirect``)."""
        return self.header(HX_REDIRECT, header_url(url))

    def hx_refresh(self) -> ViewResponse:
        return self.header(HX_REFRESH, "true")

    def hx_no_refresh(self) -> ViewResponse:
        return self.header(HX_REFRESH, "false")

    def hx_replace_url(self, url: str) -> ViewResponse:
        return self.header(HX_REPLACE_URL, header_url(url))

    def hx_no_replace_url(self) -> ViewResponse:
        return self.header(HX_REPLACE_URL, "false")

    def hx_reswap(self, swap: str | Swap) -> ViewResponse:
        return self.header(HX_RESWAP, str(swap))

    def hx_retarget(self, selector: str) -> ViewResponse:
        return self.header(HX_RETARGET, selector)

    def hx_reselect(self, selector: str) -> ViewResponse:
        return self.header(HX_RESELECT, selector)

    def hx_trigger(self, event: str, value: Any = None) -> ViewResponse:
        self._triggers.set(event, value)
        return self

    def hx_trigger_after_settle(self, event: str, value: Any = None) -> ViewResponse:
        self._triggers.set_after_settle(event, value)
        return self

    def hx_trigger_after_swap(self, event: str, value: Any = None) -> ViewResponse:
        self._triggers.set_after_swap(event, value)
        return self

    # -- Accessors --

    @property
    def template_path(self) -> str:
        return self._path

    @property
    def template_layout(self) -> str:
        return self._layout

    @property
    def status_code(self) -> int:
        """The chosen status, ``0`` when unset."""
        return self._status

    @property
    def page_title(self) -> str:
        return self._view().title

    @property
    def headers(self) -> dict[str, str]:
        """Custom headers merged with the rendered trigger headers."""
        return {**self._headers, **self._triggers.headers()}

    @property
    def content_type(self) -> str | None:
        """The ``Content-Type`` header, if one was set."""
        for key, value in self._headers.items():
            if key.lower() == "content-type":
                return value
        return None

    def response_headers(self) -> tuple[tuple[str, str], ...]:
        """Headers to copy onto the final Response (``Content-Type`` excluded)."""
        return tuple(
            (key, value) for key, value in self.headers.items() if key.lower() != "content-type"
        )

    def view_data(self, request: Request) -> ViewData:
        """Bind *request* and return the object handed to the renderer."""
        return self._view().bind(request)

    def __repr__(self) -> str:
        return (
            f"ViewResponse(path={self._path!r}, layout={self._layout!r}, "
            f"status={self._status}, headers={self.headers!r})"
        )
