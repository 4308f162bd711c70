"""The object handed to templates and JSON serializers.

``ViewData`` wraps the page data accumulated on a ``ViewResponse`` and
binds it to the live request. Templates see the page data as top-level
variables plus ``view`` for request-derived helpers::

    <title>{{ view.title }}</title>
    <script nonce="{{ view.nonce }}">...</script>
    {% if view.has_error %}<p class="error">{{ view.error }}</p>{% end %}

Short-lived and request-confined. Not thread-safe.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from hyperview.context import get_nonce
from hyperview.htmx.request import is_boosted_request, is_htmx_request
from hyperview.http import info
from hyperview.http.request import Request

ERROR_KEY = "error"
ERRORS_KEY = "errors"
VIEW_KEY = "view"


class ViewData:
    """Page data plus request-bound helpers for one render."""

    __slots__ = ("_page_data", "_request", "title")

    def __init__(
        self,
        page_data: Mapping[str, Any] | None = None,
        *,
        title: str = "",
        request: Request | None = None,
    ) -> None:
        self._page_data: dict[str, Any] = dict(page_data or {})
        self._request = request
        self.title = title
        _ensure_defaults(self._page_data)

    def bind(self, request: Request) -> ViewData:
        """Attach the request being answered."""
        self._request = request
        return self

    @property
    def request(self) -> Request:
        if self._request is None:
            msg = "ViewData is not bound to a request; call bind() first"
            raise RuntimeError(msg)
        return self._request

    # -- Data maps --

    def data(self) -> dict[str, Any]:
        """A fresh template context: page data, error defaults, and ``view``.

        ``view`` is reserved in templates; a page-data key of that name is
        shadowed there but still reaches :meth:`payload`.
        """
        _ensure_defaults(self._page_data)
        return {**self._page_data, VIEW_KEY: self}

    def payload(self) -> dict[str, Any]:
        """The JSON payload: page data and error defaults."""
        _ensure_defaults(self._page_data)
        return dict(self._page_data)

    def add(self, data: Mapping[str, Any]) -> None:
        """Merge *data* in; existing keys are overwritten."""
        self._page_data.update(data)

    def add_item(self, key: str, value: Any) -> None:
        self._page_data[key] = value

    def add_errors(self, message: str, field_errors: Mapping[str, str] | None = None) -> None:
        self._page_data[ERROR_KEY] = message
        self._page_data[ERRORS_KEY] = dict(field_errors or {})

    def get(self, key: str) -> Any:
        """Value stored under *key*, or ``""`` when missing."""
        return self._page_data.get(key, "")

    def get_string(self, key: str) -> str:
        """Value under *key* if it is a string, else ``""``."""
        value = self.get(key)
        return value if isinstance(value, str) else ""

    # -- Errors --

    @property
    def error(self) -> str:
        return self.get_string(ERROR_KEY)

    @property
    def has_error(self) -> bool:
        return self.error != ""

    @property
    def errors(self) -> dict[str, str]:
        value = self.get(ERRORS_KEY)
        return value if isinstance(value, dict) else {}

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    # -- Request helpers --

    @property
    def base_url(self) -> str:
        return info.base_url(self.request)

    @property
    def request_path(self) -> str:
        return info.url_path(self.request)

    @property
    def request_method(self) -> str:
        return info.method(self.request)

    @property
    def is_htmx_request(self) -> bool:
        """HX-Request without HX-Boosted: render a fragment, not a page."""
        return is_htmx_request(self.request)

    @property
    def is_boosted_request(self) -> bool:
        return is_boosted_request(self.request)

    @property
    def nonce(self) -> str:
        """CSP nonce from the request context, ``""`` when unset."""
        return get_nonce()

    @property
    def htmx_nonce(self) -> str:
        """htmx config JSON for a ``<meta name="htmx-config">`` tag."""
        return json_module.dumps({"includeIndicatorStyles": False, "inlineScriptNonce": self.nonce})

    @property
    def current_year(self) -> int:
        return datetime.now().year

    def __repr__(self) -> str:
        keys = sorted(self._page_data)
        return f"ViewData(title={self.title!r}, keys={keys!r})"


def _ensure_defaults(data: dict[str, Any]) -> None:
    data.setdefault(ERROR_KEY, "")
    data.setdefault(ERRORS_KEY, {})
