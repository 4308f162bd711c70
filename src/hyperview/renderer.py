"""HyperView: the dispatch facade over named output adapters.

One ``HyperView`` owns an adapter registry and picks the adapter for each
``ViewResponse``::

    hv = HyperView(ViewConfig(template_dir="templates"))

    async def app(scope, receive, send):
        request = Request.from_asgi(scope)
        view = hv.new_response().path("users/show").data(user=user)
        await send_response(hv.render(request, view), send)

Format selection, in order:

1. ``Content-Type: application/json`` on the view selects ``json``.
2. The extension of the last path segment: none or ``.html`` selects
   ``html``; anything else selects the adapter of that name.

The extension is stripped before the adapter sees the path. Every render
method returns a ``Response``; lookup failures become plain-text 500s.
"""

import json as json_module
import logging
from collections.abc import Callable, Mapping
from typing import Any

from hyperview._internal.locks import ReadWriteLock
from hyperview.adapters.base import Adapter
from hyperview.adapters.json import JSONAdapter
from hyperview.adapters.template import TemplateAdapter
from hyperview.config import ViewConfig
from hyperview.constants import DEFAULT_ADAPTER, JSON_ADAPTER
from hyperview.errors import AdapterNotFound
from hyperview.htmx.headers import HX_REDIRECT
from hyperview.htmx.request import is_htmx_request
from hyperview.http import info
from hyperview.http.request import Request
from hyperview.http.response import TEXT_PLAIN, Response, header_url, plain_text_error
from hyperview.view.response import ViewResponse

logger = logging.getLogger("hyperview.renderer")

_JSON_MEDIA_TYPE = "application/json"


class HyperView:
    """Adapter registry plus content negotiation and redirect helpers.

    Safe to share across threads: the registry sits behind a
    reader/writer lock. ``ViewResponse`` objects are not shared.
    """

    def __init__(
        self,
        config: ViewConfig | None = None,
        *,
        adapters: Mapping[str, Adapter] | None = None,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        globals_: Mapping[str, Any] | None = None,
    ) -> None:
        self.config = config or ViewConfig()
        self._filters = dict(filters or {})
        self._globals = dict(globals_ or {})
        self._adapters: dict[str, Adapter] = {}
        self._lock = ReadWriteLock()

        for name, adapter in (adapters or {}).items():
            self.register_adapter(name, adapter)
        self.register_default_adapters()

    # -- Registry --

    def register_adapter(self, name: str, adapter: Adapter) -> None:
        """Initialize *adapter* and register it under *name*.

        Replaces any adapter already registered under that name. If
        ``init()`` raises, nothing is registered.
        """
        adapter.init()
        with self._lock.write():
            self._adapters[name] = adapter
        logger.debug("Registered adapter %r: %s", name, type(adapter).__name__)

    def register_default_adapters(self) -> None:
        """Install the kida ``html`` and the ``json`` adapters where the names are free."""
        if not self.has_adapter(DEFAULT_ADAPTER):
            self.register_adapter(
                DEFAULT_ADAPTER,
                TemplateAdapter(self.config, filters=self._filters, globals_=self._globals),
            )
        if not self.has_adapter(JSON_ADAPTER):
            self.register_adapter(JSON_ADAPTER, JSONAdapter())

    def has_adapter(self, name: str) -> bool:
        with self._lock.read():
            return name in self._adapters

    def adapter(self, name: str) -> Adapter:
        """The adapter registered under *name*.

        Raises:
            AdapterNotFound: Nothing is registered under *name*.
        """
        with self._lock.read():
            try:
                return self._adapters[name or DEFAULT_ADAPTER]
            except KeyError:
                raise AdapterNotFound(name) from None

    def reinit(self) -> None:
        """Re-run ``init()`` on every adapter, e.g. after templates changed.

        Stops at the first failure and re-raises it. Adapters that rebuild
        atomically keep serving their previous state.
        """
        with self._lock.write():
            for name, adapter in self._adapters.items():
                logger.debug("Reinitializing adapter %r", name)
                adapter.init()

    # -- Rendering --

    def render(self, request: Request, view: ViewResponse) -> Response:
        """Pick an adapter for *view* and render it."""
        return self.render_as(request, self._select_adapter(view), view)

    def render_as(self, request: Request, adapter_key: str, view: ViewResponse) -> Response:
        """Render *view* with a specific adapter, applying the base layout if none is set."""
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        if not view.template_layout:
            view.layout(self.config.base_layout)
        return adapter.render(request, view)

    def render_forbidden(self, request: Request, adapter_key: str = DEFAULT_ADAPTER) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        return adapter.render_forbidden(request, self.new_system_response().status_forbidden())

    def render_maintenance(self, request: Request, adapter_key: str = DEFAULT_ADAPTER) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        return adapter.render_maintenance(request, self.new_system_response().status_maintenance())

    def render_method_not_allowed(
        self, request: Request, adapter_key: str = DEFAULT_ADAPTER
    ) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        return adapter.render_method_not_allowed(
            request, self.new_system_response().status_method_not_allowed()
        )

    def render_not_found(self, request: Request, adapter_key: str = DEFAULT_ADAPTER) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        return adapter.render_not_found(request, self.new_system_response().status_not_found())

    def render_system_error(
        self,
        request: Request,
        exc: BaseException,
        adapter_key: str = DEFAULT_ADAPTER,
    ) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            logger.error("Server error: %s", exc, exc_info=exc)
            return _adapter_not_found(adapter_key)
        return adapter.render_system_error(request, exc, self.new_system_response().status_error())

    def render_unauthorized(self, request: Request, adapter_key: str = DEFAULT_ADAPTER) -> Response:
        adapter = self._adapter_or_none(adapter_key)
        if adapter is None:
            return _adapter_not_found(adapter_key)
        return adapter.render_unauthorized(
            request, self.new_system_response().status_unauthorized()
        )

    # -- Redirects --

    def hx_redirect(self, url: str) -> Response:
        """303 with ``HX-Redirect`` so htmx performs a full-page navigation."""
        return Response(
            body="redirecting...",
            status=303,
            content_type=TEXT_PLAIN,
            headers=((HX_REDIRECT, header_url(url)),),
        )

    def redirect(self, request: Request, url: str) -> Response:
        """Redirect shaped for the caller.

        - htmx request: 303 with ``HX-Redirect``
        - XMLHttpRequest: 200 with a JSON ``{"status": "redirect", ...}`` body
        - anything else: 302 with ``Location``
        """
        if is_htmx_request(request):
            return self.hx_redirect(url)
        if info.is_xml_http_request(request):
            body = json_module.dumps(
                {"status": "redirect", "message": "redirecting...", "url": url},
                separators=(",", ":"),
                sort_keys=True,
            )
            return Response(body=body, status=200, content_type=_JSON_MEDIA_TYPE)
        return Response(status=302, headers=(("Location", header_url(url)),))

    # -- Builders --

    def new_response(self, layout: str | None = None) -> ViewResponse:
        """A fresh builder using *layout*, or the base layout when omitted."""
        return ViewResponse(layout=self.config.base_layout if layout is None else layout)

    def new_system_response(self) -> ViewResponse:
        """A fresh builder using the system layout."""
        return ViewResponse(layout=self.config.system_layout)

    # -- Internals --

    def _adapter_or_none(self, name: str) -> Adapter | None:
        try:
            return self.adapter(name)
        except AdapterNotFound:
            return None

    def _select_adapter(self, view: ViewResponse) -> str:
        """Choose the adapter key for *view*, stripping a path extension."""
        head, sep, segment = view.template_path.rpartition("/")
        stem, dot, extension = segment.rpartition(".")
        if dot:
            view.path(f"{head}{sep}{stem}")

        content_type = view.content_type
        if content_type and content_type.split(";")[0].strip().lower() == _JSON_MEDIA_TYPE:
            return JSON_ADAPTER
        if not dot or extension == "html":
            return DEFAULT_ADAPTER
        return extension


def _adapter_not_found(name: str) -> Response:
    error = AdapterNotFound(name)
    logger.error("%s", error)
    return plain_text_error(str(error), 500)
