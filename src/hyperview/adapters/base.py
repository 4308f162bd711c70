"""Adapter protocol and shared error-page dispatch.

An adapter renders a ``ViewResponse`` in one output format. Any object
with the right methods is an adapter — no base class required::

    class CSVAdapter:
        def init(self) -> None: ...
        def render(self, request, view) -> Response: ...
        def render_forbidden(self, request, view) -> Response: ...
        ...

``BaseAdapter`` is the convenient route: implement ``render`` and
``render_error`` once, and the six per-kind methods dispatch on
``ErrorKind``.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol, runtime_checkable

from hyperview.http.request import Request
from hyperview.http.response import Response
from hyperview.view.response import ViewResponse


class ErrorKind(Enum):
    """The fixed set of error pages every adapter can render.

    Each kind carries its status code, the plain-text fallback body, and
    the message used in JSON envelopes. The system page for a kind is
    ``system/<status>``.
    """

    UNAUTHORIZED = (401, "Unauthorized", "Unauthorized")
    FORBIDDEN = (403, "Forbidden", "Forbidden")
    NOT_FOUND = (404, "Not Found", "Not found")
    METHOD_NOT_ALLOWED = (405, "Method Not Allowed", "Method not allowed")
    SYSTEM_ERROR = (500, "Internal Server Error", "Internal server error")
    MAINTENANCE = (503, "Maintenance", "Maintenance")

    def __init__(self, status: int, text: str, message: str) -> None:
        self.status = status
        self.text = text
        self.message = message

    @property
    def page(self) -> str:
        """Name of the system page, relative to the system directory."""
        return str(self.status)


@runtime_checkable
class Adapter(Protocol):
    """Protocol for hyperview output adapters."""

    def init(self) -> None:
        """(Re)load backing resources. Raises on bad sources."""
        ...

    def render(self, request: Request, view: ViewResponse) -> Response: ...

    def render_forbidden(self, request: Request, view: ViewResponse) -> Response: ...

    def render_maintenance(self, request: Request, view: ViewResponse) -> Response: ...

    def render_method_not_allowed(self, request: Request, view: ViewResponse) -> Response: ...

    def render_not_found(self, request: Request, view: ViewResponse) -> Response: ...

    def render_system_error(
        self, request: Request, exc: BaseException, view: ViewResponse
    ) -> Response: ...

    def render_unauthorized(self, request: Request, view: ViewResponse) -> Response: ...


class BaseAdapter(ABC):
    """Adapter skeleton that routes the six error pages through ``render_error``."""

    def init(self) -> None:
        """Nothing to load by default."""

    @abstractmethod
    def render(self, request: Request, view: ViewResponse) -> Response: ...

    @abstractmethod
    def render_error(
        self,
        kind: ErrorKind,
        request: Request,
        view: ViewResponse,
        exc: BaseException | None = None,
    ) -> Response:
        """Render the error page for *kind*. Must never answer 200."""

    def render_forbidden(self, request: Request, view: ViewResponse) -> Response:
        return self.render_error(ErrorKind.FORBIDDEN, request, view)

    def render_maintenance(self, request: Request, view: ViewResponse) -> Response:
        return self.render_error(ErrorKind.MAINTENANCE, request, view)

    def render_method_not_allowed(self, request: Request, view: ViewResponse) -> Response:
        return self.render_error(ErrorKind.METHOD_NOT_ALLOWED, request, view)

    def render_not_found(self, request: Request, view: ViewResponse) -> Response:
        return self.render_error(ErrorKind.NOT_FOUND, request, view)

    def render_system_error(
        self, request: Request, exc: BaseException, view: ViewResponse
    ) -> Response:
        return self.render_error(ErrorKind.SYSTEM_ERROR, request, view, exc)

    def render_unauthorized(self, request: Request, view: ViewResponse) -> Response:
        return self.render_error(ErrorKind.UNAUTHORIZED, request, view)
