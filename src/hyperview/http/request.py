"""Immutable HTTP request.

Frozen metadata built from an ASGI scope. hyperview only reads request
metadata (headers, path, connection info) while rendering, so the body
is never consumed here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hyperview._internal.asgi import Scope
from hyperview.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``scheme`` is the connection scheme reported by the server (``"https"``
    when the connection itself is TLS). Forwarding headers are interpreted
    by ``hyperview.http.info``, not here.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    scheme: str = "http"
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            scheme=scope.get("scheme", "http"),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )

    @classmethod
    def build(
        cls,
        method: str = "GET",
        path: str = "/",
        *,
        headers: Mapping[str, str] | None = None,
        **fields: Any,
    ) -> Request:
        """Create a Request without an ASGI server.

        Handy for rendering outside a request cycle (emails, static
        export) and in tests::

            Request.build("GET", "/", headers={"HX-Request": "true"})
        """
        return cls(
            method=method,
            path=path,
            headers=Headers.from_pairs(headers or {}),
            **fields,
        )
