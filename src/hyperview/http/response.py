"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Adapters only build one
after rendering has fully succeeded, so a failed render never leaves a
half-written response behind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from urllib.parse import quote

TEXT_HTML = "text/html; charset=utf-8"
TEXT_PLAIN = "text/plain; charset=utf-8"
APPLICATION_JSON = "application/json; charset=UTF-8"

# Reserved URL characters and existing escapes pass through unchanged
_URL_SAFE = "/:?#[]@!$&'()*+,;=%~"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = TEXT_HTML
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Lookups --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive).

        ``Content-Type`` resolves to :attr:`content_type`.
        """
        lowered = name.lower()
        if lowered == "content-type":
            return self.content_type
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


def plain_text_error(message: str, status: int) -> Response:
    """Last-resort error response: plain text, never cached as HTML.

    Used whenever a dedicated error page or envelope cannot be produced.
    """
    return Response(
        body=f"{message}\n",
        status=status,
        content_type=TEXT_PLAIN,
        headers=(("X-Content-Type-Options", "nosniff"),),
    )


def header_url(url: str) -> str:
    """Percent-encode *url* for a header such as ``Location`` or ``HX-Redirect``.

    Non-ASCII characters become UTF-8 escapes; an already-encoded URL is
    returned unchanged.
    """
    return quote(url, safe=_URL_SAFE)
