"""ASGI response sending — translates a rendered Response to ASGI messages.

Rendering happens entirely in memory before this point, so the status
line and headers are only emitted for responses that rendered cleanly.
"""

import logging

from hyperview._internal.asgi import Send
from hyperview.http.response import Response

logger = logging.getLogger("hyperview.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(response: Response, body: bytes) -> list[tuple[bytes, bytes]]:
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        if name.lower() in {"content-type", "content-length"}:
            continue
        raw_headers.append((name.lower().encode("latin-1"), value.encode("utf-8")))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))
    return raw_headers


async def send_response(response: Response, send: Send) -> None:
    """Translate a hyperview Response into ASGI send() calls."""
    body = response.body_bytes if _body_allowed(response.status) else b""
    logger.debug("send %d (%d bytes)", response.status, len(body))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": _raw_headers(response, body),
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
