"""JSON envelope responses.

Every JSON body produced by hyperview has the same shape::

    {"status": "success" | "fail" | "error", "message": "...", "data": ..., "code": 200}

``code`` is omitted when zero. ``fail`` means the request could not be
fulfilled (4xx and domain failures); ``error`` means the server broke.

Helpers return a ``Response`` and raise ``TypeError``/``ValueError`` when
the payload cannot be serialized, leaving the fallback to the caller.
"""

import dataclasses
import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Literal

from hyperview.http.response import APPLICATION_JSON, Response

type EnvelopeStatus = Literal["success", "fail", "error"]


@dataclass(frozen=True, slots=True)
class Envelope:
    """The fixed wrapper shape of JSON responses."""

    status: EnvelopeStatus
    message: str
    data: Any = None
    code: int = 0

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "data": self.data,
        }
        if self.code:
            result["code"] = self.code
        return result


def _default(value: Any) -> Any:
    """Encode the common non-JSON types found in page data."""
    if isinstance(value, datetime | date | time):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, set | frozenset | tuple):
        return list(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def json_response(
    status: int,
    data: Any,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Serialize *data* as tab-indented JSON with a trailing newline."""
    body = json_module.dumps(data, indent="\t", default=_default) + "\n"
    extra = tuple((k, v) for k, v in (headers or {}).items() if k.lower() != "content-type")
    return Response(body=body, status=status, content_type=APPLICATION_JSON, headers=extra)


def json_success(data: Any, headers: Mapping[str, str] | None = None) -> Response:
    """200 ``success`` envelope."""
    return json_success_with_status(200, data, headers)


def json_success_with_status(
    status: int,
    data: Any,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """``success`` envelope with an explicit status (e.g. 201)."""
    envelope = Envelope(status="success", message="Success", data=data, code=status)
    return json_response(status, envelope.to_dict(), headers)


def json_failure(
    data: Any,
    message: str,
    status: int,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """``fail`` envelope; *status* is echoed in ``code`` and the status line."""
    envelope = Envelope(status="fail", message=message, data=data, code=status)
    return json_response(status, envelope.to_dict(), headers)


def json_error(
    message: str,
    status: int,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """``error`` envelope for server-side failures."""
    envelope = Envelope(status="error", message=message, code=status)
    return json_response(status, envelope.to_dict(), headers)


def json_redirect(url: str, headers: Mapping[str, str] | None = None) -> Response:
    """303 with a ``{"Redirect": url}`` body for API clients."""
    return json_response(303, {"Redirect": url}, headers)
