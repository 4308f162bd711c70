"""JSON envelope adapter.

Renders the page data of a ``ViewResponse`` inside the standard envelope
(see ``hyperview.envelope``). Statuses above 299 produce a ``fail``
envelope, everything else ``success``. The fixed error renderers ignore
the view entirely and emit a literal envelope.
"""

import logging

from hyperview.adapters.base import BaseAdapter, ErrorKind
from hyperview.envelope import json_error, json_failure, json_success_with_status
from hyperview.http.request import Request
from hyperview.http.response import Response, plain_text_error
from hyperview.view.response import ViewResponse

logger = logging.getLogger("hyperview.adapters")


class JSONAdapter(BaseAdapter):
    """Adapter that answers with JSON envelopes."""

    def render(self, request: Request, view: ViewResponse) -> Response:
        view.status_if_unset(200)
        status = view.status_code
        payload = view.view_data(request).payload()
        try:
            headers = dict(view.response_headers())
            if status > 299:
                return json_failure(payload, "Failure", status, headers)
            return json_success_with_status(status, payload, headers)
        except (TypeError, ValueError) as exc:
            return self.render_system_error(request, exc, view)

    def render_error(
        self,
        kind: ErrorKind,
        request: Request,
        view: ViewResponse,
        exc: BaseException | None = None,
    ) -> Response:
        try:
            if kind is ErrorKind.SYSTEM_ERROR:
                logger.error("Server error: %s", exc, exc_info=exc)
                return json_error(str(exc) if exc is not None else kind.message, kind.status)
            return json_failure(None, kind.message, kind.status)
        except (TypeError, ValueError) as encode_exc:
            return plain_text_error(str(encode_exc), 500)
