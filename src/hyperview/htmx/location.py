"""``HX-Location`` values.

A bare path makes htmx navigate like a boosted link. Extra options
(target, swap, values, ...) turn the header into a JSON object; see
https://htmx.org/headers/hx-location/.
"""

import json as json_module
from dataclasses import dataclass
from typing import Any

from hyperview.htmx.swap import Swap


@dataclass(frozen=True, slots=True)
class Location:
    """An ``HX-Location`` navigation with optional context."""

    path: str
    source: str | None = None
    event: str | None = None
    handler: str | None = None
    target: str | None = None
    swap: str | Swap | None = None
    values: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    select: str | None = None

    @property
    def is_plain(self) -> bool:
        """True when only ``path`` is set."""
        return all(
            value is None
            for value in (
                self.source,
                self.event,
                self.handler,
                self.target,
                self.swap,
                self.values,
                self.headers,
                self.select,
            )
        )

    def header_value(self) -> str:
        """The header value: the bare path, or a JSON object."""
        if self.is_plain:
            return self.path
        obj: dict[str, Any] = {"path": self.path}
        for key in ("source", "event", "handler", "target", "values", "headers", "select"):
            value = getattr(self, key)
            if value is not None:
                obj[key] = value
        if self.swap is not None:
            obj["swap"] = str(self.swap)
        return json_module.dumps(obj)
