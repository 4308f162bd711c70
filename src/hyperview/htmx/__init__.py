"""htmx helpers — request predicates, trigger events, swap styles, locations.

Request side:
    is_htmx_request -- HX-Request without HX-Boosted
    is_boosted_request -- HX-Boosted
    is_any_htmx_request -- either header

Response side (usually set through ``ViewResponse.hx_*``):
    Triggers -- HX-Trigger / HX-Trigger-After-Settle / HX-Trigger-After-Swap
    Swap -- HX-Reswap values
    Location -- HX-Location values
"""

from hyperview.htmx.location import Location
from hyperview.htmx.request import (
    htmx_current_url,
    htmx_prompt,
    htmx_target,
    htmx_trigger,
    htmx_trigger_name,
    is_any_htmx_request,
    is_boosted_request,
    is_history_restore_request,
    is_htmx_request,
)
from hyperview.htmx.swap import Swap
from hyperview.htmx.triggers import Triggers, TriggerTiming

__all__ = [
    "Location",
    "Swap",
    "TriggerTiming",
    "Triggers",
    "htmx_current_url",
    "htmx_prompt",
    "htmx_target",
    "htmx_trigger",
    "htmx_trigger_name",
    "is_any_htmx_request",
    "is_boosted_request",
    "is_history_restore_request",
    "is_htmx_request",
]
