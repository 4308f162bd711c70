"""htmx header names.

See https://htmx.org/reference/#request_headers and
https://htmx.org/reference/#response_headers.
"""

# Request headers
HX_BOOSTED = "HX-Boosted"
HX_CURRENT_URL = "HX-Current-URL"
HX_HISTORY_RESTORE_REQUEST = "HX-History-Restore-Request"
HX_PROMPT = "HX-Prompt"
HX_REQUEST = "HX-Request"
HX_TARGET = "HX-Target"
HX_TRIGGER_NAME = "HX-Trigger-Name"

# Response headers
HX_LOCATION = "HX-Location"
HX_PUSH_URL = "HX-Push-Url"
HX_REDIRECT = "HX-Redirect"
HX_REFRESH = "HX-Refresh"
HX_REPLACE_URL = "HX-Replace-Url"
HX_RESELECT = "HX-Reselect"
HX_RESWAP = "HX-Reswap"
HX_RETARGET = "HX-Retarget"
HX_TRIGGER_AFTER_SETTLE = "HX-Trigger-After-Settle"
HX_TRIGGER_AFTER_SWAP = "HX-Trigger-After-Swap"

# Both: the id of the triggering element on requests, client events on responses
HX_TRIGGER = "HX-Trigger"
