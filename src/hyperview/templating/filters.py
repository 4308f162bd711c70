"""The built-in helper table registered on every hyperview kida Environment.

Every helper is available as a global (``{{ humanize(name) }}``); the ones
that read naturally after a pipe are also filters (``{{ name | humanize }}``).
User-supplied helpers are registered afterwards and may override these.
"""

from typing import Any

from hyperview.templating import markup, strings

BUILTIN_GLOBALS: dict[str, Any] = {
    # Boolean
    "yesno": strings.yesno,
    # Forms
    "input_attrs": markup.input_attrs,
    "field_error": markup.field_error,
    "attr": markup.attr,
    "qs": markup.qs,
    # HTML
    "safe_html": markup.safe_html,
    "safe_attr": markup.safe_attr,
    "safe_css": markup.safe_css,
    "safe_js": markup.safe_js,
    "safe_url": markup.safe_url,
    # Maps
    "class_map": markup.class_map,
    # Numbers
    "is_even": strings.is_even,
    "is_odd": strings.is_odd,
    "to_int": strings.to_int,
    # Slices
    "slice": strings.make_slice,
    # Strings
    "contains": strings.contains,
    "has_prefix": strings.has_prefix,
    "has_suffix": strings.has_suffix,
    "humanize": strings.humanize,
    "is_blank": strings.is_blank,
    "join": strings.join,
    "lower": strings.lower,
    "not_blank": strings.not_blank,
    "pluralize": strings.pluralize,
    "replace_all": strings.replace_all,
    "replace": strings.replace,
    "slugify": strings.slugify,
    "split": strings.split,
    "trim": strings.trim,
    "trim_prefix": strings.trim_prefix,
    "trim_suffix": strings.trim_suffix,
    "truncate": strings.truncate,
    "upper": strings.upper,
    # Images
    "srcset": markup.srcset,
    # Time
    "now": strings.now,
    "since": strings.since,
    "until": strings.until,
}

# Only names kida does not ship as filters; its own ``truncate``, ``replace``
# and ``join`` filters keep their behavior.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": markup.attr,
    "field_error": markup.field_error,
    "humanize": strings.humanize,
    "qs": markup.qs,
    "safe_html": markup.safe_html,
    "slugify": strings.slugify,
    "srcset": markup.srcset,
    "to_int": strings.to_int,
    "yesno": strings.yesno,
}
