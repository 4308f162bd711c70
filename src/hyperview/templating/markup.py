"""HTML-producing helpers: safe wrappers, form attributes, class maps, srcset.

kida escapes every interpolated value unless it is ``Markup``. The
``safe_*`` helpers mark trusted strings so they pass through untouched;
never feed them user input.
"""

import html
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from kida.template import Markup

# -- Safe wrappers --


def safe_html(value: str) -> Markup:
    return Markup(value)


def safe_attr(value: str) -> Markup:
    return Markup(value)


def safe_css(value: str) -> Markup:
    return Markup(value)


def safe_js(value: str) -> Markup:
    return Markup(value)


def safe_url(value: str) -> Markup:
    return Markup(value)


# -- Attributes --


def attr(value: Any, name: str) -> str | Markup:
    """Output `` name="value"`` when *value* is truthy, else an empty string.

    Example:
        <input name="email"{{ placeholder | attr("placeholder") }}>

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def class_map(*pairs: Any) -> str:
    """Join the class names whose condition is truthy.

    Arguments alternate class name and condition::

        class="{{ class_map("btn", true, "btn-active", is_active) }}"

    """
    if len(pairs) % 2 != 0:
        msg = "class_map expects an even number of arguments"
        raise ValueError(msg)
    classes: list[str] = []
    for i in range(0, len(pairs), 2):
        name, condition = pairs[i], pairs[i + 1]
        if not isinstance(name, str):
            msg = f"class_map: class name at position {i} is not a string"
            raise TypeError(msg)
        if condition:
            classes.append(name)
    return " ".join(classes)


# Attribute keys that populate named fields instead of ``attributes``.
_INPUT_SPECIAL_KEYS: dict[str, str] = {
    "error": "error",
    "hint": "hint",
    "label": "label",
    "type": "type",
    "class": "class",
    "_": "hyperscript",
    "hyperscript": "hyperscript",
}


def input_attrs(name_id: str, *pairs: Any, **attrs: Any) -> dict[str, Any]:
    """Prepare the context for a reusable form-input partial.

    *name_id* is used for both ``name`` and ``id``. Extra attributes come
    as alternating key/value positional pairs (for hyphenated names like
    ``"aria-describedby"``) or as keywords. ``label``, ``hint``, ``error``,
    ``type``, ``class`` and ``_`` (hyperscript) fill dedicated fields;
    everything else lands in ``attributes``. Non-string values become
    ``""``.

    Example:
        {% set field = input_attrs("email", type="email", label="Email") %}
        {% include "partials/input.html" %}

    """
    if len(pairs) % 2 != 0:
        msg = "input_attrs expects attributes as key/value pairs, received odd number of arguments"
        raise ValueError(msg)

    items: list[tuple[Any, Any]] = [(pairs[i], pairs[i + 1]) for i in range(0, len(pairs), 2)]
    items.extend(attrs.items())

    data: dict[str, Any] = {
        "name_id": name_id,
        "error": "",
        "hint": "",
        "label": "",
        "type": "text",
        "class": "",
        "hyperscript": "",
    }
    attributes: dict[str, str] = {}
    for position, (key, value) in enumerate(items):
        if not isinstance(key, str):
            msg = f"input_attrs: attribute key at position {position * 2} is not a string"
            raise TypeError(msg)
        text = value if isinstance(value, str) else ""
        special = _INPUT_SPECIAL_KEYS.get(key)
        if special is not None:
            data[special] = text
        else:
            attributes[key] = text
    data["attributes"] = attributes
    return data


def field_error(errors: Any, field_name: str) -> str:
    """The validation message for one field, ``""`` when there is none.

    Example:
        {% if field_error(errors, "email") %}
          <span class="error">{{ field_error(errors, "email") }}</span>
        {% end %}

    """
    if isinstance(errors, Mapping):
        value = errors.get(field_name, "")
        return str(value) if value else ""
    return ""


def qs(base: str, **params: Any) -> str:
    """Append query-string parameters to a URL path, skipping falsy values.

    Example:
        {{ "/search" | qs(page=page + 1, q=query) }}  → "/search?page=3&q=owl"

    """
    filtered = {k: str(v) for k, v in params.items() if v}
    if not filtered:
        return base
    sep = "&" if "?" in base else "?"
    return f"{base}{sep}{urlencode(filtered, quote_via=quote)}"


# -- Images --


def srcset(src: str, *widths: str) -> str:
    """Build a ``srcset`` value from an image path and width descriptors.

    Widths without a ``w`` or ``x`` suffix get ``w``::

        srcset("/img/cat.webp", "100", "200")  → "/img/cat-100w.webp, /img/cat-200w.webp"
        srcset("/cat.jpg", "1x", "2x")         → "/cat-1x.jpg, /cat-2x.jpg"

    """
    if not src.strip() or not widths:
        return ""
    stem, dot, ext = src.rpartition(".")
    if not dot:
        stem, ext = src, ""
    suffix = f".{ext}" if dot else ""
    entries: list[str] = []
    for width in widths:
        descriptor = str(width)
        if not descriptor.endswith(("w", "x")):
            descriptor += "w"
        entries.append(f"{stem}-{descriptor}{suffix}")
    return ", ".join(entries)
