"""String, number and time helpers exposed to templates.

Plain functions with no shared state. Each one is registered as a kida
global and, where it reads naturally after a pipe, as a filter::

    {{ "user_name" | humanize }}          → "User name"
    {{ title | slugify }}                 → "hello-world"
    {{ pluralize(count, "item", "items") }}
"""

from datetime import UTC, datetime, timedelta
from typing import Any


def yesno(value: Any, yes: str = "yes", no: str = "no") -> str:
    """Return *yes* when *value* is truthy, else *no*."""
    return yes if value else no


def to_int(value: Any) -> int:
    """Convert integers and base-10 strings to ``int``.

    Floats and booleans are rejected rather than silently truncated.
    """
    if isinstance(value, bool):
        msg = f"unable to convert type {type(value).__name__} to int"
        raise TypeError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip(), 10)
    msg = f"unable to convert type {type(value).__name__} to int"
    raise TypeError(msg)


def is_even(value: Any) -> bool:
    return to_int(value) % 2 == 0


def is_odd(value: Any) -> bool:
    return to_int(value) % 2 != 0


def make_slice(*items: Any) -> list[Any]:
    """Collect the arguments into a list: ``slice("a", "b")``."""
    return list(items)


def pluralize(count: Any, singular: str, plural: str | None = None) -> str:
    """Pick *singular* when *count* is one, else *plural* (default ``singular + "s"``).

    Example:
        {{ count }} {{ pluralize(count, "reply", "replies") }}

    """
    if plural is None:
        plural = singular + "s"
    return singular if to_int(count) == 1 else plural


def humanize(value: str) -> str:
    """Turn snake_case, kebab-case or camelCase into a readable phrase.

    ``"hello_world"`` and ``"helloWorld"`` both become ``"Hello world"``.
    """
    out: list[str] = []
    for i, ch in enumerate(value):
        if i == 0:
            out.append(ch.upper())
        elif ch in "_-":
            out.append(" ")
        elif ch.isupper():
            out.append(" " + ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def slugify(value: str) -> str:
    """Naive ASCII slug: letters lowered, whitespace to ``-``, the rest dropped."""
    out: list[str] = []
    for ch in value:
        if not ch.isascii():
            continue
        if ch.isalpha():
            out.append(ch.lower())
        elif ch.isdigit() or ch in "_-":
            out.append(ch)
        elif ch.isspace():
            out.append("-")
    return "".join(out)


def truncate(value: str, length: int) -> str:
    """Cut *value* to *length* characters and append ``...`` when it was longer."""
    if len(value) <= length:
        return value
    return value[:length] + "..."


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def not_blank(value: str | None) -> bool:
    return not is_blank(value)


def contains(value: str, substr: str) -> bool:
    return substr in value


def has_prefix(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def has_suffix(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


def join(items: Any, sep: str) -> str:
    return sep.join(str(item) for item in items)


def lower(value: str) -> str:
    return value.lower()


def upper(value: str) -> str:
    return value.upper()


def replace(value: str, old: str, new: str, count: int = -1) -> str:
    """Replace the first *count* occurrences; negative means all."""
    return value.replace(old, new, count)


def replace_all(value: str, old: str, new: str) -> str:
    return value.replace(old, new)


def split(value: str, sep: str) -> list[str]:
    return value.split(sep)


def trim(value: str) -> str:
    return value.strip()


def trim_prefix(value: str, prefix: str) -> str:
    return value.removeprefix(prefix)


def trim_suffix(value: str, suffix: str) -> str:
    return value.removesuffix(suffix)


# -- Time --


def now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


def since(moment: datetime) -> timedelta:
    """Time elapsed since *moment*; naive values compare against local time."""
    return datetime.now(moment.tzinfo) - moment


def until(moment: datetime) -> timedelta:
    """Time remaining until *moment*."""
    return moment - datetime.now(moment.tzinfo)
