"""ASGI type aliases.

Only the raw callables are needed: hyperview builds ``Request`` values
from a scope and hands finished ``Response`` values to ``send``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI scope and send callable
Scope: TypeAlias = MutableMapping[str, Any]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
