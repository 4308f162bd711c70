"""Request-scoped context via ContextVar.

Provides:
- ``nonce_var``: The CSP nonce for the current request.

Set by middleware (usually the one emitting ``Content-Security-Policy``)
and read by ``ViewData.nonce`` while a template renders.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading (3.14t). No locks needed.
"""

from contextvars import ContextVar, Token

nonce_var: ContextVar[str] = ContextVar("hyperview_nonce")
"""The CSP nonce of the current request. Unset outside middleware."""


def get_nonce() -> str:
    """Return the current nonce, or ``""`` when none was set."""
    return nonce_var.get("")


def set_nonce(nonce: str) -> Token[str]:
    """Set the nonce for the current context.

    Returns the token so middleware can ``nonce_var.reset(token)`` once
    the request completes.
    """
    return nonce_var.set(nonce)
