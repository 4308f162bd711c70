"""hyperview exception hierarchy.

Shared across the adapters and the dispatch facade so every module
raises and catches the same types.
"""


class HyperViewError(Exception):
    """Base for all hyperview-specific errors."""


class ConfigurationError(HyperViewError):
    """Raised when view configuration is invalid.

    Typically surfaces while building a ``HyperView`` or an adapter.
    """


class TemplateLoadError(HyperViewError):
    """A template source failed to compile during ``init()``.

    Fatal to startup and to reinitialization. The underlying kida
    exception is chained as ``__cause__``.
    """

    def __init__(self, name: str, detail: str = "") -> None:
        message = f"error loading template {name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.name = name
        self.detail = detail


class TemplateNotFound(HyperViewError, LookupError):  # noqa: N818
    """No compiled page is registered under the requested path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"template not found: {path}")
        self.path = path


class AdapterNotFound(HyperViewError, LookupError):  # noqa: N818
    """No adapter is registered under the requested format name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Adapter not found: {name}")
        self.name = name
