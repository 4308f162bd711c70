"""hyperview: view rendering for htmx-driven ASGI apps.

Build a response fluently, then let ``HyperView`` pick the output format
(kida HTML pages, JSON envelopes, or your own adapter)::

    from hyperview import HyperView, ViewConfig

    hv = HyperView(ViewConfig(template_dir="templates"))

    def show_user(request, user):
        view = (
            hv.new_response()
            .path("users/show")
            .title(user.name)
            .data(user=user)
            .hx_trigger("userLoaded")
        )
        return hv.render(request, view)

Write the resulting ``Response`` with ``send_response``::

    from hyperview import send_response
    await send_response(response, send)
"""

__version__ = "0.1.0"
__all__ = [
    "Adapter",
    "AdapterNotFound",
    "BaseAdapter",
    "ConfigurationError",
    "ErrorKind",
    "HyperView",
    "HyperViewError",
    "JSONAdapter",
    "Request",
    "Response",
    "TemplateAdapter",
    "TemplateLoadError",
    "TemplateNotFound",
    "ViewConfig",
    "ViewData",
    "ViewResponse",
    "get_nonce",
    "send_response",
    "set_nonce",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hyperview`` from pulling in kida until it is needed.
    """
    if name == "HyperView":
        from hyperview.renderer import HyperView

        return HyperView

    if name == "ViewConfig":
        from hyperview.config import ViewConfig

        return ViewConfig

    if name == "Request":
        from hyperview.http.request import Request

        return Request

    if name == "Response":
        from hyperview.http.response import Response

        return Response

    if name in ("ViewData", "ViewResponse"):
        from hyperview import view as _view

        return getattr(_view, name)

    if name in ("Adapter", "BaseAdapter", "ErrorKind", "JSONAdapter", "TemplateAdapter"):
        from hyperview import adapters as _adapters

        return getattr(_adapters, name)

    if name == "send_response":
        from hyperview.server.sender import send_response

        return send_response

    if name in ("get_nonce", "set_nonce"):
        from hyperview import context as _ctx

        return getattr(_ctx, name)

    if name in (
        "AdapterNotFound",
        "ConfigurationError",
        "HyperViewError",
        "TemplateLoadError",
        "TemplateNotFound",
    ):
        from hyperview import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
