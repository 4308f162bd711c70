"""Request inspection honoring reverse-proxy forwarding headers.

Pure functions over ``Request``: no side effects, every result a plain
string. Forwarding headers (``X-Forwarded-Proto``, ``X-Forwarded-Host``,
``X-Forwarded-Port``, ``X-Real-IP``) take precedence over what the
connection itself reports, so deploy behind a proxy that overwrites them.

A comma-separated forwarding header (one entry per proxy hop) is read
from its first entry, the one closest to the client.
"""

from hyperview.http.request import Request

DEFAULT_PORTS: dict[str, str] = {"http": "80", "https": "443"}


def _first(value: str | None) -> str:
    if not value:
        return ""
    return value.split(",", 1)[0].strip()


def _split_host_port(value: str) -> tuple[str, str]:
    """Split ``host[:port]``, keeping bracketed IPv6 literals intact."""
    if value.startswith("["):
        end = value.find("]")
        if end != -1:
            rest = value[end + 1 :]
            return value[: end + 1], rest[1:] if rest.startswith(":") else ""
    host, sep, port = value.rpartition(":")
    if sep and port.isdigit():
        return host, port
    return value, ""


def scheme(request: Request) -> str:
    """``"https"`` if forwarded as https or the connection is TLS, else ``"http"``."""
    if _first(request.headers.get("X-Forwarded-Proto")).lower() == "https":
        return "https"
    if request.scheme == "https":
        return "https"
    return "http"


def is_secure(request: Request) -> bool:
    """True when the client reached us over https."""
    return scheme(request) == "https"


def scheme_host_port(request: Request) -> tuple[str, str, str]:
    """Scheme, host and port resolved from a single pass over the headers.

    Host precedence: ``X-Forwarded-Host``, then ``Host``, then the ASGI
    server address. ``X-Forwarded-Port`` overrides any port found that
    way. Without an explicit port, the scheme's default is reported.
    """
    headers = request.headers
    resolved_scheme = scheme(request)

    host = ""
    port = ""
    forwarded_host = _first(headers.get("X-Forwarded-Host"))
    host_header = headers.get("Host")
    if forwarded_host:
        host, port = _split_host_port(forwarded_host)
    elif host_header:
        host, port = _split_host_port(host_header.strip())
    elif request.server is not None:
        host, port = request.server[0], str(request.server[1])

    forwarded_port = _first(headers.get("X-Forwarded-Port"))
    if forwarded_port:
        port = forwarded_port

    return resolved_scheme, host, port or DEFAULT_PORTS[resolved_scheme]


def host(request: Request) -> str:
    """Host name the client addressed, without the port."""
    return scheme_host_port(request)[1]


def port(request: Request) -> str:
    """Port the client addressed."""
    return scheme_host_port(request)[2]


def base_url(request: Request) -> str:
    """``scheme://host[:port]``, omitting the scheme's default port."""
    resolved_scheme, resolved_host, resolved_port = scheme_host_port(request)
    if not resolved_port or resolved_port == DEFAULT_PORTS[resolved_scheme]:
        return f"{resolved_scheme}://{resolved_host}"
    return f"{resolved_scheme}://{resolved_host}:{resolved_port}"


def remote_addr(request: Request) -> str:
    """Client address: ``X-Real-IP``, else the socket peer as ``host:port``."""
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()
    if request.client is None:
        return ""
    client_host, client_port = request.client
    return f"{client_host}:{client_port}"


def user_agent(request: Request) -> str:
    return request.headers.get("User-Agent") or ""


def referer(request: Request) -> str:
    return request.headers.get("Referer") or ""


def method(request: Request) -> str:
    return request.method


def url_path(request: Request) -> str:
    return request.path


def in_path(request: Request, path: str, mode: str) -> bool:
    """Match the request path against *path*.

    *mode* is one of ``exact``, ``contains``, ``suffix`` or ``prefix``.
    Any other mode matches nothing.
    """
    current = request.path
    match mode:
        case "exact":
            return current == path
        case "contains":
            return path in current
        case "suffix":
            return current.endswith(path)
        case "prefix":
            return current.startswith(path)
        case _:
            return False


def is_xml_http_request(request: Request) -> bool:
    """True for requests sent with ``X-Requested-With: XMLHttpRequest``."""
    return (request.headers.get("X-Requested-With") or "").lower() == "xmlhttprequest"
