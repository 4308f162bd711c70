"""HTML adapter backed by kida templates.

Sources follow a fixed layout::

    templates/
        partials/          reusable fragments, imported by pages
        views/             one page per file
            layouts/       page wrappers; the page fills ``{% block content %}``
            system/        error pages: 401, 403, 404, 405, 500, 503

Pages are registered by their path under ``views/`` without the
extension (``"users/show"``, ``"system/404"``). Pages from a named
source other than the root get a ``"<source>:"`` prefix.

``init()`` reads every source into memory, compiles everything into a
fresh kida Environment and swaps the result in with one assignment. A
failed build raises ``TemplateLoadError`` and the previous templates
keep serving.

Rendering happens fully in memory. A ``Response`` only exists once the
page and its layout have rendered, so a failing template can still be
answered with a clean error page instead of a truncated 200.
"""

import logging
import traceback
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Any

from kida import Environment

from hyperview.adapters.base import BaseAdapter, ErrorKind
from hyperview.config import ViewConfig
from hyperview.constants import LAYOUTS_DIR, PARTIALS_DIR, ROOT_SOURCE_ID, SYSTEM_DIR, VIEWS_DIR
from hyperview.errors import TemplateLoadError, TemplateNotFound
from hyperview.http.request import Request
from hyperview.http.response import TEXT_HTML, Response, plain_text_error
from hyperview.templating.environment import create_environment
from hyperview.view.response import ViewResponse

logger = logging.getLogger("hyperview.adapters")


@dataclass(frozen=True, slots=True)
class _TemplateSet:
    """One consistent build of the template registry."""

    env: Environment | None
    pages: Mapping[str, Any]


_EMPTY = _TemplateSet(env=None, pages=MappingProxyType({}))


class TemplateAdapter(BaseAdapter):
    """Renders ``ViewResponse`` objects through kida page and layout templates."""

    def __init__(
        self,
        config: ViewConfig,
        *,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        globals_: Mapping[str, Any] | None = None,
    ) -> None:
        self._config = config
        self._filters = dict(filters or {})
        self._globals = dict(globals_ or {})
        self._templates = _EMPTY

    # -- Registry --

    def init(self) -> None:
        """Rebuild the template registry from every configured source.

        Raises:
            TemplateLoadError: A source could not be read or compiled.
                The registry from the previous successful build stays active.
        """
        sources = self._config.template_sources()
        extension = self._config.extension
        loader_sources: dict[str, str] = {}

        partial_origin: dict[str, str] = {}
        for source_id, root in sources.items():
            for rel, text in _read_tree(root, PARTIALS_DIR, extension):
                name = f"{PARTIALS_DIR}/{rel}"
                if name in partial_origin:
                    logger.warning(
                        "Partial %s from source %r overrides the one from %r",
                        name,
                        source_id,
                        partial_origin[name],
                    )
                partial_origin[name] = source_id
                loader_sources[name] = text

        page_sources: dict[str, str] = {}
        for source_id, root in sources.items():
            for rel, text in _read_tree(root, VIEWS_DIR, extension):
                name = f"{VIEWS_DIR}/{rel}"
                key = rel.removesuffix(extension)
                if source_id != ROOT_SOURCE_ID:
                    name = f"{source_id}:{name}"
                    key = f"{source_id}:{key}"
                loader_sources[name] = text
                page_sources[key] = name

        env = create_environment(self._config, loader_sources, self._filters, self._globals)
        for name in partial_origin:
            _compile(env, name)
        pages = {key: _compile(env, name) for key, name in page_sources.items()}

        self._templates = _TemplateSet(env=env, pages=MappingProxyType(pages))
        logger.debug(
            "Compiled %d pages and %d partials from %d sources",
            len(pages),
            len(partial_origin),
            len(sources),
        )

    def page_names(self) -> list[str]:
        """Registered page keys, sorted."""
        return sorted(self._templates.pages)

    def has_page(self, key: str) -> bool:
        return key in self._templates.pages

    # -- Rendering --

    def render(self, request: Request, view: ViewResponse) -> Response:
        templates = self._templates
        key = view.template_path
        page = templates.pages.get(key)
        if page is None:
            error = TemplateNotFound(key)
            logger.error("%s", error)
            return plain_text_error(str(error), 500)

        layout = None
        if view.template_layout:
            layout = templates.pages.get(f"{LAYOUTS_DIR}/{view.template_layout}")
            if layout is None:
                logger.error("layout not found: %s", view.template_layout)
                return plain_text_error(f"layout not found: {view.template_layout}", 500)

        context = view.view_data(request).data()
        try:
            html = page.render(context)
            if layout is not None:
                html = layout.render_with_blocks({"content": html}, context)
            headers = view.response_headers()
        except Exception as exc:
            if key == _system_page(ErrorKind.SYSTEM_ERROR):
                logger.exception("System error page %s failed to render", key)
                return plain_text_error(f"error executing template: {exc}", 500)
            return self.render_system_error(request, exc, view)

        view.status_if_unset(200)
        return Response(
            body=html,
            status=view.status_code,
            content_type=view.content_type or TEXT_HTML,
            headers=headers,
        )

    def render_error(
        self,
        kind: ErrorKind,
        request: Request,
        view: ViewResponse,
        exc: BaseException | None = None,
    ) -> Response:
        if kind is ErrorKind.SYSTEM_ERROR:
            return self._render_system_error(request, view, exc)
        key = _system_page(kind)
        if self.has_page(key):
            return self.render(request, view.path(key).status(kind.status))
        return plain_text_error(kind.text, kind.status)

    def _render_system_error(
        self,
        request: Request,
        view: ViewResponse,
        exc: BaseException | None,
    ) -> Response:
        message = str(exc) if exc is not None else ErrorKind.SYSTEM_ERROR.text
        logger.error("Server error: %s", message, exc_info=exc)

        key = _system_page(ErrorKind.SYSTEM_ERROR)
        if self.has_page(key):
            view.path(key).errors(message, {"trace": _format_trace(exc)}).status_error()
            return self.render(request, view)
        return plain_text_error(message, 500)


def _system_page(kind: ErrorKind) -> str:
    return f"{SYSTEM_DIR}/{kind.page}"


def _format_trace(exc: BaseException | None) -> str:
    if exc is None:
        return ""
    return "".join(traceback.format_exception(exc)).replace("\t", "    ")


def _compile(env: Environment, name: str) -> Any:
    try:
        return env.get_template(name)
    except Exception as exc:
        raise TemplateLoadError(name, str(exc)) from exc


def _read_tree(
    root: Path | Traversable, directory: str, extension: str
) -> Iterator[tuple[str, str]]:
    """Yield ``(relative path, source)`` for every template under *root*/*directory*."""
    base = root.joinpath(directory)
    if not base.is_dir():
        return
    yield from _walk(base, "", extension)


def _walk(node: Path | Traversable, prefix: str, extension: str) -> Iterator[tuple[str, str]]:
    for child in sorted(node.iterdir(), key=lambda entry: entry.name):
        rel = f"{prefix}{child.name}"
        if child.is_dir():
            yield from _walk(child, f"{rel}/", extension)
        elif child.name.endswith(extension):
            try:
                source = child.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise TemplateLoadError(rel, str(exc)) from exc
            yield rel, source
