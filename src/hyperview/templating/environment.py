"""Kida environment setup.

Builds one kida ``Environment`` per template registry build. Sources are
read up front into a ``DictLoader`` so a build either sees a consistent
snapshot of every file or fails as a whole.
"""

from collections.abc import Callable, Mapping
from typing import Any

from kida import DictLoader, Environment

from hyperview.config import ViewConfig
from hyperview.templating.filters import BUILTIN_FILTERS, BUILTIN_GLOBALS


def create_environment(
    config: ViewConfig,
    templates: Mapping[str, str],
    filters: Mapping[str, Callable[..., Any]] | None = None,
    globals_: Mapping[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment over an in-memory template snapshot.

    *templates* maps loader names (``"views/about.html"``,
    ``"partials/nav.html"``) to source text.
    """
    env = Environment(
        loader=DictLoader(dict(templates)),
        autoescape=config.autoescape,
        auto_reload=config.auto_reload,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    env.update_filters(BUILTIN_FILTERS)

    # User filters may override built-ins
    if filters:
        env.update_filters(dict(filters))

    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)

    if globals_:
        for name, value in globals_.items():
            env.add_global(name, value)

    return env
