"""View configuration.

ViewConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType

from hyperview.constants import ROOT_SOURCE_ID
from hyperview.errors import ConfigurationError

type TemplateSource = str | Path | Traversable


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """View configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewConfig(template_dir="templates", base_layout="app")

    Templates are read from ``template_dir`` (the root source) and from
    any additional named ``sources``. Pages from a named source are
    registered as ``"<name>:<page>"``.
    """

    # Sources
    template_dir: TemplateSource | None = None
    sources: Mapping[str, TemplateSource] = field(default_factory=dict)
    extension: str = ".html"

    # Layouts
    base_layout: str = "base"
    system_layout: str = "base"

    # kida environment
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    auto_reload: bool = False

    def __post_init__(self) -> None:
        if not self.extension.startswith("."):
            msg = f"extension must start with '.', got {self.extension!r}"
            raise ConfigurationError(msg)
        if ROOT_SOURCE_ID in self.sources:
            msg = f"source id {ROOT_SOURCE_ID!r} is reserved for template_dir"
            raise ConfigurationError(msg)
        for source_id in self.sources:
            if not source_id or ":" in source_id:
                msg = f"invalid source id {source_id!r}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    def template_sources(self) -> dict[str, Path | Traversable]:
        """All template sources keyed by source id, root first."""
        result: dict[str, Path | Traversable] = {}
        if self.template_dir is not None:
            result[ROOT_SOURCE_ID] = _as_traversable(self.template_dir)
        for source_id, source in self.sources.items():
            result[source_id] = _as_traversable(source)
        return result


def _as_traversable(source: TemplateSource) -> Path | Traversable:
    if isinstance(source, str):
        return Path(source)
    return source
