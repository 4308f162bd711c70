"""Per-request view description: the ``ViewResponse`` builder and ``ViewData``."""

from hyperview.view.data import ViewData
from hyperview.view.response import ViewResponse

__all__ = ["ViewData", "ViewResponse"]
