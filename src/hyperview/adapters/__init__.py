"""Output adapters.

Built-in adapters:
    TemplateAdapter  HTML pages rendered through kida
    JSONAdapter      JSON envelopes

Custom adapters implement the ``Adapter`` protocol or subclass
``BaseAdapter``.
"""

from hyperview.adapters.base import Adapter, BaseAdapter, ErrorKind
from hyperview.adapters.json import JSONAdapter
from hyperview.adapters.template import TemplateAdapter

__all__ = [
    "Adapter",
    "BaseAdapter",
    "ErrorKind",
    "JSONAdapter",
    "TemplateAdapter",
]
