"""Swap styles for the ``HX-Reswap`` response header.

Mirrors the ``hx-swap`` attribute syntax: a strategy followed by
optional modifiers::

    Swap("outerHTML").with_transition().with_settle_delay("300ms")
    # "outerHTML transition:true settle:300ms"
"""

from __future__ import annotations

from dataclasses import dataclass, replace

STRATEGIES = frozenset(
    {
        "innerHTML",
        "outerHTML",
        "textContent",
        "beforebegin",
        "afterbegin",
        "beforeend",
        "afterend",
        "delete",
        "none",
    }
)


@dataclass(frozen=True, slots=True)
class Swap:
    """An ``hx-swap`` value. Immutable; ``with_*`` returns a new Swap."""

    strategy: str = "innerHTML"
    transition: bool | None = None
    swap_delay: str | None = None
    settle_delay: str | None = None
    ignore_title: bool | None = None
    scroll: str | None = None
    show: str | None = None
    focus_scroll: bool | None = None

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            msg = f"unknown swap strategy {self.strategy!r}"
            raise ValueError(msg)

    def with_transition(self, enabled: bool = True) -> Swap:
        return replace(self, transition=enabled)

    def with_swap_delay(self, delay: str) -> Swap:
        return replace(self, swap_delay=delay)

    def with_settle_delay(self, delay: str) -> Swap:
        return replace(self, settle_delay=delay)

    def with_ignore_title(self, enabled: bool = True) -> Swap:
        return replace(self, ignore_title=enabled)

    def with_scroll(self, position: str, selector: str | None = None) -> Swap:
        """Scroll *position* (``top``/``bottom``), optionally of *selector*."""
        return replace(self, scroll=f"{selector}:{position}" if selector else position)

    def with_show(self, position: str, selector: str | None = None) -> Swap:
        return replace(self, show=f"{selector}:{position}" if selector else position)

    def with_focus_scroll(self, enabled: bool = True) -> Swap:
        return replace(self, focus_scroll=enabled)

    def __str__(self) -> str:
        parts = [self.strategy]
        if self.transition is not None:
            parts.append(f"transition:{_bool(self.transition)}")
        if self.swap_delay:
            parts.append(f"swap:{self.swap_delay}")
        if self.settle_delay:
            parts.append(f"settle:{self.settle_delay}")
        if self.ignore_title is not None:
            parts.append(f"ignoreTitle:{_bool(self.ignore_title)}")
        if self.scroll:
            parts.append(f"scroll:{self.scroll}")
        if self.show:
            parts.append(f"show:{self.show}")
        if self.focus_scroll is not None:
            parts.append(f"focus-scroll:{_bool(self.focus_scroll)}")
        return " ".join(parts)


def _bool(value: bool) -> str:
    return "true" if value else "false"
