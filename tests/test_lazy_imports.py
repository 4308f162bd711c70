"""Tests for hyperview.__init__ — every public name resolves lazily."""

import pytest

import hyperview


@pytest.mark.parametrize("name", hyperview.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(hyperview, name)
    assert obj is not None, f"hyperview.{name} resolved to None"


def test_resolved_names_match_modules() -> None:
    from hyperview.renderer import HyperView
    from hyperview.view.response import ViewResponse

    assert hyperview.HyperView is HyperView
    assert hyperview.ViewResponse is ViewResponse


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        hyperview.__getattr__("ThisDoesNotExist")
