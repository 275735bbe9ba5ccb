"""
Shape Registry
==============
Maps a type tag to its shape class.

The built-in shapes register themselves when `shapearea.model.shapes` is
imported; `get_shape_class` imports that module on first use so the lookup
does not depend on the caller's import order.
"""
from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapearea.model.shapes import Shape

_REGISTRY: dict[str, type[Shape]] = {}


def register_shape(cls: type[Shape]) -> type[Shape]:
    """Class decorator to register a shape by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key.lower()] = cls
    return cls


def get_shape_class(key: str) -> type[Shape]:
    # Registration side-effects of the built-in shapes
    importlib.import_module("shapearea.model.shapes")
    cls = _REGISTRY.get(key.lower())
    if not cls:
        raise KeyError(f"No shape registered for key '{key}'")
    return cls


def list_keys() -> list[str]:
    importlib.import_module("shapearea.model.shapes")
    return list(_REGISTRY.keys())
