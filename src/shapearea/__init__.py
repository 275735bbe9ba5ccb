"""
shapearea
=========
Area calculator for simple planar shapes.

Public entry point is :func:`shapearea.model.factory.create_shape`, re-exported
here for convenience.
"""
import logging

from shapearea.config import PACKAGE_LOGGER_NAME
from shapearea.model.factory import (
    InvalidParameterCount,
    InvalidShapeType,
    ShapeError,
    ShapeFactory,
    create_shape,
)
from shapearea.model.shapes import Circle, Shape, Triangle

# Library callers without logging configured should see nothing
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "Circle",
    "InvalidParameterCount",
    "InvalidShapeType",
    "Shape",
    "ShapeError",
    "ShapeFactory",
    "Triangle",
    "create_shape",
]
