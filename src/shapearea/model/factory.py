"""
Shape Factory
=============
Builds a shape from a type tag and a list of numeric parameters.

Why is this file needed?
------------------------
1. Dispatch: It maps the (case-insensitive) type tag to the registered
   shape class.
2. Validation: It checks the tag and the parameter count before anything is
   constructed. Geometric validity is NOT checked.
3. Reporting: It prints one line with the computed area of every shape it
   creates.

Classes:
    ShapeError: Base class of the factory input errors.
    InvalidShapeType: The type tag is not registered.
    InvalidParameterCount: Wrong number of parameters for the type tag.
    ShapeFactory: The factory itself.
"""
from __future__ import annotations

import logging
from typing import Sequence

from shapearea.config import REPORT_TEMPLATE
from shapearea.model.registry import get_shape_class, list_keys
# Importing the module registers the built-in shapes
from shapearea.model.shapes import Shape

logger = logging.getLogger(__name__)


class ShapeError(ValueError):
    """Raised when the factory rejects its input."""


class InvalidShapeType(ShapeError):
    def __init__(self, shape_type: str):
        self.shape_type = shape_type
        super().__init__(
            f"Unknown shape type '{shape_type}'. Expected one of: {', '.join(list_keys())}."
        )


class InvalidParameterCount(ShapeError):
    def __init__(self, shape_type: str, expected: int, actual: int):
        self.shape_type = shape_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid number of parameters for a {shape_type}: expected {expected}, got {actual}."
        )


class ShapeFactory:
    """Creates Shape instances from a type tag and parameters."""

    @staticmethod
    def create_shape(shape_type: str, *parameters: float) -> Shape:
        """
        Creates a new shape and prints its area.

        Args:
            shape_type: Type tag ("circle" or "triangle"), case-insensitive.
            *parameters: Values passed to the shape constructor in order.
                A circle takes the radius, a triangle its three sides.

        Returns:
            The constructed shape.

        Raises:
            InvalidShapeType: If the type tag is not recognised.
            InvalidParameterCount: If the number of parameters does not match
                the shape type.
        """
        shape_cls = ShapeFactory._resolve(shape_type)

        if len(parameters) != shape_cls.PARAMETER_COUNT:
            logger.debug(
                f"Rejected {shape_cls.KEY}: expected {shape_cls.PARAMETER_COUNT} "
                f"parameter(s), got {len(parameters)}"
            )
            raise InvalidParameterCount(shape_cls.KEY, shape_cls.PARAMETER_COUNT, len(parameters))

        shape = shape_cls(*parameters)
        area = shape.calculate_area()
        logger.debug(f"Created {shape!r} with area {area}")
        print(REPORT_TEMPLATE.format(label=shape.LABEL, area=area))
        return shape

    @staticmethod
    def _resolve(shape_type: str) -> type[Shape]:
        try:
            return get_shape_class(shape_type)
        except KeyError:
            logger.debug(f"Rejected unknown shape type '{shape_type}'")
            raise InvalidShapeType(shape_type) from None


def create_shape(shape_type: str, *parameters: float) -> Shape:
    """Module-level shortcut for :meth:`ShapeFactory.create_shape`."""
    return ShapeFactory.create_shape(shape_type, *parameters)


def create_shape_from_sequence(shape_type: str, parameters: Sequence[float]) -> Shape:
    """Same as :func:`create_shape` with the parameters given as one sequence."""
    return ShapeFactory.create_shape(shape_type, *parameters)
