"""
Shape Primitives
================
The abstract shape capability and its concrete variants.

Inputs are not checked for geometric validity: a negative radius or side
lengths that break the triangle inequality give a degenerate result (possibly
NaN) instead of an exception.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from shapearea.model.registry import register_shape


class Shape(ABC):
    """Base class for planar shapes with a computable area."""
    KEY: ClassVar[str] = ""  # Override in subclass
    LABEL: ClassVar[str] = "Shape"
    PARAMETER_COUNT: ClassVar[int] = 0

    @abstractmethod
    def calculate_area(self) -> float:
        """Returns the area of the shape."""
        raise NotImplementedError("`calculate_area` must be implemented in subclass.")


@register_shape
@dataclass(frozen=True)
class Circle(Shape):
    """A circle given by its radius."""
    KEY: ClassVar[str] = "circle"
    LABEL: ClassVar[str] = "Circle"
    PARAMETER_COUNT: ClassVar[int] = 1

    radius: float

    def calculate_area(self) -> float:
        return math.pi * self.radius * self.radius


@register_shape
@dataclass(frozen=True)
class Triangle(Shape):
    """A triangle given by the lengths of its three sides."""
    KEY: ClassVar[str] = "triangle"
    LABEL: ClassVar[str] = "Triangle"
    PARAMETER_COUNT: ClassVar[int] = 3

    side_a: float
    side_b: float
    side_c: float

    @property
    def semi_perimeter(self) -> float:
        return (self.side_a + self.side_b + self.side_c) / 2

    def calculate_area(self) -> float:
        """
        Area by Heron's formula.

        Returns:
            The area, or NaN when the sides violate the triangle inequality
            (the radicand is negative).
        """
        s = self.semi_perimeter
        radicand = s * (s - self.side_a) * (s - self.side_b) * (s - self.side_c)
        # np.sqrt gives NaN for a negative radicand where math.sqrt would raise
        with np.errstate(invalid="ignore"):
            return float(np.sqrt(np.float64(radicand)))

    def is_right_triangle(self) -> bool:
        """
        Checks the Pythagorean theorem for each choice of hypotenuse.

        The comparison is exact, so only triples that are exact in floating
        point (e.g. 3, 4, 5) are recognised; 1, 1, sqrt(2) is not.
        """
        a2 = self.side_a * self.side_a
        b2 = self.side_b * self.side_b
        c2 = self.side_c * self.side_c
        return a2 + b2 == c2 or a2 + c2 == b2 or b2 + c2 == a2
