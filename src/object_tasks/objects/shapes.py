"""Shape value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Rectangle:
    """Rectangle with *width* and *height*; ranges are not validated."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area()


@dataclass
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2
