"""Circle measurements using the approximation pi = 3.14."""

from __future__ import annotations

PI = 3.14


def circle_area(radius: float) -> float:
    """Return the area of a circle of the given radius."""
    return PI * radius * radius


def circle_perimeter(radius: float) -> float:
    """Return the perimeter of a circle of the given radius."""
    return 2 * PI * radius