"""Rectangle value object."""

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    """A rectangle with a computed area.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height
        (10, 20)
        >>> r.area()
        200

    """

    width: float
    height: float

    def area(self) -> float:
        """Return width times height."""
        return self.width * self.height
