"""Handling geometries"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Tuple

from avpath.common import T


###############################################################################
# AvVec2
###############################################################################
@dataclass(frozen=True)
class AvVec2(Generic[T]):
    """
    Immutable 2D point (or vector) over a numeric coordinate type.

    Attributes:
        x (T): The x-coordinate.
        y (T): The y-coordinate.
    """

    x: T
    y: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y))

    def __add__(self, other: AvVec2[T]) -> AvVec2[T]:
        return AvVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: AvVec2[T]) -> AvVec2[T]:
        return AvVec2(self.x - other.x, self.y - other.y)

    def cross(self, other: AvVec2[T]) -> T:
        """
        Return the 2D cross product (z-component of the 3D cross product).

        Positive if _other_ lies counter-clockwise of this vector
        in a y-up coordinate system.

        Args:
            other (AvVec2): The second operand

        Returns:
            T: self.x * other.y - self.y * other.x
        """
        return self.x * other.y - self.y * other.x

    def dot(self, other: AvVec2[T]) -> T:
        """Return the dot product of both vectors."""
        return self.x * other.x + self.y * other.y

    def __str__(self):
        return f"({self.x}, {self.y})"


###############################################################################
# AvRect
###############################################################################
@dataclass
class AvRect:
    """
    Axis-aligned rectangle spanned by two opposite corners.

    The corners are normalized on construction, so _origin_ always holds
    the minimum and _opposite_ the maximum coordinates.

    Attributes:
        xmin: The minimum x-coordinate.
        ymin: The minimum y-coordinate.
        xmax: The maximum x-coordinate.
        ymax: The maximum y-coordinate.
    """

    _xmin: T
    _ymin: T
    _xmax: T
    _ymax: T

    def __init__(self, origin: AvVec2, opposite: AvVec2):
        """Initialize AvRect from two corner points.

        Args:
            origin: One corner of the rectangle
            opposite: The diagonally opposite corner
        """
        self._xmin = origin.x
        self._ymin = origin.y
        self._xmax = opposite.x
        self._ymax = opposite.y

        # Normalize coordinates to ensure xmin ≤ xmax and ymin ≤ ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @property
    def xmin(self) -> T:
        """The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> T:
        """The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> T:
        """The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> T:
        """The maximum y-coordinate."""
        return self._ymax

    @property
    def origin(self) -> AvVec2:
        """The corner holding the minimum coordinates."""
        return AvVec2(self._xmin, self._ymin)

    @property
    def opposite(self) -> AvVec2:
        """The corner holding the maximum coordinates."""
        return AvVec2(self._xmax, self._ymax)

    @property
    def extent(self) -> Tuple[T, T, T, T]:
        """The extent of the rectangle as Tuple (xmin, ymin, xmax, ymax)."""
        return self._xmin, self._ymin, self._xmax, self._ymax

    @property
    def width(self) -> T:
        """The width of the rectangle (difference between xmax and xmin)."""

        return self._xmax - self._xmin

    @property
    def height(self) -> T:
        """The height of the rectangle (difference between ymax and ymin)."""

        return self._ymax - self._ymin

    @property
    def area(self) -> T:
        """The area of the rectangle."""

        return self.width * self.height

    @property
    def centroid(self) -> AvVec2:
        """
        The centroid of the rectangle.

        Returns:
            AvVec2: The center point, always with float coordinates
        """
        return AvVec2((self._xmin + self._xmax) / 2, (self._ymin + self._ymax) / 2)

    def contains(self, point: AvVec2) -> bool:
        """Return True if _point_ lies inside or on the border of the rectangle."""
        return self._xmin <= point.x <= self._xmax and self._ymin <= point.y <= self._ymax

    def __str__(self):
        """Returns a string representation of the AvRect instance."""
        return (
            f"AvRect(xmin={self.xmin}, ymin={self.ymin}, "
            f"xmax={self.xmax}, ymax={self.ymax}, "
            f"width={self.width}, height={self.height})"
        )
