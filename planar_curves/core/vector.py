# ==============================================================================
# Planar Curves - Curve Geometry Kernel for Lane and Road Networks
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
2D Point and Vector Types
==========================

Immutable 2D point and vector values for curve geometry.

Points (positions) and vectors (displacements, directions) are distinct
types so positions and directions cannot be mixed by accident:

    Point2 - Point2  -> Vector2
    Point2 + Vector2 -> Point2
    Point2 + Point2  -> TypeError

Also provides the angle helpers used by arc construction and projection.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

from .constants import ROUGH_TOLERANCE


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D displacement or direction.

    Attributes:
        x: X component
        y: Y component

    Example:
        >>> direction = Vector2(3.0, 4.0).normalized()
        >>> direction.length
        1.0
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def of(cls, value: Union["Vector2", Sequence[float]]) -> "Vector2":
        """Coerce a Vector2 or (x, y) tuple/list into a Vector2."""
        if isinstance(value, Vector2):
            return value
        if isinstance(value, Point2):
            raise TypeError("Use Point2.coords to reinterpret a point as a vector")
        return cls(value[0], value[1])

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, (Vector2, Point2)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Vector2({self.x:.4f}, {self.y:.4f})"

    @property
    def length(self) -> float:
        """Vector magnitude."""
        return math.hypot(self.x, self.y)

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self.x * self.x + self.y * self.y

    @property
    def angle(self) -> float:
        """Angle in radians from positive X axis."""
        return math.atan2(self.y, self.x)

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def normalized(self) -> "Vector2":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """2D cross product (z-component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> "Vector2":
        """Rotate vector by angle.

        Args:
            angle: Rotation angle in radians (counter-clockwise positive)

        Returns:
            Rotated vector
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a
        )

    def orthogonal(self) -> "Vector2":
        """Perpendicular vector pointing to the right (90° clockwise).

        Shifting a curve by ``direction.orthogonal() * offset`` moves it
        to the right for positive offsets.
        """
        return Vector2(self.y, -self.x)

    def rough_eq(self, other: "Vector2", tolerance: float = ROUGH_TOLERANCE) -> bool:
        """True if the two vectors differ by at most ``tolerance``."""
        return (self - other).length <= tolerance

    def to_tuple(self) -> tuple:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point2:
    """Immutable 2D position.

    Attributes:
        x: X coordinate (Easting)
        y: Y coordinate (Northing)

    Example:
        >>> a = Point2(0.0, 0.0)
        >>> b = Point2(3.0, 4.0)
        >>> (b - a).length
        5.0
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def of(cls, value: Union["Point2", Sequence[float]]) -> "Point2":
        """Coerce a Point2 or (x, y) tuple/list into a Point2."""
        if isinstance(value, Point2):
            return value
        if isinstance(value, Vector2):
            raise TypeError("Use Point2.from_coords to reinterpret a vector as a point")
        return cls(value[0], value[1])

    @classmethod
    def from_coords(cls, coords: Vector2) -> "Point2":
        """Point whose coordinates equal the given vector."""
        return cls(coords.x, coords.y)

    @property
    def coords(self) -> Vector2:
        """Coordinates as a vector from the origin."""
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> "Point2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point2({self.x:.4f}, {self.y:.4f})"

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def distance_to(self, other: "Point2") -> float:
        return (other - self).length

    def midpoint(self, other: "Point2") -> "Point2":
        return Point2((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def rough_eq(self, other: "Point2", tolerance: float = ROUGH_TOLERANCE) -> bool:
        """True if the two points are at most ``tolerance`` apart."""
        return (self - other).length <= tolerance

    def to_tuple(self) -> tuple:
        return (self.x, self.y)


# =============================================================================
# Angle Helpers
# =============================================================================

def angle_to(a: Vector2, b: Vector2) -> float:
    """Unsigned angle between two vectors, in [0, pi].

    Zero-length vectors have no direction; the angle is reported as 0.
    """
    norms = a.length * b.length
    if norms == 0.0:
        return 0.0
    cos_theta = a.dot(b) / norms
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def signed_angle_to(a: Vector2, b: Vector2) -> float:
    """Signed angle from a to b, in (-pi, pi], counter-clockwise positive."""
    return math.atan2(a.cross(b), a.dot(b))


def angle_along_to(a: Vector2, a_direction: Vector2, b: Vector2) -> float:
    """Angle from a to b measured in the rotational sense of a_direction.

    ``a_direction`` is a tangent at the tip of ``a``; if b lies ahead of
    that tangent the short angle is returned, otherwise the long way
    round (2*pi minus the short angle).

    Args:
        a: Reference radius vector
        a_direction: Direction of travel at the tip of a
        b: Target radius vector

    Returns:
        Angle in [0, 2*pi)
    """
    simple_angle = angle_to(a, b)
    if a_direction.dot(b - a) >= 0.0:
        return simple_angle
    return 2.0 * math.pi - simple_angle


__all__ = [
    "Vector2",
    "Point2",
    "angle_to",
    "signed_angle_to",
    "angle_along_to",
]
