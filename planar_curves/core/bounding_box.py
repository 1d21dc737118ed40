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
Axis-Aligned Bounding Boxes
============================

Bounding boxes let callers build their own spatial indexes over curves.
No index structure lives here.
"""

from dataclasses import dataclass

from .vector import Point2


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle given by its minimum and maximum corners.

    Attributes:
        min: Corner with the smallest x and y
        max: Corner with the largest x and y

    Example:
        >>> box = BoundingBox(Point2(0, 0), Point2(2, 1))
        >>> box.contains(Point2(1, 0.5))
        True
    """

    min: Point2
    max: Point2

    @classmethod
    def from_points(cls, *points: Point2) -> "BoundingBox":
        """Smallest box containing all given points."""
        if not points:
            raise ValueError("Cannot build a bounding box from no points")
        return cls(
            Point2(min(p.x for p in points), min(p.y for p in points)),
            Point2(max(p.x for p in points), max(p.y for p in points)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def contains(self, point: Point2) -> bool:
        """True if point lies inside or on the border of the box."""
        return (self.min.x <= point.x <= self.max.x
                and self.min.y <= point.y <= self.max.y)

    def overlaps(self, other: "BoundingBox") -> bool:
        """True if the two boxes share at least one point."""
        return (self.min.x <= other.max.x and other.min.x <= self.max.x
                and self.min.y <= other.max.y and other.min.y <= self.max.y)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(
            Point2(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Point2(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )


__all__ = ["BoundingBox"]
