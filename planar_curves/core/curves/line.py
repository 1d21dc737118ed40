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
Infinite Line
==============

Unbounded straight line through a reference point. ``start`` is only the
origin of the line's offset parameter, not an endpoint.
"""

from dataclasses import dataclass
from typing import Optional

from ..vector import Point2, Vector2
from .base import Curve, Projection


@dataclass(frozen=True)
class Line(Curve):
    """Infinite line through ``start`` along unit ``direction``.

    Attributes:
        start: Reference point (offset 0)
        direction: Unit direction vector
    """

    start: Point2
    direction: Vector2

    def project_with_tolerance(self, point: Point2, tolerance: float) -> Optional[Projection]:
        """Project a point perpendicularly onto the line.

        Every point projects; the offset is signed (negative behind
        ``start``).
        """
        point = Point2.of(point)
        along = (point - self.start).dot(self.direction)
        return (along, self.start + self.direction * along)

    def distance_to(self, point: Point2) -> float:
        point = Point2.of(point)
        return abs((point - self.start).dot(self.direction.orthogonal()))

    def along(self, distance: float) -> Point2:
        """Point at signed distance from ``start``."""
        return self.start + self.direction * distance


__all__ = ["Line"]
