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
Circle
=======

Full circle as an infinite (unbounded) curve. Used as a projection target,
e.g. for snapping points onto a roundabout ring.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..vector import Point2, Vector2, angle_along_to
from .base import Curve, Projection

_ANGLE_ORIGIN = Vector2(1.0, 0.0)
_ANGLE_SENSE = Vector2(0.0, 1.0)


@dataclass(frozen=True)
class Circle(Curve):
    """Circle given by center and radius.

    The radius is expected to be positive; it is not validated.

    Attributes:
        center: Circle center
        radius: Circle radius (> 0)

    Example:
        >>> circle = Circle(Point2(0, 0), 2.0)
        >>> circle.distance_to(Point2(0, 3))
        1.0
    """

    center: Point2
    radius: float

    def project_with_tolerance(self, point: Point2, tolerance: float) -> Optional[Projection]:
        """Project a point radially onto the circle.

        Every point projects. The offset is the arc length from angle 0
        (the +X axis) counter-clockwise to the point's angle, in
        [0, 2*pi*radius). The tolerance is unused since a circle has no
        endpoints.
        """
        point = Point2.of(point)
        to_point = point - self.center
        angle = angle_along_to(_ANGLE_ORIGIN, _ANGLE_SENSE, to_point)
        return (
            self.radius * angle,
            self.center + to_point.normalized() * self.radius,
        )

    def distance_to(self, point: Point2) -> float:
        point = Point2.of(point)
        return abs((point - self.center).length - self.radius)

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius


__all__ = ["Circle"]
