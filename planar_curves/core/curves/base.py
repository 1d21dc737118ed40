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
Curve Capability Contracts
===========================

Abstract base classes for curve-like shapes:
- Curve: anything a point can be projected onto
- FiniteCurve: a curve with arc-length parametrization over [0, length]

Lane construction, pathfinding and rendering only rely on these
operations, never on the concrete curve type.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..constants import THICKNESS
from ..vector import Point2, Vector2

# (offset along the curve, closest point on the curve)
Projection = Tuple[float, Point2]


class Curve(ABC):
    """Abstract base class for curves.

    All curves must implement:
    - project_with_tolerance(point, tolerance): closest point and its offset
    - distance_to(point): unsigned distance from point to the curve
    """

    @abstractmethod
    def project_with_tolerance(self, point: Point2, tolerance: float) -> Optional[Projection]:
        """Project a point onto the curve.

        Args:
            point: Point to project
            tolerance: Distance within which a point snaps to a curve endpoint

        Returns:
            (offset, closest_point), or None if the point does not project
            onto the curve's domain
        """

    @abstractmethod
    def distance_to(self, point: Point2) -> float:
        """Unsigned distance from point to the curve."""

    def project(self, point: Point2) -> Optional[Projection]:
        """Project a point using THICKNESS as the snapping tolerance."""
        return self.project_with_tolerance(point, THICKNESS)

    def project_with_max_distance(
        self,
        point: Point2,
        max_distance: float,
        tolerance: float
    ) -> Optional[Projection]:
        """Project a point, rejecting projections farther than max_distance.

        Args:
            point: Point to project
            max_distance: Projections at this distance or beyond are rejected
            tolerance: Endpoint snapping tolerance

        Returns:
            (offset, closest_point), or None
        """
        point = Point2.of(point)
        projection = self.project_with_tolerance(point, tolerance)
        if projection is None:
            return None
        if (point - projection[1]).length < max_distance:
            return projection
        return None

    def includes(self, point: Point2) -> bool:
        """True if point lies on the curve within half its THICKNESS."""
        return self.distance_to(point) < THICKNESS / 2.0


class FiniteCurve(Curve):
    """Abstract base class for curves with finite extent.

    Implementations expose ``start``, ``end`` and ``length`` attributes and
    are parametrized by arc length over [0, length].

    All finite curves must implement:
    - along(distance): position at distance from start
    - direction_along(distance): unit tangent at distance from start
    - reverse(): same locus traversed from end to start
    - subsection(start, end): part of the curve between two offsets
    - shift_orthogonally(shift_to_right): parallel curve
    """

    start: Point2
    end: Point2
    length: float

    @abstractmethod
    def along(self, distance: float) -> Point2:
        """Position at the given arc-length distance from start."""

    @abstractmethod
    def direction_along(self, distance: float) -> Vector2:
        """Unit tangent at the given arc-length distance from start."""

    @abstractmethod
    def reverse(self) -> "FiniteCurve":
        """Same locus traversed in the opposite direction."""

    @abstractmethod
    def subsection(self, start: float, end: float) -> Optional["FiniteCurve"]:
        """Part of the curve between two offsets, clamped to [0, length].

        Returns:
            New curve, or None if the clamped range is too short
        """

    @abstractmethod
    def shift_orthogonally(self, shift_to_right: float) -> Optional["FiniteCurve"]:
        """Parallel curve offset to the right (negative = left).

        Returns:
            New curve, or None if the shifted geometry is degenerate
        """

    @property
    def start_direction(self) -> Vector2:
        return self.direction_along(0.0)

    @property
    def end_direction(self) -> Vector2:
        return self.direction_along(self.length)

    @property
    def midpoint(self) -> Point2:
        return self.along(self.length / 2.0)

    @property
    def midpoint_direction(self) -> Vector2:
        return self.direction_along(self.length / 2.0)


__all__ = ["Curve", "FiniteCurve", "Projection"]
