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
Finite Segments
================

Finite straight lines and circular arcs under one Segment interface:
- LineSegment: straight segment with a unit direction
- ArcSegment: circular arc with a center and a signed radius

Segments are immutable values. They are built through the validated
factories ``Segment.line``, ``Segment.arc_with_direction`` and
``Segment.biarc``, which return None (never a half-built segment) for
degenerate input. Every transformation returns a new segment.

Turning Sense:
    A positive signed radius turns clockwise (to the right of travel),
    a negative one counter-clockwise (to the left). Distances passed to
    ``along`` always advance from start toward end.
"""

import math
from abc import abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ..bounding_box import BoundingBox
from ..constants import DIRECTION_TOLERANCE, MIN_START_TO_END, ROUGH_TOLERANCE, THICKNESS
from ..errors import GeometryInvariantError, SegmentError, check_endpoints
from ..logging_config import get_logger, log_rejection
from ..tolerance import rough_eq
from ..vector import Point2, Vector2, angle_along_to, signed_angle_to
from .base import FiniteCurve, Projection

logger = get_logger(__name__)

PointLike = Union[Point2, Sequence[float]]
VectorLike = Union[Vector2, Sequence[float]]


def _svg_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class Segment(FiniteCurve):
    """Abstract finite segment: either a LineSegment or an ArcSegment.

    Attributes (provided by subclasses):
        start: Start point
        end: End point (at least MIN_START_TO_END from start)
        length: True arc length (> 0)
        signed_radius: Radius whose sign gives the turning sense; 0 for lines

    Example:
        >>> seg = Segment.arc_with_direction((0, 0), (1, 0), (1, -1))
        >>> round(seg.length, 4)
        1.5708
        >>> seg.along(seg.length).rough_eq(Point2(1, -1), 1e-9)
        True
    """

    # =========================================================================
    # Factories
    # =========================================================================

    @staticmethod
    def line(start: PointLike, end: PointLike) -> Optional["LineSegment"]:
        """Build a straight segment from start to end.

        Args:
            start: Start point
            end: End point

        Returns:
            LineSegment, or None if either point is NaN or the points are
            closer than MIN_START_TO_END
        """
        start = Point2.of(start)
        end = Point2.of(end)

        error = check_endpoints(start, end)
        if error is not None:
            log_rejection(logger, "line segment", error)
            return None

        chord = end - start
        return LineSegment(start, end, chord.length, chord.normalized())

    @staticmethod
    def arc_with_direction(
        start: PointLike,
        direction: VectorLike,
        end: PointLike
    ) -> Optional["Segment"]:
        """Build the circular arc leaving start along direction and ending at end.

        If direction already points along the chord the result is a
        LineSegment, since an arc without curvature is a line.

        Args:
            start: Start point
            direction: Tangent at start (normalized internally)
            end: End point

        Returns:
            ArcSegment or LineSegment, or None if the endpoints are invalid
            or direction points straight away from end
        """
        start = Point2.of(start)
        end = Point2.of(end)
        direction = Vector2.of(direction)

        error = check_endpoints(start, end)
        if error is None and (direction.is_nan or direction.length_squared == 0.0):
            error = SegmentError.INVALID_COORDINATE
        if error is not None:
            log_rejection(logger, "arc segment", error)
            return None

        direction = direction.normalized()
        chord_direction = (end - start).normalized()

        if direction.rough_eq(chord_direction, DIRECTION_TOLERANCE):
            return Segment.line(start, end)

        # No finite circle is tangent to direction at start and passes
        # through a point directly behind start
        if direction.rough_eq(-chord_direction, DIRECTION_TOLERANCE):
            log_rejection(logger, "arc segment", SegmentError.OPPOSING_DIRECTION)
            return None

        # Circle through start with tangent direction, through end:
        # r = |h|^2 / (n . h) with h the half chord and n the right normal
        half_chord = (end - start) / 2.0
        normal = direction.orthogonal()
        signed_radius = half_chord.length_squared / normal.dot(half_chord)
        center = start + normal * signed_radius

        angle_span = angle_along_to(start - center, direction, end - center)

        return ArcSegment(
            start,
            end,
            angle_span * abs(signed_radius),
            center,
            signed_radius,
        )

    @staticmethod
    def biarc(
        start: PointLike,
        start_direction: VectorLike,
        end: PointLike,
        end_direction: VectorLike
    ) -> Optional[List["Segment"]]:
        """Join two oriented points with at most two arcs or lines.

        See ``planar_curves.core.curves.biarc.biarc``.
        """
        from .biarc import biarc

        return biarc(start, start_direction, end, end_direction)

    # =========================================================================
    # Variant-specific Queries
    # =========================================================================

    @property
    @abstractmethod
    def is_linear(self) -> bool:
        """True for straight segments."""

    @abstractmethod
    def winding_angle(self, point: Point2) -> float:
        """Signed angle swept by the segment as seen from point."""

    @abstractmethod
    def to_svg(self) -> str:
        """SVG path data for debugging and rendering."""

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Axis-aligned box containing the segment, grown by THICKNESS."""

    @property
    def radius(self) -> float:
        return abs(self.signed_radius)

    @property
    def signed_angle(self) -> float:
        """Swept angle, positive for clockwise turns; 0 for lines."""
        if self.is_linear:
            return 0.0
        return self.length / self.signed_radius

    # =========================================================================
    # Shared Operations
    # =========================================================================

    def subsection(self, start: float, end: float) -> Optional["Segment"]:
        """Part of the segment between two offsets.

        Offsets are clamped to [0, length]; the piece keeps the segment's
        turning sense.

        Args:
            start: Offset where the piece starts
            end: Offset where the piece ends

        Returns:
            New segment, or None if the clamped piece is shorter than
            MIN_START_TO_END
        """
        true_start = max(start, 0.0)
        true_end = min(end, self.length)

        if true_end - true_start < MIN_START_TO_END:
            log_rejection(logger, "subsection", SegmentError.SUBSECTION_TOO_SHORT)
            return None

        if self.is_linear or rough_eq(true_end, 0.0) or rough_eq(true_start, self.length):
            return Segment.line(self.along(true_start), self.along(true_end))

        return Segment.arc_with_direction(
            self.along(true_start),
            self.direction_along(true_start),
            self.along(true_end),
        )

    def distance_to(self, point: Point2) -> float:
        """Distance to the closest point, falling back to the nearer endpoint."""
        point = Point2.of(point)
        projection = self.project(point)
        if projection is not None:
            return (point - projection[1]).length
        return min((self.start - point).length, (self.end - point).length)

    def rough_eq(self, other: "Segment", tolerance: float = ROUGH_TOLERANCE) -> bool:
        """True if start, end and midpoint all match within tolerance."""
        return (self.start.rough_eq(other.start, tolerance)
                and self.end.rough_eq(other.end, tolerance)
                and self.midpoint.rough_eq(other.midpoint, tolerance))

    def _project_endpoint(self, point: Point2, tolerance: float) -> Optional[Projection]:
        if (point - self.start).length < tolerance:
            return (0.0, self.start)
        if (point - self.end).length < tolerance:
            return (self.length, self.end)
        return None


@dataclass(frozen=True, repr=False)
class LineSegment(Segment):
    """Straight segment.

    Build through ``Segment.line``; direct construction skips validation.

    Attributes:
        start: Start point
        end: End point
        length: Distance from start to end
        direction: Unit direction from start to end
    """

    start: Point2
    end: Point2
    length: float
    direction: Vector2

    @property
    def is_linear(self) -> bool:
        return True

    @property
    def signed_radius(self) -> float:
        return 0.0

    def along(self, distance: float) -> Point2:
        return self.start + self.direction * distance

    def direction_along(self, distance: float) -> Vector2:
        return self.direction

    @property
    def start_direction(self) -> Vector2:
        return self.direction

    @property
    def end_direction(self) -> Vector2:
        return self.direction

    def reverse(self) -> "LineSegment":
        reversed_segment = Segment.line(self.end, self.start)
        if reversed_segment is None:
            logger.error("Reversing %r produced no segment", self)
            raise GeometryInvariantError("Reversing a segment should always produce a valid segment")
        return reversed_segment

    def shift_orthogonally(self, shift_to_right: float) -> Optional["LineSegment"]:
        offset = self.direction.orthogonal() * shift_to_right
        return Segment.line(self.start + offset, self.end + offset)

    def project_with_tolerance(self, point: Point2, tolerance: float) -> Optional[Projection]:
        point = Point2.of(point)
        snapped = self._project_endpoint(point, tolerance)
        if snapped is not None:
            return snapped

        line_offset = self.direction.dot(point - self.start)
        if 0.0 <= line_offset <= self.length:
            return (line_offset, self.start + self.direction * line_offset)
        return None

    def winding_angle(self, point: Point2) -> float:
        point = Point2.of(point)
        return signed_angle_to(self.start - point, self.end - point)

    def to_svg(self) -> str:
        return (
            f"M {_svg_number(self.start.x)} {_svg_number(self.start.y)} "
            f"L {_svg_number(self.end.x)} {_svg_number(self.end.y)}"
        )

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            Point2(min(self.start.x, self.end.x) - THICKNESS,
                   min(self.start.y, self.end.y) - THICKNESS),
            Point2(max(self.start.x, self.end.x) + THICKNESS,
                   max(self.start.y, self.end.y) + THICKNESS),
        )

    def __repr__(self):
        return (
            f"LineSeg({self.start.x:.4f}, {self.start.y:.4f} "
            f"to {self.end.x:.4f}, {self.end.y:.4f})"
        )


@dataclass(frozen=True, repr=False)
class ArcSegment(Segment):
    """Circular arc.

    Build through ``Segment.arc_with_direction``; direct construction skips
    validation.

    Attributes:
        start: Start point
        end: End point
        length: Arc length (angular span * radius)
        center: Arc center, at distance |signed_radius| from start and end
        signed_radius: Radius, positive for clockwise turns
    """

    start: Point2
    end: Point2
    length: float
    center: Point2
    signed_radius: float

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def _turn_sign(self) -> float:
        return math.copysign(1.0, self.signed_radius)

    def _radius_vector_along(self, distance: float) -> Vector2:
        # Positive radius turns clockwise, i.e. a negative rotation
        return (self.start - self.center).rotate(distance / -self.signed_radius)

    def along(self, distance: float) -> Point2:
        return self.center + self._radius_vector_along(distance)

    def direction_along(self, distance: float) -> Vector2:
        return self._radius_vector_along(distance).normalized().orthogonal() * self._turn_sign

    @property
    def start_direction(self) -> Vector2:
        return (self.start - self.center).normalized().orthogonal() * self._turn_sign

    @property
    def end_direction(self) -> Vector2:
        return (self.end - self.center).normalized().orthogonal() * self._turn_sign

    @property
    def angle_span(self) -> float:
        """Unsigned swept angle in radians."""
        return self.length / self.radius

    def reverse(self) -> "Segment":
        reversed_segment = Segment.arc_with_direction(self.end, -self.end_direction, self.start)
        if reversed_segment is None:
            logger.error("Reversing %r produced no segment", self)
            raise GeometryInvariantError("Reversing a segment should always produce a valid segment")
        return reversed_segment

    def shift_orthogonally(self, shift_to_right: float) -> Optional["Segment"]:
        """Offset the arc to the right by moving both endpoints.

        Each endpoint moves along its own normal and the arc is rebuilt
        through the moved endpoints with the original start tangent.
        """
        start = self.start + self.start_direction.orthogonal() * shift_to_right
        end = self.end + self.end_direction.orthogonal() * shift_to_right
        return Segment.arc_with_direction(start, self.start_direction, end)

    def project_with_tolerance(self, point: Point2, tolerance: float) -> Optional[Projection]:
        point = Point2.of(point)
        snapped = self._project_endpoint(point, tolerance)
        if snapped is not None:
            return snapped

        center_to_point = point - self.center
        if center_to_point.length_squared == 0.0:
            # Every point of the arc is equally close to its center
            return (0.0, self.start)

        angle_start_to_point = angle_along_to(
            self.start - self.center,
            self.start_direction,
            center_to_point,
        )

        if angle_start_to_point <= self.angle_span:
            projected = self.center + center_to_point.normalized() * self.radius
            return (min(angle_start_to_point * self.radius, self.length), projected)
        return None

    def winding_angle(self, point: Point2) -> float:
        """Signed angle swept by the arc as seen from point.

        Seen from outside the circular segment bounded by chord and arc,
        this is the angle between the chord endpoints. Seen from inside
        that region the arc wraps around the point, so the long way round
        with the opposite sign is returned instead.
        """
        point = Point2.of(point)
        simple_angle = signed_angle_to(self.start - point, self.end - point)

        chord_midpoint = self.start.midpoint(self.end)
        sagitta_direction = (self.end - self.start).normalized().orthogonal() * self._turn_sign
        on_bulge_side_of_chord = (
            (self.center - chord_midpoint).dot(sagitta_direction)
            < (self.center - point).dot(sagitta_direction)
        )
        between_chord_and_arc = (
            (point - self.center).length < self.radius and on_bulge_side_of_chord
        )

        if between_chord_and_arc:
            return (2.0 * math.pi - abs(simple_angle)) * -math.copysign(1.0, simple_angle)
        return simple_angle

    def to_svg(self) -> str:
        large_arc = 1 if self.angle_span > math.pi else 0
        sweep = 1 if self.signed_radius < 0.0 else 0
        radius = _svg_number(self.radius)
        return (
            f"M {_svg_number(self.start.x)} {_svg_number(self.start.y)} "
            f"A {radius} {radius} 0 {large_arc} {sweep} "
            f"{_svg_number(self.end.x)} {_svg_number(self.end.y)}"
        )

    def bounding_box(self) -> BoundingBox:
        # Whole circle, not just the swept part
        half_diagonal = Vector2(self.radius + THICKNESS, self.radius + THICKNESS)
        return BoundingBox(self.center - half_diagonal, self.center + half_diagonal)

    def __repr__(self):
        return (
            f"ArcSeg({self.start.x:.4f}, {self.start.y:.4f} "
            f"around {self.center.x:.4f}, {self.center.y:.4f} "
            f"to {self.end.x:.4f}, {self.end.y:.4f})"
        )


def segments_to_svg(segments: Sequence[Segment]) -> str:
    """SVG path data for a chain of segments, one subpath per segment."""
    return " ".join(segment.to_svg() for segment in segments)


__all__ = ["Segment", "LineSegment", "ArcSegment", "segments_to_svg"]
