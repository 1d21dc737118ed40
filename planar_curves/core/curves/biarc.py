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
Biarc Construction
===================

Joins two oriented points (position + tangent) with the shortest chain of
at most two circular arcs or lines that matches both positions and both
tangents exactly.

Strategy, in order:
1. One arc from start along the start tangent, if it already arrives
   with the end tangent
2. A plain line for very short chords (tangents are not matched)
3. A joining point where the chain switches from the first piece to the
   second, from either
   - the intersection of the tangent rays (arc + line chains), or
   - the closed-form biarc interpolation
     (http://www.ryanjuckett.com/programming/biarc-interpolation/)
4. Two arcs through the joining point, or one if the joining point
   coincides with an endpoint
"""

import math
from typing import List, Optional, Sequence, Tuple, Union

from ..constants import DIRECTION_TOLERANCE, MAX_SIMPLE_LINE_LENGTH, MIN_START_TO_END
from ..errors import GeometryInvariantError, SegmentError, check_endpoints
from ..intersection import IntersectionKind, intersect_lines
from ..logging_config import get_logger, log_rejection
from ..tolerance import rough_eq
from ..vector import Point2, Vector2
from .line import Line
from .segment import Segment

logger = get_logger(__name__)

# (joining point, tangent at the joining point)
Connection = Tuple[Point2, Vector2]


def biarc(
    start: Union[Point2, Sequence[float]],
    start_direction: Union[Vector2, Sequence[float]],
    end: Union[Point2, Sequence[float]],
    end_direction: Union[Vector2, Sequence[float]]
) -> Optional[List[Segment]]:
    """Connect two oriented points with one or two arcs/lines.

    Args:
        start: Start point
        start_direction: Tangent at start (normalized internally)
        end: End point
        end_direction: Tangent at end (normalized internally)

    Returns:
        Contiguous chain of one or two segments starting at start with
        start_direction and ending at end with end_direction. Chords
        shorter than MAX_SIMPLE_LINE_LENGTH give a single straight line.
        None if the endpoints are invalid (NaN, or closer than
        MIN_START_TO_END) or a direction is NaN or zero.

    Raises:
        GeometryInvariantError: If the chain cannot be completed for
            validated endpoints. This happens only for tangents pointing
            straight back along the chord at both ends, which no chain of
            two pieces can join.

    Example:
        >>> chain = biarc((0, 0), (1, 0), (10, 10), (0, 1))
        >>> len(chain)
        1
    """
    start = Point2.of(start)
    end = Point2.of(end)
    start_direction = Vector2.of(start_direction)
    end_direction = Vector2.of(end_direction)

    error = check_endpoints(start, end)
    if error is None and not (_usable_direction(start_direction)
                              and _usable_direction(end_direction)):
        error = SegmentError.INVALID_COORDINATE
    if error is not None:
        log_rejection(logger, "biarc", error)
        return None

    start_direction = start_direction.normalized()
    end_direction = end_direction.normalized()

    simple_curve = Segment.arc_with_direction(start, start_direction, end)
    if (simple_curve is not None
            and simple_curve.end_direction.rough_eq(end_direction, DIRECTION_TOLERANCE)):
        return [simple_curve]

    if (end - start).length < MAX_SIMPLE_LINE_LENGTH:
        logger.debug("Short biarc chord, using a straight line")
        return [Segment.line(start, end)]

    connection_position, connection_direction = _find_connection(
        start, start_direction, end, end_direction
    )

    if start.rough_eq(connection_position, MIN_START_TO_END):
        segments = [
            Segment.arc_with_direction(connection_position, connection_direction, end),
        ]
    elif end.rough_eq(connection_position, MIN_START_TO_END):
        segments = [
            Segment.arc_with_direction(start, start_direction, connection_position),
        ]
    else:
        segments = [
            Segment.arc_with_direction(start, start_direction, connection_position),
            Segment.arc_with_direction(connection_position, connection_direction, end),
        ]

    if any(segment is None for segment in segments):
        logger.error(
            "Biarc piece failed: start=%r end=%r connection=%r",
            start, end, connection_position,
        )
        raise GeometryInvariantError(
            "Biarc pieces between separated endpoints should always be constructible"
        )

    return segments


def _usable_direction(direction: Vector2) -> bool:
    return not direction.is_nan and direction.length_squared > 0.0


def _find_connection(
    start: Point2,
    start_direction: Vector2,
    end: Point2,
    end_direction: Vector2
) -> Connection:
    """Pick the joining point and tangent for a two-piece chain."""
    result = intersect_lines(Line(start, start_direction), Line(end, -end_direction))

    if result.kind is IntersectionKind.COINCIDENT:
        return _collinear_connection(start, start_direction, end, end_direction)

    if result.is_intersecting:
        hit = result.intersections[0]
        if hit.along_a > 0.0 and hit.along_b > 0.0:
            logger.debug("Biarc via tangent ray intersection at %r", hit.position)
            return _ray_connection(start, start_direction, end, end_direction, hit.position)

    logger.debug("Biarc via closed-form interpolation")
    return _closed_form_connection(start, start_direction, end, end_direction)


def _ray_connection(
    start: Point2,
    start_direction: Vector2,
    end: Point2,
    end_direction: Vector2,
    intersection: Point2
) -> Connection:
    """Arc + line chain around the point where both tangent rays meet.

    The endpoint nearer to the intersection gets the arc; the other side
    continues straight along its own tangent.
    """
    start_to_intersection = (start - intersection).length
    end_to_intersection = (end - intersection).length

    if start_to_intersection < end_to_intersection:
        # arc then line
        return (
            intersection + end_direction * start_to_intersection,
            end_direction,
        )
    # line then arc
    return (
        intersection - start_direction * end_to_intersection,
        start_direction,
    )


def _closed_form_connection(
    start: Point2,
    start_direction: Vector2,
    end: Point2,
    end_direction: Vector2
) -> Connection:
    """Joining point of the biarc with equal tangent-offset distances.

    Both arcs use the same distance d from their endpoint to the control
    point where their tangents meet.
    """
    v = end - start
    t = start_direction + end_direction
    same_direction = start_direction.rough_eq(end_direction, DIRECTION_TOLERANCE)
    end_orthogonal_of_start = rough_eq(v.dot(end_direction), 0.0)

    if same_direction and end_orthogonal_of_start:
        #    __
        #   /  \
        #  ^    v    ^
        #        \__/
        return (start.midpoint(end), -start_direction)

    if same_direction:
        d = v.dot(v) / (4.0 * v.dot(end_direction))
    else:
        v_dot_t = v.dot(t)
        one_minus_cos = 1.0 - start_direction.dot(end_direction)
        d = (
            (-v_dot_t + math.sqrt(v_dot_t * v_dot_t + 2.0 * one_minus_cos * v.dot(v)))
            / (2.0 * one_minus_cos)
        )

    start_offset_point = start + start_direction * d
    end_offset_point = end - end_direction * d
    connection_direction = (end_offset_point - start_offset_point).normalized()

    return (start_offset_point + connection_direction * d, connection_direction)


def _collinear_connection(
    start: Point2,
    start_direction: Vector2,
    end: Point2,
    end_direction: Vector2
) -> Connection:
    """Joining point when both tangents lie on the chord's line.

    Opposite tangents need a U-turn: two half-chord radius arcs meeting
    half a chord to the right of the chord midpoint. Equal tangents
    pointing back along the chord cannot be joined by two pieces.
    """
    if start_direction.dot(end_direction) >= 0.0:
        logger.error(
            "Coincident tangent rays with equal directions: start=%r end=%r direction=%r",
            start, end, start_direction,
        )
        raise GeometryInvariantError(
            "Tangent rays of a biarc should never coincide with equal directions"
        )

    logger.debug("Biarc via U-turn between collinear opposite tangents")
    v = end - start
    return (
        start.midpoint(end) + v.normalized().orthogonal() * (v.length / 2.0),
        start_direction.orthogonal(),
    )


__all__ = ["biarc"]
