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
Geometry Errors
================

Closed set of reasons a fallible curve constructor can reject its input,
and the exception raised when an internal geometry invariant breaks.

Fallible constructors (``Segment.line``, ``Segment.arc_with_direction``,
``Segment.biarc``, ``subsection``, ``shift_orthogonally``) never raise for
bad input. They return None and log one of the ``SegmentError`` reasons.
``GeometryInvariantError`` is reserved for states that valid input cannot
reach; it signals a bug upstream and must not be caught and ignored.
"""

from enum import Enum
from typing import Optional

from .constants import MIN_START_TO_END
from .vector import Point2


class SegmentError(Enum):
    """Reason a segment could not be constructed."""

    DEGENERATE_ENDPOINTS = "start and end are closer than MIN_START_TO_END"
    INVALID_COORDINATE = "coordinate is NaN"
    SUBSECTION_TOO_SHORT = "clamped subsection is shorter than MIN_START_TO_END"
    OPPOSING_DIRECTION = "start direction points directly away from end"


class GeometryInvariantError(RuntimeError):
    """Raised when geometry that is valid by construction turns out invalid."""


def check_endpoints(start: Point2, end: Point2) -> Optional[SegmentError]:
    """Validate a segment's endpoints.

    Args:
        start: Segment start point
        end: Segment end point

    Returns:
        The rejection reason, or None if the endpoints are usable
    """
    if start.is_nan or end.is_nan:
        return SegmentError.INVALID_COORDINATE
    if start.rough_eq(end, MIN_START_TO_END):
        return SegmentError.DEGENERATE_ENDPOINTS
    return None


__all__ = ["SegmentError", "GeometryInvariantError", "check_endpoints"]
