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
Core Geometry Package
======================

Pure geometry: no I/O, no shared mutable state. Every value is immutable
and every function is deterministic, so curves can be shared freely
between worker threads.
"""

from .constants import (
    DIRECTION_TOLERANCE,
    MAX_SIMPLE_LINE_LENGTH,
    MIN_START_TO_END,
    ROUGH_TOLERANCE,
    THICKNESS,
)
from .vector import Point2, Vector2, angle_along_to, angle_to, signed_angle_to
from .tolerance import rough_eq
from .errors import GeometryInvariantError, SegmentError, check_endpoints
from .bounding_box import BoundingBox
from .intersection import Intersection, IntersectionKind, IntersectionResult, intersect_lines
from .curves import (
    ArcSegment,
    Circle,
    Curve,
    FiniteCurve,
    Line,
    LineSegment,
    Segment,
    biarc,
    segments_to_svg,
)
from .sampling import sample_chain, sample_curve

__all__ = [
    # Constants
    "THICKNESS",
    "MIN_START_TO_END",
    "DIRECTION_TOLERANCE",
    "MAX_SIMPLE_LINE_LENGTH",
    "ROUGH_TOLERANCE",
    # Vector algebra
    "Point2",
    "Vector2",
    "angle_to",
    "signed_angle_to",
    "angle_along_to",
    "rough_eq",
    # Errors
    "SegmentError",
    "GeometryInvariantError",
    "check_endpoints",
    # Spatial helpers
    "BoundingBox",
    "Intersection",
    "IntersectionKind",
    "IntersectionResult",
    "intersect_lines",
    # Curves
    "Curve",
    "FiniteCurve",
    "Circle",
    "Line",
    "Segment",
    "LineSegment",
    "ArcSegment",
    "biarc",
    "segments_to_svg",
    # Sampling
    "sample_curve",
    "sample_chain",
]
