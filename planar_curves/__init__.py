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
Planar Curves
==============

Planar curve geometry kernel for lane and road networks.

Provides infinite lines and circles, finite line/arc segments with
arc-length parametrization and nearest-point projection, and biarc
construction joining two oriented points with at most two arcs.

Example:
    >>> from planar_curves import Segment, Point2
    >>> seg = Segment.line((0, 0), (3, 4))
    >>> seg.length
    5.0
    >>> seg.to_svg()
    'M 0 0 L 3 4'
"""

# Tunables
from .core.constants import (
    DIRECTION_TOLERANCE,
    MAX_SIMPLE_LINE_LENGTH,
    MIN_START_TO_END,
    ROUGH_TOLERANCE,
    THICKNESS,
)

# Vector algebra and rough equality
from .core.vector import Point2, Vector2, angle_along_to, angle_to, signed_angle_to
from .core.tolerance import rough_eq

# Errors
from .core.errors import GeometryInvariantError, SegmentError, check_endpoints

# Spatial helpers
from .core.bounding_box import BoundingBox
from .core.intersection import Intersection, IntersectionKind, IntersectionResult, intersect_lines

# Curves
from .core.curves import (
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

# Sampling
from .core.sampling import sample_chain, sample_curve

# Logging
from .core.logging_config import get_logger, setup_logging

__version__ = "0.3.0"

__all__ = [
    "THICKNESS",
    "MIN_START_TO_END",
    "DIRECTION_TOLERANCE",
    "MAX_SIMPLE_LINE_LENGTH",
    "ROUGH_TOLERANCE",
    "Point2",
    "Vector2",
    "angle_to",
    "signed_angle_to",
    "angle_along_to",
    "rough_eq",
    "SegmentError",
    "GeometryInvariantError",
    "check_endpoints",
    "BoundingBox",
    "Intersection",
    "IntersectionKind",
    "IntersectionResult",
    "intersect_lines",
    "Curve",
    "FiniteCurve",
    "Circle",
    "Line",
    "Segment",
    "LineSegment",
    "ArcSegment",
    "biarc",
    "segments_to_svg",
    "sample_curve",
    "sample_chain",
    "get_logger",
    "setup_logging",
]
