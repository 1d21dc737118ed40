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
Curves Package
===============

Curve types and the capability contracts they implement.

This package provides:
- Curve / FiniteCurve capability contracts
- Circle and Line (unbounded curves)
- Segment: finite line or circular arc with arc-length parametrization
- Biarc construction between two oriented points

Example:
    >>> from planar_curves.core.curves import Segment
    >>> chain = Segment.biarc((0, 0), (1, 0), (20, 5), (1, 0))
    >>> [seg.is_linear for seg in chain]
    [False, False]
"""

# Capability contracts
from .base import Curve, FiniteCurve, Projection

# Unbounded curves
from .circle import Circle
from .line import Line

# Finite segments
from .segment import ArcSegment, LineSegment, Segment, segments_to_svg

# Biarc construction
from .biarc import biarc

__all__ = [
    # Contracts
    "Curve",
    "FiniteCurve",
    "Projection",
    # Classes
    "Circle",
    "Line",
    "Segment",
    "LineSegment",
    "ArcSegment",
    # Functions
    "biarc",
    "segments_to_svg",
]
