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
Curve Geometry Tolerances
==========================

Global tunables shared by every curve type.

All values are absolute, in the same length unit as the coordinates
(meters for lane networks).

Tolerance Roles:
    THICKNESS              - Nominal width of a curve; a point closer than
                             THICKNESS / 2 counts as lying on the curve
    MIN_START_TO_END       - Segments whose endpoints are closer than this
                             are rejected as degenerate
    DIRECTION_TOLERANCE    - Two unit tangents closer than this are treated
                             as parallel
    MAX_SIMPLE_LINE_LENGTH - Biarc connections shorter than this fall back
                             to a plain straight line
    ROUGH_TOLERANCE        - Default for rough (approximate) equality
"""

# Nominal curve width used for containment and endpoint snapping
THICKNESS = 0.001

# Minimum distance between segment start and end (m)
MIN_START_TO_END = 0.01

# Maximum difference between unit tangents considered parallel
DIRECTION_TOLERANCE = 0.0001

# Chords shorter than this are joined with a straight line by biarc (m)
MAX_SIMPLE_LINE_LENGTH = 0.5

# Default absolute tolerance for rough equality
ROUGH_TOLERANCE = 1e-7

__all__ = [
    "THICKNESS",
    "MIN_START_TO_END",
    "DIRECTION_TOLERANCE",
    "MAX_SIMPLE_LINE_LENGTH",
    "ROUGH_TOLERANCE",
]
