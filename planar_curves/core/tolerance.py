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
Rough Equality
===============

Tolerance-parametrized equality used to absorb floating-point noise at
degeneracy boundaries (coincident endpoints, parallel tangents, points
exactly on a chord).

Points, vectors and segments carry their own ``rough_eq`` methods; this
module covers scalars.
"""

from .constants import ROUGH_TOLERANCE


def rough_eq(a: float, b: float, tolerance: float = ROUGH_TOLERANCE) -> bool:
    """Check whether two scalars are equal within an absolute tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum allowed absolute difference

    Returns:
        True if |a - b| <= tolerance
    """
    return abs(a - b) <= tolerance


__all__ = ["rough_eq", "ROUGH_TOLERANCE"]
