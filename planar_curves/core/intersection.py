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
Line-Line Intersection
=======================

Intersection of two infinite lines, reporting where they cross and how far
along each line the crossing lies. Biarc construction uses it to decide
whether the tangent rays at both ends meet ahead of their origins.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

from .tolerance import rough_eq
from .vector import Point2

if TYPE_CHECKING:
    from .curves.line import Line


class IntersectionKind(Enum):
    """How two lines relate to each other."""

    APART = "apart"
    COINCIDENT = "coincident"
    INTERSECTING = "intersecting"


@dataclass(frozen=True)
class Intersection:
    """A crossing of two curves.

    Attributes:
        position: Crossing point
        along_a: Arc-length offset of the crossing along the first curve
        along_b: Arc-length offset of the crossing along the second curve
    """

    position: Point2
    along_a: float
    along_b: float


@dataclass(frozen=True)
class IntersectionResult:
    """Outcome of an intersection query.

    Attributes:
        kind: APART, COINCIDENT or INTERSECTING
        intersections: Crossings, non-empty only for INTERSECTING
    """

    kind: IntersectionKind
    intersections: List[Intersection] = field(default_factory=list)

    @property
    def is_intersecting(self) -> bool:
        return self.kind is IntersectionKind.INTERSECTING


def intersect_lines(a: "Line", b: "Line") -> IntersectionResult:
    """Intersect two infinite lines.

    Solves ``a.start + s * a.direction == b.start + t * b.direction``.

    Args:
        a: First line (unit direction)
        b: Second line (unit direction)

    Returns:
        APART for distinct parallel lines, COINCIDENT for the same line,
        otherwise a single intersection with ``along_a = s`` and
        ``along_b = t``.
    """
    det = b.direction.x * a.direction.y - b.direction.y * a.direction.x

    if rough_eq(det, 0.0):
        a_to_b = b.start - a.start
        if rough_eq(a_to_b.dot(a.direction.orthogonal()), 0.0):
            return IntersectionResult(IntersectionKind.COINCIDENT)
        return IntersectionResult(IntersectionKind.APART)

    delta = b.start - a.start
    along_a = (b.direction.x * delta.y - delta.x * b.direction.y) / det
    along_b = (a.direction.x * delta.y - delta.x * a.direction.y) / det

    return IntersectionResult(
        IntersectionKind.INTERSECTING,
        [Intersection(a.start + a.direction * along_a, along_a, along_b)],
    )


__all__ = [
    "IntersectionKind",
    "Intersection",
    "IntersectionResult",
    "intersect_lines",
]
