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
Tests for Bounding Boxes
=========================

Tests for BoundingBox construction and queries.
"""

import pytest

from planar_curves.core.bounding_box import BoundingBox
from planar_curves.core.vector import Point2


class TestBoundingBox:
    """Tests for BoundingBox."""

    @pytest.mark.unit
    def test_from_points(self):
        """Test building the box around scattered points."""
        box = BoundingBox.from_points(Point2(1.0, 5.0), Point2(-2.0, 3.0), Point2(4.0, -1.0))
        assert box.min == Point2(-2.0, -1.0)
        assert box.max == Point2(4.0, 5.0)
        assert box.width == pytest.approx(6.0)
        assert box.height == pytest.approx(6.0)

    @pytest.mark.unit
    def test_from_no_points(self):
        """Test that an empty point set is rejected."""
        with pytest.raises(ValueError):
            BoundingBox.from_points()

    @pytest.mark.unit
    def test_contains(self):
        """Test point containment including the border."""
        box = BoundingBox(Point2(0.0, 0.0), Point2(2.0, 1.0))
        assert box.contains(Point2(1.0, 0.5))
        assert box.contains(Point2(2.0, 1.0))
        assert not box.contains(Point2(2.1, 0.5))

    @pytest.mark.unit
    def test_overlaps(self):
        """Test overlap between boxes."""
        box = BoundingBox(Point2(0.0, 0.0), Point2(2.0, 2.0))
        assert box.overlaps(BoundingBox(Point2(1.0, 1.0), Point2(3.0, 3.0)))
        assert box.overlaps(BoundingBox(Point2(2.0, 0.0), Point2(3.0, 1.0)))
        assert not box.overlaps(BoundingBox(Point2(2.5, 0.0), Point2(3.0, 1.0)))

    @pytest.mark.unit
    def test_union(self):
        """Test the union of two boxes."""
        a = BoundingBox(Point2(0.0, 0.0), Point2(1.0, 1.0))
        b = BoundingBox(Point2(-1.0, 0.5), Point2(0.5, 3.0))
        union = a.union(b)
        assert union.min == Point2(-1.0, 0.0)
        assert union.max == Point2(1.0, 3.0)
