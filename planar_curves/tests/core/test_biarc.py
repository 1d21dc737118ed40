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
Tests for Biarc Construction
=============================

Tests for joining two oriented points with one or two segments.
"""

import pytest

from planar_curves.core.constants import MIN_START_TO_END
from planar_curves.core.curves import ArcSegment, LineSegment, Segment, biarc
from planar_curves.core.errors import GeometryInvariantError
from planar_curves.core.vector import Point2, Vector2

NAN = float("nan")
TOLERANCE = 1e-6


def assert_valid_chain(chain, start, start_direction, end, end_direction):
    """Check positions and tangents at both ends and at every joint."""
    start_direction = Vector2.of(start_direction).normalized()
    end_direction = Vector2.of(end_direction).normalized()

    assert 1 <= len(chain) <= 2
    assert chain[0].start.rough_eq(Point2.of(start), TOLERANCE)
    assert chain[-1].end.rough_eq(Point2.of(end), TOLERANCE)
    assert chain[0].start_direction.rough_eq(start_direction, TOLERANCE)
    assert chain[-1].end_direction.rough_eq(end_direction, TOLERANCE)

    for first, second in zip(chain, chain[1:]):
        assert first.end.rough_eq(second.start, TOLERANCE)
        assert first.end_direction.rough_eq(second.start_direction, TOLERANCE)


class TestSingleSegment:
    """Tests for biarcs that collapse to a single segment."""

    @pytest.mark.unit
    def test_single_arc(self):
        """Test that a matching quarter circle is returned alone."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (10.0, 10.0), (0.0, 1.0))
        assert len(chain) == 1
        assert isinstance(chain[0], ArcSegment)
        assert chain[0].center.rough_eq(Point2(0.0, 10.0), TOLERANCE)
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (10.0, 10.0), (0.0, 1.0))

    @pytest.mark.unit
    def test_straight_continuation(self):
        """Test that collinear tangents along the chord give one line."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (5.0, 0.0), (1.0, 0.0))
        assert len(chain) == 1
        assert isinstance(chain[0], LineSegment)
        assert chain[0].length == pytest.approx(5.0)

    @pytest.mark.unit
    def test_short_chord_gives_line(self):
        """Test that chords under MAX_SIMPLE_LINE_LENGTH become a straight line."""
        chain = biarc((0.0, 0.0), (0.0, 1.0), (0.3, 0.0), (0.0, 1.0))
        assert len(chain) == 1
        assert isinstance(chain[0], LineSegment)
        assert chain[0].end.rough_eq(Point2(0.3, 0.0))

    @pytest.mark.unit
    def test_static_factory(self):
        """Test that Segment.biarc delegates to biarc."""
        chain = Segment.biarc((0.0, 0.0), (1.0, 0.0), (10.0, 10.0), (0.0, 1.0))
        assert len(chain) == 1


class TestTwoSegments:
    """Tests for biarcs needing a joining point."""

    @pytest.mark.unit
    def test_line_then_arc(self):
        """Test tangent rays meeting closer to the end."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (10.0, 5.0), (0.0, 1.0))
        assert len(chain) == 2
        assert isinstance(chain[0], LineSegment)
        assert chain[0].end.rough_eq(Point2(5.0, 0.0), TOLERANCE)
        assert chain[1].center.rough_eq(Point2(5.0, 5.0), TOLERANCE)
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (10.0, 5.0), (0.0, 1.0))

    @pytest.mark.unit
    def test_arc_then_line(self):
        """Test tangent rays meeting closer to the start."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (5.0, 10.0), (0.0, 1.0))
        assert len(chain) == 2
        assert isinstance(chain[0], ArcSegment)
        assert chain[0].center.rough_eq(Point2(0.0, 5.0), TOLERANCE)
        assert isinstance(chain[1], LineSegment)
        assert chain[1].start.rough_eq(Point2(5.0, 5.0), TOLERANCE)
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (5.0, 10.0), (0.0, 1.0))

    @pytest.mark.unit
    def test_parallel_offset_tangents(self):
        """Test an S-bend between parallel tangents using the closed form."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (20.0, 5.0), (1.0, 0.0))
        assert len(chain) == 2
        assert chain[0].end.rough_eq(Point2(10.0, 2.5), TOLERANCE)
        assert chain[0].signed_radius < 0.0
        assert chain[1].signed_radius > 0.0
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (20.0, 5.0), (1.0, 0.0))

    @pytest.mark.unit
    def test_rays_meeting_behind(self):
        """Test tangents whose rays do not meet ahead of both points."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (10.0, 3.0), (0.0, -1.0))
        assert len(chain) == 2
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (10.0, 3.0), (0.0, -1.0))

    @pytest.mark.unit
    def test_symmetric_s_curve(self):
        """Test parallel tangents orthogonal to the chord."""
        chain = biarc((0.0, 0.0), (0.0, 1.0), (4.0, 0.0), (0.0, 1.0))
        assert len(chain) == 2
        assert chain[0].end.rough_eq(Point2(2.0, 0.0), TOLERANCE)
        assert chain[0].end_direction.rough_eq(Vector2(0.0, -1.0), TOLERANCE)
        assert chain[0].center.rough_eq(Point2(1.0, 0.0), TOLERANCE)
        assert chain[1].center.rough_eq(Point2(3.0, 0.0), TOLERANCE)
        assert_valid_chain(chain, (0.0, 0.0), (0.0, 1.0), (4.0, 0.0), (0.0, 1.0))

    @pytest.mark.unit
    def test_u_turn(self):
        """Test opposite tangents on the chord's own line."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), (5.0, 0.0), (-1.0, 0.0))
        assert len(chain) == 2
        assert chain[0].end.rough_eq(Point2(2.5, -2.5), TOLERANCE)
        assert chain[0].center.rough_eq(Point2(0.0, -2.5), TOLERANCE)
        assert chain[1].center.rough_eq(Point2(5.0, -2.5), TOLERANCE)
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (5.0, 0.0), (-1.0, 0.0))

    @pytest.mark.unit
    def test_unnormalized_directions(self):
        """Test that tangent lengths do not matter."""
        chain = biarc((0.0, 0.0), (3.0, 0.0), (10.0, 5.0), (0.0, 0.5))
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), (10.0, 5.0), (0.0, 1.0))

    @pytest.mark.integration
    @pytest.mark.parametrize("end, end_direction", [
        ((10.0, 10.0), (1.0, 2.0)),
        ((10.0, -4.0), (1.0, 0.0)),
        ((-6.0, 8.0), (-1.0, 0.0)),
        ((3.0, 12.0), (0.0, 1.0)),
        ((15.0, 0.5), (1.0, -1.0)),
        ((8.0, -8.0), (0.0, -1.0)),
    ])
    def test_chain_properties(self, end, end_direction):
        """Test contiguity and tangent continuity over assorted end poses."""
        chain = biarc((0.0, 0.0), (1.0, 0.0), end, end_direction)
        assert chain is not None
        assert_valid_chain(chain, (0.0, 0.0), (1.0, 0.0), end, end_direction)


class TestJoinNearEndpoint:
    """Tests for joining points that land next to start or end."""

    @pytest.mark.unit
    def test_join_next_to_start(self):
        """Test that a join within MIN_START_TO_END of start leaves one piece to the end.

        The tangent rays meet at (0.004, 0), so the arc before the join
        would be shorter than MIN_START_TO_END and is dropped.
        """
        chain = biarc((0.0, 0.0), (1.0, 0.0), (0.004, 10.0), (0.0, 1.0))
        assert len(chain) == 1
        assert chain[0].start.rough_eq(Point2(0.004, 0.004), TOLERANCE)
        assert chain[0].start.rough_eq(Point2(0.0, 0.0), MIN_START_TO_END)
        assert chain[0].end.rough_eq(Point2(0.004, 10.0), TOLERANCE)
        assert chain[0].end_direction.rough_eq(Vector2(0.0, 1.0), TOLERANCE)

    @pytest.mark.unit
    def test_join_next_to_end(self):
        """Test that a join within MIN_START_TO_END of end leaves one piece from the start.

        The tangent rays meet at (10, 0), so the arc after the join would
        be shorter than MIN_START_TO_END and is dropped.
        """
        chain = biarc((0.0, 0.0), (1.0, 0.0), (10.0, 0.004), (0.0, 1.0))
        assert len(chain) == 1
        assert chain[0].start.rough_eq(Point2(0.0, 0.0), TOLERANCE)
        assert chain[0].start_direction.rough_eq(Vector2(1.0, 0.0), TOLERANCE)
        assert chain[0].end.rough_eq(Point2(9.996, 0.0), TOLERANCE)
        assert chain[0].end.rough_eq(Point2(10.0, 0.004), MIN_START_TO_END)
        assert chain[0].end_direction.rough_eq(Vector2(1.0, 0.0), TOLERANCE)


class TestInvalidInput:
    """Tests for rejected and impossible biarcs."""

    @pytest.mark.unit
    def test_degenerate_endpoints(self):
        """Test that nearly coincident endpoints are rejected."""
        assert biarc((0.0, 0.0), (1.0, 0.0), (0.0, 0.001), (1.0, 0.0)) is None

    @pytest.mark.unit
    def test_nan_point(self):
        """Test that NaN coordinates are rejected."""
        assert biarc((NAN, 0.0), (1.0, 0.0), (5.0, 5.0), (0.0, 1.0)) is None

    @pytest.mark.unit
    def test_invalid_directions(self):
        """Test that NaN or zero tangents are rejected."""
        assert biarc((0.0, 0.0), (NAN, 0.0), (5.0, 5.0), (0.0, 1.0)) is None
        assert biarc((0.0, 0.0), (1.0, 0.0), (5.0, 5.0), (0.0, 0.0)) is None

    @pytest.mark.unit
    def test_tangents_pointing_back_along_chord(self):
        """Test that equal tangents pointing away along the chord raise."""
        with pytest.raises(GeometryInvariantError):
            biarc((0.0, 0.0), (-1.0, 0.0), (5.0, 0.0), (-1.0, 0.0))
