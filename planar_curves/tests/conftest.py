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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the planar_curves test suite.
"""

import logging

import pytest

from planar_curves.core.curves import Segment
from planar_curves.core.logging_config import LOGGER_PREFIX, setup_logging
from planar_curves.core.vector import Point2, Vector2


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Chains of several operations")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture(autouse=True)
def reset_logging():
    """Restore INFO level after tests that change the log level."""
    yield
    setup_logging(level=logging.INFO)
    logging.getLogger(LOGGER_PREFIX).setLevel(logging.INFO)


# =============================================================================
# Geometry Fixtures
# =============================================================================

@pytest.fixture
def horizontal_line() -> Segment:
    """Straight segment from (0, 0) to (10, 0)."""
    return Segment.line(Point2(0.0, 0.0), Point2(10.0, 0.0))


@pytest.fixture
def right_turn_arc() -> Segment:
    """Quarter circle of radius 1 around (0, -1), turning clockwise.

    Starts at (0, 0) heading +X, ends at (1, -1) heading -Y.
    """
    return Segment.arc_with_direction(Point2(0.0, 0.0), Vector2(1.0, 0.0), Point2(1.0, -1.0))


@pytest.fixture
def left_turn_arc() -> Segment:
    """Quarter circle of radius 10 around (0, 10), turning counter-clockwise.

    Starts at (0, 0) heading +X, ends at (10, 10) heading +Y.
    """
    return Segment.arc_with_direction(Point2(0.0, 0.0), Vector2(1.0, 0.0), Point2(10.0, 10.0))


@pytest.fixture
def upper_semicircle() -> Segment:
    """Half circle of radius 1 around the origin over the top.

    Starts at (-1, 0) heading +Y, passes (0, 1), ends at (1, 0) heading -Y.
    """
    return Segment.arc_with_direction(Point2(-1.0, 0.0), Vector2(0.0, 1.0), Point2(1.0, 0.0))
