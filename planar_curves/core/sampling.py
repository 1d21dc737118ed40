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
Curve Sampling Module
======================

Polyline sampling of finite curves for rendering and debugging.

Samples are evaluated at evenly spaced arc-length distances and returned
as ``(n, 2)`` numpy arrays of x/y coordinates, ready for plotting or for
uploading as vertex buffers.
"""

import math
from typing import Sequence

import numpy as np

from .curves.base import FiniteCurve
from .logging_config import get_logger

logger = get_logger(__name__)


def sample_curve(curve: FiniteCurve, count: int) -> np.ndarray:
    """Sample a finite curve at evenly spaced distances.

    Args:
        curve: Curve to sample
        count: Number of samples, including both endpoints (>= 2)

    Returns:
        Array of shape (count, 2)

    Raises:
        ValueError: If count is less than 2

    Example:
        >>> seg = Segment.line((0, 0), (10, 0))
        >>> sample_curve(seg, 3)[:, 0]
        array([ 0.,  5., 10.])
    """
    if count < 2:
        raise ValueError(f"Need at least 2 samples, got {count}")

    distances = np.linspace(0.0, curve.length, count)
    return np.array([curve.along(float(d)).to_tuple() for d in distances])


def sample_chain(curves: Sequence[FiniteCurve], spacing: float) -> np.ndarray:
    """Sample a contiguous chain of curves as one polyline.

    Each curve gets enough samples that neighbouring samples are at most
    ``spacing`` apart along the curve. The shared point between two
    consecutive curves is emitted once.

    Args:
        curves: Contiguous curves (each starts where the previous ends)
        spacing: Maximum arc-length distance between samples (> 0)

    Returns:
        Array of shape (n, 2); empty (0, 2) for an empty chain

    Raises:
        ValueError: If spacing is not positive
    """
    if spacing <= 0.0:
        raise ValueError(f"Sample spacing must be positive, got {spacing}")

    if not curves:
        return np.empty((0, 2))

    pieces = []
    for index, curve in enumerate(curves):
        count = max(2, int(math.ceil(curve.length / spacing)) + 1)
        samples = sample_curve(curve, count)
        pieces.append(samples if index == 0 else samples[1:])

    polyline = np.vstack(pieces)
    logger.debug("Sampled %d curves into %d points", len(curves), len(polyline))
    return polyline


__all__ = ["sample_curve", "sample_chain"]
