#!/usr/bin/env python3
# SportViewer - GPS activity track analyzer
# Copyright (C) 2024 SportViewer Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Tests for track bounds.
"""
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add parent directory to path for imports
PARENT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PARENT_DIR not in sys.path:
    sys.path.insert(0, PARENT_DIR)

from core.bounds import calculate_bounds
from core.kinematics import derive_points
from core.structures import RawPoint


T0 = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


def make_points(coords):
    return derive_points([
        RawPoint(lat=lat, lon=lon, time=T0 + timedelta(seconds=i * 10))
        for i, (lat, lon) in enumerate(coords)
    ])


def test_empty_sequence_has_no_bounds():
    assert calculate_bounds([]) is None


def test_extrema_and_midpoint_center():
    # Most points cluster in the south-west: the centroid would differ from the midpoint
    points = make_points([(45.0, 6.0), (45.0, 6.01), (45.01, 6.0), (45.0, 6.0), (46.0, 7.0)])
    bounds = calculate_bounds(points)

    assert bounds.north == 46.0
    assert bounds.south == 45.0
    assert bounds.east == 7.0
    assert bounds.west == 6.0
    assert bounds.center.lat == pytest.approx(45.5)
    assert bounds.center.lon == pytest.approx(6.5)


def test_single_point_bounds():
    bounds = calculate_bounds(make_points([(-33.9, 151.2)]))

    assert bounds.north == bounds.south == -33.9
    assert bounds.east == bounds.west == 151.2
    assert bounds.center.lat == pytest.approx(-33.9)
    assert bounds.center.lon == pytest.approx(151.2)


def test_signed_coordinates():
    bounds = calculate_bounds(make_points([(-1.0, -2.0), (1.0, 2.0)]))

    assert (bounds.north, bounds.south, bounds.east, bounds.west) == (1.0, -1.0, 2.0, -2.0)
    assert bounds.center.lat == pytest.approx(0.0)
    assert bounds.center.lon == pytest.approx(0.0)
