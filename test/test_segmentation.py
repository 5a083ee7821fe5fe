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
Tests for speed-bucket segmentation.
"""
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add parent directory to path for imports
PARENT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PARENT_DIR not in sys.path:
    sys.path.insert(0, PARENT_DIR)

from core.kinematics import derive_points
from core.segmentation import bucket_color, segment_by_speed, speed_bucket, speed_color
from core.structures import Coordinate, RawPoint
import config


T0 = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


def make_points(speeds):
    return derive_points([
        RawPoint(lat=45.0 + i * 0.0001, lon=6.0, time=T0 + timedelta(seconds=i * 5), ele=float(i), speed=speed)
        for i, speed in enumerate(speeds)
    ])


def flatten(segments):
    """Concatenate segment coordinates, dropping the shared boundary points."""
    coords = list(segments[0].coordinates)
    for segment in segments[1:]:
        assert segment.coordinates[0] == coords[-1]
        coords.extend(segment.coordinates[1:])
    return coords


@pytest.mark.parametrize("speed,bucket", [
    (0.0, 0), (4.99, 0), (5.0, 1), (9.9, 1), (10.0, 2), (14.0, 2),
    (15.0, 3), (19.99, 3), (20.0, 4), (24.9, 4), (25.0, 5), (120.0, 5),
])
def test_speed_bucket_boundaries(speed, bucket):
    assert speed_bucket(speed) == bucket


def test_color_table():
    assert len(config.SPEED_BUCKET_COLORS) == 6
    assert bucket_color(0) == '#00ff00'
    assert bucket_color(5) == '#ff0000'
    assert speed_color(12.0) == '#ffff00'


def test_empty_track():
    assert segment_by_speed([]) == ()


def test_single_point_single_segment():
    segments = segment_by_speed(make_points([7.0]))

    assert len(segments) == 1
    assert segments[0].bucket == 1
    assert segments[0].coordinates == (Coordinate(lat=45.0, lon=6.0, ele=0.0),)
    assert segments[0].start_index == segments[0].end_index == 0


def test_constant_bucket_single_segment():
    points = make_points([11.0, 12.0, 13.5, 14.9])
    segments = segment_by_speed(points)

    assert len(segments) == 1
    assert segments[0].bucket == 2
    assert len(segments[0].coordinates) == 4
    assert segments[0].speed == 11.0


def test_alternating_speeds():
    points = make_points([3.0, 12.0] * 4)
    segments = segment_by_speed(points)

    assert [s.bucket for s in segments] == [0, 2] * 4
    for segment in segments[:-1]:
        assert len(segment.coordinates) == 2
        assert segment.end_index == segment.start_index + 1
    assert len(segments[-1].coordinates) == 1


def test_boundary_point_is_shared():
    points = make_points([3.0, 3.5, 12.0, 12.5, 30.0])
    segments = segment_by_speed(points)

    assert [s.bucket for s in segments] == [0, 2, 5]
    assert segments[0].coordinates[-1] == segments[1].coordinates[0]
    assert segments[0].end_index == segments[1].start_index == 2
    assert segments[1].end_index == segments[2].start_index == 4
    assert segments[1].color == '#ffff00'
    assert segments[2].speed == 30.0


def test_segments_cover_every_point_once():
    speeds = [0.0, 2.0, 6.0, 7.0, 16.0, 26.0, 26.0, 4.0, 11.0, 11.0, 21.0]
    points = make_points(speeds)
    coords = flatten(segment_by_speed(points))

    assert coords == [Coordinate(lat=p.lat, lon=p.lon, ele=p.ele) for p in points]


def test_custom_bucket_function():
    points = make_points([1.0, 2.0, 30.0, 40.0])
    segments = segment_by_speed(points, bucket_fn=lambda speed: int(speed > 10))

    assert [s.bucket for s in segments] == [0, 1]
    assert segments[1].start_index == 2
