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
Tests for per-point kinematics derivation.
"""
import math
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add parent directory to path for imports
PARENT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PARENT_DIR not in sys.path:
    sys.path.insert(0, PARENT_DIR)

from core.geodesy import haversine_distance
from core.kinematics import derive_point, derive_points, is_pause, kilometer_markers
from core.structures import RawPoint
import config


T0 = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)


def make_raw(lat, lon=0.0, seconds=0.0, **kwargs):
    return RawPoint(lat=lat, lon=lon, time=T0 + timedelta(seconds=seconds), **kwargs)


def test_first_point_defaults():
    point = derive_point(None, make_raw(45.0, 6.0, ele=120.0, heart_rate=130))
    assert point.index == 0
    assert point.distance == 0.0
    assert point.time_delta == 0.0
    assert point.speed == 0.0
    assert point.is_pause is False
    assert point.ele == 120.0
    assert point.heart_rate == 130
    assert point.cadence is None


def test_two_points_derived_speed():
    points = derive_points([make_raw(0.0, seconds=0), make_raw(0.01, seconds=10)])
    expected_m = config.EARTH_RADIUS_M * math.radians(0.01)

    assert points[1].distance == pytest.approx(expected_m)
    assert points[1].time_delta == 10.0
    assert points[1].speed == pytest.approx(expected_m / 10 * 3.6)
    assert points[1].speed == pytest.approx(400.5, abs=1.0)
    assert points[1].is_pause is False


def test_supplied_speed_wins_over_derived():
    points = derive_points([make_raw(0.0), make_raw(0.01, seconds=10, speed=12.0)])
    assert points[1].speed == 12.0


def test_supplied_zero_speed_is_kept():
    points = derive_points([make_raw(0.0), make_raw(0.01, seconds=10, speed=0.0)])
    assert points[1].speed == 0.0


def test_pause_flag_on_single_slow_long_gap():
    raws = [make_raw(45.0 + i * 0.0005, seconds=i * 10, speed=10.0) for i in range(5)]
    raws.append(make_raw(45.003, seconds=80, speed=0.2))   # 40 s after previous
    raws.append(make_raw(45.0035, seconds=90, speed=10.0))
    points = derive_points(raws)

    assert points[5].time_delta == 40.0
    assert [p.is_pause for p in points] == [False] * 5 + [True, False]


@pytest.mark.parametrize("speed,delta,expected", [
    (0.2, 40.0, True),
    (0.2, 30.0, False),   # exactly 30 s is not a pause
    (0.5, 40.0, False),   # exactly 0.5 km/h is not a pause
    (0.0, 31.0, True),
    (5.0, 600.0, False),
])
def test_pause_rule(speed, delta, expected):
    assert is_pause(speed, delta) is expected


def test_cumulative_distance_is_monotonic():
    raws = [make_raw(45.0 + 0.0003 * math.sin(i), 6.0 + 0.0002 * i, seconds=i * 5) for i in range(50)]
    points = derive_points(raws)

    assert all(a.distance <= b.distance for a, b in zip(points, points[1:]))
    total = sum(haversine_distance(a.lat, a.lon, b.lat, b.lon) for a, b in zip(raws, raws[1:]))
    assert points[-1].distance == pytest.approx(total)


def test_indices_match_positions():
    points = derive_points([make_raw(45.0 + i * 0.001, seconds=i) for i in range(7)])
    assert [p.index for p in points] == list(range(7))


def test_equal_and_backwards_timestamps_propagate():
    points = derive_points([
        make_raw(45.0, seconds=10),
        make_raw(45.001, seconds=10),   # same time
        make_raw(45.002, seconds=5),    # earlier
    ])
    assert points[1].time_delta == 0.0
    assert points[2].time_delta == -5.0
    assert points[1].speed == 0.0
    assert points[2].speed == 0.0
    assert points[2].distance > points[1].distance > 0


def test_naive_timestamps_are_read_as_utc():
    naive = RawPoint(lat=45.001, lon=0.0, time=datetime(2024, 5, 1, 8, 0, 20))
    points = derive_points([make_raw(45.0), naive])
    assert points[1].time_delta == 20.0


def test_empty_input():
    assert derive_points([]) == ()


def test_derive_point_does_not_touch_previous():
    first = derive_point(None, make_raw(45.0))
    second = derive_point(first, make_raw(45.001, seconds=10))
    again = derive_point(first, make_raw(45.001, seconds=10))
    assert second == again
    assert first.distance == 0.0


def test_kilometer_markers():
    # ~111 m per step, 30 steps -> ~3.3 km
    points = derive_points([make_raw(i * 0.001, seconds=i * 30) for i in range(31)])
    markers = kilometer_markers(points)

    assert [km for km, _ in markers] == [1.0, 2.0, 3.0]
    for km, point in markers:
        assert point.distance >= km * 1000
        assert points[point.index - 1].distance < km * 1000


def test_kilometer_markers_short_track():
    points = derive_points([make_raw(0.0), make_raw(0.001, seconds=10)])
    assert kilometer_markers(points) == []
