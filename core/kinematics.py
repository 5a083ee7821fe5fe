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
Kinematics derivation: raw fixes to enriched points.

Each enriched point depends only on the previous enriched point and the current
raw fix, so the whole sequence is a scan of ``derive_point`` over the raw
points with the previous enriched point as the accumulator.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

try:
    from .. import config
except ImportError:
    import config

from .geodesy import haversine_distance
from .helpers import seconds_between
from .structures import EnrichedPoint, RawPoint, MS_TO_KMH

logger = logging.getLogger(__name__)


def is_pause(speed_kmh: float, time_delta_s: float) -> bool:
    """Stationary rule: slow and long since the previous fix."""
    return speed_kmh < config.PAUSE_SPEED_KMH and time_delta_s > config.PAUSE_MIN_SECONDS


def derive_point(previous: Optional[EnrichedPoint], raw: RawPoint) -> EnrichedPoint:
    """
    Derive one enriched point from the previous one.

    Args:
        previous: enriched point before ``raw``, or None for the first point
        raw: fix to enrich

    Returns:
        EnrichedPoint: ``raw`` with index, cumulative distance, time delta,
        effective speed and pause flag

    Zero or negative time deltas (equal or out-of-order timestamps) are kept
    as they are; such points get a derived speed of 0.
    """
    if previous is None:
        return EnrichedPoint(
            index=0,
            lat=raw.lat,
            lon=raw.lon,
            time=raw.time,
            ele=raw.ele,
            speed=raw.speed if raw.speed is not None else 0.0,
            distance=0.0,
            time_delta=0.0,
            is_pause=False,
            heart_rate=raw.heart_rate,
            cadence=raw.cadence,
            power=raw.power,
        )

    segment_m = haversine_distance(previous.lat, previous.lon, raw.lat, raw.lon)
    time_delta = seconds_between(previous.time, raw.time)

    if raw.speed is not None:
        speed = raw.speed
    elif time_delta > 0:
        speed = segment_m / time_delta * MS_TO_KMH
    else:
        speed = 0.0

    return EnrichedPoint(
        index=previous.index + 1,
        lat=raw.lat,
        lon=raw.lon,
        time=raw.time,
        ele=raw.ele,
        speed=speed,
        distance=previous.distance + segment_m,
        time_delta=time_delta,
        is_pause=is_pause(speed, time_delta),
        heart_rate=raw.heart_rate,
        cadence=raw.cadence,
        power=raw.power,
    )


def derive_points(raw_points: Iterable[RawPoint]) -> Tuple[EnrichedPoint, ...]:
    """
    Enrich a whole track.

    Args:
        raw_points: fixes in track order

    Returns:
        tuple of EnrichedPoint, same length and order as the input
    """
    enriched = []
    previous = None
    for raw in raw_points:
        previous = derive_point(previous, raw)
        enriched.append(previous)
    points = tuple(enriched)

    backwards = sum(1 for p in points if p.time_delta < 0)
    if backwards:
        logger.debug(f"{backwards} points have timestamps earlier than their predecessor")
    return points


def kilometer_markers(points: Sequence[EnrichedPoint],
                      interval_m: float = config.KM_MARKER_INTERVAL_M) -> List[Tuple[float, EnrichedPoint]]:
    """
    Find the first point reaching each whole distance interval.

    Args:
        points: enriched points
        interval_m: marker spacing in metres

    Returns:
        list of (kilometres, point) tuples, at most one marker per point
    """
    markers = []
    next_mark = interval_m
    for point in points:
        if point.distance >= next_mark:
            markers.append((next_mark / 1000.0, point))
            next_mark += interval_m
    return markers
