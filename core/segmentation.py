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
Speed-bucket segmentation of a track.

Splits the route into contiguous runs of points sharing a speed bucket so that
renderers can draw a speed gradient. This module is the single source of the
bucket table and its colors.
"""
from bisect import bisect_right
from typing import Callable, List, Sequence, Tuple

try:
    from .. import config
except ImportError:
    import config

from .structures import ColorSegment, Coordinate, EnrichedPoint


def speed_bucket(speed_kmh: float) -> int:
    """Bucket index for a speed: 0 below the first threshold, 5 at or above the last."""
    return bisect_right(config.SPEED_BUCKET_THRESHOLDS, speed_kmh)


def bucket_color(bucket: int) -> str:
    """Hex color of a bucket (green for slow, red for fast)."""
    colors = config.SPEED_BUCKET_COLORS
    return colors[min(max(bucket, 0), len(colors) - 1)]


def speed_color(speed_kmh: float) -> str:
    return bucket_color(speed_bucket(speed_kmh))


def _coordinate(point: EnrichedPoint) -> Coordinate:
    return Coordinate(lat=point.lat, lon=point.lon, ele=point.ele)


def segment_by_speed(points: Sequence[EnrichedPoint],
                     bucket_fn: Callable[[float], int] = speed_bucket) -> Tuple[ColorSegment, ...]:
    """
    Partition a track into runs of equal speed bucket.

    Args:
        points: enriched points in track order
        bucket_fn: maps a speed in km/h to a bucket index

    Returns:
        tuple of ColorSegment in track order

    The point where the bucket changes ends the closing segment and starts the
    new one, so the drawn segments touch. A one-point track gives one
    one-point segment.
    """
    if not points:
        return ()

    segments = []
    first = points[0]
    current_bucket = bucket_fn(first.speed)
    current_speed = first.speed
    start_index = first.index
    coords: List[Coordinate] = [_coordinate(first)]

    for point in points[1:]:
        bucket = bucket_fn(point.speed)
        coord = _coordinate(point)
        coords.append(coord)
        if bucket != current_bucket:
            segments.append(ColorSegment(
                bucket=current_bucket,
                speed=current_speed,
                start_index=start_index,
                end_index=point.index,
                coordinates=tuple(coords),
            ))
            current_bucket = bucket
            current_speed = point.speed
            start_index = point.index
            coords = [coord]

    segments.append(ColorSegment(
        bucket=current_bucket,
        speed=current_speed,
        start_index=start_index,
        end_index=points[-1].index,
        coordinates=tuple(coords),
    ))
    return tuple(segments)
