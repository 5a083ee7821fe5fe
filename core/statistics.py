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
Whole-track statistics.
Reduces an enriched point sequence into a TrackSummary.
"""
import logging
from typing import Sequence

import numpy as np

try:
    from ..locales.strings import ERRORS
except ImportError:
    from locales.strings import ERRORS

from .errors import EmptyTrackError
from .helpers import seconds_between
from .structures import EnrichedPoint, TrackSummary, MS_TO_KMH

logger = logging.getLogger(__name__)


def _elevation_gain_loss(elevations):
    """Sum of positive and of absolute negative successive elevation deltas."""
    if len(elevations) < 2:
        return 0.0, 0.0
    deltas = np.diff(elevations)
    gain = float(np.sum(deltas[deltas > 0]))
    loss = float(-np.sum(deltas[deltas < 0]))
    return gain, loss


def aggregate(points: Sequence[EnrichedPoint]) -> TrackSummary:
    """
    Compute the summary of a track.

    Args:
        points: enriched points in track order

    Returns:
        TrackSummary

    Raises:
        EmptyTrackError: if ``points`` is empty

    Average and max speed only consider points with a positive speed (zero
    speeds are recording artifacts); both are 0 when there is none. Moving time
    is the sum of time deltas of non-pause points, so
    ``duration == moving_time + pause_time`` holds by construction.
    """
    if not points:
        raise EmptyTrackError(ERRORS['empty_track'])

    first = points[0]
    last = points[-1]
    duration = seconds_between(first.time, last.time)
    total_distance = float(last.distance)

    speeds = np.array([p.speed for p in points], dtype=float)
    moving_speeds = speeds[speeds > 0]
    if moving_speeds.size:
        avg_speed = float(np.mean(moving_speeds))
        max_speed = float(np.max(moving_speeds))
    else:
        avg_speed = 0.0
        max_speed = 0.0

    elevations = np.array([p.ele for p in points], dtype=float)
    elevation_gain, elevation_loss = _elevation_gain_loss(elevations)

    pauses = np.array([p.is_pause for p in points], dtype=bool)
    time_deltas = np.array([p.time_delta for p in points], dtype=float)
    moving_time = float(np.sum(time_deltas[~pauses]))
    pause_count = int(np.count_nonzero(pauses))

    if moving_time > 0:
        avg_moving_speed = total_distance / moving_time * MS_TO_KMH
    else:
        logger.debug("Track has no moving time, average moving speed is undefined")
        avg_moving_speed = None

    heart_rates = [p.heart_rate for p in points if p.heart_rate is not None and p.heart_rate > 0]
    if heart_rates:
        avg_heart_rate = float(np.mean(heart_rates))
        max_heart_rate = int(max(heart_rates))
    else:
        avg_heart_rate = None
        max_heart_rate = None

    return TrackSummary(
        start_time=first.time,
        end_time=last.time,
        duration=duration,
        moving_time=moving_time,
        pause_time=duration - moving_time,
        pause_count=pause_count,
        total_distance=total_distance,
        avg_speed=avg_speed,
        max_speed=max_speed,
        avg_moving_speed=avg_moving_speed,
        min_elevation=float(np.min(elevations)),
        max_elevation=float(np.max(elevations)),
        elevation_gain=elevation_gain,
        elevation_loss=elevation_loss,
        avg_heart_rate=avg_heart_rate,
        max_heart_rate=max_heart_rate,
        point_count=len(points),
    )
