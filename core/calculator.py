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
Main SportViewer analysis engine.
Turns parsed fixes into an immutable Track: kinematics, statistics, bounds.
"""
import logging
from typing import Iterable, Sequence

from .bounds import calculate_bounds
from .kinematics import derive_points
from .statistics import aggregate
from .structures import EnrichedPoint, RawPoint, Track

logger = logging.getLogger(__name__)


def assemble_track(name: str, description: str, points: Sequence[EnrichedPoint]) -> Track:
    """
    Bundle enriched points with their summary and bounds.

    Raises:
        EmptyTrackError: if ``points`` is empty
    """
    points = tuple(points)
    stats = aggregate(points)
    return Track(
        name=name,
        description=description,
        points=points,
        stats=stats,
        bounds=calculate_bounds(points),
    )


def analyze_track(name: str, description: str, raw_points: Iterable[RawPoint]) -> Track:
    """
    Run the full pipeline on parsed fixes.

    Args:
        name: track name
        description: track description
        raw_points: fixes in document order

    Returns:
        Track

    Raises:
        EmptyTrackError: if there are no fixes
    """
    points = derive_points(raw_points)
    track = assemble_track(name, description, points)
    logger.info(
        f"Analyzed '{name}': {track.stats.point_count} points, "
        f"{track.stats.total_distance:.0f} m, {track.stats.pause_count} pauses"
    )
    return track
