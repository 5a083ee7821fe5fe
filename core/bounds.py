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
Geographic extent of a track.
"""
from typing import Optional, Sequence

import numpy as np

from .structures import Bounds, Coordinate, EnrichedPoint


def calculate_bounds(points: Sequence[EnrichedPoint]) -> Optional[Bounds]:
    """
    Bounding rectangle of the points and the midpoint of its extrema.

    Args:
        points: enriched (or raw) points with ``lat``/``lon``

    Returns:
        Bounds, or None for an empty sequence
    """
    if not points:
        return None

    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)
    north, south = float(np.max(lats)), float(np.min(lats))
    east, west = float(np.max(lons)), float(np.min(lons))

    return Bounds(
        north=north,
        south=south,
        east=east,
        west=west,
        center=Coordinate(lat=(north + south) / 2.0, lon=(east + west) / 2.0),
    )
