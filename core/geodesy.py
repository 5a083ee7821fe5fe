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
Geodesic helpers.
"""
import math

try:
    from .. import config
except ImportError:
    import config


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two coordinates (haversine formula).

    Args:
        lat1: latitude of the first point, degrees
        lon1: longitude of the first point, degrees
        lat2: latitude of the second point, degrees
        lon2: longitude of the second point, degrees

    Returns:
        float: distance in metres
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    a = min(a, 1.0)  # rounding near antipodes
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return config.EARTH_RADIUS_M * c
