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

"""Input format parsers: GPX."""

from .gpx_handler import (
    extract_point_sensors,
    extract_raw_points,
    parse_gpx,
    parse_gpx_file,
)

__all__ = [
    # GPX functions
    'extract_point_sensors',
    'extract_raw_points',
    'parse_gpx',
    'parse_gpx_file',
]
