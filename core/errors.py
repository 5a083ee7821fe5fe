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
Error taxonomy for track parsing and analysis.

All errors derive from ValueError so callers that only care about "bad input"
can catch a single type.
"""


class TrackError(ValueError):
    """Base class for all track processing errors."""


class FormatError(TrackError):
    """Input is not a well-formed document."""


class SchemaError(TrackError):
    """A required element or attribute is missing or unparseable."""


class EmptyTrackError(TrackError):
    """The track has no points to analyze."""
