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
JSON export and import of analyzed tracks.

The exported document mirrors the viewer's data model (camelCase keys). Import
rebuilds the enriched points and recomputes the summary and bounds from them,
so an export/import round trip yields the same statistics.
"""
import json
import re
from datetime import datetime

try:
    from .. import config
    from ..locales.strings import ERRORS
except ImportError:
    import config
    from locales.strings import ERRORS

from .calculator import assemble_track
from .errors import FormatError, SchemaError
from .structures import EnrichedPoint

# Exported point key -> EnrichedPoint field
POINT_FIELDS = {
    'index': 'index',
    'lat': 'lat',
    'lon': 'lon',
    'ele': 'ele',
    'time': 'time',
    'speed': 'speed',
    'heartRate': 'heart_rate',
    'cadence': 'cadence',
    'power': 'power',
    'distance': 'distance',
    'timeDelta': 'time_delta',
    'isPause': 'is_pause',
}

# Exported stats key -> TrackSummary field
STATS_FIELDS = {
    'startTime': 'start_time',
    'endTime': 'end_time',
    'duration': 'duration',
    'movingTime': 'moving_time',
    'pauseTime': 'pause_time',
    'pauseCount': 'pause_count',
    'totalDistance': 'total_distance',
    'avgSpeed': 'avg_speed',
    'maxSpeed': 'max_speed',
    'avgMovingSpeed': 'avg_moving_speed',
    'minElevation': 'min_elevation',
    'maxElevation': 'max_elevation',
    'elevationGain': 'elevation_gain',
    'elevationLoss': 'elevation_loss',
    'avgHeartRate': 'avg_heart_rate',
    'maxHeartRate': 'max_heart_rate',
    'pointCount': 'point_count',
}


def _to_json_value(value):
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def point_to_dict(point):
    return {key: _to_json_value(getattr(point, attr)) for key, attr in POINT_FIELDS.items()}


def stats_to_dict(stats):
    return {key: _to_json_value(getattr(stats, attr)) for key, attr in STATS_FIELDS.items()}


def bounds_to_dict(bounds):
    if bounds is None:
        return None
    return {
        'north': bounds.north,
        'south': bounds.south,
        'east': bounds.east,
        'west': bounds.west,
        'center': {'lat': bounds.center.lat, 'lon': bounds.center.lon},
    }


def track_to_dict(track):
    """Serializable dict of a Track."""
    return {
        'name': track.name,
        'description': track.description,
        'points': [point_to_dict(p) for p in track.points],
        'stats': stats_to_dict(track.stats),
        'bounds': bounds_to_dict(track.bounds),
    }


def track_to_json(track, indent=config.JSON_INDENT):
    return json.dumps(track_to_dict(track), ensure_ascii=False, indent=indent)


def _point_from_dict(data):
    try:
        values = {attr: data[key] for key, attr in POINT_FIELDS.items()}
    except KeyError as e:
        raise SchemaError(ERRORS['missing_field'].format(field=f"points[].{e.args[0]}")) from e

    try:
        values['time'] = datetime.fromisoformat(values['time'])
    except (TypeError, ValueError) as e:
        raise SchemaError(ERRORS['invalid_point'].format(index=values['index'], reason=e)) from e
    return EnrichedPoint(**values)


def points_from_dict(data):
    """Rebuild the enriched points of an exported track document."""
    try:
        points = data['points']
    except (KeyError, TypeError) as e:
        raise SchemaError(ERRORS['missing_field'].format(field='points')) from e
    return tuple(_point_from_dict(p) for p in points)


def track_from_dict(data):
    """
    Rebuild a Track from an exported document.

    The summary and bounds are recomputed from the points rather than read
    from the document.

    Raises:
        SchemaError: required keys are missing
        EmptyTrackError: the document has no points
    """
    points = points_from_dict(data)
    return assemble_track(data.get('name', ''), data.get('description', ''), points)


def track_from_json(text):
    """
    Parse an exported JSON document back into a Track.

    Raises:
        FormatError: text is not valid JSON
        SchemaError: required keys are missing
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(ERRORS['invalid_json'].format(reason=e)) from e
    if not isinstance(data, dict):
        raise SchemaError(ERRORS['missing_field'].format(field='points'))
    return track_from_dict(data)


def export_filename(name):
    """File name for a track export: non-alphanumerics become underscores."""
    return re.sub(r'[^a-z0-9]', '_', name, flags=re.IGNORECASE) + '_export.json'
