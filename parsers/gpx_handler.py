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
GPX file handler - parsing and data extraction from GPX documents.
"""
import logging
import math
from typing import Optional, Tuple

import gpxpy
import gpxpy.gpx

try:
    from .. import config
    from ..core.calculator import analyze_track
    from ..core.errors import FormatError, SchemaError
    from ..core.structures import RawPoint, Track, MS_TO_KMH
    from ..locales.strings import ERRORS, LABELS
except ImportError:
    import config
    from core.calculator import analyze_track
    from core.errors import FormatError, SchemaError
    from core.structures import RawPoint, Track, MS_TO_KMH
    from locales.strings import ERRORS, LABELS

logger = logging.getLogger(__name__)


def _finite_float(text) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value {text!r}")
    return value


# Extension tags (local names, any namespace) and their converters
_SENSOR_TAGS = {
    'speed': _finite_float,
    'hr': lambda text: int(_finite_float(text)),
    'cad': _finite_float,
    'power': lambda text: int(_finite_float(text)),
}


def _local_name(tag) -> str:
    if '}' in tag:
        tag = tag.split('}', 1)[1]
    if ':' in tag:
        tag = tag.split(':', 1)[1]
    return tag.lower()


def extract_point_sensors(point) -> dict:
    """
    Extract speed [m/s], heart rate [bpm], cadence [rpm] and power [W]
    from typical Garmin / Amazfit GPX extension tags.

    Returns:
        dict keyed by 'speed', 'hr', 'cad', 'power'; missing or unparseable
        channels are absent from the dict. The first occurrence of a tag wins.
    """
    sensors = {}
    for ext in getattr(point, 'extensions', None) or []:
        for child in ext.iter():
            if not isinstance(child.tag, str) or child.text is None:
                continue
            text = child.text.strip()
            if not text:
                continue
            tag = _local_name(child.tag)
            converter = _SENSOR_TAGS.get(tag)
            if converter is None or tag in sensors:
                continue
            try:
                sensors[tag] = converter(text)
            except ValueError:
                logger.debug(f"Ignored unparseable <{tag}> value: {text!r}")
    return sensors


def _raw_point(point, index) -> RawPoint:
    if point.latitude is None or point.longitude is None:
        raise SchemaError(ERRORS['invalid_point'].format(index=index, reason="lat/lon manquant"))
    if point.time is None:
        raise SchemaError(ERRORS['missing_time'].format(index=index))

    sensors = extract_point_sensors(point)

    # GPX 1.1 carries speed in extensions, GPX 1.0 as a <speed> child
    speed_ms = sensors.get('speed')
    if speed_ms is None:
        speed_ms = getattr(point, 'speed', None)
        if speed_ms is not None and not math.isfinite(speed_ms):
            logger.debug(f"Ignored non-finite <speed> value on point {index}")
            speed_ms = None

    return RawPoint(
        lat=float(point.latitude),
        lon=float(point.longitude),
        time=point.time,
        ele=float(point.elevation) if point.elevation is not None else config.DEFAULT_ELEVATION_M,
        speed=speed_ms * MS_TO_KMH if speed_ms is not None else None,
        heart_rate=sensors.get('hr'),
        cadence=sensors.get('cad'),
        power=sensors.get('power'),
    )


def extract_raw_points(document: str) -> Tuple[str, str, Tuple[RawPoint, ...]]:
    """
    Parse a GPX document into the first track's metadata and fixes.

    Args:
        document: GPX XML text

    Returns:
        tuple: (name, description, raw_points) with points in document order;
        the points of all segments of the first track are concatenated

    Raises:
        FormatError: document is not well-formed XML
        SchemaError: no track, or a trackpoint without valid coordinates or time
    """
    try:
        gpx = gpxpy.parse(document)
    except gpxpy.gpx.GPXXMLSyntaxException as e:
        raise FormatError(ERRORS['invalid_gpx'].format(reason=e)) from e
    except (gpxpy.gpx.GPXException, ValueError, TypeError) as e:
        raise SchemaError(ERRORS['invalid_gpx'].format(reason=e)) from e

    if not gpx.tracks:
        raise SchemaError(ERRORS['no_track'])
    if len(gpx.tracks) > 1:
        logger.warning(f"GPX has {len(gpx.tracks)} tracks, only the first one is used")

    track = gpx.tracks[0]
    name = track.name or LABELS['untitled_track']
    description = track.description or ''

    raw_points = []
    for segment in track.segments:
        for point in segment.points:
            raw_points.append(_raw_point(point, len(raw_points)))

    logger.debug(f"Extracted {len(raw_points)} points from track '{name}'")
    return name, description, tuple(raw_points)


def parse_gpx(document: str) -> Track:
    """
    Parse a GPX document into an analyzed Track.

    Raises:
        FormatError: document is not well-formed XML
        SchemaError: missing track or invalid trackpoint
        EmptyTrackError: the track has no points
    """
    name, description, raw_points = extract_raw_points(document)
    return analyze_track(name, description, raw_points)


def parse_gpx_file(file_path: str, encoding: Optional[str] = 'utf-8') -> Track:
    """Read a GPX file and parse it with ``parse_gpx``."""
    with open(file_path, 'r', encoding=encoding) as f:
        document = f.read()
    return parse_gpx(document)
