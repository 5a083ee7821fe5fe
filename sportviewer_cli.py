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
SportViewer CLI entry point.

Analyzes an activity track from a GPX file and prints a JSON report.
"""
import json
import os
import sys
import argparse
import logging

# Add script directory to path for imports
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
if SCRIPT_DIR not in sys.path:
    sys.path.insert(0, SCRIPT_DIR)

from core.errors import TrackError
from core.export import (
    bounds_to_dict,
    export_filename,
    point_to_dict,
    stats_to_dict,
    track_to_json,
)
from core.helpers import format_duration
from core.kinematics import kilometer_markers
from core.segmentation import segment_by_speed
from core.visualization import plot_track_by_speed
from core.warnings import compute_warnings
from parsers.gpx_handler import parse_gpx_file
import config
from locales.strings import ERRORS, LABELS

# Configure logging (basicConfig is sufficient, no need for duplicate handler)
logging.basicConfig(
    level=logging.ERROR,
    format='%(levelname)s: %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger('sportviewer_cli')


def points_preview(points, count=config.PREVIEW_POINTS):
    """
    First and last ``count`` points, with a separator entry in between
    when points are hidden.
    """
    if len(points) <= count * 2:
        return [point_to_dict(p) for p in points]
    hidden = len(points) - count * 2
    return (
        [point_to_dict(p) for p in points[:count]]
        + [{"separator": LABELS['hidden_points'].format(count=hidden)}]
        + [point_to_dict(p) for p in points[-count:]]
    )


def format_json_response(track, warnings_dict=None, cautions_dict=None, files=None, preview_count=config.PREVIEW_POINTS):
    """
    Format JSON response for CLI output.

    Args:
        track: analyzed Track
        warnings_dict: warnings
        cautions_dict: cautions
        files: paths of written files
        preview_count: points shown at each end of the preview

    Returns:
        dict with JSON response
    """
    stats = track.stats
    response = {
        "success": True,
        "track": {
            "name": track.name,
            "description": track.description,
        },
        "stats": stats_to_dict(stats),
        "stats_formatted": {
            "duration": format_duration(stats.duration),
            "moving_time": format_duration(stats.moving_time),
            "distance_km": round(stats.total_distance / 1000.0, 2),
        },
        "bounds": bounds_to_dict(track.bounds),
        "segments": [
            {
                "bucket": s.bucket,
                "color": s.color,
                "speed": s.speed,
                "start_index": s.start_index,
                "end_index": s.end_index,
            }
            for s in segment_by_speed(track.points)
        ],
        "kilometer_markers": [
            {"km": km, "index": p.index, "lat": p.lat, "lon": p.lon}
            for km, p in kilometer_markers(track.points)
        ],
        "points_preview": points_preview(track.points, preview_count),
        "files": files or {},
    }

    if warnings_dict:
        response["warning"] = warnings_dict

    if cautions_dict:
        response["caution"] = cautions_dict

    return response


def _error_exit(message):
    error_response = {
        "success": False,
        "error": message
    }
    print(json.dumps(error_response, ensure_ascii=False, indent=config.JSON_INDENT))
    sys.exit(1)


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description='Activity track analysis from GPX data')
    parser.add_argument('gpx_file', help='Path to GPX file')
    parser.add_argument('--export', help='Write the full track as JSON to this path', default=None)
    parser.add_argument('--export-dir', dest='export_dir', help='Write the JSON export into this directory, named after the track', default=None)
    parser.add_argument('--plot', help='Base path for the speed-colored track chart', default=None)
    parser.add_argument('--points', type=int, help='Points shown at each end of the preview', default=config.PREVIEW_POINTS)
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not os.path.exists(args.gpx_file):
        _error_exit(ERRORS['file_not_found'].format(file_path=args.gpx_file))

    try:
        track = parse_gpx_file(args.gpx_file)
    except TrackError as e:
        logger.error(f"Track error: {e}")
        _error_exit(str(e))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.gpx_file}: {e}")
        _error_exit(f"Error: {e}")

    files = {}
    export_path = args.export
    if export_path is None and args.export_dir:
        export_path = os.path.join(args.export_dir, export_filename(track.name))
    if export_path:
        try:
            with open(export_path, 'w', encoding='utf-8') as f:
                f.write(track_to_json(track))
        except OSError as e:
            logger.error(f"Cannot write export {export_path}: {e}")
            _error_exit(ERRORS['write_failed'].format(file_path=export_path, reason=e))
        files["export"] = export_path

    if args.plot:
        try:
            chart_path = plot_track_by_speed(track, args.plot)
        except OSError as e:
            logger.error(f"Cannot write chart {args.plot}: {e}")
            _error_exit(ERRORS['write_failed'].format(file_path=args.plot, reason=e))
        if chart_path:
            files["track"] = chart_path

    warnings_dict, cautions_dict = compute_warnings(track)
    response = format_json_response(track, warnings_dict, cautions_dict, files, args.points)
    print(json.dumps(response, ensure_ascii=False, indent=config.JSON_INDENT))
    return 0


if __name__ == "__main__":
    sys.exit(main())
