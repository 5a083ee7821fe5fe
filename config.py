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
Configuration file for SportViewer.
Contains all constants and settings for track analysis.

This module contains only calculation parameters and constants.
"""

# Physical Constants
EARTH_RADIUS_M = 6_371_000.0  # Mean Earth radius, m

# ============================================================
# Pause Detection
# ============================================================
# A point is a pause when it is both slow and far from the previous fix in time
PAUSE_SPEED_KMH = 0.5      # Speed below this is considered stationary, km/h
PAUSE_MIN_SECONDS = 30.0   # Elapsed time above this is considered a stop, s

# ============================================================
# Speed Buckets (gradient route rendering)
# ============================================================
# Upper bounds of the first five buckets, km/h. Six buckets total, ascending.
SPEED_BUCKET_THRESHOLDS = (5.0, 10.0, 15.0, 20.0, 25.0)

# One color per bucket, green (slow) to red (fast)
SPEED_BUCKET_COLORS = (
    '#00ff00',  # green
    '#7fff00',  # chartreuse
    '#ffff00',  # yellow
    '#ff7f00',  # orange
    '#ff3f00',  # orange-red
    '#ff0000',  # red
)

# ============================================================
# Track Defaults
# ============================================================
DEFAULT_ELEVATION_M = 0.0       # Elevation used when <ele> is absent
KM_MARKER_INTERVAL_M = 1000.0   # Distance between kilometre markers, m

# ============================================================
# Quality Notices
# ============================================================
# Warn when at least this many points go back in time
NON_MONOTONIC_WARNING_COUNT = 1
# Caution when at least this many points share the previous timestamp
DUPLICATE_TIMESTAMP_CAUTION_COUNT = 1

# ============================================================
# CLI Output
# ============================================================
PREVIEW_POINTS = 10  # Points shown at each end of the points preview
JSON_INDENT = 2

# ============================================================
# Track Visualization Parameters
# ============================================================
TRACK_FIGSIZE = (10, 10)
TRACK_LINE_WIDTH = 4             # Route line width
TRACK_LINE_ALPHA = 0.8           # Route line transparency
TRACK_SHADOW_ALPHA = 0.4         # Shadow transparency
TRACK_SHADOW_WIDTH = 6           # Shadow line width
TRACK_START_COLOR = '#4CAF50'    # Start marker color
TRACK_END_COLOR = '#f44336'      # End marker color
TRACK_MARKER_SIZE = 10
TRACK_KM_MARKER_COLOR = '#2196F3'
TRACK_KM_FONTSIZE = 8
TRACK_DPI = 150
