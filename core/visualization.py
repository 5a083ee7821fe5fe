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
SportViewer visualization module.

Draws the route colored by speed bucket using matplotlib.
"""
import logging
import os

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
import numpy as np

try:
    from .. import config
except ImportError:
    import config

try:
    from locales.strings import LABELS
except ImportError:
    from ..locales.strings import LABELS

from .kinematics import kilometer_markers
from .segmentation import bucket_color, segment_by_speed

logger = logging.getLogger(__name__)


def _bucket_legend_handles():
    """One legend entry per speed bucket, e.g. "5-10"."""
    thresholds = config.SPEED_BUCKET_THRESHOLDS
    bounds = (0.0,) + tuple(thresholds)
    handles = []
    for bucket, low in enumerate(bounds):
        if bucket < len(thresholds):
            label = f"{low:.0f}-{thresholds[bucket]:.0f}"
        else:
            label = f"≥ {low:.0f}"
        handles.append(Line2D([0], [0], color=bucket_color(bucket), linewidth=config.TRACK_LINE_WIDTH, label=label))
    return handles


def plot_track_by_speed(track, output_file, show_km_markers=True):
    """Build the track map with a speed gradient.

    Each ColorSegment becomes one polyline in its bucket color. Start and end
    are marked, and kilometre markers are labeled.

    Args:
        track: Track
        output_file: base path for saving
        show_km_markers: draw kilometre labels

    Returns:
        str: path to saved file or None
    """
    points = track.points
    if len(points) < 2:
        return None

    lats = np.array([p.lat for p in points], dtype=float)
    lons = np.array([p.lon for p in points], dtype=float)

    fig, ax = plt.subplots(figsize=config.TRACK_FIGSIZE)

    # Shadow under the whole route
    ax.plot(lons, lats, color='#CCCCCC',
            linewidth=config.TRACK_SHADOW_WIDTH,
            alpha=config.TRACK_SHADOW_ALPHA, zorder=1)

    segments = segment_by_speed(points)
    lines = [[(c.lon, c.lat) for c in segment.coordinates] for segment in segments]
    colors = [segment.color for segment in segments]
    lc = LineCollection(lines, colors=colors,
                        linewidth=config.TRACK_LINE_WIDTH,
                        alpha=config.TRACK_LINE_ALPHA, zorder=3)
    ax.add_collection(lc)

    ax.plot(lons[0], lats[0], 'o', color=config.TRACK_START_COLOR,
            markersize=config.TRACK_MARKER_SIZE, markeredgecolor='white', zorder=5)
    ax.plot(lons[-1], lats[-1], 'o', color=config.TRACK_END_COLOR,
            markersize=config.TRACK_MARKER_SIZE, markeredgecolor='white', zorder=5)

    if show_km_markers:
        for km, point in kilometer_markers(points):
            ax.annotate(
                f'{km:.0f}',
                xy=(point.lon, point.lat),
                fontsize=config.TRACK_KM_FONTSIZE,
                fontweight='bold',
                color='white',
                ha='center',
                va='center',
                bbox=dict(boxstyle='circle', fc=config.TRACK_KM_MARKER_COLOR, ec='white'),
                zorder=6
            )

    ax.autoscale()
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(track.name, fontsize=14, fontweight='bold')
    ax.legend(handles=_bucket_legend_handles(), title=LABELS['speed_legend'],
              loc='lower right', fontsize=9)

    base_filename = os.path.splitext(output_file)[0]
    track_filename = f"{base_filename}_track.png"
    try:
        fig.savefig(track_filename, dpi=config.TRACK_DPI, bbox_inches='tight', facecolor='white')
    finally:
        plt.close(fig)
    logger.debug(f"Saved track chart to {track_filename} ({len(segments)} segments)")
    return track_filename
