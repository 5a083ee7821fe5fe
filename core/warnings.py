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
Track quality notices.
Single point for all warning logic about a recorded track.
"""

import logging

try:
    from .. import config
    from ..locales.strings import WARNINGS, CAUTIONS
except ImportError:
    import config
    from locales.strings import WARNINGS, CAUTIONS

from .helpers import format_duration

logger = logging.getLogger(__name__)


def compute_warnings(track):
    """
    Compute warnings and cautions for an analyzed track.

    Args:
        track: Track

    Returns:
        tuple: (warnings: dict, cautions: dict)
    """
    warnings = {}
    cautions = {}

    # 1. Timestamps order
    _check_timestamps(track.points, warnings, cautions)

    # 2. Moving time
    _check_moving_time(track.stats, warnings, cautions)

    # 3. Speed data
    _check_speed(track.stats, warnings, cautions)

    # 4. Pauses
    _check_pauses(track.stats, warnings, cautions)

    return warnings, cautions


def _check_timestamps(points, warnings, cautions):
    """Check for timestamps going backwards or repeating."""
    backwards = sum(1 for p in points[1:] if p.time_delta < 0)
    repeated = sum(1 for p in points[1:] if p.time_delta == 0)

    if backwards >= config.NON_MONOTONIC_WARNING_COUNT:
        warnings["non_monotonic"] = WARNINGS['non_monotonic'].format(count=backwards)
        logger.warning(f"{backwards} points have decreasing timestamps")

    if repeated >= config.DUPLICATE_TIMESTAMP_CAUTION_COUNT:
        cautions["duplicate_timestamps"] = CAUTIONS['duplicate_timestamps'].format(count=repeated)


def _check_moving_time(stats, warnings, cautions):
    """Check that the average moving speed is defined."""
    if stats.avg_moving_speed is None:
        warnings["no_moving_time"] = WARNINGS['no_moving_time']


def _check_speed(stats, warnings, cautions):
    if stats.max_speed <= 0:
        cautions["no_speed"] = CAUTIONS['no_speed']


def _check_pauses(stats, warnings, cautions):
    if stats.pause_count > 0:
        cautions["pauses"] = CAUTIONS['pauses'].format(
            count=stats.pause_count, duration=format_duration(stats.pause_time)
        )
