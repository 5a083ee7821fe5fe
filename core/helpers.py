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
Helper functions shared by the analysis and output modules.
"""
from datetime import datetime, timezone


def as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as an aware datetime, reading naive values as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def seconds_between(start: datetime, end: datetime) -> float:
    """Signed number of seconds from ``start`` to ``end``."""
    return (as_utc(end) - as_utc(start)).total_seconds()


def format_duration(seconds):
    """Format a duration as "1h 02m 03s", "2m 03s" or "3s"."""
    if seconds is None:
        return ""
    total = int(max(0.0, seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    if hours > 0:
        return f"{hours}h {minutes:02d}m {secs:02d}s"
    if minutes > 0:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"
