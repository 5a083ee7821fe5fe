#!/usr/bin/env python3
# SportViewer - GPS activity track analyzer
# Copyright (C) 2024 SportViewer Contributors
#
# Shared data-structure definitions used across the analysis pipeline.
# Every stage returns new frozen records; nothing downstream mutates them.

"""
Core records used in the SportViewer pipeline.

Raw point (``RawPoint``)
------------------------
Produced by ``parsers.gpx_handler.extract_raw_points``. One GPS fix as read from
the document: coordinates, elevation, timestamp and the optional sensor
channels (speed already converted to km/h).

Enriched point (``EnrichedPoint``)
----------------------------------
Produced by ``core.kinematics.derive_points``. Adds the position in the track,
the cumulative distance, the time since the previous fix, the effective speed
and the pause flag.

Summary, bounds and segments
----------------------------
``TrackSummary`` (``core.statistics``), ``Bounds`` (``core.bounds``) and
``ColorSegment`` (``core.segmentation``) are reductions of the enriched
sequence. ``Track`` bundles the sequence with its summary and bounds.

Optional sensor channels are ``None`` when the document does not carry them,
never zero, so aggregates can tell "no data" from "zero".
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

# Unit conversion constants
MS_TO_KMH = 3.6  # m/s to km/h conversion factor
M_PER_KM = 1000.0


@dataclass(frozen=True)
class RawPoint:
    """A single fix as read from the track document."""

    lat: float
    lon: float
    time: datetime
    ele: float = 0.0
    speed: Optional[float] = None       # km/h, only when the source supplies it
    heart_rate: Optional[int] = None    # bpm
    cadence: Optional[float] = None     # rpm
    power: Optional[int] = None         # W


@dataclass(frozen=True)
class EnrichedPoint:
    """A fix with its kinematic context inside the track."""

    index: int
    lat: float
    lon: float
    time: datetime
    ele: float
    speed: float                        # km/h, supplied or derived
    distance: float                     # cumulative, m
    time_delta: float                   # since previous point, s
    is_pause: bool
    heart_rate: Optional[int] = None
    cadence: Optional[float] = None
    power: Optional[int] = None


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float
    ele: float = 0.0


@dataclass(frozen=True)
class TrackSummary:
    """Whole-track statistics.

    Speeds are km/h, distances and elevations metres, times seconds.
    ``avg_moving_speed`` is None when the track has no moving time;
    heart-rate fields are None when no point carries heart-rate data.
    """

    start_time: datetime
    end_time: datetime
    duration: float
    moving_time: float
    pause_time: float
    pause_count: int
    total_distance: float
    avg_speed: float
    max_speed: float
    avg_moving_speed: Optional[float]
    min_elevation: float
    max_elevation: float
    elevation_gain: float
    elevation_loss: float
    avg_heart_rate: Optional[float]
    max_heart_rate: Optional[int]
    point_count: int


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extent of a track.

    ``center`` is the midpoint of the extrema, used as an initial viewport,
    not the centroid of the points.
    """

    north: float
    south: float
    east: float
    west: float
    center: Coordinate


@dataclass(frozen=True)
class ColorSegment:
    """Contiguous run of points sharing one speed bucket.

    Consecutive segments share their boundary point: the last coordinate of a
    segment is the first coordinate of the next one.
    """

    bucket: int
    speed: float                        # speed of the first point, km/h
    start_index: int
    end_index: int
    coordinates: Tuple[Coordinate, ...]

    @property
    def color(self) -> str:
        from .segmentation import bucket_color
        return bucket_color(self.bucket)


@dataclass(frozen=True)
class Track:
    name: str
    description: str
    points: Tuple[EnrichedPoint, ...]
    stats: TrackSummary
    bounds: Optional[Bounds]
