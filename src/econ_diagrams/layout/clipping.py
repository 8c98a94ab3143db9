"""Boundary clipping of segments against the plot rectangle.

Slope-based parametric clipping of a single segment against an
axis-aligned rectangle: the Y boundaries are solved first, then the X
boundaries, each step working on the already clipped endpoints.

Demand-oriented segments (``x1 > x2``) are returned untouched by
:func:`clip`; demand curves are deliberately drawn unclipped.
"""

from __future__ import annotations

__all__ = ["clip", "clip_rows", "fits_frame", "outside_frame"]

from econ_diagrams.layout.constants import EXTEND_FACTOR
from econ_diagrams.parser.model import ClipPolicy, PlotFrame, Segment


def outside_frame(segment: Segment, frame: PlotFrame) -> bool:
    """True when both endpoints lie beyond the same frame boundary."""
    x1, y1, x2, y2 = segment.points()
    return (
        (y1 < frame.min_y and y2 < frame.min_y)
        or (y1 > frame.max_y and y2 > frame.max_y)
        or (x1 < frame.min_x and x2 < frame.min_x)
        or (x1 > frame.max_x and x2 > frame.max_x)
    )


def fits_frame(segment: Segment, frame: PlotFrame, tolerance: float = 1e-6) -> bool:
    """True when both endpoints lie inside the frame.

    A clipped segment only fails this when its line misses the rectangle.
    """
    return frame.contains(segment.x1, segment.y1, tolerance) and frame.contains(
        segment.x2, segment.y2, tolerance
    )


def clip(
    segment: Segment,
    frame: PlotFrame,
    policy: ClipPolicy = ClipPolicy.TRUNCATE,
) -> Segment:
    """Fit a segment into the plot rectangle.

    With ``ClipPolicy.EXTEND`` a segment overflowing the X range is first
    lengthened at its opposite end by 1.5x the overflow and floored at the
    X axis, so a curve shifted sideways keeps its visible length.
    """
    if segment.is_demand_oriented:
        return segment

    if policy == ClipPolicy.EXTEND:
        segment = _floor_at_axis(_extend_for_overflow(segment, frame), frame)

    return _clip_columns(clip_rows(segment, frame), frame)


def clip_rows(segment: Segment, frame: PlotFrame) -> Segment:
    """Clip against the top and bottom boundaries only, any orientation."""
    x1, y1, x2, y2 = segment.points()

    if segment.is_vertical:
        return Segment(
            x1,
            max(frame.min_y, min(frame.max_y, y1)),
            x2,
            max(frame.min_y, min(frame.max_y, y2)),
        )
    if y1 == y2:
        return segment

    slope = segment.slope
    if y1 < frame.min_y:
        x1, y1 = x1 + (frame.min_y - y1) / slope, frame.min_y
    elif y1 > frame.max_y:
        x1, y1 = x1 + (frame.max_y - y1) / slope, frame.max_y
    if y2 < frame.min_y:
        x2, y2 = x2 + (frame.min_y - y2) / slope, frame.min_y
    elif y2 > frame.max_y:
        x2, y2 = x2 + (frame.max_y - y2) / slope, frame.max_y

    return Segment(x1, y1, x2, y2)


def _clip_columns(segment: Segment, frame: PlotFrame) -> Segment:
    if segment.is_vertical:
        return segment

    x1, y1, x2, y2 = segment.points()
    slope = segment.slope
    if x1 < frame.min_x:
        x1, y1 = frame.min_x, y1 + slope * (frame.min_x - x1)
    elif x1 > frame.max_x:
        x1, y1 = frame.max_x, y1 + slope * (frame.max_x - x1)
    if x2 < frame.min_x:
        x2, y2 = frame.min_x, y2 + slope * (frame.min_x - x2)
    elif x2 > frame.max_x:
        x2, y2 = frame.max_x, y2 + slope * (frame.max_x - x2)

    return Segment(x1, y1, x2, y2)


def _extend_for_overflow(segment: Segment, frame: PlotFrame) -> Segment:
    """Push the end opposite an X overflow back along the line."""
    if segment.is_vertical:
        return segment

    x1, y1, x2, y2 = segment.points()
    slope = segment.slope
    right_overflow = max(0.0, x2 - frame.max_x)
    left_overflow = max(0.0, frame.min_x - x1)

    if right_overflow:
        step = EXTEND_FACTOR * right_overflow
        x1, y1 = x1 - step, y1 - slope * step
    if left_overflow:
        step = EXTEND_FACTOR * left_overflow
        x2, y2 = x2 + step, y2 + slope * step

    return Segment(x1, y1, x2, y2)


def _floor_at_axis(segment: Segment, frame: PlotFrame) -> Segment:
    """Pull any endpoint below the X axis back up to it along the line."""
    if segment.is_vertical or segment.y1 == segment.y2:
        return segment

    x1, y1, x2, y2 = segment.points()
    if y1 > frame.max_y:
        x1, y1 = segment.x_at(frame.max_y), frame.max_y
    if y2 > frame.max_y:
        x2, y2 = segment.x_at(frame.max_y), frame.max_y
    return Segment(x1, y1, x2, y2)
