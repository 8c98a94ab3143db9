"""Curve parameter resolution and line segment generation.

Maps qualitative economic parameters (elasticity class, opportunity cost)
to a numeric angle and extent, then turns those into concrete segments
centred on a point of the plot frame.

Supply lines run bottom-left to top-right. Demand lines are generated
right to left (``x1 > x2``), which the clipper relies on to recognise them.
"""

from __future__ import annotations

__all__ = [
    "CurveProfile",
    "FrontierProfile",
    "frontier_point",
    "frontier_reach",
    "generate_frontier",
    "generate_segment",
    "resolve",
    "resolve_frontier",
    "retarget_right_end",
]

import logging
import math
from dataclasses import dataclass

from econ_diagrams.layout.constants import (
    DEMAND_SNAP_DEGREES,
    FRONTIER_SAMPLES,
    LINE_WIDTH_FRACTION,
    NEAR_VERTICAL_LIMIT,
    NEAR_VERTICAL_START,
    VERTICAL_ANGLE,
)
from econ_diagrams.parser.model import (
    ElasticityClass,
    OpportunityCost,
    Orientation,
    PlotFrame,
    Segment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveProfile:
    """Numeric shape of a straight curve."""

    angle_degrees: float
    extent_percent: float


@dataclass(frozen=True)
class FrontierProfile:
    """Numeric shape of a production possibility curve.

    The frontier follows ``(x/A)^exponent + (y/B)^exponent = 1``:
    exponent 1 is a straight line, above 1 bows outward, below 1 bows in.
    """

    exponent: float
    extent_percent: float


_SUPPLY_TABLE: dict[ElasticityClass, CurveProfile] = {
    ElasticityClass.UNITARY: CurveProfile(45.0, 80.0),
    ElasticityClass.RELATIVELY_ELASTIC: CurveProfile(20.0, 100.0),
    ElasticityClass.RELATIVELY_INELASTIC: CurveProfile(65.0, 40.0),
    ElasticityClass.PERFECTLY_ELASTIC: CurveProfile(0.0, 100.0),
    ElasticityClass.PERFECTLY_INELASTIC: CurveProfile(90.0, 5.0),
}

_DEMAND_TABLE: dict[ElasticityClass, CurveProfile] = {
    ElasticityClass.UNITARY: CurveProfile(-45.0, 80.0),
    ElasticityClass.RELATIVELY_ELASTIC: CurveProfile(-20.0, 100.0),
    ElasticityClass.RELATIVELY_INELASTIC: CurveProfile(-75.0, 95.0),
    ElasticityClass.PERFECTLY_ELASTIC: CurveProfile(0.0, 100.0),
    ElasticityClass.PERFECTLY_INELASTIC: CurveProfile(-90.0, 5.0),
}

_FRONTIER_TABLE: dict[OpportunityCost, FrontierProfile] = {
    OpportunityCost.CONSTANT: FrontierProfile(1.0, 85.0),
    OpportunityCost.INCREASING: FrontierProfile(2.0, 85.0),
    OpportunityCost.DECREASING: FrontierProfile(0.5, 85.0),
}

_DEFAULT_ELASTICITY = ElasticityClass.UNITARY
_DEFAULT_OPPORTUNITY_COST = OpportunityCost.INCREASING


def _coerce(value, enum_cls, default):
    """Map an enum member or its string value onto the enum, else default."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug("Unknown %s %r, using %s", enum_cls.__name__, value, default.value)
        return default


def resolve(
    orientation: Orientation, elasticity: ElasticityClass | str
) -> CurveProfile:
    """Look up the angle and extent for a supply or demand elasticity.

    Values that do not name an elasticity class resolve to the unitary
    row of the table.
    """
    table = _SUPPLY_TABLE if orientation == Orientation.SUPPLY else _DEMAND_TABLE
    return table[_coerce(elasticity, ElasticityClass, _DEFAULT_ELASTICITY)]


def resolve_frontier(opportunity_cost: OpportunityCost | str) -> FrontierProfile:
    """Look up the PPC shape; unknown values resolve to increasing cost."""
    return _FRONTIER_TABLE[
        _coerce(opportunity_cost, OpportunityCost, _DEFAULT_OPPORTUNITY_COST)
    ]


def generate_segment(
    orientation: Orientation,
    elasticity: ElasticityClass | str,
    frame: PlotFrame,
    center_x: float,
    center_y: float,
    angle: float | None = None,
    extent: float | None = None,
    anchor_x: float | None = None,
) -> Segment:
    """Produce the unclipped base segment for a supply or demand curve.

    ``angle`` and ``extent`` override the resolved profile. ``anchor_x``
    only applies to demand: the right endpoint is moved along the line to
    that X so the curve ends level with the label column.
    """
    profile = resolve(orientation, elasticity)
    angle = profile.angle_degrees if angle is None else angle
    extent = profile.extent_percent if extent is None else extent

    half_width = frame.available_width * LINE_WIDTH_FRACTION * (extent / 100) / 2

    if orientation == Orientation.SUPPLY:
        segment = _supply_segment(angle, half_width, frame, center_x, center_y)
    else:
        segment = _demand_segment(angle, half_width, frame, center_x, center_y)
        if anchor_x is not None:
            segment = retarget_right_end(segment, anchor_x, frame)
    return segment


def _symmetric(cx: float, cy: float, half: float, offset: float) -> Segment:
    return Segment(cx - half, cy + offset, cx + half, cy - offset)


def _supply_segment(
    angle: float, half: float, frame: PlotFrame, cx: float, cy: float
) -> Segment:
    if angle >= VERTICAL_ANGLE:
        return Segment(cx, frame.min_y, cx, frame.max_y)

    if angle > NEAR_VERTICAL_LIMIT:
        # Blend the fitted 89 degree line into the full-height vertical
        progress = (angle - NEAR_VERTICAL_LIMIT) / (VERTICAL_ANGLE - NEAR_VERTICAL_LIMIT)
        steep = _clamp_preserving_slope(
            _symmetric(cx, cy, half, math.tan(math.radians(NEAR_VERTICAL_LIMIT)) * half),
            frame, cx, cy,
        )
        vertical = (cx, frame.max_y, cx, frame.min_y)
        return Segment(*(
            a + (b - a) * progress for a, b in zip(steep.points(), vertical)
        ))

    if angle > NEAR_VERTICAL_START:
        progress = (angle - NEAR_VERTICAL_START) / (NEAR_VERTICAL_LIMIT - NEAR_VERTICAL_START)
        normal = math.tan(math.radians(NEAR_VERTICAL_START)) * half
        steep = math.tan(math.radians(NEAR_VERTICAL_LIMIT)) * half
        segment = _symmetric(cx, cy, half, normal + (steep - normal) * progress)
    else:
        segment = _symmetric(cx, cy, half, math.tan(math.radians(angle)) * half)

    return _clamp_preserving_slope(segment, frame, cx, cy)


def _demand_segment(
    angle: float, half: float, frame: PlotFrame, cx: float, cy: float
) -> Segment:
    # No graduated band for demand: snap as soon as it is within a degree
    if abs(abs(angle) - VERTICAL_ANGLE) < DEMAND_SNAP_DEGREES:
        return Segment(cx, frame.max_y, cx, frame.min_y)

    half = -half
    segment = _symmetric(cx, cy, half, math.tan(math.radians(angle)) * half)
    return _clamp_preserving_slope(segment, frame, cx, cy)


def _clamp_preserving_slope(
    segment: Segment, frame: PlotFrame, cx: float, cy: float
) -> Segment:
    """Keep Y inside the frame by shortening the segment about its centre.

    Scaling both endpoints toward (cx, cy) keeps the drawn angle intact,
    which is what a reader of the diagram sees, at the cost of length.
    """
    y1 = max(frame.min_y, min(frame.max_y, segment.y1))
    y2 = max(frame.min_y, min(frame.max_y, segment.y2))
    if y1 == segment.y1 and y2 == segment.y2:
        return segment

    max_offset = max(0.0, min(cy - frame.min_y, frame.max_y - cy))
    reach = max(abs(segment.y1 - cy), abs(segment.y2 - cy))
    ratio = max_offset / reach
    return Segment(
        cx + (segment.x1 - cx) * ratio,
        cy + (segment.y1 - cy) * ratio,
        cx + (segment.x2 - cx) * ratio,
        cy + (segment.y2 - cy) * ratio,
    )


def retarget_right_end(segment: Segment, anchor_x: float, frame: PlotFrame) -> Segment:
    """Move a demand segment's right endpoint along its line to ``anchor_x``.

    The endpoint never drops below the X axis; vertical segments and
    anchors left of the segment's far end are left alone.
    """
    if segment.is_vertical or anchor_x <= segment.x2:
        return segment

    y = segment.y_at(anchor_x)
    if y > frame.max_y:
        anchor_x = segment.x_at(frame.max_y)
        y = frame.max_y
    elif y < frame.min_y:
        return segment
    return Segment(anchor_x, y, segment.x2, segment.y2)


def frontier_point(
    profile: FrontierProfile,
    x_reach: float,
    y_reach: float,
    t: float,
    frame: PlotFrame,
) -> tuple[float, float]:
    """Canvas point at parameter ``t`` (0 = Y intercept, 1 = X intercept)."""
    theta = (1.0 - t) * math.pi / 2
    power = 2.0 / profile.exponent
    x = x_reach * abs(math.cos(theta)) ** power
    y = y_reach * abs(math.sin(theta)) ** power
    return frame.min_x + x, frame.max_y - y


def frontier_reach(
    profile: FrontierProfile,
    frame: PlotFrame,
    extent: float | None = None,
    grow: float = 0.0,
) -> tuple[float, float]:
    """Axis intercept distances (from the origin) of a frontier."""
    extent = profile.extent_percent if extent is None else extent
    x_reach = (frame.max_x - frame.min_x) * extent / 100 + grow
    y_reach = (frame.max_y - frame.min_y) * extent / 100 + grow
    return x_reach, y_reach


def generate_frontier(
    opportunity_cost: OpportunityCost | str,
    frame: PlotFrame,
    extent: float | None = None,
    grow: float = 0.0,
    samples: int = FRONTIER_SAMPLES,
) -> tuple[Segment, ...]:
    """Approximate a production possibility curve with a chain of segments.

    The chain runs from the Y axis intercept to the X axis intercept.
    ``grow`` pushes both intercepts outward by that many pixels (economic
    growth); the result is unclipped.
    """
    profile = resolve_frontier(opportunity_cost)
    x_reach, y_reach = frontier_reach(profile, frame, extent, grow)

    points = [
        frontier_point(profile, x_reach, y_reach, i / samples, frame)
        for i in range(samples + 1)
    ]
    return tuple(
        Segment(x1, y1, x2, y2)
        for (x1, y1), (x2, y2) in zip(points, points[1:])
    )
