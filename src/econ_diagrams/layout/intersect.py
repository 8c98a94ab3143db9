"""Intersection solver for equilibrium and policy-wedge points.

Degenerate inputs never raise: two vertical lines meet at the frame's
centre, parallel lines yield a NaN point. Callers must check with
:func:`settle` before drawing anything that depends on a point.
"""

from __future__ import annotations

__all__ = ["intersect", "project_onto", "settle"]

import logging
import math

from econ_diagrams.layout.constants import PARALLEL_REL_TOLERANCE, POINT_FRAME_TOLERANCE
from econ_diagrams.parser.model import CurveRole, IntersectionPoint, PlotFrame, Segment

logger = logging.getLogger(__name__)

NAN_POINT_COORDS = (math.nan, math.nan)


def intersect(
    a: Segment,
    b: Segment,
    frame: PlotFrame,
    roles: tuple[CurveRole, ...] = (),
) -> IntersectionPoint:
    """Intersect the infinite lines through two segments."""
    a_vertical = a.is_vertical
    b_vertical = b.is_vertical

    if a_vertical and b_vertical:
        return IntersectionPoint(frame.center_x, frame.center_y, roles)
    if a_vertical:
        return IntersectionPoint(a.x1, b.y_at(a.x1), roles)
    if b_vertical:
        return IntersectionPoint(b.x1, a.y_at(b.x1), roles)

    a_slope, b_slope = a.slope, b.slope
    if math.isclose(a_slope, b_slope, rel_tol=PARALLEL_REL_TOLERANCE, abs_tol=1e-12):
        logger.debug("Parallel segments %s and %s have no intersection", a, b)
        return IntersectionPoint(*NAN_POINT_COORDS, roles)

    a_intercept, b_intercept = a.intercept, b.intercept
    x = (b_intercept - a_intercept) / (a_slope - b_slope)
    y = a_slope * x + a_intercept
    return IntersectionPoint(x, y, roles)


def project_onto(
    segment: Segment, x: float, roles: tuple[CurveRole, ...] = ()
) -> IntersectionPoint:
    """Point on the line through ``segment`` at a given X.

    Used for the tax and subsidy wedge: the price producers receive on
    the original supply curve at the new quantity.
    """
    if segment.is_vertical:
        return IntersectionPoint(*NAN_POINT_COORDS, roles)
    return IntersectionPoint(x, segment.y_at(x), roles)


def settle(
    point: IntersectionPoint, frame: PlotFrame
) -> IntersectionPoint | None:
    """Return the point clamped into the frame, or None if not drawable.

    A point is drawable when it is not NaN and lies inside the frame
    within half a pixel of rounding slack.
    """
    if point.is_nan or not frame.contains(point.x, point.y, POINT_FRAME_TOLERANCE):
        logger.debug("Dropping degenerate point %s", point)
        return None
    return IntersectionPoint(
        max(frame.min_x, min(frame.max_x, point.x)),
        max(frame.min_y, min(frame.max_y, point.y)),
        point.roles,
    )
