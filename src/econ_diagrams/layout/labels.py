"""Label placement for curves, equilibrium points and axes.

Labels use fixed offsets from the geometry they describe, like the
hand-drawn teaching diagrams they imitate: curve names sit just past a
curve's terminal point, prices left of the Y axis and quantities below
the X axis. Collision handling is deliberately minimal (see
:func:`place_quantity_label`).
"""

from __future__ import annotations

__all__ = [
    "axis_labels",
    "curve_label",
    "point_label",
    "place_quantity_label",
    "price_label",
    "quantity_label",
    "title_label",
    "watermark_label",
]

import logging

from econ_diagrams.layout.constants import (
    CURVE_LABEL_DX,
    CURVE_LABEL_DY,
    LABEL_COLLISION_GAP,
    POINT_LABEL_DX,
    PRICE_LABEL_DY,
    PRICE_LABEL_X,
    QUANTITY_LABEL_BOTTOM,
    QUANTITY_LABEL_DX,
    TITLE_Y,
    WATERMARK_INSET_X,
    WATERMARK_INSET_Y,
    X_AXIS_LABEL_INSET,
    Y_AXIS_LABEL_X,
    Y_AXIS_LABEL_Y,
)
from econ_diagrams.parser.model import (
    CurveRole,
    IntersectionPoint,
    LabelPlacement,
    PlotFrame,
    Segment,
)

logger = logging.getLogger(__name__)


def curve_label(
    segment: Segment, text: str, role: CurveRole | None = None
) -> LabelPlacement:
    """Place a curve name beyond the segment's terminal point.

    Supply-like segments are labelled past their right end, level with
    their top; demand-oriented ones past their right (lower) end.
    """
    if segment.is_demand_oriented:
        x, y = segment.x1, segment.y1
    else:
        x, y = segment.x2, min(segment.y1, segment.y2)
    return LabelPlacement(text, x + CURVE_LABEL_DX, y + CURVE_LABEL_DY, role)


def price_label(point: IntersectionPoint, text: str) -> LabelPlacement:
    return LabelPlacement(text, PRICE_LABEL_X, point.y + PRICE_LABEL_DY, CurveRole.GUIDE)


def quantity_label(
    point: IntersectionPoint, text: str, frame: PlotFrame
) -> LabelPlacement:
    return LabelPlacement(
        text,
        point.x + QUANTITY_LABEL_DX,
        frame.canvas_height - QUANTITY_LABEL_BOTTOM,
        CurveRole.GUIDE,
    )


def point_label(point: IntersectionPoint, text: str) -> LabelPlacement:
    """Letter beside a marked point (PPC points A, B, C)."""
    role = point.roles[0] if point.roles else None
    return LabelPlacement(text, point.x + POINT_LABEL_DX, point.y - 2 * POINT_LABEL_DX, role)


def place_quantity_label(
    existing: list[LabelPlacement],
    point: IntersectionPoint,
    text: str,
    frame: PlotFrame,
    min_gap: float = LABEL_COLLISION_GAP,
) -> LabelPlacement | None:
    """Place a quantity label unless it would crowd one already placed.

    Only labels on the quantity row are considered, and only their X
    position: a narrow rule for the AD/AS tax equilibrium, not a general
    collision resolver.
    """
    candidate = quantity_label(point, text, frame)
    for placed in existing:
        if placed.y == candidate.y and abs(placed.x - candidate.x) < min_gap:
            logger.debug(
                "Suppressing %r at x=%.1f: within %.0fpx of %r",
                text, candidate.x, min_gap, placed.text,
            )
            return None
    return candidate


def axis_labels(
    frame: PlotFrame, x_axis_label: str, y_axis_label: str
) -> list[LabelPlacement]:
    labels = []
    if y_axis_label:
        labels.append(LabelPlacement(y_axis_label, Y_AXIS_LABEL_X, Y_AXIS_LABEL_Y, CurveRole.AXIS))
    if x_axis_label:
        labels.append(LabelPlacement(
            x_axis_label,
            frame.canvas_width - X_AXIS_LABEL_INSET,
            frame.canvas_height - QUANTITY_LABEL_BOTTOM,
            CurveRole.AXIS,
        ))
    return labels


def title_label(frame: PlotFrame, title: str) -> LabelPlacement | None:
    if not title:
        return None
    return LabelPlacement(title, frame.canvas_width / 2, TITLE_Y, text_anchor="middle")


def watermark_label(frame: PlotFrame, text: str) -> LabelPlacement | None:
    """Bottom-right watermark, omitted by the paid export path."""
    if not text:
        return None
    return LabelPlacement(
        text,
        frame.canvas_width - WATERMARK_INSET_X,
        frame.canvas_height - WATERMARK_INSET_Y,
        text_anchor="end",
        watermark=True,
    )
