"""Coordinate frame: the usable plot rectangle for a canvas size.

The geometry engine assumes ``canvas_width >= 400`` and
``canvas_height >= 400``. It does not re-validate; callers clamp user
input with :func:`clamp_canvas_size` first.
"""

from __future__ import annotations

__all__ = ["clamp_canvas_size", "make_frame", "right_margin_for"]

from econ_diagrams.layout.constants import (
    MARGIN_RIGHT,
    MARGIN_RIGHT_AD_AS,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    MAX_SCALE,
    MIN_CANVAS_HEIGHT,
    MIN_CANVAS_WIDTH,
    MIN_SCALE,
)
from econ_diagrams.parser.model import DiagramType, PlotFrame


def right_margin_for(diagram_type: DiagramType) -> float:
    """AD/AS diagrams carry no curve labels past the axis, so less margin."""
    if diagram_type == DiagramType.NEO_CLASSICAL_AD_AS:
        return MARGIN_RIGHT_AD_AS
    return MARGIN_RIGHT


def clamp_canvas_size(
    width: float, height: float, scale: float = 1.0
) -> tuple[float, float, float]:
    """Clamp canvas dimensions and scale to the ranges the UI allows."""
    return (
        max(MIN_CANVAS_WIDTH, min(MAX_CANVAS_WIDTH, width)),
        max(MIN_CANVAS_HEIGHT, min(MAX_CANVAS_HEIGHT, height)),
        max(MIN_SCALE, min(MAX_SCALE, scale)),
    )


def make_frame(
    canvas_width: float,
    canvas_height: float,
    diagram_type: DiagramType = DiagramType.SUPPLY_DEMAND,
    scale: float = 1.0,
) -> PlotFrame:
    """Build the plot frame for a canvas.

    Bounds: ``min_x=160``, ``max_x=canvas_width-90`` (``-40`` for AD/AS),
    ``min_y=80``, ``max_y=canvas_height-70``.
    """
    return PlotFrame(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        scale=scale,
        margin_right=right_margin_for(diagram_type),
    )
