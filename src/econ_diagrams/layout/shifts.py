"""Shift composer: derive taxed, subsidised and externality curves.

Each shifted :class:`CurveRole` owns one entry in ``SHIFT_TABLE`` giving
its translation axis, clip policy and default direction, so the scene
assembler asks for a role and a distance instead of re-deriving signs.
"""

from __future__ import annotations

__all__ = ["SHIFT_TABLE", "shift", "shift_spec_for"]

import logging

from econ_diagrams.layout.clipping import clip, clip_rows, fits_frame, outside_frame
from econ_diagrams.layout.constants import DIAGONAL_X_FACTOR
from econ_diagrams.parser.model import (
    ClipPolicy,
    CurveRole,
    PlotFrame,
    Segment,
    ShiftAxis,
    ShiftSpec,
)

logger = logging.getLogger(__name__)

# role -> (axis, clip policy, moves up the price axis by default)
SHIFT_TABLE: dict[CurveRole, tuple[ShiftAxis, ClipPolicy, bool]] = {
    CurveRole.SUPPLY_TAX: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
    CurveRole.SUPPLY_SUBSIDY: (ShiftAxis.DIAGONAL, ClipPolicy.EXTEND, False),
    CurveRole.DEMAND_ADVERTISING: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
    CurveRole.MSC: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
    CurveRole.MSB: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
    CurveRole.AD_SHIFTED: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
    CurveRole.SRAS_TAX: (ShiftAxis.VERTICAL, ClipPolicy.TRUNCATE, True),
}


def shift_spec_for(
    role: CurveRole, distance: float, upward: bool | None = None
) -> ShiftSpec:
    """Build the shift for a role.

    ``distance`` is a non-negative magnitude in pixels; ``upward``
    overrides the role's default direction (e.g. a positive production
    externality puts MSC below MPC).
    """
    try:
        axis, policy, default_upward = SHIFT_TABLE[role]
    except KeyError:
        raise ValueError(f"{role.value} is not a shifted curve role") from None

    if upward is None:
        upward = default_upward
    offset = -abs(distance) if upward else abs(distance)
    return ShiftSpec(distance_offset=offset, directional_axis=axis, clip_policy=policy)


def shift(base: Segment, spec: ShiftSpec, frame: PlotFrame) -> Segment | None:
    """Translate a base segment and fit it back into the frame.

    Vertical shifts move Y only; diagonal shifts also move X by half the
    offset (a subsidy curve moves right as well as down). Returns ``None``
    when the moved curve is entirely outside the frame or its line misses
    the frame after clipping.
    """
    if spec.distance_offset == 0:
        return base

    dy = spec.distance_offset
    dx = dy * DIAGONAL_X_FACTOR if spec.directional_axis == ShiftAxis.DIAGONAL else 0.0
    moved = base.translated(dx, dy)

    if outside_frame(moved, frame):
        logger.debug("Shifted segment %s left the frame; not drawable", moved)
        return None

    if moved.is_demand_oriented:
        return clip_rows(moved, frame)

    clipped = clip(moved, frame, spec.clip_policy)
    if not fits_frame(clipped, frame):
        logger.debug("Shifted segment %s misses the frame; not drawable", moved)
        return None
    return clipped
