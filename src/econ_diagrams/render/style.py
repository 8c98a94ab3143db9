"""Theme and style constants for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace

from econ_diagrams.render.constants import (
    AXIS_WIDTH_SCALE,
    FONT_SIZE_RANGE,
    LINE_THICKNESS_RANGE,
    TITLE_FONT_SCALE,
)


@dataclass
class Theme:
    """Visual theme for an economics diagram."""

    name: str
    background_color: str
    primary_color: str  # supply family: S, MPC, SRAS, PPC
    secondary_color: str  # demand family: D, MPB, AD
    axis_color: str
    guide_color: str
    line_width: float
    axis_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    point_fill: str
    point_radius: float = 6.0
    guide_width: float = 1.5
    guide_dash: str = "5,5"
    control_color: str = ""  # empty = inherit guide_color
    watermark_color: str = "#999999"
    watermark_font_size: float = 12.0


def customize_theme(
    theme: Theme,
    font_size: float | None = None,
    line_thickness: float | None = None,
    primary_color: str = "",
    secondary_color: str = "",
) -> Theme:
    """Return a copy of ``theme`` with the user's style overrides applied.

    ``None`` sizes and empty colours keep the theme's own value. Sizes are
    clamped to the ranges the editor offers; the title and axes follow
    the overridden label size and curve width.
    """
    changes: dict[str, object] = {}
    if font_size is not None:
        size = min(max(font_size, FONT_SIZE_RANGE[0]), FONT_SIZE_RANGE[1])
        changes["label_font_size"] = size
        changes["title_font_size"] = size * TITLE_FONT_SCALE
    if line_thickness is not None:
        width = min(max(line_thickness, LINE_THICKNESS_RANGE[0]), LINE_THICKNESS_RANGE[1])
        changes["line_width"] = width
        changes["axis_width"] = width * AXIS_WIDTH_SCALE
    if primary_color:
        changes["primary_color"] = primary_color
    if secondary_color:
        changes["secondary_color"] = secondary_color
    return replace(theme, **changes)
