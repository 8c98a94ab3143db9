"""SVG generation for economics diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from econ_diagrams.parser.model import (
    DEMAND_FAMILY,
    CurveRole,
    DiagramScene,
    LabelPlacement,
    SceneLine,
)
from econ_diagrams.render.constants import (
    AXIS_LABEL_FONT_WEIGHT,
    LINE_CAP,
    POINT_STROKE_WIDTH,
    TITLE_FONT_WEIGHT,
)
from econ_diagrams.render.style import Theme

_CONTROL_ROLES = (CurveRole.PRICE_CEILING, CurveRole.PRICE_FLOOR)


def render_svg(
    scene: DiagramScene,
    theme: Theme,
    include_watermark: bool = True,
) -> str:
    """Render a diagram scene to an SVG string.

    With ``include_watermark=False`` the watermark labels are left out,
    which is the clean export path.
    """
    if not include_watermark:
        scene = scene.without_watermark()

    frame = scene.frame
    d = draw.Drawing(frame.canvas_width, frame.canvas_height)
    d.set_pixel_scale(frame.scale)

    # Background
    d.append(draw.Rectangle(
        0, 0, frame.canvas_width, frame.canvas_height,
        fill=theme.background_color,
    ))

    # Guides behind everything else, then axes, then curves
    guides = [line for line in scene.lines if line.role == CurveRole.GUIDE]
    axes = [line for line in scene.lines if line.role == CurveRole.AXIS]
    curves = [
        line for line in scene.lines
        if line.role not in (CurveRole.GUIDE, CurveRole.AXIS)
    ]
    _render_guides(d, guides, theme)
    _render_axes(d, axes, theme)
    _render_curves(d, curves, theme)

    for point in scene.points:
        d.append(draw.Circle(
            point.x, point.y, theme.point_radius,
            fill=theme.point_fill,
            stroke=theme.background_color if theme.background_color != "none" else theme.point_fill,
            stroke_width=POINT_STROKE_WIDTH,
        ))

    _render_labels(d, scene.labels, theme)

    svg = d.as_svg()
    return svg if svg.endswith("\n") else svg + "\n"


def line_color(role: CurveRole | None, theme: Theme) -> str:
    """Colour of a curve role: demand family secondary, the rest primary."""
    if role is None or role == CurveRole.AXIS:
        return theme.axis_color
    if role == CurveRole.GUIDE:
        return theme.guide_color
    if role in _CONTROL_ROLES:
        return theme.control_color or theme.guide_color
    if role in DEMAND_FAMILY:
        return theme.secondary_color
    return theme.primary_color


def _render_guides(d: draw.Drawing, guides: list[SceneLine], theme: Theme) -> None:
    for line in guides:
        s = line.segment
        d.append(draw.Line(
            s.x1, s.y1, s.x2, s.y2,
            stroke=theme.guide_color,
            stroke_width=theme.guide_width,
            stroke_dasharray=theme.guide_dash,
        ))


def _render_axes(d: draw.Drawing, axes: list[SceneLine], theme: Theme) -> None:
    for line in axes:
        s = line.segment
        d.append(draw.Line(
            s.x1, s.y1, s.x2, s.y2,
            stroke=theme.axis_color,
            stroke_width=theme.axis_width,
        ))


def _render_curves(d: draw.Drawing, curves: list[SceneLine], theme: Theme) -> None:
    """Draw curves; consecutive frontier pieces share one path."""
    path: draw.Path | None = None
    path_role: CurveRole | None = None

    for line in curves:
        s = line.segment
        color = line_color(line.role, theme)
        width = theme.guide_width if line.role in _CONTROL_ROLES else theme.line_width

        if line.role in (CurveRole.PPC, CurveRole.PPC_SHIFTED):
            if path is None or path_role != line.role:
                path = draw.Path(
                    stroke=color,
                    stroke_width=width,
                    fill="none",
                    stroke_linecap=LINE_CAP,
                    stroke_linejoin=LINE_CAP,
                )
                path.M(s.x1, s.y1)
                path_role = line.role
                d.append(path)
            path.L(s.x2, s.y2)
            continue

        path = None
        path_role = None
        extra = {"stroke_dasharray": theme.guide_dash} if line.dashed else {}
        d.append(draw.Line(
            s.x1, s.y1, s.x2, s.y2,
            stroke=color,
            stroke_width=width,
            stroke_linecap=LINE_CAP,
            **extra,
        ))


def _render_labels(
    d: draw.Drawing,
    labels: tuple[LabelPlacement, ...],
    theme: Theme,
) -> None:
    """Render labels with their anchor at the top-left of the text."""
    for label in labels:
        if label.watermark:
            d.append(draw.Text(
                label.text,
                theme.watermark_font_size,
                label.x, label.y,
                fill=theme.watermark_color,
                font_family=theme.label_font_family,
                text_anchor=label.text_anchor,
                dominant_baseline="auto",
            ))
            continue

        # The title is the only label without a role
        if label.role is None:
            d.append(draw.Text(
                label.text,
                theme.title_font_size,
                label.x, label.y,
                fill=theme.title_color,
                font_family=theme.label_font_family,
                font_weight=TITLE_FONT_WEIGHT,
                text_anchor=label.text_anchor,
                dominant_baseline="hanging",
            ))
            continue

        extra = {"font_weight": AXIS_LABEL_FONT_WEIGHT} if label.role == CurveRole.AXIS else {}
        fill = theme.label_color
        if label.role not in (CurveRole.AXIS, CurveRole.GUIDE):
            fill = line_color(label.role, theme)
        d.append(draw.Text(
            label.text,
            theme.label_font_size,
            label.x, label.y,
            fill=fill,
            font_family=theme.label_font_family,
            text_anchor=label.text_anchor,
            dominant_baseline="hanging",
            **extra,
        ))
