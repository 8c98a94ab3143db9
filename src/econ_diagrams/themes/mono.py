"""Monochrome theme for print."""

from econ_diagrams.render.style import Theme

MONO_THEME = Theme(
    name="mono",
    background_color="none",
    primary_color="#000000",
    secondary_color="#444444",
    axis_color="#000000",
    guide_color="#777777",
    line_width=2.5,
    axis_width=2.0,
    label_color="#000000",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=15.0,
    title_color="#000000",
    title_font_size=20.0,
    point_fill="#000000",
    watermark_color="#bbbbbb",
)
