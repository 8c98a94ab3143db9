"""Classic blue and red teaching theme."""

from econ_diagrams.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="#ffffff",
    primary_color="#2563eb",
    secondary_color="#dc2626",
    axis_color="#000000",
    guide_color="#6b7280",
    line_width=3.0,
    axis_width=2.0,
    label_color="#000000",
    label_font_family="Arial, sans-serif",
    label_font_size=16.0,
    title_color="#000000",
    title_font_size=20.0,
    point_fill="#000000",
)
