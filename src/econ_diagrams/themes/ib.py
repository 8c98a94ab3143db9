"""IB exam style theme: darker primaries, thinner strokes."""

from econ_diagrams.render.style import Theme

IB_THEME = Theme(
    name="ib",
    background_color="#ffffff",
    primary_color="#0066cc",
    secondary_color="#cc0000",
    axis_color="#000000",
    guide_color="#000000",
    line_width=2.0,
    axis_width=2.0,
    label_color="#000000",
    label_font_family="'Times New Roman', Times, serif",
    label_font_size=16.0,
    title_color="#000000",
    title_font_size=18.0,
    point_fill="#000000",
    point_radius=4.0,
    guide_width=1.0,
    guide_dash="4,4",
)
