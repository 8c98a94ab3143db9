"""SVG rendering of diagram scenes."""

from econ_diagrams.render.svg import render_svg
from econ_diagrams.render.style import Theme, customize_theme

__all__ = ["Theme", "customize_theme", "render_svg"]
