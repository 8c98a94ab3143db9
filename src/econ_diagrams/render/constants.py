"""Render constants used by the SVG renderer.

Layout geometry lives in ``econ_diagrams.layout.constants``.
Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------
TITLE_FONT_WEIGHT: str = "bold"
"""Font weight of the diagram title."""

AXIS_LABEL_FONT_WEIGHT: str = "bold"
"""Font weight of the two axis labels."""

# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------
LINE_CAP: str = "round"
"""Stroke line cap for curves."""

POINT_STROKE_WIDTH: float = 1.5
"""Stroke width of equilibrium point markers."""

# ---------------------------------------------------------------------------
# User style overrides
# ---------------------------------------------------------------------------
FONT_SIZE_RANGE: tuple[float, float] = (8.0, 24.0)
"""Allowed label font size override, in pixels."""

LINE_THICKNESS_RANGE: tuple[float, float] = (1.0, 5.0)
"""Allowed curve stroke width override, in pixels."""

TITLE_FONT_SCALE: float = 1.2
"""Title font size relative to an overridden label font size."""

AXIS_WIDTH_SCALE: float = 0.75
"""Axis stroke width relative to an overridden curve width."""
