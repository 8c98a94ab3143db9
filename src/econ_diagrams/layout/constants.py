"""Layout constants used across layout modules.

Centralizes the magic numbers of the frame, curve generator, clipper,
shift composer, intersection solver and label placement.
"""

# ---------------------------------------------------------------------------
# Plot frame
# ---------------------------------------------------------------------------
MARGIN_LEFT: float = 160.0
"""Left margin; the Y axis is drawn here."""

MARGIN_TOP: float = 80.0
"""Top margin above the plot rectangle."""

MARGIN_BOTTOM: float = 70.0
"""Bottom margin; the X axis is drawn here."""

MARGIN_RIGHT: float = 90.0
"""Right margin for micro diagrams (room for curve labels)."""

MARGIN_RIGHT_AD_AS: float = 40.0
"""Right margin for aggregate demand / supply diagrams."""

MIN_CANVAS_WIDTH: float = 400.0
MAX_CANVAS_WIDTH: float = 1200.0
MIN_CANVAS_HEIGHT: float = 400.0
MAX_CANVAS_HEIGHT: float = 800.0
MIN_SCALE: float = 0.5
MAX_SCALE: float = 2.0

DEFAULT_CANVAS_WIDTH: float = 650.0
DEFAULT_CANVAS_HEIGHT: float = 600.0

# ---------------------------------------------------------------------------
# Curve generation
# ---------------------------------------------------------------------------
LINE_WIDTH_FRACTION: float = 0.8
"""Share of the available plot width a 100% extent line spans."""

NEAR_VERTICAL_START: float = 85.0
"""Supply angle where graduated near-vertical interpolation begins."""

NEAR_VERTICAL_LIMIT: float = 89.0
"""Supply angle where interpolation toward the frame boundary begins."""

VERTICAL_ANGLE: float = 90.0
"""Supply angle at or beyond which the line snaps to full height."""

DEMAND_SNAP_DEGREES: float = 1.0
"""Demand lines closer than this to vertical snap to full height."""

# ---------------------------------------------------------------------------
# Clipping and shifting
# ---------------------------------------------------------------------------
EXTEND_FACTOR: float = 1.5
"""Multiple of the X overflow an extendable segment is lengthened by."""

DIAGONAL_X_FACTOR: float = 0.5
"""Horizontal share of a diagonal shift relative to its vertical offset."""

MAX_SHIFT_DISTANCE: float = 500.0
"""Upper bound of user shift distances (tax, subsidy, gaps)."""

# ---------------------------------------------------------------------------
# Intersection
# ---------------------------------------------------------------------------
VERTICAL_DX_TOLERANCE: float = 0.1
"""Segments with a smaller horizontal run are treated as vertical."""

PARALLEL_REL_TOLERANCE: float = 1e-9
"""Relative slope tolerance under which two lines count as parallel."""

POINT_FRAME_TOLERANCE: float = 0.5
"""Slack allowed when checking that a point lies inside the frame."""

# ---------------------------------------------------------------------------
# PPC
# ---------------------------------------------------------------------------
FRONTIER_SAMPLES: int = 24
"""Number of segments a production possibility curve is split into."""

FRONTIER_INSIDE_RATIO: float = 0.55
"""Fraction of the frontier point used for the inefficient point B."""

FRONTIER_POINT_T: float = 0.5
"""Parametric position of point A along the frontier."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
CURVE_LABEL_DX: float = 20.0
"""Horizontal offset of a curve label from the curve's terminal point."""

CURVE_LABEL_DY: float = -20.0
"""Vertical offset of a curve label from the curve's top end."""

PRICE_LABEL_X: float = 125.0
"""X of price-axis labels (left of the Y axis)."""

PRICE_LABEL_DY: float = -8.0
"""Vertical offset of a price label from its point."""

QUANTITY_LABEL_DX: float = -8.0
"""Horizontal offset of a quantity label from its point."""

QUANTITY_LABEL_BOTTOM: float = 55.0
"""Quantity labels sit this far above the canvas bottom."""

LABEL_COLLISION_GAP: float = 24.0
"""Minimum X distance between labels on the quantity row (AD/AS tax)."""

Y_AXIS_LABEL_X: float = 20.0
Y_AXIS_LABEL_Y: float = 65.0
X_AXIS_LABEL_INSET: float = 200.0
"""X axis label starts this far left of the canvas right edge."""

TITLE_Y: float = 30.0
POINT_LABEL_DX: float = 10.0
"""Offset of PPC point letters from their marker."""

WATERMARK_INSET_X: float = 12.0
WATERMARK_INSET_Y: float = 14.0
