"""Data model for economics diagram scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from econ_diagrams.layout.constants import (
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    VERTICAL_DX_TOLERANCE,
)


class DiagramType(Enum):
    """Diagram families the scene assembler knows how to build."""

    SUPPLY_DEMAND = "supply-demand"
    EXTERNALITIES = "externalities"
    PPC = "ppc"
    NEO_CLASSICAL_AD_AS = "ad-as"


class ElasticityClass(Enum):
    """Qualitative elasticity of a supply or demand curve."""

    UNITARY = "unitary"
    RELATIVELY_ELASTIC = "relatively-elastic"
    RELATIVELY_INELASTIC = "relatively-inelastic"
    PERFECTLY_ELASTIC = "perfectly-elastic"
    PERFECTLY_INELASTIC = "perfectly-inelastic"


class OpportunityCost(Enum):
    """Shape of a production possibility curve."""

    CONSTANT = "constant"
    INCREASING = "increasing"
    DECREASING = "decreasing"


class ExternalityKind(Enum):
    """Which side of the market carries the external cost or benefit."""

    NEGATIVE_PRODUCTION = "negative-production"
    POSITIVE_PRODUCTION = "positive-production"
    NEGATIVE_CONSUMPTION = "negative-consumption"
    POSITIVE_CONSUMPTION = "positive-consumption"


class Orientation(Enum):
    """Slope family of a generated curve."""

    SUPPLY = "supply"  # 0..90 degrees, drawn left to right
    DEMAND = "demand"  # 0..-90 degrees, drawn right to left


class CurveRole(Enum):
    """Economic identity of a scene line."""

    SUPPLY = "supply"
    DEMAND = "demand"
    SUPPLY_TAX = "supply-tax"
    SUPPLY_SUBSIDY = "supply-subsidy"
    DEMAND_ADVERTISING = "demand-advertising"
    MPC = "mpc"
    MSC = "msc"
    MPB = "mpb"
    MSB = "msb"
    AD = "ad"
    AD_SHIFTED = "ad-shifted"
    SRAS = "sras"
    SRAS_TAX = "sras-tax"
    LRAS = "lras"
    PPC = "ppc"
    PPC_SHIFTED = "ppc-shifted"
    PRICE_CEILING = "price-ceiling"
    PRICE_FLOOR = "price-floor"
    GUIDE = "guide"
    AXIS = "axis"


DEMAND_FAMILY: frozenset[CurveRole] = frozenset({
    CurveRole.DEMAND,
    CurveRole.DEMAND_ADVERTISING,
    CurveRole.MPB,
    CurveRole.MSB,
    CurveRole.AD,
    CurveRole.AD_SHIFTED,
})
"""Roles drawn in the secondary colour and exempt from X clipping."""


class ShiftAxis(Enum):
    """Direction a shifted curve is translated along."""

    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class ClipPolicy(Enum):
    """How a shifted segment is fitted back into the plot rectangle."""

    TRUNCATE = "truncate"
    EXTEND = "extend"


@dataclass(frozen=True)
class ShiftSpec:
    """Translation applied to a base curve to derive a shifted variant.

    ``distance_offset`` is signed in canvas pixels: positive values move
    the curve down the canvas (lower price), negative values move it up.
    """

    distance_offset: float
    directional_axis: ShiftAxis = ShiftAxis.VERTICAL
    clip_policy: ClipPolicy = ClipPolicy.TRUNCATE


@dataclass(frozen=True)
class PlotFrame:
    """Usable plot rectangle inside a canvas.

    Rejects margin combinations that leave no plot area.
    """

    canvas_width: float
    canvas_height: float
    scale: float = 1.0
    margin_left: float = MARGIN_LEFT
    margin_top: float = MARGIN_TOP
    margin_bottom: float = MARGIN_BOTTOM
    margin_right: float = MARGIN_RIGHT

    def __post_init__(self) -> None:
        if not self.margin_left < self.canvas_width - self.margin_right:
            raise ValueError(
                f"Canvas width {self.canvas_width} leaves no plot area "
                f"between margins {self.margin_left} and {self.margin_right}"
            )
        if not self.margin_top < self.canvas_height - self.margin_bottom:
            raise ValueError(
                f"Canvas height {self.canvas_height} leaves no plot area "
                f"between margins {self.margin_top} and {self.margin_bottom}"
            )
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive, got {self.scale}")

    @property
    def min_x(self) -> float:
        return self.margin_left

    @property
    def max_x(self) -> float:
        return self.canvas_width - self.margin_right

    @property
    def min_y(self) -> float:
        return self.margin_top

    @property
    def max_y(self) -> float:
        return self.canvas_height - self.margin_bottom

    @property
    def available_width(self) -> float:
        """Horizontal span the curve generator distributes lines across."""
        return self.canvas_width - (self.margin_left + 10)

    @property
    def center_x(self) -> float:
        return self.min_x + self.available_width / 2

    @property
    def center_y(self) -> float:
        return self.min_y + (self.canvas_height - (self.margin_top + 40)) / 2

    def contains(self, x: float, y: float, tolerance: float = 0.0) -> bool:
        return (
            self.min_x - tolerance <= x <= self.max_x + tolerance
            and self.min_y - tolerance <= y <= self.max_y + tolerance
        )


@dataclass(frozen=True)
class Segment:
    """A directed line segment in canvas pixel space.

    Direction is meaningful: demand-family segments run right to left.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def dx(self) -> float:
        return self.x2 - self.x1

    @property
    def dy(self) -> float:
        return self.y2 - self.y1

    @property
    def is_vertical(self) -> bool:
        return abs(self.dx) < VERTICAL_DX_TOLERANCE

    @property
    def is_demand_oriented(self) -> bool:
        return self.x1 > self.x2

    @property
    def slope(self) -> float:
        """Canvas slope dy/dx. Callers must rule out vertical segments."""
        return self.dy / self.dx

    @property
    def intercept(self) -> float:
        return self.y1 - self.slope * self.x1

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept

    def x_at(self, y: float) -> float:
        if self.is_vertical:
            return self.x1
        return (y - self.intercept) / self.slope

    def translated(self, dx: float, dy: float) -> Segment:
        return Segment(self.x1 + dx, self.y1 + dy, self.x2 + dx, self.y2 + dy)

    def points(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class IntersectionPoint:
    """An equilibrium or wedge point with the roles it equilibrates."""

    x: float
    y: float
    roles: tuple[CurveRole, ...] = ()

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)


@dataclass(frozen=True)
class SceneLine:
    """A segment tagged with its economic role."""

    segment: Segment
    role: CurveRole
    label: str = ""
    dashed: bool = False


@dataclass(frozen=True)
class LabelPlacement:
    """Positioned text. (x, y) is the top-left origin unless anchored."""

    text: str
    x: float
    y: float
    role: CurveRole | None = None
    text_anchor: str = "start"
    watermark: bool = False


@dataclass(frozen=True)
class DiagramParameters:
    """Immutable snapshot of the user-controlled diagram parameters."""

    title: str = "Figure 1: Supply and Demand"
    x_axis_label: str = "Quantity"
    y_axis_label: str = "Price"
    # Supply and demand
    supply_elasticity: ElasticityClass | str = ElasticityClass.UNITARY
    demand_elasticity: ElasticityClass | str = ElasticityClass.UNITARY
    supply_angle: float | None = None
    show_tax: bool = False
    tax_distance: float = 40.0
    show_subsidy: bool = False
    subsidy_distance: float = 40.0
    show_tax_wedge: bool = False
    show_subsidy_wedge: bool = False
    show_advertising: bool = False
    advertising_distance: float = 40.0
    show_price_ceiling: bool = False
    price_ceiling_distance: float = 40.0
    show_price_floor: bool = False
    price_floor_distance: float = 40.0
    # Externalities
    externality: ExternalityKind | str = ExternalityKind.NEGATIVE_PRODUCTION
    externality_gap: float = 60.0
    show_welfare_loss: bool = False
    # Production possibility curve
    opportunity_cost: OpportunityCost | str = OpportunityCost.INCREASING
    show_ppc_shift: bool = False
    ppc_shift_distance: float = 40.0
    show_ppc_points: bool = False
    # Aggregate demand / supply
    show_lras: bool = True
    show_ad_shift: bool = False
    ad_shift_distance: float = 40.0
    ad_increase: bool = True
    show_sras_tax: bool = False
    sras_tax_distance: float = 40.0
    # Style overrides on top of the theme
    font_size: float | None = None
    line_thickness: float | None = None
    primary_color: str = ""
    secondary_color: str = ""
    # Export
    watermark: str = ""

    def with_changes(self, **changes) -> DiagramParameters:
        return replace(self, **changes)


_DEFAULT_TEXT: dict[DiagramType, tuple[str, str, str]] = {
    DiagramType.SUPPLY_DEMAND: ("Figure 1: Supply and Demand", "Quantity", "Price"),
    DiagramType.EXTERNALITIES: ("Figure 1: Externalities", "Quantity", "Price"),
    DiagramType.PPC: ("Production Possibilities Curve", "Good B", "Good A"),
    DiagramType.NEO_CLASSICAL_AD_AS: (
        "Figure 1: Aggregate Demand and Supply",
        "Real GDP",
        "Average Price Level ($)",
    ),
}


def default_parameters(diagram_type: DiagramType) -> DiagramParameters:
    """Return parameters with the title and axis labels for a diagram type."""
    title, x_label, y_label = _DEFAULT_TEXT[diagram_type]
    return DiagramParameters(title=title, x_axis_label=x_label, y_axis_label=y_label)


@dataclass(frozen=True)
class DiagramScene:
    """Renderer-agnostic output of one scene build."""

    diagram_type: DiagramType
    frame: PlotFrame
    lines: tuple[SceneLine, ...] = ()
    points: tuple[IntersectionPoint, ...] = ()
    labels: tuple[LabelPlacement, ...] = ()

    def lines_for(self, role: CurveRole) -> list[SceneLine]:
        return [line for line in self.lines if line.role == role]

    def label_texts(self) -> list[str]:
        return [label.text for label in self.labels]

    def without_watermark(self) -> DiagramScene:
        """Return the scene minus its watermark labels (paid export)."""
        return replace(
            self,
            labels=tuple(label for label in self.labels if not label.watermark),
        )
