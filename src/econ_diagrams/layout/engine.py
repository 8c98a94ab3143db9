"""Scene assembler: turns a parameter snapshot into a DiagramScene.

Dispatches once on the diagram type. Each build starts from nothing:
base curves are generated, toggled shifts are derived and re-clipped,
equilibria are solved, and any element that depends on a missing curve
or an undrawable point is silently left out.
"""

from __future__ import annotations

__all__ = ["build_scene"]

import logging
from typing import Callable

from econ_diagrams.layout.clipping import clip, fits_frame, outside_frame
from econ_diagrams.layout.constants import FRONTIER_INSIDE_RATIO, FRONTIER_POINT_T
from econ_diagrams.layout.curves import (
    frontier_point,
    frontier_reach,
    generate_frontier,
    generate_segment,
    resolve_frontier,
)
from econ_diagrams.layout.intersect import intersect, project_onto, settle
from econ_diagrams.layout.labels import (
    axis_labels,
    curve_label,
    place_quantity_label,
    point_label,
    price_label,
    quantity_label,
    title_label,
    watermark_label,
)
from econ_diagrams.layout.shifts import shift, shift_spec_for
from econ_diagrams.parser.model import (
    CurveRole,
    DiagramParameters,
    DiagramScene,
    DiagramType,
    ExternalityKind,
    IntersectionPoint,
    LabelPlacement,
    Orientation,
    PlotFrame,
    SceneLine,
    Segment,
)

logger = logging.getLogger(__name__)

# Multiple of point A's distance from the origin used for the
# unattainable point C.
_OUTSIDE_RATIO = 1.25


class _SceneDraft:
    """Mutable accumulator for the scene currently being assembled."""

    def __init__(self, frame: PlotFrame) -> None:
        self.frame = frame
        self.lines: list[SceneLine] = []
        self.points: list[IntersectionPoint] = []
        self.labels: list[LabelPlacement] = []

    def add_axes(self) -> None:
        f = self.frame
        self.lines.append(SceneLine(Segment(f.min_x, f.max_y, f.max_x, f.max_y), CurveRole.AXIS))
        self.lines.append(SceneLine(Segment(f.min_x, f.min_y, f.min_x, f.max_y), CurveRole.AXIS))

    def add_text(self, params: DiagramParameters) -> None:
        self.labels.extend(axis_labels(self.frame, params.x_axis_label, params.y_axis_label))
        for label in (
            title_label(self.frame, params.title),
            watermark_label(self.frame, params.watermark),
        ):
            if label is not None:
                self.labels.append(label)

    def add_curve(
        self, segment: Segment | None, role: CurveRole, text: str = ""
    ) -> Segment | None:
        """Add a curve and its name; a None segment is skipped."""
        if segment is None:
            logger.debug("No drawable %s curve in this frame", role.value)
            return None
        self.lines.append(SceneLine(segment, role, text))
        if text:
            self.labels.append(curve_label(segment, text, role))
        return segment

    def add_guide(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.lines.append(SceneLine(Segment(x1, y1, x2, y2), CurveRole.GUIDE, dashed=True))

    def add_point(
        self,
        point: IntersectionPoint,
        price_text: str | None = None,
        quantity_text: str | None = None,
        crowd_check: bool = False,
    ) -> IntersectionPoint | None:
        """Add a point with optional projections onto the axes.

        ``price_text`` / ``quantity_text`` of None skip that projection;
        an empty string draws the dashed guide without a label. Returns
        the settled point, or None when the point is not drawable.
        """
        settled = settle(point, self.frame)
        if settled is None:
            return None

        f = self.frame
        self.points.append(settled)
        if price_text is not None:
            self.add_guide(f.min_x, settled.y, settled.x, settled.y)
            if price_text:
                self.labels.append(price_label(settled, price_text))
        if quantity_text is not None:
            self.add_guide(settled.x, settled.y, settled.x, f.max_y)
            if quantity_text:
                if crowd_check:
                    label = place_quantity_label(self.labels, settled, quantity_text, f)
                else:
                    label = quantity_label(settled, quantity_text, f)
                if label is not None:
                    self.labels.append(label)
        return settled

    def freeze(self, diagram_type: DiagramType) -> DiagramScene:
        return DiagramScene(
            diagram_type=diagram_type,
            frame=self.frame,
            lines=tuple(self.lines),
            points=tuple(self.points),
            labels=tuple(self.labels),
        )


def build_scene(
    diagram_type: DiagramType | str,
    parameters: DiagramParameters,
    frame: PlotFrame,
) -> DiagramScene:
    """Build the full scene for one diagram from a parameter snapshot."""
    diagram_type = DiagramType(diagram_type)
    draft = _SceneDraft(frame)
    draft.add_axes()
    draft.add_text(parameters)
    _BUILDERS[diagram_type](draft, parameters)
    scene = draft.freeze(diagram_type)
    logger.debug(
        "Built %s scene: %d lines, %d points, %d labels",
        diagram_type.value, len(scene.lines), len(scene.points), len(scene.labels),
    )
    return scene


def _market_curves(
    params: DiagramParameters, frame: PlotFrame, anchored: bool
) -> tuple[Segment, Segment]:
    """Base upward and downward sloping curves crossing at the frame centre.

    With ``anchored`` the downward curve ends level with the upward curve's
    right end, where its label sits.
    """
    cx, cy = frame.center_x, frame.center_y
    supply = clip(
        generate_segment(
            Orientation.SUPPLY, params.supply_elasticity, frame, cx, cy,
            angle=params.supply_angle,
        ),
        frame,
    )
    anchor_x = None
    if anchored and not supply.is_vertical:
        anchor_x = max(supply.x1, supply.x2)
    demand = generate_segment(
        Orientation.DEMAND, params.demand_elasticity, frame, cx, cy, anchor_x=anchor_x
    )
    return supply, demand


def _build_supply_demand(draft: _SceneDraft, params: DiagramParameters) -> None:
    frame = draft.frame
    # The subsidy curve moves right, so the demand label column is not the
    # supply curve's end any more.
    supply, demand = _market_curves(params, frame, anchored=not params.show_subsidy)
    draft.add_curve(supply, CurveRole.SUPPLY, "S₁")
    draft.add_curve(demand, CurveRole.DEMAND, "D")

    market_roles = (CurveRole.SUPPLY, CurveRole.DEMAND)
    equilibrium = draft.add_point(intersect(supply, demand, frame, market_roles), "Pₑ", "Qₑ")

    if params.show_tax:
        taxed = draft.add_curve(
            shift(supply, shift_spec_for(CurveRole.SUPPLY_TAX, params.tax_distance), frame),
            CurveRole.SUPPLY_TAX,
            "S₂",
        )
        if taxed is not None:
            point = draft.add_point(
                intersect(taxed, demand, frame, (CurveRole.SUPPLY_TAX, CurveRole.DEMAND)),
                "P₁",
                "Q₁",
            )
            if point is not None and params.show_tax_wedge:
                draft.add_point(project_onto(supply, point.x, (CurveRole.SUPPLY,)), "P₂")

    if params.show_subsidy:
        subsidised = draft.add_curve(
            shift(supply, shift_spec_for(CurveRole.SUPPLY_SUBSIDY, params.subsidy_distance), frame),
            CurveRole.SUPPLY_SUBSIDY,
            "S₃",
        )
        if subsidised is not None:
            point = draft.add_point(
                intersect(subsidised, demand, frame, (CurveRole.SUPPLY_SUBSIDY, CurveRole.DEMAND)),
                "P₃",
                "Q₃",
            )
            if point is not None and params.show_subsidy_wedge:
                draft.add_point(project_onto(supply, point.x, (CurveRole.SUPPLY,)), "P₄")

    if params.show_advertising:
        advertised = draft.add_curve(
            shift(
                demand,
                shift_spec_for(CurveRole.DEMAND_ADVERTISING, params.advertising_distance),
                frame,
            ),
            CurveRole.DEMAND_ADVERTISING,
            "D₂",
        )
        if advertised is not None:
            draft.add_point(
                intersect(supply, advertised, frame, (CurveRole.SUPPLY, CurveRole.DEMAND_ADVERTISING)),
                "Pₐ",
                "Qₐ",
            )

    if equilibrium is None:
        return
    if params.show_price_ceiling:
        _add_price_control(
            draft, supply, demand,
            equilibrium.y + params.price_ceiling_distance,
            CurveRole.PRICE_CEILING, "Pc", ("Qs", "Qd"),
        )
    if params.show_price_floor:
        _add_price_control(
            draft, supply, demand,
            equilibrium.y - params.price_floor_distance,
            CurveRole.PRICE_FLOOR, "Pf", ("Qs′", "Qd′"),
        )


def _add_price_control(
    draft: _SceneDraft,
    supply: Segment,
    demand: Segment,
    price_y: float,
    role: CurveRole,
    text: str,
    quantity_texts: tuple[str, str],
) -> None:
    """Horizontal ceiling or floor with the quantities it induces."""
    frame = draft.frame
    if not frame.min_y <= price_y <= frame.max_y:
        logger.debug("%s at y=%.1f is outside the frame", role.value, price_y)
        return

    control = draft.add_curve(Segment(frame.min_x, price_y, frame.max_x, price_y), role, text)
    draft.add_point(intersect(control, supply, frame, (role, CurveRole.SUPPLY)), None, quantity_texts[0])
    draft.add_point(intersect(control, demand, frame, (role, CurveRole.DEMAND)), None, quantity_texts[1])


def _build_externalities(draft: _SceneDraft, params: DiagramParameters) -> None:
    frame = draft.frame
    try:
        kind = ExternalityKind(params.externality)
    except ValueError:
        logger.debug("Unknown externality %r, using negative production", params.externality)
        kind = ExternalityKind.NEGATIVE_PRODUCTION

    supply, demand = _market_curves(params, frame, anchored=True)
    production = kind in (
        ExternalityKind.NEGATIVE_PRODUCTION,
        ExternalityKind.POSITIVE_PRODUCTION,
    )

    if production:
        upward = kind == ExternalityKind.NEGATIVE_PRODUCTION
        draft.add_curve(supply, CurveRole.MPC, "MPC")
        draft.add_curve(demand, CurveRole.MPB, "MPB = MSB")
        social = draft.add_curve(
            shift(supply, shift_spec_for(CurveRole.MSC, params.externality_gap, upward), frame),
            CurveRole.MSC,
            "MSC",
        )
        optimum_pair = (social, demand)
        optimum_roles = (CurveRole.MSC, CurveRole.MPB)
    else:
        upward = kind == ExternalityKind.POSITIVE_CONSUMPTION
        draft.add_curve(supply, CurveRole.MPC, "MPC = MSC")
        draft.add_curve(demand, CurveRole.MPB, "MPB")
        social = draft.add_curve(
            shift(demand, shift_spec_for(CurveRole.MSB, params.externality_gap, upward), frame),
            CurveRole.MSB,
            "MSB",
        )
        optimum_pair = (supply, social)
        optimum_roles = (CurveRole.MPC, CurveRole.MSB)

    market = draft.add_point(
        intersect(supply, demand, frame, (CurveRole.MPC, CurveRole.MPB)), "Pₘ", "Qₘ"
    )
    if social is None:
        return

    optimum = draft.add_point(intersect(*optimum_pair, frame, optimum_roles), "P*", "Q*")
    if params.show_welfare_loss and market is not None and optimum is not None:
        _add_welfare_loss(draft, social, market, optimum)


def _add_welfare_loss(
    draft: _SceneDraft,
    social: Segment,
    market: IntersectionPoint,
    optimum: IntersectionPoint,
) -> None:
    """Outline the welfare loss triangle between the two equilibria."""
    vertex = draft.add_point(project_onto(social, market.x, (CurveRole.GUIDE,)))
    if vertex is None:
        return
    draft.add_guide(market.x, market.y, vertex.x, vertex.y)
    draft.add_guide(vertex.x, vertex.y, optimum.x, optimum.y)
    draft.add_guide(optimum.x, optimum.y, market.x, market.y)
    cx = (market.x + vertex.x + optimum.x) / 3
    cy = (market.y + vertex.y + optimum.y) / 3
    draft.labels.append(LabelPlacement("DWL", cx, cy, CurveRole.GUIDE, text_anchor="middle"))


def _fit_chain(segments: tuple[Segment, ...], frame: PlotFrame) -> list[Segment]:
    """Clip frontier pieces into the frame, dropping pieces that miss it."""
    fitted = []
    for segment in segments:
        if outside_frame(segment, frame):
            continue
        clipped = clip(segment, frame)
        if not fits_frame(clipped, frame):
            logger.debug("Dropping frontier piece %s: its line misses the frame", segment)
            continue
        fitted.append(clipped)
    return fitted


def _add_chain(
    draft: _SceneDraft, segments: list[Segment], role: CurveRole, text: str
) -> None:
    for i, segment in enumerate(segments):
        draft.add_curve(segment, role, text if i == len(segments) - 1 else "")


def _build_ppc(draft: _SceneDraft, params: DiagramParameters) -> None:
    frame = draft.frame
    _add_chain(
        draft,
        _fit_chain(generate_frontier(params.opportunity_cost, frame), frame),
        CurveRole.PPC,
        "PPC",
    )
    if params.show_ppc_shift and params.ppc_shift_distance > 0:
        grown = generate_frontier(
            params.opportunity_cost, frame, grow=params.ppc_shift_distance
        )
        _add_chain(draft, _fit_chain(grown, frame), CurveRole.PPC_SHIFTED, "PPC₂")

    if not params.show_ppc_points:
        return

    profile = resolve_frontier(params.opportunity_cost)
    x_reach, y_reach = frontier_reach(profile, frame)
    ax, ay = frontier_point(profile, x_reach, y_reach, FRONTIER_POINT_T, frame)
    for text, ratio, guides in (
        ("A", 1.0, ""),
        ("B", FRONTIER_INSIDE_RATIO, None),
        ("C", _OUTSIDE_RATIO, None),
    ):
        candidate = IntersectionPoint(
            frame.min_x + (ax - frame.min_x) * ratio,
            frame.max_y - (frame.max_y - ay) * ratio,
            (CurveRole.PPC,),
        )
        point = draft.add_point(candidate, guides, guides)
        if point is not None:
            draft.labels.append(point_label(point, text))


def _build_ad_as(draft: _SceneDraft, params: DiagramParameters) -> None:
    frame = draft.frame
    sras, ad = _market_curves(params, frame, anchored=True)
    draft.add_curve(sras, CurveRole.SRAS, "SRAS")
    draft.add_curve(ad, CurveRole.AD, "AD")

    if params.show_lras:
        draft.add_curve(
            Segment(frame.center_x, frame.min_y, frame.center_x, frame.max_y),
            CurveRole.LRAS,
            "LRAS",
        )

    equilibrium = intersect(sras, ad, frame, (CurveRole.SRAS, CurveRole.AD))
    at_full_employment = (
        params.show_lras and abs(equilibrium.x - frame.center_x) < 0.5
    )
    draft.add_point(equilibrium, "PLₑ", "Yf" if at_full_employment else "Yₑ")
    if params.show_lras and not at_full_employment:
        full = IntersectionPoint(frame.center_x, frame.max_y, (CurveRole.LRAS,))
        label = place_quantity_label(draft.labels, full, "Yf", frame)
        if label is not None:
            draft.labels.append(label)

    shifted_ad = None
    if params.show_ad_shift:
        shifted_ad = draft.add_curve(
            shift(
                ad,
                shift_spec_for(CurveRole.AD_SHIFTED, params.ad_shift_distance, params.ad_increase),
                frame,
            ),
            CurveRole.AD_SHIFTED,
            "AD₂",
        )
        if shifted_ad is not None:
            draft.add_point(
                intersect(sras, shifted_ad, frame, (CurveRole.SRAS, CurveRole.AD_SHIFTED)),
                "PL₁",
                "Y₁",
            )

    if params.show_sras_tax:
        taxed = draft.add_curve(
            shift(sras, shift_spec_for(CurveRole.SRAS_TAX, params.sras_tax_distance), frame),
            CurveRole.SRAS_TAX,
            "SRAS₂",
        )
        if taxed is not None:
            draft.add_point(
                intersect(taxed, ad, frame, (CurveRole.SRAS_TAX, CurveRole.AD)),
                "PL₂",
                "Y₂",
                crowd_check=True,
            )
            if shifted_ad is not None:
                draft.add_point(
                    intersect(taxed, shifted_ad, frame, (CurveRole.SRAS_TAX, CurveRole.AD_SHIFTED)),
                    "PL₃",
                    "Y₃",
                )


_BUILDERS: dict[DiagramType, Callable[[_SceneDraft, DiagramParameters], None]] = {
    DiagramType.SUPPLY_DEMAND: _build_supply_demand,
    DiagramType.EXTERNALITIES: _build_externalities,
    DiagramType.PPC: _build_ppc,
    DiagramType.NEO_CLASSICAL_AD_AS: _build_ad_as,
}
