"""Tests for the curve parameter resolver and segment generator."""

from __future__ import annotations

import pytest

from econ_diagrams.layout.curves import (
    frontier_point,
    generate_frontier,
    generate_segment,
    resolve,
    resolve_frontier,
    retarget_right_end,
)
from econ_diagrams.layout.frame import make_frame
from econ_diagrams.parser.model import (
    ElasticityClass,
    OpportunityCost,
    Orientation,
    Segment,
)

FRAME = make_frame(650, 600)
CX, CY = FRAME.center_x, FRAME.center_y


def _supply(elasticity=ElasticityClass.UNITARY, **kwargs):
    return generate_segment(Orientation.SUPPLY, elasticity, FRAME, CX, CY, **kwargs)


def _demand(elasticity=ElasticityClass.UNITARY, **kwargs):
    return generate_segment(Orientation.DEMAND, elasticity, FRAME, CX, CY, **kwargs)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TestResolve:
    @pytest.mark.parametrize("elasticity,angle,extent", [
        (ElasticityClass.UNITARY, 45, 80),
        (ElasticityClass.RELATIVELY_ELASTIC, 20, 100),
        (ElasticityClass.RELATIVELY_INELASTIC, 65, 40),
        (ElasticityClass.PERFECTLY_ELASTIC, 0, 100),
        (ElasticityClass.PERFECTLY_INELASTIC, 90, 5),
    ])
    def test_supply_table(self, elasticity, angle, extent):
        profile = resolve(Orientation.SUPPLY, elasticity)
        assert profile.angle_degrees == angle
        assert profile.extent_percent == extent

    @pytest.mark.parametrize("elasticity,angle,extent", [
        (ElasticityClass.UNITARY, -45, 80),
        (ElasticityClass.RELATIVELY_ELASTIC, -20, 100),
        (ElasticityClass.RELATIVELY_INELASTIC, -75, 95),
        (ElasticityClass.PERFECTLY_ELASTIC, 0, 100),
        (ElasticityClass.PERFECTLY_INELASTIC, -90, 5),
    ])
    def test_demand_table(self, elasticity, angle, extent):
        profile = resolve(Orientation.DEMAND, elasticity)
        assert profile.angle_degrees == angle
        assert profile.extent_percent == extent

    def test_string_values_accepted(self):
        assert resolve(Orientation.SUPPLY, "relatively-elastic").angle_degrees == 20

    @pytest.mark.parametrize("value", ["", "super-elastic", None])
    def test_unknown_falls_back_to_unitary(self, value):
        assert resolve(Orientation.SUPPLY, value) == resolve(
            Orientation.SUPPLY, ElasticityClass.UNITARY
        )
        assert resolve(Orientation.DEMAND, value).angle_degrees == -45

    def test_frontier_fallback_is_increasing(self):
        assert resolve_frontier("bogus") == resolve_frontier(OpportunityCost.INCREASING)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class TestSupplySegment:
    def test_unitary_values(self):
        seg = _supply()
        half = 480 * 0.8 * 0.8 / 2
        assert seg.x1 == pytest.approx(CX - half)
        assert seg.y1 == pytest.approx(CY + half)
        assert seg.x2 == pytest.approx(CX + half)
        assert seg.y2 == pytest.approx(CY - half)

    def test_runs_left_to_right(self):
        seg = _supply()
        assert seg.x1 < seg.x2
        assert not seg.is_demand_oriented

    def test_perfectly_elastic_is_horizontal(self):
        seg = _supply(ElasticityClass.PERFECTLY_ELASTIC)
        assert seg.y1 == seg.y2 == pytest.approx(CY)
        assert seg.x1 < seg.x2

    @pytest.mark.parametrize("angle", [90, 95, 120])
    def test_vertical_snap(self, angle):
        seg = _supply(angle=angle)
        assert seg.points() == (CX, FRAME.min_y, CX, FRAME.max_y)

    def test_perfectly_inelastic_is_full_height(self):
        seg = _supply(ElasticityClass.PERFECTLY_INELASTIC)
        assert seg.is_vertical
        assert {seg.y1, seg.y2} == {FRAME.min_y, FRAME.max_y}

    def test_near_vertical_band_gets_steeper(self):
        slopes = [abs(_supply(angle=a).slope) for a in (60, 80, 86, 88, 89, 89.5, 89.9)]
        assert slopes == sorted(slopes)
        assert len(set(slopes)) == len(slopes)

    @pytest.mark.parametrize("angle", [30, 60, 80, 86, 88, 89.5, 89.99])
    def test_generated_y_stays_in_frame(self, angle):
        seg = _supply(angle=angle)
        for y in (seg.y1, seg.y2):
            assert FRAME.min_y - 1e-9 <= y <= FRAME.max_y + 1e-9

    def test_clamp_preserves_angle(self):
        """A steep line is shortened rather than bent."""
        seg = _supply(angle=75, extent=100)
        assert seg.slope == pytest.approx(-3.7320508, rel=1e-6)


class TestDemandSegment:
    def test_runs_right_to_left(self):
        seg = _demand()
        assert seg.x1 > seg.x2
        assert seg.is_demand_oriented

    def test_perfectly_elastic_is_horizontal(self):
        seg = _demand(ElasticityClass.PERFECTLY_ELASTIC)
        assert seg.y1 == seg.y2 == pytest.approx(CY)
        assert seg.x1 > seg.x2

    def test_mirrors_unitary_supply(self):
        supply, demand = _supply(), _demand()
        assert demand.x1 == pytest.approx(supply.x2)
        assert demand.y1 == pytest.approx(supply.y1)
        assert demand.x2 == pytest.approx(supply.x1)
        assert demand.y2 == pytest.approx(supply.y2)

    @pytest.mark.parametrize("angle", [-90, -89.5, 89.5, -90.9])
    def test_snaps_within_a_degree(self, angle):
        seg = _demand(angle=angle)
        assert seg.points() == (CX, FRAME.max_y, CX, FRAME.min_y)

    def test_no_graduated_band(self):
        seg = _demand(angle=-88)
        assert not seg.is_vertical

    def test_anchor_moves_right_end_along_line(self):
        base = _demand()
        anchored = _demand(anchor_x=base.x1 + 10)
        assert anchored.x1 == pytest.approx(base.x1 + 10)
        assert anchored.slope == pytest.approx(base.slope)
        assert anchored.x2 == base.x2

    def test_anchor_never_below_x_axis(self):
        seg = _demand(anchor_x=2000)
        assert seg.y1 == pytest.approx(FRAME.max_y)


class TestRetargetRightEnd:
    def test_vertical_untouched(self):
        seg = Segment(400, 530, 400, 80)
        assert retarget_right_end(seg, 500, FRAME) is seg

    def test_anchor_left_of_curve_untouched(self):
        seg = Segment(500, 400, 300, 200)
        assert retarget_right_end(seg, 250, FRAME) is seg


# ---------------------------------------------------------------------------
# Production possibility frontier
# ---------------------------------------------------------------------------


class TestFrontier:
    @pytest.mark.parametrize("cost", list(OpportunityCost))
    def test_chain_is_continuous(self, cost):
        chain = generate_frontier(cost, FRAME)
        assert len(chain) == 24
        for a, b in zip(chain, chain[1:]):
            assert (a.x2, a.y2) == (b.x1, b.y1)

    def test_runs_from_y_intercept_to_x_intercept(self):
        chain = generate_frontier(OpportunityCost.INCREASING, FRAME)
        assert chain[0].x1 == pytest.approx(FRAME.min_x)
        assert chain[-1].y2 == pytest.approx(FRAME.max_y)

    def test_constant_cost_is_straight(self):
        chain = generate_frontier(OpportunityCost.CONSTANT, FRAME)
        slopes = [seg.slope for seg in chain]
        assert slopes == pytest.approx([slopes[0]] * len(slopes))

    def test_increasing_cost_bows_outward(self):
        """The midpoint lies beyond the straight chord between intercepts."""
        profile = resolve_frontier(OpportunityCost.INCREASING)
        x, y = frontier_point(profile, 300, 300, 0.5, FRAME)
        assert (x - FRAME.min_x) + (FRAME.max_y - y) > 300

    def test_decreasing_cost_bows_inward(self):
        profile = resolve_frontier(OpportunityCost.DECREASING)
        x, y = frontier_point(profile, 300, 300, 0.5, FRAME)
        assert (x - FRAME.min_x) + (FRAME.max_y - y) < 300

    def test_growth_moves_intercepts_out(self):
        base = generate_frontier(OpportunityCost.CONSTANT, FRAME)
        grown = generate_frontier(OpportunityCost.CONSTANT, FRAME, grow=40)
        assert grown[-1].x2 == pytest.approx(base[-1].x2 + 40)
        assert grown[0].y1 == pytest.approx(base[0].y1 - 40)
