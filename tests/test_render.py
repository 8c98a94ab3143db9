"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest

from econ_diagrams.layout.engine import build_scene
from econ_diagrams.layout.frame import make_frame
from econ_diagrams.parser.model import CurveRole, DiagramType, default_parameters
from econ_diagrams.render.style import customize_theme
from econ_diagrams.render.svg import line_color, render_svg
from econ_diagrams.themes import CLASSIC_THEME, IB_THEME, MONO_THEME, THEMES

SVG_NS = "{http://www.w3.org/2000/svg}"


def _scene(diagram_type=DiagramType.SUPPLY_DEMAND, scale=1.0, **changes):
    params = default_parameters(diagram_type).with_changes(**changes)
    frame = make_frame(650, 600, diagram_type, scale)
    return build_scene(diagram_type, params, frame)


def _render_simple(**changes):
    return render_svg(_scene(**changes), CLASSIC_THEME)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_ends_with_newline():
    assert _render_simple().endswith("\n")


def test_render_contains_title_and_labels():
    svg = _render_simple()
    assert "Figure 1: Supply and Demand" in svg
    for text in ("S₁", "Pₑ", "Qₑ", "Price", "Quantity"):
        assert text in svg


def test_render_curve_colours():
    svg = _render_simple()
    assert CLASSIC_THEME.primary_color in svg
    assert CLASSIC_THEME.secondary_color in svg


def test_render_dashed_guides():
    svg = _render_simple()
    assert CLASSIC_THEME.guide_dash in svg


def test_render_point_markers():
    root = ET.fromstring(_render_simple(show_tax=True))
    circles = root.findall(f".//{SVG_NS}circle")
    assert len(circles) == 2


def test_render_ppc_as_paths():
    root = ET.fromstring(render_svg(_scene(DiagramType.PPC, show_ppc_shift=True), CLASSIC_THEME))
    assert len(root.findall(f".//{SVG_NS}path")) == 2


def test_watermark_included_by_default():
    svg = _render_simple(watermark="econ-diagrams.example")
    assert "econ-diagrams.example" in svg


def test_watermark_can_be_omitted():
    scene = _scene(watermark="econ-diagrams.example")
    svg = render_svg(scene, CLASSIC_THEME, include_watermark=False)
    assert "econ-diagrams.example" not in svg
    assert "Pₑ" in svg


def test_pixel_scale_sets_size():
    root = ET.fromstring(render_svg(_scene(scale=2.0), CLASSIC_THEME))
    assert float(root.get("width")) == pytest.approx(1300)
    assert float(root.get("height")) == pytest.approx(1200)


@pytest.mark.parametrize("name", sorted(THEMES))
def test_every_theme_renders(name):
    for diagram_type in DiagramType:
        ET.fromstring(render_svg(_scene(diagram_type), THEMES[name]))


def test_ib_theme_colours():
    svg = render_svg(_scene(), IB_THEME)
    assert "#0066cc" in svg
    assert "#cc0000" in svg


class TestLineColor:
    def test_supply_family_primary(self):
        for role in (CurveRole.SUPPLY, CurveRole.MPC, CurveRole.SRAS, CurveRole.PPC):
            assert line_color(role, CLASSIC_THEME) == CLASSIC_THEME.primary_color

    def test_demand_family_secondary(self):
        for role in (CurveRole.DEMAND, CurveRole.MSB, CurveRole.AD_SHIFTED):
            assert line_color(role, CLASSIC_THEME) == CLASSIC_THEME.secondary_color

    def test_price_controls_use_guide_colour(self):
        assert line_color(CurveRole.PRICE_CEILING, MONO_THEME) == MONO_THEME.guide_color


class TestCustomizeTheme:
    def test_no_overrides_keeps_theme(self):
        assert customize_theme(CLASSIC_THEME) == CLASSIC_THEME

    def test_overrides_applied(self):
        theme = customize_theme(
            CLASSIC_THEME,
            font_size=20,
            line_thickness=4,
            primary_color="#111111",
            secondary_color="#222222",
        )
        assert theme.label_font_size == 20
        assert theme.title_font_size == pytest.approx(24)
        assert theme.line_width == 4
        assert theme.axis_width == pytest.approx(3)
        assert theme.primary_color == "#111111"
        assert theme.secondary_color == "#222222"
        # The registry theme is untouched
        assert CLASSIC_THEME.primary_color == "#2563eb"

    @pytest.mark.parametrize("font_size,expected", [(2, 8), (40, 24)])
    def test_font_size_clamped(self, font_size, expected):
        assert customize_theme(CLASSIC_THEME, font_size=font_size).label_font_size == expected

    @pytest.mark.parametrize("thickness,expected", [(0.2, 1), (9, 5)])
    def test_line_thickness_clamped(self, thickness, expected):
        assert customize_theme(CLASSIC_THEME, line_thickness=thickness).line_width == expected

    def test_overrides_reach_the_svg(self):
        theme = customize_theme(
            CLASSIC_THEME,
            font_size=22,
            line_thickness=4.5,
            primary_color="#0f766e",
            secondary_color="#b45309",
        )
        svg = render_svg(_scene(), theme)
        assert "#0f766e" in svg
        assert "#b45309" in svg
        assert CLASSIC_THEME.primary_color not in svg
        assert 'stroke-width="4.5"' in svg
        assert 'font-size="22' in svg
