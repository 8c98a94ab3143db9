"""Tests for the %%econ parameter file parser."""

from __future__ import annotations

import pytest

from econ_diagrams.parser import DiagramParameters, DiagramType, parse_parameters


def test_empty_file_gives_defaults():
    diagram_type, params = parse_parameters("")
    assert diagram_type is None
    assert params == DiagramParameters()


def test_type_sets_default_text():
    diagram_type, params = parse_parameters("%%econ type: ad-as\n")
    assert diagram_type == DiagramType.NEO_CLASSICAL_AD_AS
    assert params.x_axis_label == "Real GDP"
    assert params.y_axis_label == "Average Price Level ($)"


def test_title_keeps_colons():
    _, params = parse_parameters("%%econ title: Figure 3: Tax on cigarettes\n")
    assert params.title == "Figure 3: Tax on cigarettes"


def test_explicit_text_overrides_type_default():
    _, params = parse_parameters(
        "%%econ x_axis_label: Output\n"
        "%%econ type: ppc\n"
    )
    assert params.x_axis_label == "Output"
    assert params.y_axis_label == "Good A"


def test_toggles_with_and_without_prefix():
    _, params = parse_parameters(
        "%%econ tax: on\n"
        "%%econ show_subsidy: yes\n"
        "%%econ tax-wedge: true\n"
        "%%econ lras: off\n"
    )
    assert params.show_tax
    assert params.show_subsidy
    assert params.show_tax_wedge
    assert not params.show_lras


def test_elasticities_pass_through():
    _, params = parse_parameters(
        "%%econ supply_elasticity: relatively-inelastic\n"
        "%%econ demand_elasticity: who-knows\n"
    )
    assert params.supply_elasticity == "relatively-inelastic"
    # Resolved later through the unitary fallback
    assert params.demand_elasticity == "who-knows"


@pytest.mark.parametrize("value,expected", [
    ("60", 60.0),
    ("0", 0.0),
    ("-20", 0.0),
    ("9000", 500.0),
])
def test_distances_clamped(value, expected):
    _, params = parse_parameters(f"%%econ tax_distance: {value}\n")
    assert params.tax_distance == expected


def test_supply_angle_not_clamped():
    _, params = parse_parameters("%%econ supply_angle: 89.5\n")
    assert params.supply_angle == 89.5


def test_malformed_values_ignored():
    _, params = parse_parameters(
        "%%econ tax_distance: lots\n"
        "%%econ tax: maybe\n"
        "%%econ no colon here\n"
    )
    assert params.tax_distance == 40.0
    assert not params.show_tax


def test_unknown_keys_ignored():
    _, params = parse_parameters("%%econ colour: red\n")
    assert params == DiagramParameters()


def test_comments_and_blank_lines():
    _, params = parse_parameters(
        "# classroom handout\n"
        "\n"
        "%% interventions\n"
        "   %%econ tax: on\n"
    )
    assert params.show_tax


def test_unknown_type_raises():
    with pytest.raises(ValueError, match="unknown diagram type"):
        parse_parameters("%%econ type: isoquant\n")


def test_stray_line_raises_with_line_number():
    with pytest.raises(ValueError, match="Line 2"):
        parse_parameters("%%econ tax: on\nS1 --> D\n")


def test_style_overrides():
    _, params = parse_parameters(
        "%%econ font-size: 18\n"
        "%%econ line_thickness: 2.5\n"
        "%%econ primary_color: #1d4ed8\n"
        "%%econ secondary-color: #be123c\n"
    )
    assert params.font_size == 18.0
    assert params.line_thickness == 2.5
    assert params.primary_color == "#1d4ed8"
    assert params.secondary_color == "#be123c"


def test_style_defaults_defer_to_theme():
    _, params = parse_parameters("%%econ font_size: huge\n")
    assert params.font_size is None
    assert params.primary_color == ""
