"""CLI for econ-diagrams."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import click

from econ_diagrams import __version__
from econ_diagrams.layout.constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from econ_diagrams.layout.curves import resolve
from econ_diagrams.layout.engine import build_scene
from econ_diagrams.layout.frame import clamp_canvas_size, make_frame
from econ_diagrams.parser import (
    DiagramParameters,
    DiagramScene,
    DiagramType,
    default_parameters,
    parse_parameters,
)
from econ_diagrams.parser.model import (
    ElasticityClass,
    ExternalityKind,
    OpportunityCost,
    Orientation,
)
from econ_diagrams.render import customize_theme, render_svg
from econ_diagrams.themes import THEMES

logger = logging.getLogger(__name__)

_DIAGRAM_TYPES = [t.value for t in DiagramType]

# flag -> DiagramParameters field switched on
_TOGGLES = {
    "tax": "show_tax",
    "subsidy": "show_subsidy",
    "tax_wedge": "show_tax_wedge",
    "subsidy_wedge": "show_subsidy_wedge",
    "advertising": "show_advertising",
    "ceiling": "show_price_ceiling",
    "floor": "show_price_floor",
    "welfare_loss": "show_welfare_loss",
    "ppc_shift": "show_ppc_shift",
    "ppc_points": "show_ppc_points",
    "ad_shift": "show_ad_shift",
    "sras_tax": "show_sras_tax",
}


def _scene_options(func):
    """Options shared by every command that builds a scene."""
    decorators = [
        click.argument("diagram_type", type=click.Choice(_DIAGRAM_TYPES)),
        click.option("-p", "--params", "params_file",
                     type=click.Path(exists=True, path_type=Path), default=None,
                     help="Parameter file with %%econ directives"),
        click.option("--width", type=float, default=DEFAULT_CANVAS_WIDTH,
                     help=f"Canvas width in pixels (default: {DEFAULT_CANVAS_WIDTH:g})"),
        click.option("--height", type=float, default=DEFAULT_CANVAS_HEIGHT,
                     help=f"Canvas height in pixels (default: {DEFAULT_CANVAS_HEIGHT:g})"),
        click.option("--scale", type=float, default=1.0,
                     help="Pixel scale of the exported SVG (default: 1)"),
        click.option("--supply", "supply_elasticity",
                     type=click.Choice([e.value for e in ElasticityClass]), default=None,
                     help="Supply elasticity"),
        click.option("--demand", "demand_elasticity",
                     type=click.Choice([e.value for e in ElasticityClass]), default=None,
                     help="Demand elasticity"),
        click.option("--externality",
                     type=click.Choice([e.value for e in ExternalityKind]), default=None,
                     help="Externality kind (externalities diagrams)"),
        click.option("--opportunity-cost",
                     type=click.Choice([o.value for o in OpportunityCost]), default=None,
                     help="Opportunity cost (PPC diagrams)"),
        click.option("--decrease", is_flag=True,
                     help="Shift AD to the left instead of the right"),
    ]
    for flag in _TOGGLES:
        decorators.append(click.option(
            f"--{flag.replace('_', '-')}", flag, is_flag=True,
            help=f"Show the {flag.replace('_', ' ')}",
        ))
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _build(
    diagram_type: str,
    params_file: Path | None,
    width: float,
    height: float,
    scale: float,
    options: dict,
) -> tuple[DiagramParameters, DiagramScene]:
    """Resolve parameters from file and flags, then build the scene."""
    dtype = DiagramType(diagram_type)
    if params_file is not None:
        file_type, params = parse_parameters(params_file.read_text())
        if file_type is not None and file_type != dtype:
            raise ValueError(
                f"{params_file} describes a {file_type.value} diagram, "
                f"not {dtype.value}"
            )
    else:
        params = default_parameters(dtype)

    changes = {
        field: True
        for flag, field in _TOGGLES.items()
        if options.pop(flag, False)
    }
    if options.pop("decrease", False):
        changes["ad_increase"] = False
    changes.update({k: v for k, v in options.items() if v is not None})
    params = params.with_changes(**changes)

    clamped = clamp_canvas_size(width, height, scale)
    if clamped != (width, height, scale):
        logger.warning(
            "Canvas %gx%g at scale %g clamped to %gx%g at scale %g",
            width, height, scale, *clamped,
        )
    width, height, scale = clamped
    frame = make_frame(width, height, dtype, scale)
    return params, build_scene(dtype, params, frame)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True,
              help="Log geometry decisions (omitted curves and points)")
def cli(verbose: bool) -> None:
    """econ-diagrams: Generate textbook economics diagrams as SVG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_scene_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <diagram-type>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
@click.option("--watermark", type=str, default=None, help="Watermark text")
@click.option("--no-watermark", is_flag=True, help="Export without the watermark")
@click.option("--font-size", type=float, default=None,
              help="Label font size in pixels, 8-24 (overrides the theme)")
@click.option("--line-thickness", type=float, default=None,
              help="Curve stroke width in pixels, 1-5 (overrides the theme)")
@click.option("--primary-color", type=str, default=None,
              help="Colour of the supply-family curves")
@click.option("--secondary-color", type=str, default=None,
              help="Colour of the demand-family curves")
def render(
    diagram_type: str,
    params_file: Path | None,
    width: float,
    height: float,
    scale: float,
    output: Path | None,
    theme: str,
    no_watermark: bool,
    **options,
) -> None:
    """Render an economics diagram to SVG."""
    try:
        params, scene = _build(diagram_type, params_file, width, height, scale, options)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    style = customize_theme(
        THEMES[theme],
        font_size=params.font_size,
        line_thickness=params.line_thickness,
        primary_color=params.primary_color,
        secondary_color=params.secondary_color,
    )
    svg = render_svg(scene, style, include_watermark=not no_watermark)

    if output is None:
        output = Path(f"{diagram_type}.svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(scene.lines)} lines, "
               f"{len(scene.points)} points, "
               f"{len(scene.labels)} labels -> {output}")


@cli.command()
@_scene_options
def info(
    diagram_type: str,
    params_file: Path | None,
    width: float,
    height: float,
    scale: float,
    **options,
) -> None:
    """Show the geometry of a diagram without rendering it."""
    try:
        _, scene = _build(diagram_type, params_file, width, height, scale, options)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    f = scene.frame
    click.echo(f"Diagram: {scene.diagram_type.value}")
    click.echo(f"Canvas: {f.canvas_width:g}x{f.canvas_height:g} (scale {f.scale:g})")
    click.echo(f"Frame: x {f.min_x:g}..{f.max_x:g}, y {f.min_y:g}..{f.max_y:g}, "
               f"centre ({f.center_x:g}, {f.center_y:g})")

    counts = Counter(line.role.value for line in scene.lines)
    click.echo(f"Lines: {len(scene.lines)}")
    for role, count in counts.items():
        click.echo(f"  {role}: {count}")

    click.echo(f"Points: {len(scene.points)}")
    for point in scene.points:
        roles = ", ".join(r.value for r in point.roles) or "-"
        click.echo(f"  ({point.x:.1f}, {point.y:.1f}) [{roles}]")

    click.echo(f"Labels: {', '.join(scene.label_texts())}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a diagram parameter file."""
    text = input_file.read_text()
    try:
        diagram_type, params = parse_parameters(text)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    if diagram_type is None:
        click.echo("Valid: no type directive (defaults to supply-demand)")
    else:
        click.echo(f"Valid: {diagram_type.value}")

    supply = resolve(Orientation.SUPPLY, params.supply_elasticity)
    demand = resolve(Orientation.DEMAND, params.demand_elasticity)
    click.echo(f"Supply: {supply.angle_degrees:g} degrees, {supply.extent_percent:g}% extent")
    click.echo(f"Demand: {demand.angle_degrees:g} degrees, {demand.extent_percent:g}% extent")

    enabled = [field for field in _TOGGLES.values() if getattr(params, field)]
    click.echo(f"Enabled: {', '.join(enabled) or '(none)'}")
