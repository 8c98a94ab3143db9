#!/usr/bin/env python3
"""Batch render every diagram type with common interventions to SVG and PNG.

Outputs go to /tmp/econ_diagrams_gallery/.

Usage:
    python scripts/render_gallery.py [--theme ib] [--no-watermark]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from econ_diagrams.layout.engine import build_scene  # noqa: E402
from econ_diagrams.layout.frame import make_frame  # noqa: E402
from econ_diagrams.parser.model import DiagramType, default_parameters  # noqa: E402
from econ_diagrams.render.svg import render_svg  # noqa: E402
from econ_diagrams.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/econ_diagrams_gallery")

# (name, diagram type, parameter changes)
PRESETS: list[tuple[str, DiagramType, dict]] = [
    ("market", DiagramType.SUPPLY_DEMAND, {}),
    ("tax", DiagramType.SUPPLY_DEMAND, {"show_tax": True, "show_tax_wedge": True}),
    ("subsidy", DiagramType.SUPPLY_DEMAND, {"show_subsidy": True, "show_subsidy_wedge": True}),
    ("inelastic_tax", DiagramType.SUPPLY_DEMAND, {
        "show_tax": True, "demand_elasticity": "relatively-inelastic",
    }),
    ("advertising", DiagramType.SUPPLY_DEMAND, {"show_advertising": True}),
    ("price_controls", DiagramType.SUPPLY_DEMAND, {
        "show_price_ceiling": True, "show_price_floor": True,
    }),
    ("vertical_supply", DiagramType.SUPPLY_DEMAND, {
        "supply_elasticity": "perfectly-inelastic", "show_tax": True,
    }),
    ("negative_production", DiagramType.EXTERNALITIES, {"show_welfare_loss": True}),
    ("positive_consumption", DiagramType.EXTERNALITIES, {
        "externality": "positive-consumption", "show_welfare_loss": True,
    }),
    ("ppc_increasing", DiagramType.PPC, {"show_ppc_points": True}),
    ("ppc_growth", DiagramType.PPC, {"opportunity_cost": "constant", "show_ppc_shift": True}),
    ("ad_as", DiagramType.NEO_CLASSICAL_AD_AS, {}),
    ("ad_as_shocks", DiagramType.NEO_CLASSICAL_AD_AS, {
        "show_ad_shift": True, "show_sras_tax": True,
    }),
]


def render_preset(
    name: str,
    diagram_type: DiagramType,
    changes: dict,
    output_dir: Path,
    *,
    theme_name: str = "classic",
    watermark: bool = True,
) -> tuple[str, list[str]]:
    """Build and render one preset to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    issues: list[str] = []

    try:
        params = default_parameters(diagram_type).with_changes(
            watermark="econ-diagrams", **changes
        )
        frame = make_frame(650, 600, diagram_type)
        scene = build_scene(diagram_type, params, frame)
    except Exception as e:
        return name, [f"BUILD ERROR: {e}"]

    try:
        svg_str = render_svg(scene, THEMES[theme_name], include_watermark=watermark)
    except Exception as e:
        return name, [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render diagram presets")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="classic", help="Visual theme"
    )
    parser.add_argument(
        "--no-watermark", action="store_true", help="Render without the watermark"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    print(f"Rendering {len(PRESETS)} presets to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(name) for name, _, _ in PRESETS)
    any_errors = False

    for name, diagram_type, changes in PRESETS:
        name, issues = render_preset(
            name, diagram_type, changes, OUTPUT_DIR,
            theme_name=args.theme, watermark=not args.no_watermark,
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
