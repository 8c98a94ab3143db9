"""Theme definitions for economics diagrams."""

from econ_diagrams.themes.classic import CLASSIC_THEME
from econ_diagrams.themes.ib import IB_THEME
from econ_diagrams.themes.mono import MONO_THEME

THEMES = {
    "classic": CLASSIC_THEME,
    "ib": IB_THEME,
    "mono": MONO_THEME,
}

__all__ = ["THEMES", "CLASSIC_THEME", "IB_THEME", "MONO_THEME"]
