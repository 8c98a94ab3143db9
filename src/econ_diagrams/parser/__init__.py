"""Diagram data model and parameter file parsing."""

from econ_diagrams.parser.directives import parse_parameters
from econ_diagrams.parser.model import (
    DiagramParameters,
    DiagramScene,
    DiagramType,
    default_parameters,
)

__all__ = [
    "DiagramParameters",
    "DiagramScene",
    "DiagramType",
    "default_parameters",
    "parse_parameters",
]
