"""Parser for diagram parameter files with %%econ directives.

Uses a simple line-by-line approach: every meaningful line is a
``%%econ key: value`` directive naming a :class:`DiagramParameters`
field (the ``show_`` prefix of toggles may be dropped, so ``tax: on``
and ``show_tax: on`` are equivalent). Other ``%%`` and ``#`` lines are
comments.

Example::

    %%econ type: supply-demand
    %%econ title: Figure 3: Tax on cigarettes
    %%econ supply_elasticity: relatively-inelastic
    %%econ tax: on
    %%econ tax_distance: 60
    %%econ primary_color: #1d4ed8
"""

from __future__ import annotations

__all__ = ["parse_parameters"]

import logging
from dataclasses import fields

from econ_diagrams.layout.constants import MAX_SHIFT_DISTANCE
from econ_diagrams.parser.model import (
    DiagramParameters,
    DiagramType,
    default_parameters,
)

logger = logging.getLogger(__name__)

_PREFIX = "%%econ"

_FIELD_NAMES = {f.name for f in fields(DiagramParameters)}
_BOOL_FIELDS = {name for name in _FIELD_NAMES if name.startswith("show_")} | {"ad_increase"}
_DISTANCE_FIELDS = {
    name for name in _FIELD_NAMES if name.endswith("_distance") or name.endswith("_gap")
}
_FLOAT_FIELDS = _DISTANCE_FIELDS | {"supply_angle", "font_size", "line_thickness"}

_TRUE_WORDS = {"on", "true", "yes", "1"}
_FALSE_WORDS = {"off", "false", "no", "0"}


def parse_parameters(text: str) -> tuple[DiagramType | None, DiagramParameters]:
    """Parse a parameter file into a diagram type and parameters.

    The diagram type is ``None`` when the file has no ``type`` directive;
    title and axis labels then keep the supply and demand defaults.
    Unknown keys and malformed values are ignored.
    """
    diagram_type: DiagramType | None = None
    changes: dict[str, object] = {}

    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(_PREFIX):
            key, value = _split_directive(stripped[len(_PREFIX):], number)
            if key is None:
                continue
            if key == "type":
                diagram_type = _parse_type(value, number)
                continue
            _apply(key, value, changes, number)
            continue

        if stripped.startswith("%%") or stripped.startswith("#"):
            continue

        raise ValueError(
            f"Line {number}: expected a '%%econ key: value' directive, "
            f"got {stripped!r}. Comment lines start with '%%' or '#'."
        )

    base = default_parameters(diagram_type or DiagramType.SUPPLY_DEMAND)
    return diagram_type, base.with_changes(**changes)


def _split_directive(content: str, number: int) -> tuple[str | None, str]:
    key, sep, value = content.partition(":")
    if not sep:
        logger.debug("Line %d: directive without ':' ignored", number)
        return None, ""
    return key.strip().lower().replace("-", "_"), value.strip()


def _parse_type(value: str, number: int) -> DiagramType:
    try:
        return DiagramType(value.lower())
    except ValueError:
        choices = ", ".join(t.value for t in DiagramType)
        raise ValueError(
            f"Line {number}: unknown diagram type {value!r} (choose from {choices})"
        ) from None


def _apply(key: str, value: str, changes: dict[str, object], number: int) -> None:
    """Convert one directive value onto its parameter field."""
    if key not in _FIELD_NAMES and f"show_{key}" in _FIELD_NAMES:
        key = f"show_{key}"
    if key not in _FIELD_NAMES:
        logger.debug("Line %d: unknown key %r ignored", number, key)
        return

    if key in _BOOL_FIELDS:
        word = value.lower()
        if word in _TRUE_WORDS:
            changes[key] = True
        elif word in _FALSE_WORDS:
            changes[key] = False
        else:
            logger.debug("Line %d: %r is not on/off for %s", number, value, key)
    elif key in _FLOAT_FIELDS:
        try:
            number_value = float(value)
        except ValueError:
            logger.debug("Line %d: %r is not a number for %s", number, value, key)
            return
        if key in _DISTANCE_FIELDS:
            number_value = max(0.0, min(MAX_SHIFT_DISTANCE, number_value))
        changes[key] = number_value
    else:
        changes[key] = value
