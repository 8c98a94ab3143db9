"""Tests for label placement."""

from __future__ import annotations

import pytest

from econ_diagrams.layout.frame import make_frame
from econ_diagrams.layout.labels import (
    axis_labels,
    curve_label,
    place_quantity_label,
    price_label,
    quantity_label,
    title_label,
    watermark_label,
)
from econ_diagrams.parser.model import CurveRole, IntersectionPoint, LabelPlacement, Segment

FRAME = make_frame(650, 600)


class TestCurveLabel:
    def test_supply_label_past_top_right(self):
        label = curve_label(Segment(246, 474, 554, 166), "S₁", CurveRole.SUPPLY)
        assert (label.x, label.y) == (574, 146)
        assert label.role == CurveRole.SUPPLY

    def test_demand_label_past_right_end(self):
        label = curve_label(Segment(554, 474, 246, 166), "D", CurveRole.DEMAND)
        assert (label.x, label.y) == (574, 454)

    def test_vertical_label_above_top(self):
        label = curve_label(Segment(400, 80, 400, 530), "LRAS")
        assert (label.x, label.y) == (420, 60)


class TestAxisProjectionLabels:
    def test_price_label_left_of_axis(self):
        label = price_label(IntersectionPoint(400, 320), "Pₑ")
        assert (label.x, label.y) == (125, 312)

    def test_quantity_label_below_axis(self):
        label = quantity_label(IntersectionPoint(400, 320), "Qₑ", FRAME)
        assert (label.x, label.y) == (392, 545)


class TestPlaceQuantityLabel:
    def test_crowded_label_suppressed(self):
        existing = [quantity_label(IntersectionPoint(400, 320), "Yₑ", FRAME)]
        assert place_quantity_label(existing, IntersectionPoint(380, 300), "Y₂", FRAME) is None

    def test_gap_of_24_is_allowed(self):
        existing = [quantity_label(IntersectionPoint(400, 320), "Yₑ", FRAME)]
        label = place_quantity_label(existing, IntersectionPoint(376, 300), "Y₂", FRAME)
        assert label is not None
        assert label.x == pytest.approx(368)

    def test_other_rows_ignored(self):
        existing = [LabelPlacement("PLₑ", 392, 100)]
        label = place_quantity_label(existing, IntersectionPoint(400, 300), "Y₂", FRAME)
        assert label is not None

    def test_empty_existing(self):
        assert place_quantity_label([], IntersectionPoint(400, 300), "Y₂", FRAME) is not None


class TestFrameText:
    def test_axis_label_positions(self):
        y_label, x_label = axis_labels(FRAME, "Quantity", "Price")
        assert (y_label.text, y_label.x, y_label.y) == ("Price", 20, 65)
        assert (x_label.text, x_label.x, x_label.y) == ("Quantity", 450, 545)

    def test_blank_axis_labels_skipped(self):
        assert axis_labels(FRAME, "", "") == []

    def test_title_centered(self):
        label = title_label(FRAME, "Figure 1")
        assert (label.x, label.y, label.text_anchor) == (325, 30, "middle")
        assert title_label(FRAME, "") is None

    def test_watermark_flagged(self):
        label = watermark_label(FRAME, "econ-diagrams")
        assert label.watermark
        assert label.text_anchor == "end"
        assert (label.x, label.y) == (638, 586)
        assert watermark_label(FRAME, "") is None
