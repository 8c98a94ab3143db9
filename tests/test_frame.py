"""Tests for the plot frame and canvas clamping."""

from __future__ import annotations

import pytest

from econ_diagrams.layout.frame import clamp_canvas_size, make_frame
from econ_diagrams.parser.model import DiagramType, PlotFrame


class TestMakeFrame:
    def test_default_canvas_bounds(self):
        frame = make_frame(650, 600)
        assert frame.min_x == 160
        assert frame.max_x == 560
        assert frame.min_y == 80
        assert frame.max_y == 530

    def test_ad_as_has_narrow_right_margin(self):
        frame = make_frame(650, 600, DiagramType.NEO_CLASSICAL_AD_AS)
        assert frame.max_x == 610

    def test_center_formulas(self):
        frame = make_frame(650, 600)
        assert frame.center_x == pytest.approx(160 + (650 - 170) / 2)
        assert frame.center_y == pytest.approx(80 + (600 - 120) / 2)

    @pytest.mark.parametrize("width,height", [(400, 400), (650, 600), (1200, 800)])
    def test_center_inside_frame(self, width, height):
        frame = make_frame(width, height)
        assert frame.contains(frame.center_x, frame.center_y)

    def test_scale_is_kept(self):
        assert make_frame(650, 600, scale=2.0).scale == 2.0


class TestPlotFrameValidation:
    def test_too_narrow_raises(self):
        with pytest.raises(ValueError, match="width"):
            PlotFrame(200, 600)

    def test_too_short_raises(self):
        with pytest.raises(ValueError, match="height"):
            PlotFrame(650, 140)

    def test_non_positive_scale_raises(self):
        with pytest.raises(ValueError, match="Scale"):
            PlotFrame(650, 600, scale=0)


class TestContains:
    def test_tolerance(self):
        frame = make_frame(650, 600)
        assert not frame.contains(559.0, 530.4)
        assert frame.contains(559.0, 530.4, tolerance=0.5)


class TestClampCanvasSize:
    def test_in_range_unchanged(self):
        assert clamp_canvas_size(650, 600, 1.0) == (650, 600, 1.0)

    def test_below_minimum(self):
        assert clamp_canvas_size(100, 50, 0.1) == (400, 400, 0.5)

    def test_above_maximum(self):
        assert clamp_canvas_size(5000, 5000, 9) == (1200, 800, 2)
