"""Tests for parallel_curve/svg.py rendering helpers."""
import pytest
from parallel_curve.geometry import GeometryError
from parallel_curve.svg import make_svg_transform, render_polyline, render_curves_svg


# --- Mock transform for helper unit tests ---
def _mock_to_svg(x, y):
    return (x * 10, -y * 10)


class TestMakeSvgTransform:
    def test_centre_maps_to_page_centre(self):
        to_svg = make_svg_transform([[(0, 0), (10, 0)], [(0, 10)]])
        x, y = to_svg(5, 5)
        assert abs(x - 396) < 1e-9
        assert abs(y - 306) < 1e-9

    def test_y_axis_flipped_and_fitted(self):
        # span 10 fitted into 540 pt of usable height -> 54 pt per unit
        to_svg = make_svg_transform([[(0, 0), (10, 0)], [(0, 10)]])
        x, y = to_svg(0, 10)
        assert abs(x - 126) < 1e-9
        assert abs(y - 36) < 1e-9

    def test_single_point_uses_unit_scale(self):
        to_svg = make_svg_transform([[(3, 4)]], width=100, height=100, margin=0)
        assert to_svg(3, 4) == (50, 50)
        assert to_svg(4, 4) == (51, 50)

    def test_no_points_raises(self):
        with pytest.raises(GeometryError, match="Nothing to draw"):
            make_svg_transform([[], []])


class TestRenderPolyline:
    def test_polyline_element(self):
        out = []
        render_polyline(out, [(0, 0), (1, 2)], _mock_to_svg, "#123", 1.5)
        assert out == ['<polyline points="0.00,0.00 10.00,-20.00" fill="none"'
                       ' stroke="#123" stroke-width="1.5"/>']

    def test_dashed(self):
        out = []
        render_polyline(out, [(0, 0), (1, 0)], _mock_to_svg, "#000", 1, dash="4,2")
        assert 'stroke-dasharray="4,2"' in out[0]

    def test_filled_polygon(self):
        out = []
        render_polyline(out, [(0, 0), (1, 0), (1, 1)], _mock_to_svg, "none", 0, fill="#eee")
        assert out[0].startswith("<polygon")
        assert 'fill="#eee"' in out[0]

    def test_short_curve_skipped(self):
        out = []
        render_polyline(out, [(0, 0)], _mock_to_svg, "#000", 1)
        render_polyline(out, [], _mock_to_svg, "#000", 1)
        assert out == []


class TestRenderCurvesSvg:
    def test_document(self):
        svg = render_curves_svg([
            ([(0, 0), (10, 0)], "#000", 1, None),
            ([(0, 2), (10, 2)], "#f00", 1, "2,2"),
        ])
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.count("<polyline") == 2
        assert svg.count("stroke-dasharray") == 1
