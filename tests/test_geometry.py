"""
Unit tests for the turtle <-> canvas coordinate mapping.
"""

import math

import pytest

from turtlegraphics import CoordinateMapper, InvalidArgument, heading_to_radians, normalize_heading


class TestCoordinateMapper:
    """Conversions between turtle space and canvas pixels"""

    def test_origin_maps_to_canvas_center(self):
        mapper = CoordinateMapper(600, 600)
        assert mapper.to_canvas_point(0, 0) == (300.0, 300.0)

    def test_y_axis_is_flipped(self):
        mapper = CoordinateMapper(600, 400)
        assert mapper.to_canvas_x(100) == 400.0
        assert mapper.to_canvas_y(100) == 100.0
        assert mapper.to_canvas_y(-100) == 300.0

    def test_odd_dimensions_use_half_pixels(self):
        mapper = CoordinateMapper(5, 3)
        assert mapper.to_canvas_point(0, 0) == (2.5, 1.5)

    @pytest.mark.parametrize("point", [(0.0, 0.0), (12.5, -7.25), (-300.0, 300.0), (1024.0, -2048.0)])
    def test_inverse_mapping_restores_point(self, point):
        mapper = CoordinateMapper(600, 600)
        assert mapper.to_turtle_point(*mapper.to_canvas_point(*point)) == point

    def test_dot_corner_is_upper_left_of_bounding_box(self):
        mapper = CoordinateMapper(600, 600)
        assert mapper.dot_corner(0, 0, 4) == (298.0, 298.0)

    def test_dot_corner_off_center(self):
        mapper = CoordinateMapper(600, 600)
        # center (10, 20), radius 5 -> turtle corner (5, 25)
        assert mapper.dot_corner(10, 20, 10) == (305.0, 275.0)


class TestHeadings:
    """Heading conversion and normalization"""

    def test_up_is_half_pi(self):
        assert heading_to_radians(0) == pytest.approx(math.pi / 2)

    def test_right_is_zero(self):
        assert heading_to_radians(90) == pytest.approx(0.0)

    def test_down_is_minus_half_pi(self):
        assert heading_to_radians(180) == pytest.approx(-math.pi / 2)

    def test_mapper_exposes_conversion(self):
        assert CoordinateMapper.to_radians(270) == pytest.approx(-math.pi)

    @pytest.mark.parametrize(
        "heading",
        [0.0, 359.999, 360.0, 370.0, -10.0, -1e-20, -720.0, 1e300, -1e300, 123456789.5],
    )
    def test_normalized_heading_in_range(self, heading):
        result = normalize_heading(heading)
        assert 0.0 <= result < 360.0

    def test_wraparound_values(self):
        assert normalize_heading(370.0) == 10.0
        assert normalize_heading(-10.0) == 350.0
        assert normalize_heading(-1e-20) == 0.0

    @pytest.mark.parametrize("heading", [math.inf, -math.inf, math.nan])
    def test_non_finite_heading_rejected(self, heading):
        with pytest.raises(InvalidArgument):
            normalize_heading(heading)
