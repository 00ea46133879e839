"""Tests for rectangular section geometry."""

import numpy as np
import pytest

from hydroflow.cross_section import (
    RectangularSection,
    area,
    hydraulic_radius,
    top_width,
    wetted_perimeter,
)

DEPTHS = [0.001, 0.2, 1.0, 3.7, 25.0, 1000.0]
WIDTHS = [0.1, 1.5, 10.0, 50.0]


class TestGeometry:
    """Test area, perimeter and hydraulic radius."""

    def test_basic_values(self):
        assert area(2.0, 3.0) == pytest.approx(6.0)
        assert wetted_perimeter(2.0, 3.0) == pytest.approx(7.0)
        assert hydraulic_radius(2.0, 3.0) == pytest.approx(6.0 / 7.0)
        assert top_width(2.0, 3.0) == 3.0

    @pytest.mark.parametrize("y", DEPTHS)
    @pytest.mark.parametrize("b", WIDTHS)
    def test_hydraulic_radius_bounds(self, y, b):
        """R = A/P is below both the depth and half the width."""
        R = hydraulic_radius(y, b)
        assert R == pytest.approx(area(y, b) / wetted_perimeter(y, b))
        assert R < y
        assert R < b / 2

    def test_hydraulic_radius_approaches_half_width(self):
        b = 2.0
        assert hydraulic_radius(1e6, b) == pytest.approx(b / 2, rel=1e-5)

    def test_accepts_arrays(self):
        y = np.array([0.5, 1.0, 2.0])
        np.testing.assert_allclose(area(y, 2.0), [1.0, 2.0, 4.0])
        np.testing.assert_allclose(hydraulic_radius(y, 2.0), [1.0 / 3.0, 0.5, 0.6666666666666666])


class TestRectangularSection:
    """Test the section value object."""

    def test_properties_match_functions(self):
        xs = RectangularSection(width=1.5)
        A, P, R, T = xs.properties(0.8)

        assert A == pytest.approx(area(0.8, 1.5))
        assert P == pytest.approx(wetted_perimeter(0.8, 1.5))
        assert R == pytest.approx(hydraulic_radius(0.8, 1.5))
        assert T == 1.5
        assert xs.hydraulic_radius(0.8) == pytest.approx(R)

    def test_is_immutable(self):
        xs = RectangularSection(width=1.5)
        with pytest.raises(AttributeError):
            xs.width = 2.0
