"""
Tests for point conversion and vector helpers.
"""

import numpy as np
import pytest

import polyregion.linalg as linalg


class TestLattice:
    """Test conversion to lattice points."""

    def test_integral(self):
        assert linalg.lattice((1, -2, 3)) == (1, -2, 3)
        assert linalg.lattice(np.array([4, 5, 6])) == (4, 5, 6)

    def test_rounds_down(self):
        assert linalg.lattice((1.5, -0.5, 2.999)) == (1, -1, 2)

    def test_returns_ints(self):
        assert all(type(x) is int for x in linalg.lattice((1.0, 2.0, 3.0)))

    @pytest.mark.parametrize("value", [
        None,
        (1, 2),
        (1, 2, 3, 4),
        ('a', 1, 2),
        (np.inf, 0, 0),
        (np.nan, 0, 0),
    ])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            linalg.lattice(value)


class TestVectors:
    """Test vector helpers."""

    def test_point(self):
        p = linalg.point((1, 2, 3))

        assert p.dtype == float
        np.testing.assert_array_equal(p, [1.0, 2.0, 3.0])

    def test_cross(self):
        np.testing.assert_array_equal(linalg.cross([1, 0, 0], [0, 1, 0]),
                                      [0, 0, 1])

    def test_unit(self):
        np.testing.assert_allclose(linalg.unit(np.array([3.0, 0, 4.0])),
                                   [0.6, 0, 0.8])
        np.testing.assert_array_equal(linalg.unit(np.zeros(3)), np.zeros(3))

