"""
Tests for the region interface and its shared bounding box behaviour.
"""

import copy

import numpy as np
import pytest

from polyregion.regions import (
    AbstractRegion,
    NullRegion,
    Region,
    RegionOperationError,
)


# ============== Helpers ==============

class Box(AbstractRegion):
    """Axis aligned box, the simplest region with expand/contract."""

    def __init__(self, a, b):
        self._a = np.array(a)
        self._b = np.array(b)

    @property
    def minimum_point(self):
        return self._a.copy()

    @property
    def maximum_point(self):
        return self._b.copy()

    def expand(self, *changes):
        for c in changes:
            c = np.asarray(c)
            self._a = self._a + np.minimum(c, 0)
            self._b = self._b + np.maximum(c, 0)

    def contract(self, *changes):
        for c in changes:
            c = np.asarray(c)
            self._a = self._a + np.maximum(c, 0)
            self._b = self._b + np.minimum(c, 0)

    def contains(self, point):
        p = np.asarray(point)
        return bool(np.all(self._a <= p) and np.all(p <= self._b))

    def clone(self):
        return Box(self._a, self._b)


# ============== Fixtures ==============

@pytest.fixture
def box():
    return Box((-1, 0, 0), (16, 5, 3))


# ============== Region Tests ==============

class TestRegion:
    """The interface itself implements nothing."""

    def test_abstract(self):
        region = Region()

        with pytest.raises(NotImplementedError):
            region.contains((0, 0, 0))
        with pytest.raises(NotImplementedError):
            region.minimum_point
        with pytest.raises(NotImplementedError):
            region.clone()


class TestAbstractRegion:
    """Bounding box derived quantities."""

    def test_extents(self, box):
        assert box.width == 18
        assert box.height == 6
        assert box.length == 4
        assert box.area == 18 * 6 * 4

    def test_center(self, box):
        np.testing.assert_allclose(box.center, [7.5, 2.5, 1.5])

    def test_iteration(self):
        blocks = list(Box((0, 0, 0), (1, 1, 1)))

        assert len(blocks) == 8
        assert blocks[0] == (0, 0, 0)
        assert blocks[1] == (0, 0, 1)
        assert blocks[-1] == (1, 1, 1)

    def test_chunks(self, box):
        assert box.chunks() == {(-1, 0), (0, 0), (1, 0)}

    def test_chunk_cubes(self):
        region = Box((14, -2, 0), (17, 1, 0))

        assert region.chunk_cubes() == {(0, -1, 0), (1, -1, 0),
                                        (0, 0, 0), (1, 0, 0)}

    def test_polygonize(self, box):
        expected = [(-1, 0), (-1, 3), (16, 3), (16, 0)]

        assert box.polygonize() == expected
        assert box.polygonize(4) == expected

        with pytest.raises(ValueError):
            box.polygonize(3)

    def test_shift(self, box):
        """Shifting is expanding and contracting by the same delta."""
        box.shift((2, 0, -1))

        np.testing.assert_array_equal(box.minimum_point, [1, 0, -1])
        np.testing.assert_array_equal(box.maximum_point, [18, 5, 2])

    def test_copy(self, box):
        other = copy.copy(box)
        other.shift((1, 1, 1))

        np.testing.assert_array_equal(box.minimum_point, [-1, 0, 0])


class TestNullRegion:
    """The empty region."""

    def test_empty(self):
        region = NullRegion()

        assert list(region) == []
        assert not region.contains((0, 0, 0))
        assert region.area == 0
        assert region.width == region.height == region.length == 0
        assert region.chunks() == set()
        assert region.chunk_cubes() == set()
        assert region.polygonize() == []

        np.testing.assert_array_equal(region.minimum_point, [0, 0, 0])
        np.testing.assert_array_equal(region.center, [0, 0, 0])

    def test_immutable(self):
        region = NullRegion()

        with pytest.raises(RegionOperationError):
            region.expand((1, 0, 0))
        with pytest.raises(RegionOperationError):
            region.contract((1, 0, 0))
        with pytest.raises(RegionOperationError):
            region.shift((1, 0, 0))

    def test_clone(self):
        assert isinstance(NullRegion().clone(), NullRegion)
        assert isinstance(copy.deepcopy(NullRegion()), NullRegion)
