"""
Tests for triangle and edge primitives.
"""

import numpy as np
import pytest

from polyregion.polyhedron import Edge, Triangle


# ============== Fixtures ==============

@pytest.fixture
def triangle():
    """Unit triangle in the xy-plane facing +z."""
    return Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))


# ============== Triangle Tests ==============

class TestTriangle:
    """Test oriented triangles."""

    def test_normal(self, triangle):
        np.testing.assert_allclose(triangle.normal, [0, 0, 1])

    def test_above(self, triangle):
        """Only points strictly on the outer side are above."""
        assert triangle.above((0, 0, 1))
        assert triangle.above((5, -3, 0.001))
        assert not triangle.above((5, 5, 0))
        assert not triangle.above((0, 0, -1))

    def test_below(self, triangle):
        assert triangle.below((0, 0, -1))
        assert not triangle.below((0.2, 0.2, 0))
        assert not triangle.below((0, 0, 1))

    def test_degenerate(self):
        """Collinear corners see nothing."""
        t = Triangle((0, 0, 0), (1, 1, 1), (2, 2, 2))

        assert not t.above((0, 0, 1))
        assert not t.above((-4, 2, 7))
        np.testing.assert_array_equal(t.normal, [0, 0, 0])

    def test_edges(self, triangle):
        assert triangle.edge(0) == Edge((0, 0, 0), (1, 0, 0))
        assert triangle.edge(1) == Edge((1, 0, 0), (0, 1, 0))
        assert triangle.edge(2) == Edge((0, 1, 0), (0, 0, 0))
        assert triangle.edges() == [triangle.edge(i) for i in range(3)]

        with pytest.raises(IndexError):
            triangle.edge(3)

    def test_same_face(self, triangle):
        """Triangles with matching edge sets are equal."""
        rotated = Triangle((1, 0, 0), (0, 1, 0), (0, 0, 0))
        reversed_ = Triangle((0, 0, 0), (0, 1, 0), (1, 0, 0))
        other = Triangle((0, 0, 0), (1, 0, 0), (0, 0, 1))

        assert triangle == rotated
        assert triangle == reversed_
        assert hash(triangle) == hash(rotated)
        assert triangle != other

    def test_corners(self, triangle):
        assert len(triangle) == 3
        np.testing.assert_array_equal(triangle[1], [1, 0, 0])
        np.testing.assert_array_equal(list(triangle), triangle.points)

    def test_read_only(self, triangle):
        with pytest.raises(ValueError):
            triangle.points[0, 0] = 5.0

    def test_shifted(self, triangle):
        moved = triangle.shifted((1, 2, 3))

        np.testing.assert_array_equal(moved[0], [1, 2, 3])
        np.testing.assert_array_equal(triangle[0], [0, 0, 0])

        assert moved.above((1, 2, 4))
        assert not moved.above((0, 0, 1))


# ============== Edge Tests ==============

class TestEdge:
    """Test undirected edges."""

    def test_direction_ignored(self):
        a = Edge((0, 0, 0), (1, 2, 3))
        b = Edge((1, 2, 3), (0, 0, 0))

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_distinct(self):
        assert Edge((0, 0, 0), (1, 0, 0)) != Edge((0, 0, 0), (0, 1, 0))

    def test_end_points(self):
        e = Edge((1, 2, 3), (4, 5, 6))

        np.testing.assert_array_equal(e.start, [1, 2, 3])
        np.testing.assert_array_equal(e.end, [4, 5, 6])

    def test_create_triangle(self, triangle):
        """New triangles keep the direction of the edge."""
        t = triangle.edge(0).create_triangle((0, 0, 1))

        np.testing.assert_allclose(t.normal, [0, -1, 0])
        assert t.above((0.5, -1, 0.5))
        assert not t.above((0.5, 1, 0.5))
