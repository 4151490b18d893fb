# Copyright 2024-25, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

""" Triangles and edges of polyhedral meshes.

A :class:`Triangle` is an oriented plane through three points. Its normal
vector follows the right-hand rule with respect to the order of its
corners and points to the *outside*. An :class:`Edge` is an unordered
pair of points. Edges are the currency of incremental hull construction:
faces that are removed from a mesh leave their edges behind, and a new
face is created for every edge that is not shared by two removed faces.
"""

import numpy as np

import polyregion.linalg as linalg


class Triangle:
    """ Oriented triangle.

    Parameters
    ----------
    a, b, c : array_like, shape (3, )
        Corner points, listed counter-clockwise when looking at the
        triangle from the outside.

    Note
    ----
    Triangles are immutable, the corner array is read-only. Two triangles
    compare equal if their edge sets match, which makes a triangle equal
    to its reversed copy.
    """

    def __init__(self, a, b, c):
        self._verts = np.array([a, b, c], dtype=float)
        self._verts.setflags(write=False)

        # The normal vector is not normalized. For lattice corners all
        # products are integral and the above() test is exact as long as
        # they stay below 2**53 in magnitude.
        a, b, c = self._verts
        self._normal = linalg.cross(b - a, c - a)
        self._offset = max(self._normal.dot(v) for v in self._verts)

    def __repr__(self):
        a, b, c = (tuple(float(x) for x in v) for v in self._verts)
        return f'Triangle({a}, {b}, {c})'

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented

        return set(self.edges()) == set(other.edges())

    def __hash__(self):
        return hash(frozenset(self.edges()))

    def __getitem__(self, index):
        """ Corner point.

        Parameters
        ----------
        index : int
            Corner index 0, 1 or 2.

        Returns
        -------
        ~numpy.ndarray, shape (3, )
            Read-only view of the corner coordinates.
        """
        return self._verts[index]

    def __iter__(self):
        return iter(self._verts)

    def __len__(self):
        return 3

    @property
    def points(self):
        """ Corner coordinates.

        :type: ~numpy.ndarray, shape (3, 3)
        """
        return self._verts

    @property
    def normal(self):
        """ Unit normal vector.

        Points to the outside. The zero vector for degenerate triangles.

        :type: ~numpy.ndarray, shape (3, )
        """
        return linalg.unit(self._normal)

    def above(self, point):
        """ Half-space test.

        Parameters
        ----------
        point : array_like, shape (3, )
            Query point.

        Returns
        -------
        bool
            :obj:`True` if `point` lies strictly on the outer side of the
            triangle's plane. Points on the plane are **not** above.
        """
        return bool(self._normal.dot(point) > self._offset)

    def below(self, point):
        """ Half-space test.

        Returns
        -------
        bool
            :obj:`True` if `point` lies strictly on the inner side of
            the triangle's plane.
        """
        return bool(self._normal.dot(point) < self._offset)

    def edge(self, index):
        """ Boundary edge.

        Edge `index` connects corner `index` to the next corner in
        counter-clockwise order.

        Parameters
        ----------
        index : int
            Edge index 0, 1 or 2.

        Raises
        ------
        IndexError
            If `index` is out of range.

        Returns
        -------
        Edge
        """
        if not 0 <= index < 3:
            raise IndexError(f'index {index} out of range(0, 3)')

        return Edge(self._verts[index], self._verts[(index + 1) % 3])

    def edges(self):
        """ All three boundary edges in order.

        Returns
        -------
        list[Edge]
        """
        return [self.edge(i) for i in range(3)]

    def shifted(self, delta):
        """ Translated copy.

        Parameters
        ----------
        delta : array_like, shape (3, )
            Translation vector.

        Returns
        -------
        Triangle
        """
        a, b, c = self._verts + np.asarray(delta, dtype=float)
        return Triangle(a, b, c)


class Edge:
    """ Undirected edge.

    Parameters
    ----------
    start, end : array_like, shape (3, )
        End points. The edge remembers the given direction but two edges
        with swapped end points compare equal.
    """

    def __init__(self, start, end):
        self._start = tuple(float(x) for x in start)
        self._end = tuple(float(x) for x in end)

    def __repr__(self):
        return f'Edge({self._start}, {self._end})'

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented

        return ((self._start == other._start and self._end == other._end) or
                (self._start == other._end and self._end == other._start))

    def __hash__(self):
        return hash(frozenset((self._start, self._end)))

    @property
    def start(self):
        """ First end point.

        :type: ~numpy.ndarray, shape (3, )
        """
        return np.array(self._start)

    @property
    def end(self):
        """ Second end point.

        :type: ~numpy.ndarray, shape (3, )
        """
        return np.array(self._end)

    def create_triangle(self, point):
        """ Connect the edge to a point.

        The new triangle keeps the direction of the edge. An edge taken
        from a face that was removed from a convex mesh thus yields a
        triangle with outward orientation.

        Parameters
        ----------
        point : array_like, shape (3, )
            Apex of the new triangle.

        Returns
        -------
        Triangle
        """
        return Triangle(self._start, self._end, point)
