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

""" Convex polyhedral regions.

A :class:`ConvexPolyhedralRegion` is the convex hull of a set of lattice
points. The hull is built incrementally: every new vertex removes the
triangles it can see and closes the hole by connecting its silhouette
to the new vertex.

The first three vertices span a degenerate mesh of two coincident
triangles with opposite orientation. Vertices that lie in their plane
cannot be triangulated yet and are parked in a backlog until a vertex
off that plane arrives.

Note
----
Regions are not thread-safe. A single insertion updates the vertex set,
the triangle list, the backlog, the bounding box, and the containment
cache one after the other.
"""

import logging

import numpy as np

import polyregion.linalg as linalg
import polyregion.obj as obj

from polyregion.polyhedron import Triangle
from polyregion.regions import AbstractRegion


logger = logging.getLogger(__name__)

# Worklist actions used during backlog replay.
_INSERT = 0
_RESTORE = 1


class ConvexPolyhedralRegion(AbstractRegion):
    """ Convex hull of lattice points.

    Parameters
    ----------
    vertices : iterable, optional
        Initial vertices, added in the given order via :meth:`add_vertex`.


    Vertices are accepted one at a time:

    >>> region = ConvexPolyhedralRegion([(0, 0, 0), (2, 0, 0), (0, 0, 2)])
    >>> region.add_vertex((0, 2, 0))
    True
    >>> region.contains((0.5, 0.5, 0.5))
    True

    Note
    ----
    A region is :attr:`defined` once three vertices are known. Before
    that, containment tests fail for all points and the bounding box
    is not meaningful.
    """

    def __init__(self, vertices=None):
        # Ordered sets are modelled as dictionaries with None values.
        self._verts = dict()
        self._backlog = dict()
        self._triangles = []

        self._min = None
        self._max = None
        self._accum = np.zeros(3, dtype=np.int64)

        # Index of the triangle that rejected the last query point. Reset
        # whenever the triangle list changes.
        self._last = None

        if vertices is not None:
            for v in vertices:
                self.add_vertex(v)

    def __repr__(self):
        return (f'ConvexPolyhedralRegion({len(self._verts)} vertices, ' +
                f'{len(self._triangles)} triangles, ' +
                f'{len(self._backlog)} pending)')

    @classmethod
    def read(cls, filename):
        """ Read vertices from file.

        Every 'v' line of an OBJ file is added as a vertex. Coordinates
        are rounded down to the lattice.

        Parameters
        ----------
        filename : str
            Name of an OBJ file.

        Returns
        -------
        ConvexPolyhedralRegion
            New region instance.
        """
        points = obj.read(filename, 'v')
        region = cls()

        if points is not None:
            for p in points:
                region.add_vertex(p[:3])

        logger.debug('read %d vertices from %s', len(region._verts), filename)
        return region

    def write(self, filename):
        """ Write hull to file.

        Writes the distinct triangle corners as 'v' lines and the
        triangles as 'f' lines of an OBJ file.

        Parameters
        ----------
        filename : str
            Name of output file.
        """
        index = dict()
        faces = []

        for t in self._triangles:
            face = []

            for p in t:
                key = tuple(float(x) for x in p)
                face.append(index.setdefault(key, len(index)))

            faces.append(face)

        obj.write(filename, f=faces, v=list(index.keys()))

    @property
    def vertices(self):
        """ Hull vertices.

        Accepted vertices in insertion order followed by the vertices
        that are still waiting in the backlog.

        :type: list[(int, int, int)]
        """
        return list(self._verts) + list(self._backlog)

    @property
    def backlog(self):
        """ Pending vertices.

        Vertices that were coplanar with the first three vertices when
        they were added. They are reconsidered once the hull grows.

        :type: list[(int, int, int)]
        """
        return list(self._backlog)

    @property
    def triangles(self):
        """ Hull triangles.

        Read access to the triangle list. This list should not be
        modified directly.

        :type: list[Triangle]
        """
        return self._triangles

    @property
    def defined(self):
        """ Hull state.

        :obj:`True` if the hull has a triangle mesh, i.e., at least three
        vertices have been accepted.

        :type: bool
        """
        return bool(self._triangles)

    @property
    def minimum_point(self):
        """ Lower corner of the bounding box.

        Bounding box of the accepted vertices. Vertices in the backlog do
        not contribute.

        :type: ~numpy.ndarray or None
        """
        return None if self._min is None else self._min.copy()

    @property
    def maximum_point(self):
        """ Upper corner of the bounding box.

        :type: ~numpy.ndarray or None
        """
        return None if self._max is None else self._max.copy()

    @property
    def center(self):
        """ Vertex centroid.

        Average of the accepted vertices. This is not the centroid of the
        enclosed solid.

        :type: ~numpy.ndarray, shape (3, )
        """
        if not self._verts:
            return np.full(3, np.nan)

        return self._accum / len(self._verts)

    def add_vertex(self, vertex):
        """ Add vertex to the hull.

        Parameters
        ----------
        vertex : array_like, shape (3, )
            Lattice point. Non-integral coordinates are rounded down.

        Raises
        ------
        ValueError
            If `vertex` is :obj:`None` or not a point in 3-space. The
            region is not modified in this case.

        Returns
        -------
        bool
            :obj:`True` if the region changed, i.e., the vertex was
            accepted or queued in the backlog.
        """
        vertex = linalg.lattice(vertex)

        changed, grown = self._insert(vertex)

        if grown and self._backlog:
            self._replay(vertex)

        self._last = None
        return changed

    def clear(self):
        """ Remove all vertices and triangles.
        """
        self._verts.clear()
        self._backlog.clear()
        self._triangles.clear()

        self._min = None
        self._max = None
        self._accum = np.zeros(3, dtype=np.int64)
        self._last = None

    def contains(self, point):
        """ Containment test.

        Parameters
        ----------
        point : array_like, shape (3, )
            Query point, coordinates need not be integral.

        Returns
        -------
        bool
            :obj:`True` if `point` is inside the hull or on its boundary.
            Always :obj:`False` for an undefined hull and for points with
            non-finite coordinates.
        """
        if not self._triangles:
            return False

        p = linalg.point(point)

        # NaN fails every comparison and would pass all tests below.
        if not np.all(np.isfinite(p)):
            return False

        if np.any(p < self._min) or np.any(p > self._max):
            return False

        return self._contains_raw(p)

    def shift(self, change):
        """ Translate the region.

        Translates vertices, backlog, triangles, and bounding box. The
        combinatorics of the mesh is preserved.

        Parameters
        ----------
        change : array_like, shape (3, )
            Lattice translation vector.

        Raises
        ------
        ValueError
            If `change` is not a point in 3-space.
        """
        change = linalg.lattice(change)
        delta = np.array(change, dtype=np.int64)

        self._verts = dict.fromkeys(_add(v, change) for v in self._verts)
        self._backlog = dict.fromkeys(_add(v, change) for v in self._backlog)
        self._triangles[:] = [t.shifted(delta) for t in self._triangles]

        if self._min is not None:
            self._min = self._min + delta
            self._max = self._max + delta

        self._accum = self._accum + delta * len(self._verts)
        self._last = None

    def expand(self, *changes):
        """ Not supported.

        Convex hulls cannot be grown along an axis. The call is accepted
        and the region is left unchanged.
        """
        logger.debug('expand() ignored by %r', self)

    def contract(self, *changes):
        """ Not supported.

        The call is accepted and the region is left unchanged.
        """
        logger.debug('contract() ignored by %r', self)

    def clone(self):
        """ Independent copy.

        Returns
        -------
        ConvexPolyhedralRegion
            Copy of the region. Triangles are immutable and shared,
            all containers are duplicated.
        """
        region = self.__class__()

        region._verts = self._verts.copy()
        region._backlog = self._backlog.copy()
        region._triangles = self._triangles.copy()

        region._min = None if self._min is None else self._min.copy()
        region._max = None if self._max is None else self._max.copy()
        region._accum = self._accum.copy()
        region._last = self._last

        return region

    def _insert(self, vertex):
        """ Single insertion step without backlog replay.

        Parameters
        ----------
        vertex : (int, int, int)
            Lattice point.

        Returns
        -------
        changed : bool
            Whether the vertex was accepted or queued.
        grown : bool
            Whether the vertex went through a general mesh update, which
            is when the backlog needs to be replayed.
        """
        self._last = None

        if vertex in self._verts or vertex in self._backlog:
            return False, False

        p = np.array(vertex, dtype=float)

        if len(self._verts) == 3:
            # Coplanar with the degenerate start mesh (or inside the hull
            # while a backlog replay is in progress).
            if self._contains_raw(p):
                self._backlog[vertex] = None
                logger.debug('vertex %s queued, %d pending', vertex,
                             len(self._backlog))
                return True, False

        self._verts[vertex] = None
        self._accum += vertex

        v = np.array(vertex, dtype=np.int64)

        if self._min is None:
            self._min = v
            self._max = v.copy()
        else:
            self._min = np.minimum(self._min, v)
            self._max = np.maximum(self._max, v)

        if len(self._verts) < 3:
            return True, False

        if len(self._verts) == 3:
            a, b, c = (np.array(u, dtype=float) for u in self._verts)

            self._triangles.append(Triangle(a, b, c))
            self._triangles.append(Triangle(a, c, b))

            return True, False

        # Remove all triangles visible from the new vertex. Edges shared by
        # two removed triangles cancel out, the remaining edges form the
        # silhouette of the removed cap.
        border = dict()
        kept = []

        for t in self._triangles:
            if not t.above(p):
                kept.append(t)
                continue

            for edge in t.edges():
                if edge in border:
                    del border[edge]
                else:
                    border[edge] = None

        removed = len(self._triangles) - len(kept)
        kept.extend(edge.create_triangle(p) for edge in border)
        self._triangles[:] = kept
        self._last = None

        logger.debug('vertex %s replaced %d triangles by %d', vertex,
                     removed, len(border))

        return True, True

    def _replay(self, vertex):
        """ Work through the backlog.

        The new vertex is taken out of the vertex set while backlog
        vertices are re-inserted in their original order and put back
        afterwards. Re-inserted vertices can trigger a replay of their
        own, nested replays are handled by the worklist.

        Parameters
        ----------
        vertex : (int, int, int)
            Vertex whose insertion triggered the replay.
        """
        logger.debug('replaying %d pending vertices', len(self._backlog))

        work = []
        self._defer(vertex, work)

        while work:
            action, v = work.pop()

            if action == _RESTORE:
                self._verts[v] = None
                continue

            _, grown = self._insert(v)

            if grown and self._backlog:
                self._defer(v, work)

    def _defer(self, vertex, work):
        """ Move the backlog onto the worklist.

        The worklist is a stack, items are pushed in reverse order. The
        backlog is cleared and `vertex` is removed from the vertex set
        until its restore item is popped.
        """
        del self._verts[vertex]
        work.append((_RESTORE, vertex))

        pending = list(self._backlog)
        self._backlog.clear()

        work.extend((_INSERT, v) for v in reversed(pending))

    def _contains_raw(self, p):
        """ Containment test without bounding box check.

        Parameters
        ----------
        p : ~numpy.ndarray, shape (3, )
            Query point.

        Returns
        -------
        bool
            :obj:`False` if any triangle sees `p`, :obj:`True` otherwise
            (also for an empty triangle list).
        """
        last = self._last

        if last is not None and self._triangles[last].above(p):
            return False

        for i, t in enumerate(self._triangles):
            if i == last:
                continue

            if t.above(p):
                self._last = i
                return False

        return True


def _add(u, v):
    return (u[0] + v[0], u[1] + v[1], u[2] + v[2])
