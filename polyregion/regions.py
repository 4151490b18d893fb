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

""" Region interface.

A region is a set of lattice points (blocks) described by a shape. Every
shape offers the same capabilities: bounding box queries, a containment
test, translation, growing and shrinking, enumeration of the chunks it
touches, and a 2-dimensional polygonal footprint.

:class:`Region` defines the interface, :class:`AbstractRegion` derives
all bounding box related quantities from the two abstract bounding box
corners and the containment test.

Note
----
Bounding box corners are inclusive, a region whose minimum and maximum
point coincide contains exactly one block.
"""

import math
import numpy as np


CHUNK_SHIFTS = 4
""" Chunk size exponent.

Chunks are columns of :math:`2^4 \\times 2^4` blocks in the xz-plane,
chunk cubes are :math:`16 \\times 16 \\times 16` cells."""


class Region:
    """ Region base class.

    All methods and properties raise :class:`NotImplementedError`. Lattice
    points passed to and returned by regions are 3-tuples of :class:`int`
    or integer arrays of shape (3, ).
    """

    def __iter__(self):
        """ Iterate over contained blocks.

        Yields
        ------
        (int, int, int)
            Lattice point contained in the region.
        """
        raise NotImplementedError

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    @property
    def minimum_point(self):
        """ Lower corner of the bounding box.

        :type: ~numpy.ndarray, shape (3, )
        """
        raise NotImplementedError

    @property
    def maximum_point(self):
        """ Upper corner of the bounding box.

        :type: ~numpy.ndarray, shape (3, )
        """
        raise NotImplementedError

    @property
    def center(self):
        """ Center point.

        :type: ~numpy.ndarray, shape (3, )
        """
        raise NotImplementedError

    @property
    def area(self):
        """ Number of blocks in the bounding box.

        :type: int
        """
        raise NotImplementedError

    @property
    def width(self):
        """ Extent along the x-axis in blocks.

        :type: int
        """
        raise NotImplementedError

    @property
    def height(self):
        """ Extent along the y-axis in blocks.

        :type: int
        """
        raise NotImplementedError

    @property
    def length(self):
        """ Extent along the z-axis in blocks.

        :type: int
        """
        raise NotImplementedError

    def expand(self, *changes):
        """ Grow the region.

        Parameters
        ----------
        *changes
            Directional deltas of shape (3, ). The sign of each component
            selects the face of the bounding box that is moved.

        Raises
        ------
        RegionOperationError
            If the region cannot be changed.
        """
        raise NotImplementedError

    def contract(self, *changes):
        """ Shrink the region.

        Parameters
        ----------
        *changes
            Directional deltas of shape (3, ).

        Raises
        ------
        RegionOperationError
            If the region cannot be changed.
        """
        raise NotImplementedError

    def shift(self, change):
        """ Translate the region.

        Parameters
        ----------
        change : array_like, shape (3, )
            Integral translation vector.

        Raises
        ------
        RegionOperationError
            If the region cannot be moved.
        """
        raise NotImplementedError

    def contains(self, point):
        """ Containment test.

        Parameters
        ----------
        point : array_like, shape (3, )
            Query point.

        Returns
        -------
        bool
        """
        raise NotImplementedError

    def chunks(self):
        """ Chunk columns touched by the region.

        Returns
        -------
        set[(int, int)]
        """
        raise NotImplementedError

    def chunk_cubes(self):
        """ Chunk cubes touched by the region.

        Returns
        -------
        set[(int, int, int)]
        """
        raise NotImplementedError

    def clone(self):
        """ Independent copy.

        Returns
        -------
        Region
        """
        raise NotImplementedError

    def polygonize(self, max_points=-1):
        """ Footprint polygon.

        Approximation of the region's cross section in the xz-plane.

        Parameters
        ----------
        max_points : int, optional
            Upper bound on the number of polygon vertices. Negative values
            mean no limit.

        Returns
        -------
        list[(int, int)]
        """
        raise NotImplementedError


class AbstractRegion(Region):
    """ Region base class.

    Implements everything except :attr:`minimum_point`,
    :attr:`maximum_point`, :meth:`expand`, :meth:`contract`,
    :meth:`contains`, and :meth:`clone` in terms of the bounding box
    and the containment test.
    """

    def __iter__(self):
        a, b = self._lattice_bounds()

        for x in range(a[0], b[0] + 1):
            for y in range(a[1], b[1] + 1):
                for z in range(a[2], b[2] + 1):
                    if self.contains((x, y, z)):
                        yield (x, y, z)

    @property
    def center(self):
        if self.minimum_point is None:
            return np.full(3, np.nan)

        a, b = self._lattice_bounds()
        return (np.asarray(a, dtype=float) + b) / 2.0

    @property
    def area(self):
        a, b = self._lattice_bounds()
        return math.prod(j - i + 1 for i, j in zip(a, b))

    @property
    def width(self):
        a, b = self._lattice_bounds()
        return b[0] - a[0] + 1

    @property
    def height(self):
        a, b = self._lattice_bounds()
        return b[1] - a[1] + 1

    @property
    def length(self):
        a, b = self._lattice_bounds()
        return b[2] - a[2] + 1

    def shift(self, change):
        self.expand(change)
        self.contract(change)

    def chunks(self):
        a, b = self._lattice_bounds()
        y = a[1]

        chunks = set()

        # Only the bottom layer is sampled. Columns that touch the region
        # above its lowest layer only are missed.
        for x in range(a[0], b[0] + 1):
            for z in range(a[2], b[2] + 1):
                if self.contains((x, y, z)):
                    chunks.add((x >> CHUNK_SHIFTS, z >> CHUNK_SHIFTS))

        return chunks

    def chunk_cubes(self):
        return {(x >> CHUNK_SHIFTS, y >> CHUNK_SHIFTS, z >> CHUNK_SHIFTS)
                for x, y, z in self}

    def polygonize(self, max_points=-1):
        if 0 <= max_points < 4:
            raise ValueError('cannot polygonize a bounding box into less '
                             'than 4 points')

        if self.minimum_point is None:
            return []

        a, b = self._lattice_bounds()

        return [(a[0], a[2]), (a[0], b[2]), (b[0], b[2]), (b[0], a[2])]

    def _lattice_bounds(self):
        """ Bounding box corners as integer tuples.

        A region without bounding box, i.e., one that has no vertices yet,
        reports an empty box: every extent is zero and all coordinate
        ranges are empty.
        """
        a, b = self.minimum_point, self.maximum_point

        if a is None or b is None:
            return (0, 0, 0), (-1, -1, -1)

        a = tuple(int(x) for x in a)
        b = tuple(int(x) for x in b)

        return a, b


class NullRegion(Region):
    """ Empty region.

    Contains no blocks, has a degenerate bounding box at the origin and
    cannot be changed.
    """

    def __iter__(self):
        return iter(())

    @property
    def minimum_point(self):
        return np.zeros(3, dtype=int)

    @property
    def maximum_point(self):
        return np.zeros(3, dtype=int)

    @property
    def center(self):
        return np.zeros(3)

    @property
    def area(self):
        return 0

    @property
    def width(self):
        return 0

    @property
    def height(self):
        return 0

    @property
    def length(self):
        return 0

    def expand(self, *changes):
        raise RegionOperationError('cannot change NullRegion')

    def contract(self, *changes):
        raise RegionOperationError('cannot change NullRegion')

    def shift(self, change):
        raise RegionOperationError('cannot change NullRegion')

    def contains(self, point):
        return False

    def chunks(self):
        return set()

    def chunk_cubes(self):
        return set()

    def clone(self):
        return NullRegion()

    def polygonize(self, max_points=-1):
        return []


class RegionOperationError(Exception):
    """ Region operation exception.

    Raised if a region does not support a requested change of its
    shape or position.
    """

    pass
