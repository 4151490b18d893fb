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

""" Basic vector math.

Regions work with two kinds of points. Lattice points (block positions)
are stored as hashable 3-tuples of :class:`int` so they can be members of
sets and dictionary keys. Everything else, e.g. triangle corners and query
points, is a :class:`~numpy.ndarray` of shape (3, ).
"""

import math
import numpy as np


def point(p):
    r""" Continuous point.

    Parameters
    ----------
    p : array_like, shape (3, )
        Point in :math:`\mathbb{R}^3`.

    Raises
    ------
    ValueError
        If `p` is :obj:`None` or cannot be interpreted as a point in
        3-space.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Floating point copy of `p`.
    """
    if p is None:
        raise ValueError('point cannot be None')

    try:
        arr = np.array(p, dtype=float)
    except (TypeError, ValueError):
        raise ValueError(f'cannot interpret {p!r} as a point') from None

    if arr.shape != (3, ):
        raise ValueError(f'expected point of shape (3, ), got {arr.shape}')

    return arr


def lattice(p):
    r""" Lattice point.

    Coordinates are rounded down, i.e., a point is mapped to the block
    that contains it.

    Parameters
    ----------
    p : array_like, shape (3, )
        Point in :math:`\mathbb{R}^3`.

    Raises
    ------
    ValueError
        If `p` is :obj:`None`, cannot be interpreted as a point in 3-space
        or has non-finite coordinates.

    Returns
    -------
    (int, int, int)
        Integer coordinates of the block containing `p`.
    """
    arr = point(p)

    if not np.all(np.isfinite(arr)):
        raise ValueError(f'non-finite coordinates {tuple(arr)}')

    return tuple(math.floor(x) for x in arr)


def cross(u, v):
    r""" Cross product.

    Alternative to NumPy's vectorized :func:`~numpy.cross` function.

    Parameters
    ----------
    u, v : array_like, shape (3, )
        Vector in :math:`\mathbb{R}^3`.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Cross product of vectors :math:`\mathbf{u}` and :math:`\mathbf{v}`.
    """
    # Unpack the arrays. This will also catch any problem with array shape.
    u0, u1, u2 = u
    v0, v1, v2 = v

    return np.array([u1*v2 - u2*v1,
                     u2*v0 - u0*v2,
                     u0*v1 - u1*v0])


def norm(u):
    r""" Length of vector.

    Alternative to NumPy's vectorized :func:`~numpy.linalg.norm` function.

    Parameters
    ----------
    u : ~numpy.ndarray, shape (n, )
        Vector in :math:`\mathbb{R}^n`.

    Returns
    -------
    float
        Euclidean length of the vector :math:`\mathbf{u}`.
    """
    return math.sqrt(u.dot(u))


def unit(u):
    r""" Vector normalization.

    Parameters
    ----------
    u : ~numpy.ndarray, shape (3, )
        Vector in :math:`\mathbb{R}^3`.

    Returns
    -------
    ~numpy.ndarray, shape (3, )
        Normalized copy of input vector. The zero vector is returned
        unchanged.
    """
    length = norm(u)

    if length == 0.0:
        return u.copy()

    return u / length

