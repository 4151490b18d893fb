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

""" OBJ file I/O.

Minimal reader and writer for the OBJ-like text files used to exchange
vertex lists and hull meshes. Each line starts with a tag ('v', 'f',
...) followed by whitespace separated values. Only the vertex index of
v/vt/vn face definitions is kept when reading.
"""

import numpy as np


def _array_append(array, item):
    """ Resize and append to array.

    Parameters
    ----------
    array : ~numpy.ndarray or None
        Array object to be augmented. A new array of shape
        ``(1, len(item))`` is created if :obj:`None`.
    item : array_like
        Row to be appended.

    Raises
    ------
    ValueError
        If the row length does not match the array.

    Returns
    -------
    ~numpy.ndarray
        Reference to the enlarged array.
    """
    if array is None:
        return np.array([item], dtype=float)

    if array.shape[1:] != np.shape(item):
        raise ValueError(f'cannot add item with shape {np.shape(item)}')

    array.resize((array.shape[0] + 1, *array.shape[1:]), refcheck=False)
    array[-1, ...] = item

    return array


def _face_index(block, count):
    """ Parse a face vertex definition.

    Parameters
    ----------
    block : str
        A v, v/vt, v//vn, or v/vt/vn string.
    count : int
        Number of vertices read so far, used to resolve negative
        (relative) indices.

    Raises
    ------
    ValueError
        If the vertex index cannot be parsed.

    Returns
    -------
    int
        0-based vertex index.
    """
    index = int(block.split('/')[0])

    return count + index if index < 0 else index - 1


def read(filename, *args):
    """ Read from file.

    Lines whose tag is contained in `args` are read. Data blocks are
    returned in the same order as given in `args`, :obj:`None` for tags
    that do not occur in the file.

    Parameters
    ----------
    filename : str
        Name of an OBJ file.
    *args
        Variable number of tags of type :class:`str`.

    Raises
    ------
    ValueError
        If any argument is not of type :class:`str` or a line cannot be
        parsed.

    Returns
    -------
    object or tuple(object, ...)
        Data blocks corresponding to line tags given in `args`.


    Data blocks are returned as objects of type :class:`~numpy.ndarray`,
    except for the 'f' tag which yields ``list[list[int]]``:

    >>> v, f = read('input-file.obj', 'v', 'f')
    """
    if not args:
        return None

    if any(not isinstance(arg, str) for arg in args):
        raise ValueError("arguments have to be of type 'str'")

    blocks = {arg: [] if arg == 'f' else None for arg in args}

    # Number of 'v' lines seen so far. Needed to resolve relative indices.
    count = 0

    with open(filename, 'r') as file:
        for line in file:
            bits = line.split()

            if not bits or bits[0].startswith('#'):
                continue

            tag = bits[0]

            if tag == 'v':
                count += 1

            if tag not in blocks:
                continue

            if tag == 'f':
                blocks['f'].append([_face_index(bit, count)
                                    for bit in bits[1:]])
            else:
                row = [float(bit) for bit in bits[1:]]
                blocks[tag] = _array_append(blocks[tag], row)

    if len(args) == 1:
        return blocks[args[0]]

    return tuple(blocks.values())


def write(filename, *, f=None, **data):
    """ Write to file.

    Parameters
    ----------
    filename : str
        Name of output file.
    f : list[list[int]], optional
        Face definitions, 0-based vertex indices.
    **data
        Data blocks keyed on line tags. Each row of a block is written
        to a line that starts with the tag.


    Data blocks are written before faces:

    >>> write('output-file.obj', f=[[0, 1, 2]], v=[(0, 0, 0), (1, 0, 0),
    ...                                             (0, 1, 0)])
    """
    if 'v' in data and data['v'] is None:
        raise ValueError("'v' block cannot be None")

    with open(filename, 'w') as file:
        for tag, rows in data.items():
            for row in rows:
                file.write(tag + ''.join(f' {x}' for x in row) + '\n')

        for face in f or []:
            file.write('f' + ''.join(f' {int(v) + 1}' for v in face) + '\n')
