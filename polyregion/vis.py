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

""" Visualization using VTK.

Quick display of hull regions, their triangle meshes and bounding boxes.
Objects are queued for display by :func:`hull` and :func:`aabb` and shown
by :func:`show`, which blocks until the window is closed:

>>> import polyregion.vis as vis
>>> vis.hull(region, edges=True)
>>> vis.aabb(region)
>>> vis.show()
"""

import numpy as np
import vtk

from vtk.util import colors
from vtk.util.numpy_support import numpy_to_vtk


# The renderer all objects are added to. Created on demand by add(), shown
# and reset by show().
_renderer = None


def add(actor):
    """ Queue object for display.

    Parameters
    ----------
    actor : vtkProp
        Object to be rendered.

    Returns
    -------
    vtkRenderer
        The renderer instance used for display.
    """
    global _renderer

    if _renderer is None:
        _renderer = vtk.vtkRenderer()
        _renderer.SetBackground(colors.white)

    _renderer.AddViewProp(actor)
    return _renderer


def polydata(region):
    """ Hull mesh as polygonal data.

    Parameters
    ----------
    region : ConvexPolyhedralRegion
        Region whose triangles are converted.

    Returns
    -------
    vtkPolyData
        One triangle cell per hull triangle. Corners shared by several
        triangles are merged.
    """
    index = dict()
    cells = vtk.vtkCellArray()

    for t in region.triangles:
        ids = vtk.vtkIdList()

        for p in t:
            key = tuple(float(x) for x in p)
            ids.InsertNextId(index.setdefault(key, len(index)))

        cells.InsertNextCell(ids)

    points = vtk.vtkPoints()

    if index:
        coords = np.array(list(index.keys()), dtype=float)
        points.SetData(numpy_to_vtk(coords, deep=True))

    data = vtk.vtkPolyData()
    data.SetPoints(points)
    data.SetPolys(cells)

    return data


def hull(region, color=colors.snow, opacity=1.0, edges=False):
    """ Hull visualization.

    Parameters
    ----------
    region : ConvexPolyhedralRegion
        Region to be displayed.
    color : array_like, shape (3, ), optional
        RGB color triple.
    opacity : float, optional
        Surface opacity.
    edges : bool, optional
        Toggle triangle edges.

    Returns
    -------
    vtkActor
        The actor added to the scene.
    """
    mapper = vtk.vtkPolyDataMapper()
    mapper.SetInputData(polydata(region))

    actor = vtk.vtkActor()
    actor.SetMapper(mapper)

    prop = actor.GetProperty()
    prop.SetColor(color)
    prop.SetOpacity(opacity)

    if edges:
        prop.EdgeVisibilityOn()
        prop.SetEdgeColor(colors.ivory_black)

    add(actor)
    return actor


def aabb(region, opacity=0.15, color=colors.dim_grey):
    """ Axis aligned bounding box.

    The box encloses all blocks of the region, i.e., it extends one unit
    beyond the maximum point.

    Parameters
    ----------
    region : Region
        Region whose bounding box is displayed.
    opacity : float, optional
        Opacity of the box.
    color : array_like, shape (3, ), optional
        Box color.

    Returns
    -------
    vtkActor
        The actor added to the scene.
    """
    a = np.asarray(region.minimum_point, dtype=float)
    b = np.asarray(region.maximum_point, dtype=float) + 1.0

    cube = vtk.vtkCubeSource()
    cube.SetBounds(a[0], b[0], a[1], b[1], a[2], b[2])

    mapper = vtk.vtkPolyDataMapper()
    mapper.SetInputConnection(cube.GetOutputPort())

    actor = vtk.vtkActor()
    actor.SetMapper(mapper)
    actor.GetProperty().SetColor(color)
    actor.GetProperty().SetOpacity(opacity)

    add(actor)
    return actor


def show(width=1200, height=600, title=None):
    """ Start the VTK event loop.

    Open a window and render all queued objects. This is a blocking
    function. The scene is discarded once the window is closed.

    Parameters
    ----------
    width : int, optional
        Window width in pixels.
    height : int, optional
        Window height in pixels.
    title : str, optional
        Window title.
    """
    global _renderer

    renderer = _renderer if _renderer is not None else add(vtk.vtkActor())
    renderer.ResetCamera()

    window = vtk.vtkRenderWindow()
    window.SetSize(width, height)
    window.SetWindowName(title or 'polyregion')
    window.AddRenderer(renderer)

    interactor = vtk.vtkRenderWindowInteractor()
    interactor.SetInteractorStyle(vtk.vtkInteractorStyleTrackballCamera())
    interactor.SetRenderWindow(window)

    window.Render()
    interactor.Start()

    _renderer = None
