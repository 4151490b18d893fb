"""
Tests for VTK conversion of hull meshes. Nothing is rendered.
"""

import pytest

vtk = pytest.importorskip('vtk')

import polyregion.vis as vis

from polyregion.hull import ConvexPolyhedralRegion


@pytest.fixture(autouse=True)
def renderer():
    """Discard actors queued by a test."""
    yield
    vis._renderer = None


@pytest.fixture
def region():
    return ConvexPolyhedralRegion([(0, 0, 0), (2, 0, 0), (0, 0, 2),
                                   (0, 2, 0), (2, 2, 2)])


def test_polydata(region):
    data = vis.polydata(region)

    assert data.GetNumberOfPoints() == 5
    assert data.GetNumberOfCells() == len(region.triangles)


def test_polydata_empty():
    data = vis.polydata(ConvexPolyhedralRegion())

    assert data.GetNumberOfPoints() == 0
    assert data.GetNumberOfCells() == 0


def test_actors(region):
    actor = vis.hull(region, opacity=0.5, edges=True)
    box = vis.aabb(region)

    assert isinstance(actor, vtk.vtkActor)
    assert isinstance(box, vtk.vtkActor)
    assert actor.GetProperty().GetOpacity() == 0.5
    assert vis._renderer.GetViewProps().GetNumberOfItems() == 2


def test_renderer_reset():
    """Actors from earlier tests are not carried over."""
    assert vis._renderer is None
