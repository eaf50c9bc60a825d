import dataclasses

import numpy as np
import pytest
from gjk2d import ConvexPolygon, Verdict, box, regular_polygon, is_convex


def test_polygon_stores_float64_vertices():
    p = ConvexPolygon([[0, 0], [1, 0], [0, 1]])
    assert p.vertices.dtype == np.float64
    assert p.vertices.shape == (3, 2)
    assert len(p) == 3
    assert np.array_equal(np.asarray(p), p.vertices)


def test_polygon_rejects_empty():
    with pytest.raises(ValueError):
        ConvexPolygon([])


def test_polygon_is_frozen():
    p = box()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.vertices = np.zeros((3, 2))


def test_box_vertices_ccw():
    b = box((1.0, 2.0), (0.5, 1.0))
    expected = [[0.5, 1.0], [1.5, 1.0], [1.5, 3.0], [0.5, 3.0]]
    assert np.allclose(b.vertices, expected)
    assert np.allclose(b.centroid, [1.0, 2.0])


def test_support_and_translated():
    b = box()
    assert np.allclose(b.support((1.0, 1.0)), [0.5, 0.5])
    # tie along +x keeps the first vertex
    assert np.allclose(b.support((1.0, 0.0)), [0.5, -0.5])

    moved = b.translated((2.0, 3.0))
    assert np.allclose(moved.centroid, [2.0, 3.0])
    assert np.allclose(b.centroid, [0.0, 0.0])


def test_regular_polygon():
    sq = regular_polygon(4, radius=1.0)
    expected = [[1, 0], [0, 1], [-1, 0], [0, -1]]
    assert np.allclose(sq.vertices, expected, atol=1e-12)

    hexagon = regular_polygon(6, radius=2.0, center=(5.0, -1.0))
    assert len(hexagon) == 6
    assert np.allclose(hexagon.centroid, [5.0, -1.0], atol=1e-12)
    dist = np.linalg.norm(hexagon.vertices - [5.0, -1.0], axis=1)
    assert np.allclose(dist, 2.0)


def test_regular_polygon_validation():
    with pytest.raises(ValueError):
        regular_polygon(2)
    with pytest.raises(ValueError):
        regular_polygon(5, radius=0.0)


@pytest.mark.parametrize("n", range(3, 9))
def test_regular_polygons_are_convex(n):
    assert is_convex(regular_polygon(n, radius=1.5, angle=0.3))


def test_is_convex():
    assert is_convex([(0, 0), (1, 0), (1, 1), (0, 1)])
    # clockwise is fine too
    assert is_convex([(0, 1), (1, 1), (1, 0), (0, 0)])
    # collinear vertex on an edge
    assert is_convex([(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)])
    # points and segments
    assert is_convex([(0, 0)])
    assert is_convex([(0, 0), (1, 1)])

    # dart (reflex vertex at (1, 1))
    assert not is_convex([(0, 0), (2, 1), (0, 2), (1, 1)])


def test_pentagram_is_not_convex():
    """Five points visited in star order turn one way but wind twice."""
    pentagon = regular_polygon(5).vertices
    star = pentagon[[0, 2, 4, 1, 3]]
    assert not is_convex(star)


def test_polygon_intersects():
    a = box((0.0, 0.0), (0.5, 0.5))
    assert a.intersects(box((0.25, 0.0))) is Verdict.INTERSECTING
    assert a.intersects([(10, 10), (11, 10), (10, 11)]) is Verdict.DISJOINT
    assert regular_polygon(8, radius=2.0).intersects(regular_polygon(3, radius=0.5))
