import numpy as np

from blobtrace import Contour, LabelGrid, Roi, trace_contour


def _trace(mask, x, y, external=True, roi=None, record=True):
    pixels = np.asarray(mask) != 0
    h, w = pixels.shape
    roi = roi or Roi(0, 0, w, h)
    grid = LabelGrid(w, h)
    contour = Contour() if record else None
    trace_contour(external, 1, x, y, roi, pixels, grid, contour)
    return grid, contour


def test_isolated_pixel(make_mask):
    m = make_mask(
        "...",
        ".#.",
        "...",
    )
    grid, contour = _trace(m, 1, 1)
    assert contour.tolist() == [(1, 1)]
    assert grid.labels.tolist() == [
        [-1, -1, -1],
        [-1, 1, -1],
        [-1, -1, -1],
    ]


def test_isolated_pixel_in_corner_skips_outside(make_mask):
    grid, contour = _trace(make_mask("#.", ".."), 0, 0)
    assert contour.tolist() == [(0, 0)]
    assert grid.labels.tolist() == [[1, -1], [-1, -1]]


def test_two_pixel_line_walks_back(make_mask):
    m = make_mask(
        "##.",
        "...",
    )
    grid, contour = _trace(m, 0, 0)
    assert contour.tolist() == [(0, 0), (1, 0), (0, 0)]
    assert grid.labels.tolist() == [[1, 1, -1], [-1, -1, -1]]


def test_rectangle_external_contour(rectangle):
    grid, contour = _trace(rectangle, 1, 1)
    assert contour.tolist() == [
        (1, 1), (2, 1), (3, 1), (4, 1),
        (4, 2), (4, 3),
        (3, 3), (2, 3), (1, 3),
        (1, 2), (1, 1),
    ]
    # every background pixel touches the rectangle
    assert ((grid.labels == -1) == (rectangle == 0)).all()
    # interior pixels are left for the scanner
    assert grid.labels[2, 2] == 0 and grid.labels[2, 3] == 0


def test_internal_contour_of_ring(ring):
    pixels = ring != 0
    grid = LabelGrid(5, 5)
    # the outer contour labels the ring first
    trace_contour(True, 1, 1, 1, Roi(0, 0, 5, 5), pixels, grid, Contour())
    hole = Contour()
    trace_contour(False, 1, 2, 1, Roi(0, 0, 5, 5), pixels, grid, hole)
    assert hole.tolist() == [(2, 1), (1, 2), (2, 3), (3, 2), (2, 1)]


def test_points_are_in_image_coordinates(make_mask):
    m = make_mask(
        "##.",
        "...",
    )
    _, contour = _trace(m, 0, 0, roi=Roi(5, 7, 3, 2))
    assert contour.tolist() == [(5, 7), (6, 7), (5, 7)]


def test_labels_without_recording(rectangle):
    grid, contour = _trace(rectangle, 1, 1, record=False)
    recorded, _ = _trace(rectangle, 1, 1)
    assert contour is None
    assert (grid.labels == recorded.labels).all()
