# trace.py  (Moore-neighbour tracing, Chang-Chen-Lu variant)
# walks one closed contour, labeling foreground and marking border background

from __future__ import annotations
from typing import Optional
import numpy as np

from .contours import Contour
from .labels import LabelGrid
from .roi import Roi

# neighbour directions, clockwise from east (y grows downwards)
#          E  SE  S  SW   W  NW   N  NE
DX = (1, 1, 0, -1, -1, -1, 0, 1)
DY = (0, 1, 1, 1, 0, -1, -1, -1)

# first direction examined from the seed
EXTERNAL_START = 7   # NE: the pixel above the seed is background
INTERNAL_START = 3   # SW: the pixel below the seed is background


def trace_contour(external: bool, label: int, x: int, y: int, roi: Roi,
                  pixels: np.ndarray, grid: LabelGrid,
                  contour: Optional[Contour] = None) -> None:
    """
    Trace the contour through seed (x, y), ROI-local coordinates.

    Every foreground pixel reached gets `label`; every background pixel
    examined on the way becomes border. Points are appended to `contour`
    (offset back to image coordinates) when one is given. Pixels outside the
    ROI are skipped without being marked.

    Stops when the tracer is back on the seed and about to step onto the
    first pixel it stepped onto, i.e. the first edge repeats. An isolated
    pixel yields a single point.
    """
    w, h = roi.width, roi.height
    i = EXTERNAL_START if external else INTERNAL_START
    x0, y0 = x, y
    first = None
    done = False

    grid.assign(x0, y0, label)

    while not done:
        if contour is not None:
            contour.append(roi.x + x0, roi.y + y0)

        # scan around the current pixel, clockwise
        for _ in range(8):
            x1 = x0 + DX[i]
            y1 = y0 + DY[i]
            if 0 <= x1 < w and 0 <= y1 < h:
                if pixels[y1, x1]:
                    grid.assign(x1, y1, label)
                    if first is None:
                        first = (x1, y1)
                    else:
                        done = (x0, y0) == (x, y) and (x1, y1) == first
                    x0, y0 = x1, y1
                    break
                grid.mark_border(x1, y1)
            i = (i + 1) & 7
        else:
            # isolated point
            break

        # restart two steps clockwise from the direction back to the previous pixel
        i = (i + 4 + 2) & 7
