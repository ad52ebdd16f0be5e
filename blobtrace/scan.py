# scan.py
# single raster pass: find blobs, holes and interior pixels; top-level entry point

from __future__ import annotations
import logging
import operator
from dataclasses import dataclass
from typing import Optional
import numpy as np

from .blob import BlobList, destroy_blobs
from .config import S
from .errors import InvalidArgumentError, OutOfMemoryError
from .labels import LabelGrid
from .roi import Roi, as_roi, normalize_roi
from .trace import trace_contour

logger = logging.getLogger(__name__)


@dataclass
class BlobResult:
    labels: LabelGrid   # clamped ROI size
    blobs: BlobList
    roi: Roi            # clamped ROI, image coordinates

    @property
    def width(self) -> int:
        return self.labels.width

    @property
    def height(self) -> int:
        return self.labels.height

    @property
    def count(self) -> int:
        return len(self.blobs)

    def release(self):
        destroy_blobs(self.blobs)
        self.labels.release()


def scan_raster(pixels: np.ndarray, roi: Roi, grid: LabelGrid, blobs: BlobList,
                extract_internal: bool = True):
    """
    Visit the ROI row by row, left to right. For each foreground pixel P:

      1. P unvisited and the pixel above is background: P starts a new
         external contour, i.e. a new blob.
      2. The pixel below is background and still unvisited: P starts a new
         internal contour (hole) of the blob P belongs to. Also tested right
         after 1, so a hole right under a blob's first pixel is not missed.
      3. Otherwise an unvisited P is interior and takes its left neighbour's
         label.

    `pixels` is the boolean ROI window, indexed [y, x].
    """
    h, w = pixels.shape
    for y in range(h):
        for x in range(w):
            if not pixels[y, x]:
                continue

            above = y > 0 and pixels[y - 1, x]
            has_below = y < h - 1

            if grid.is_unvisited(x, y) and not above:
                blob = blobs.add()
                trace_contour(True, blob.label, x, y, roi, pixels, grid, blob.external)

            if has_below and not pixels[y + 1, x] and grid.is_unvisited(x, y + 1):
                label = grid.label_at(x, y)
                if label <= 0:
                    label = grid.label_at(x - 1, y)
                blob = blobs.by_label(label)
                if extract_internal:
                    internal = blob.add_internal()
                else:
                    # holes are still counted
                    blob.count_internal()
                    internal = None
                trace_contour(False, label, x, y, roi, pixels, grid, internal)

            elif grid.is_unvisited(x, y) and x > 0:
                grid.assign(x, y, grid.label_at(x - 1, y))


def _as_pixels(image, width: Optional[int], height: Optional[int]) -> np.ndarray:
    """Boolean (height, width) foreground mask: non-zero is foreground."""
    if image is None:
        raise InvalidArgumentError("an input image is required")
    try:
        if isinstance(image, (bytes, bytearray, memoryview)):
            arr = np.frombuffer(image, dtype=np.uint8)
        else:
            arr = np.asarray(image)
    except MemoryError as e:
        raise OutOfMemoryError("cannot read input image") from e
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"cannot read input image: {e}") from e

    if arr.ndim == 1:
        if width is None or height is None:
            raise InvalidArgumentError("a flat image buffer needs width and height")
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError as e:
            raise InvalidArgumentError(f"width and height must be integers, got {width!r}x{height!r}") from e
        if width < 0 or height < 0 or arr.size != width * height:
            raise InvalidArgumentError(f"buffer of {arr.size} pixels is not {width}x{height}")
        arr = arr.reshape(height, width)
    elif arr.ndim == 2:
        if (width is not None and width != arr.shape[1]) or (height is not None and height != arr.shape[0]):
            raise InvalidArgumentError(f"image shape {arr.shape} does not match {width}x{height}")
    else:
        raise InvalidArgumentError(f"expected a single-channel image, got shape {arr.shape}")

    H, W = arr.shape
    if W > S.COORD_MAX or H > S.COORD_MAX:
        raise InvalidArgumentError(f"{W}x{H} image exceeds {S.COORD_MAX} pixels per side")
    try:
        return arr != 0
    except MemoryError as e:
        raise OutOfMemoryError(f"cannot allocate {W}x{H} foreground mask") from e
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"unsupported pixel values: {e}") from e


def find_blobs(image, roi=None, *, width: Optional[int] = None, height: Optional[int] = None,
               extract_internal: Optional[bool] = None) -> BlobResult:
    """
    Label the 8-connected components of a binary image and trace their contours.

    Args:
        image: 2-D array (height, width), or a flat buffer with `width` and `height`.
            Any non-zero value is foreground.
        roi: (x, y, width, height) in image coordinates, clamped to the image.
            None processes the whole image.
        extract_internal: keep hole contour points (True) or only count holes.

    Returns:
        BlobResult with the label grid, the blobs (labels 1..count in raster
        discovery order) and the clamped ROI.

    Raises:
        InvalidArgumentError: malformed image or ROI.
        OutOfMemoryError: an allocation failed. Nothing allocated by the call survives.
    """
    if extract_internal is None:
        extract_internal = S.EXTRACT_INTERNAL

    fg = _as_pixels(image, width, height)
    H, W = fg.shape
    clamped = normalize_roi(as_roi(roi, W, H), W, H)
    if clamped is None:
        return BlobResult(LabelGrid(0, 0), BlobList(), Roi(0, 0, 0, 0))

    pixels = fg[clamped.y:clamped.y + clamped.height, clamped.x:clamped.x + clamped.width]
    blobs = BlobList()
    grid = None
    try:
        grid = LabelGrid(clamped.width, clamped.height)
        scan_raster(pixels, clamped, grid, blobs, extract_internal=bool(extract_internal))
    except OutOfMemoryError:
        _release(grid, blobs)
        raise
    except MemoryError as e:
        _release(grid, blobs)
        logger.error("Out of memory while scanning %s", tuple(clamped))
        raise OutOfMemoryError("out of memory while scanning") from e
    except Exception:
        _release(grid, blobs)
        raise

    logger.debug("roi=%s blobs=%d holes=%d", tuple(clamped), blobs.count, blobs.hole_count)
    return BlobResult(grid, blobs, clamped)


def _release(grid: Optional[LabelGrid], blobs: BlobList):
    destroy_blobs(blobs)
    if grid is not None:
        grid.release()
