# roi.py
# clamp a requested rectangle to the image before scanning

from __future__ import annotations
import logging
from typing import NamedTuple, Optional

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class Roi(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def as_roi(roi, image_w: int, image_h: int) -> Roi:
    """Accept None, a Roi or any 4-sequence; None extents run to the image edge."""
    if roi is None:
        return Roi(0, 0, image_w, image_h)
    try:
        x, y, w, h = roi
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"ROI must be (x, y, width, height), got {roi!r}") from e
    try:
        x, y = int(x), int(y)
        w = image_w if w is None else int(w)
        h = image_h if h is None else int(h)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"ROI values must be integers, got {roi!r}") from e
    return Roi(x, y, w, h)


def normalize_roi(roi: Roi, image_w: int, image_h: int) -> Optional[Roi]:
    """
    Clamp `roi` so that it lies inside a `image_w` x `image_h` image.

    A negative origin is moved to 0 (the extent is kept, then clamped like any
    other). The far edges are clamped against the origin on both axes.
    Returns None when there is nothing to process.
    """
    x, y, w, h = roi
    if x >= image_w or y >= image_h:
        logger.debug("ROI %s lies outside %dx%d image", tuple(roi), image_w, image_h)
        return None
    if x < 0: x = 0
    if y < 0: y = 0
    if x + w > image_w: w = image_w - x
    if y + h > image_h: h = image_h - y
    if w <= 0 or h <= 0:
        logger.debug("ROI %s is empty once clamped", tuple(roi))
        return None
    clamped = Roi(x, y, w, h)
    if clamped != roi:
        logger.debug("ROI %s clamped to %s", tuple(roi), tuple(clamped))
    return clamped
