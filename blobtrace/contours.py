# contours.py
# append-only point buffer filled by the boundary tracer

from __future__ import annotations
import logging
from typing import Iterator, List, Tuple
import numpy as np

from .config import S
from .errors import OutOfMemoryError

logger = logging.getLogger(__name__)

IntPoint = Tuple[int, int]


class Contour:
    """
    Ordered (x, y) points in source-image coordinates, stored as int16 pairs.

    Storage doubles when full, starting at `S.CONTOUR_CAPACITY`. A failed
    growth leaves the points already stored untouched.
    """

    def __init__(self):
        self.count = 0
        self._points = np.zeros((0, 2), dtype=np.int16)

    @property
    def capacity(self) -> int:
        return len(self._points)

    def _grow(self):
        new_capacity = self.capacity * 2 if self.capacity else S.CONTOUR_CAPACITY
        try:
            grown = np.zeros((new_capacity, 2), dtype=np.int16)
        except MemoryError as e:
            logger.error("Out of memory growing contour to %d points", new_capacity)
            raise OutOfMemoryError(f"cannot grow contour to {new_capacity} points") from e
        grown[:self.count] = self._points[:self.count]
        self._points = grown

    def append(self, x: int, y: int):
        if self.count == self.capacity:
            self._grow()
        self._points[self.count] = (x, y)
        self.count += 1

    @property
    def points(self) -> np.ndarray:
        """(count, 2) int16 view, columns x and y."""
        return self._points[:self.count]

    def tolist(self) -> List[IntPoint]:
        return [tuple(p) for p in self.points.tolist()]

    def flat(self) -> List[int]:
        """x0, y0, x1, y1, ...  as in the JSON dump."""
        return self.points.ravel().tolist()

    def release(self):
        self._points = np.zeros((0, 2), dtype=np.int16)
        self.count = 0

    def __len__(self):
        return self.count

    def __iter__(self) -> Iterator[IntPoint]:
        return iter(self.tolist())

    def __getitem__(self, i) -> IntPoint:
        x, y = self.points[i]
        return int(x), int(y)

    def __eq__(self, other):
        if not isinstance(other, Contour):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __repr__(self):
        return f"Contour({self.count} points)"
