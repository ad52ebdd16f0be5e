# labels.py
# dense label grid over the ROI; one signed 16-bit cell per pixel

from __future__ import annotations
import enum
import numpy as np

from .errors import OutOfMemoryError

UNVISITED = 0
BORDER = -1


class CellState(enum.Enum):
    UNVISITED = "unvisited"   # background not reached yet
    BORDER = "border"         # background next to a traced contour
    LABELED = "labeled"       # foreground, owned by a blob


class LabelGrid:
    """
    Row-major grid of labels in ROI-local coordinates.

    Cells hold 0 (unvisited), -1 (border) or a positive blob label. Each
    transition out of `UNVISITED` is final: `mark_border` leaves labeled cells
    alone and labels are only ever written onto foreground pixels.
    """

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        try:
            self._cells = np.zeros(self.width * self.height, dtype=np.int16)
        except MemoryError as e:
            raise OutOfMemoryError(f"cannot allocate {self.width}x{self.height} label grid") from e

    def __repr__(self):
        return f"LabelGrid({self.width}x{self.height})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} label grid")
        return x + self.width * y

    # --- reads ---

    def label_at(self, x: int, y: int) -> int:
        """Raw cell value: 0, -1 or a label."""
        return int(self._cells[self._offset(x, y)])

    def state(self, x: int, y: int) -> CellState:
        v = self._cells[self._offset(x, y)]
        if v > 0: return CellState.LABELED
        if v == BORDER: return CellState.BORDER
        return CellState.UNVISITED

    def is_unvisited(self, x: int, y: int) -> bool:
        return self._cells[self._offset(x, y)] == UNVISITED

    # --- writes ---

    def assign(self, x: int, y: int, label: int):
        self._cells[self._offset(x, y)] = label

    def mark_border(self, x: int, y: int):
        o = self._offset(x, y)
        if self._cells[o] <= 0:
            self._cells[o] = BORDER

    # --- views ---

    @property
    def labels(self) -> np.ndarray:
        """(height, width) int16 view of the cells."""
        return self._cells.reshape(self.height, self.width)

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def release(self):
        self._cells = np.zeros(0, dtype=np.int16)
        self.width = self.height = 0
