# blob.py
# blob records and the registry that hands out labels

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterator, List

from .config import S
from .contours import Contour
from .errors import OutOfMemoryError

logger = logging.getLogger(__name__)


@dataclass
class Blob:
    label: int
    external: Contour = field(default_factory=Contour)
    internal: List[Contour] = field(default_factory=list)  # empty unless holes are extracted
    internal_count: int = 0                                # holes, extracted or not

    @property
    def euler_number(self) -> int:
        # historical name for the hole count
        return self.internal_count

    def add_internal(self) -> Contour:
        """Open a new hole contour and count it."""
        try:
            contour = Contour()
            self.internal.append(contour)
        except MemoryError as e:
            logger.error("Out of memory adding hole to blob %d", self.label)
            raise OutOfMemoryError(f"cannot add internal contour to blob {self.label}") from e
        self.internal_count += 1
        return contour

    def count_internal(self):
        """Count a hole without keeping its points."""
        self.internal_count += 1

    def release(self):
        self.external.release()
        for contour in self.internal:
            contour.release()
        self.internal.clear()


class BlobList:
    """Blobs in discovery order; blob i (0-based) has label i + 1."""

    def __init__(self):
        self._blobs: List[Blob] = []

    def add(self) -> Blob:
        label = len(self._blobs) + 1
        if label > S.LABEL_MAX:
            logger.error("Label space exhausted at %d blobs", S.LABEL_MAX)
            raise OutOfMemoryError(f"more than {S.LABEL_MAX} blobs")
        try:
            blob = Blob(label)
            self._blobs.append(blob)
        except MemoryError as e:
            logger.error("Out of memory adding blob %d", label)
            raise OutOfMemoryError(f"cannot add blob {label}") from e
        return blob

    def by_label(self, label: int) -> Blob:
        if not 1 <= label <= len(self._blobs):
            raise IndexError(f"no blob with label {label}")
        return self._blobs[label - 1]

    @property
    def count(self) -> int:
        return len(self._blobs)

    @property
    def hole_count(self) -> int:
        return sum(b.internal_count for b in self._blobs)

    def release(self):
        for blob in self._blobs:
            blob.release()
        self._blobs.clear()

    def __len__(self):
        return len(self._blobs)

    def __iter__(self) -> Iterator[Blob]:
        return iter(self._blobs)

    def __getitem__(self, i) -> Blob:
        return self._blobs[i]

    def __repr__(self):
        return f"BlobList({len(self._blobs)} blobs)"


def destroy_blobs(blobs: BlobList):
    """Free every contour of every blob and empty the collection. Safe to repeat."""
    if blobs is None:
        return
    blobs.release()
