# errors.py
# the two ways a labeling call can fail

class BlobError(Exception):
    """Base class for every error raised by blobtrace."""

class InvalidArgumentError(BlobError, ValueError):
    """Malformed input: missing image, bad shape, bad ROI."""

class OutOfMemoryError(BlobError, MemoryError):
    """An allocation failed (label grid, blob registry, contour storage) or labels ran out."""
