# binarise.py
# fixed thresholding for the demo; adaptive policies are the caller's business

import numpy as np

from .config import S

def binarise(gray: np.ndarray, threshold: int | None = None) -> np.ndarray:
    """uint8 mask, 1 where gray >= threshold (bright = foreground)."""
    if threshold is None:
        threshold = S.THRESHOLD
    gray = np.asarray(gray)
    if gray.ndim != 2:
        raise ValueError(f"expected a single-channel image, got shape {gray.shape}")
    return (gray >= threshold).astype(np.uint8)
