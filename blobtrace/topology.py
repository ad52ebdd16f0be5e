# topology.py
# independent component / hole counts (scikit-image) to cross-check the tracer

import numpy as np
from skimage.measure import label as sklabel

def count_components(mask: np.ndarray) -> int:
    """8-connected foreground components."""
    mask = np.asarray(mask) != 0
    if mask.size == 0: return 0
    return int(sklabel(mask, connectivity=2).max())

def count_holes(mask: np.ndarray) -> int:
    """4-connected background components that do not reach the image border."""
    fg = pad_background(np.asarray(mask) != 0, 1)
    labels = sklabel(~fg, connectivity=1)
    n = int(labels.max())
    if n == 0: return 0
    # padding joins everything touching the border into one component
    border = set(np.unique(np.r_[labels[0,:], labels[-1,:], labels[:,0], labels[:,-1]]))
    border.discard(0)
    return n - len(border)

def pad_background(mask: np.ndarray, pad: int = 1) -> np.ndarray:
    return np.pad(mask, pad, mode='constant', constant_values=False)
