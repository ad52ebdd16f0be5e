# features.py
# per-blob measurements from the contours and the label grid

from __future__ import annotations
import math
from typing import Dict, List, Optional, Tuple
import numpy as np

from .contours import Contour
from .labels import LabelGrid

Bounds = Tuple[int, int, int, int]  # xmin, ymin, xmax, ymax (inclusive)

def contour_bounds(contour: Contour) -> Optional[Bounds]:
    if not len(contour): return None
    pts = contour.points
    xmin, ymin = pts.min(axis=0).tolist()
    xmax, ymax = pts.max(axis=0).tolist()
    return xmin, ymin, xmax, ymax

def contour_length(contour: Contour) -> float:
    """Length of the traced path: 1 per axial step, sqrt(2) per diagonal step."""
    if len(contour) < 2: return 0.0
    steps = np.abs(np.diff(contour.points.astype(np.int32), axis=0)).sum(axis=1)
    return float(np.sum(steps == 1) + math.sqrt(2) * np.sum(steps == 2))

def blob_area(labels: LabelGrid, label: int) -> int:
    """Pixel count of one blob."""
    return int(np.count_nonzero(labels.labels == label))

def blob_summary(result) -> List[Dict]:
    """One row per blob of a BlobResult, for logs and notebooks."""
    rows = []
    areas = np.bincount(np.clip(result.labels.labels.ravel(), 0, None).astype(np.int64),
                        minlength=result.count + 1)
    for blob in result.blobs:
        rows.append({
            "label": blob.label,
            "bounds": contour_bounds(blob.external),
            "area": int(areas[blob.label]),
            "perimeter": round(contour_length(blob.external), 3),
            "holes": blob.internal_count,
        })
    return rows
