# io_save_load.py
# load/save helpers: grayscale input, label PNG, blob JSON, gnuplot data

from __future__ import annotations
import json, os, pathlib as _p
from PIL import Image
import numpy as np

from .blob import BlobList
from .config import S
from .labels import LabelGrid

def load_gray(path: str) -> np.ndarray:
    return np.array(Image.open(path).convert('L'), dtype=np.uint8)

def _ensure_parent(path: str):
    _p.Path(os.path.dirname(str(path)) or ".").mkdir(parents=True, exist_ok=True)

def save_json(path: str, obj: dict):
    _ensure_parent(path)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)

# --- label image ---

def label_to_rgb(labels: LabelGrid) -> np.ndarray:
    """Colour labeled cells from the palette; border and background stay black."""
    grid = labels.labels.astype(np.int32)
    palette = np.array(S.PALETTE, dtype=np.uint8)
    rgb = np.zeros(grid.shape + (3,), dtype=np.uint8)
    fg = grid > 0
    rgb[fg] = palette[(grid[fg] - 1) % len(palette)]
    return rgb

def save_label_png(labels: LabelGrid, path: str):
    _ensure_parent(path)
    Image.fromarray(label_to_rgb(labels), 'RGB').save(path, format='PNG')

# --- blob records ---

def blobs_to_dict(blobs: BlobList) -> dict:
    rows = []
    for b in blobs:
        row = {"label": b.label, "external": b.external.flat()}
        if b.internal:
            row["internals"] = [c.flat() for c in b.internal]
        row["euler_number"] = b.internal_count
        rows.append(row)
    return {"blobs": rows}

def save_blobs_json(blobs: BlobList, path: str):
    save_json(path, blobs_to_dict(blobs))

def save_blobs_plot(blobs: BlobList, path: str):
    """gnuplot data, plot with:  plot "blob.plot" lc variable with lines"""
    _ensure_parent(path)
    with open(path, 'w') as f:
        for b in blobs:
            for x, y in b.external:
                f.write(f"{x:5d}    {y:5d}    {2 * b.label:5d}\n")
            f.write("\n")
            for c in b.internal:
                for x, y in c:
                    f.write(f"{x:5d}    {y:5d}    {2 * b.label + 1:5d}\n")
                f.write("\n")
