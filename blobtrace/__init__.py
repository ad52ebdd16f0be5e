# blobtrace/__init__.py
# 8-connected component labeling with contour tracing (Chang, Chen & Lu)

# Core
from .scan import find_blobs, scan_raster, BlobResult
from .blob import Blob, BlobList, destroy_blobs
from .contours import Contour
from .labels import LabelGrid, CellState
from .roi import Roi, normalize_roi
from .trace import trace_contour
from .errors import BlobError, InvalidArgumentError, OutOfMemoryError

# Measurements & cross-checks
from .features import contour_bounds, contour_length, blob_area, blob_summary
from .topology import count_components, count_holes

# I/O
from .binarise import binarise
from .io_save_load import (
    load_gray,
    save_json,
    save_label_png,
    blobs_to_dict,
    save_blobs_json,
    save_blobs_plot,
)
from .svg import write_svg

__version__ = "0.1.0"
