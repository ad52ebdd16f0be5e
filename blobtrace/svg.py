# svg.py
# simple SVG writer for blob contours

from .blob import BlobList
from .io_save_load import _ensure_parent

def path_d(points):
    points = list(points)
    if not points: return ""
    d=f"M {points[0][0]} {points[0][1]}"
    for x,y in points[1:]: d+=f" L {x} {y}"
    return d+" Z"

def write_svg(blobs: BlobList, size, out_path, hole_stroke=False):
    w,h=size
    parts=[f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">','<g fill="none" stroke="red" stroke-width="1">']
    for blob in blobs:
        parts.append(f'<path d="{path_d(blob.external)}" data-label="{blob.label}" />')
        for hc in blob.internal:
            parts.append(f'<path d="{path_d(hc)}" stroke="blue" />' if hole_stroke else f'<path d="{path_d(hc)}" />')
    parts.append('</g></svg>')
    _ensure_parent(out_path)
    with open(out_path,'w') as f: f.write("\n".join(parts))
