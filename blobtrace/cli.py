# cli.py
# blobtrace <in> <out>: label image + blob.json + blob.plot

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .binarise import binarise
from .errors import BlobError
from .features import blob_summary
from .io_save_load import load_gray, save_blobs_json, save_blobs_plot, save_label_png
from .log import setup_logging
from .scan import find_blobs
from .svg import write_svg
from .topology import count_components, count_holes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blobtrace",
        description="Create an image containing the set of found labels, a JSON file and a "
                    "gnuplot file containing the associated blob contours.")
    parser.add_argument('-x', '--roi-x', type=int, default=0, help='X coordinate of the upper left corner of the ROI')
    parser.add_argument('-y', '--roi-y', type=int, default=0, help='Y coordinate of the upper left corner of the ROI')
    parser.add_argument('-w', '--roi-w', type=int, default=None, help='ROI width (default: image width)')
    parser.add_argument('-H', '--roi-h', type=int, default=None, help='ROI height (default: image height)')
    parser.add_argument('-t', '--threshold', type=int, default=None, help='pixels >= threshold are foreground (default: 128)')
    parser.add_argument('--no-internal', action='store_true', help='count holes without storing their contours')
    parser.add_argument('--json', default='blob.json', help='blob JSON output (default: blob.json)')
    parser.add_argument('--plot', default='blob.plot', help='gnuplot output (default: blob.plot)')
    parser.add_argument('--svg', default=None, help='also write an SVG contour overlay')
    parser.add_argument('--verify', action='store_true', help='cross-check blob and hole counts with scikit-image')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='-v for INFO, -vv for DEBUG')
    parser.add_argument('input', help='input image')
    parser.add_argument('output', help='output label image (PNG)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging({0: None, 1: "INFO"}.get(args.verbose, "DEBUG"))

    try:
        gray = load_gray(args.input)
    except OSError as e:
        logger.error("failed to read image %s: %s", args.input, e)
        return 1
    mask = binarise(gray, args.threshold)

    roi = (args.roi_x, args.roi_y, args.roi_w, args.roi_h)
    try:
        result = find_blobs(mask, roi, extract_internal=not args.no_internal)
    except BlobError as e:
        logger.error("labeling failed: %s", e)
        return 1

    try:
        for row in blob_summary(result):
            logger.info("blob %(label)d bounds=%(bounds)s area=%(area)d perimeter=%(perimeter)s holes=%(holes)d", row)

        ok = True
        if args.verify:
            ok = _verify(mask, result)

        try:
            if result.labels.labels.size:
                save_label_png(result.labels, args.output)
            else:
                logger.warning("ROI %s is empty, no label image written to %s", roi, args.output)
            save_blobs_json(result.blobs, args.json)
            save_blobs_plot(result.blobs, args.plot)
            if args.svg:
                write_svg(result.blobs, (gray.shape[1], gray.shape[0]), args.svg, hole_stroke=True)
        except OSError as e:
            logger.error("failed to write output: %s", e)
            return 1
    finally:
        result.release()

    return 0 if ok else 1


def _verify(mask, result) -> bool:
    r = result.roi
    window = mask[r.y:r.y + r.height, r.x:r.x + r.width]
    comps, holes = count_components(window), count_holes(window)
    if comps != result.count or holes != result.blobs.hole_count:
        logger.error("verify: %d blobs / %d holes traced, %d / %d expected",
                     result.count, result.blobs.hole_count, comps, holes)
        return False
    logger.info("verify: %d blobs, %d holes", comps, holes)
    return True


if __name__ == "__main__":
    sys.exit(main())
