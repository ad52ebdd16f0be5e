import json
import logging

import numpy as np
import pytest
from PIL import Image

from blobtrace.cli import main, build_parser


@pytest.fixture
def picture(tmp_path, ring):
    """White ring and a white dot on black, as an 8-bit PNG."""
    gray = np.zeros((6, 9), np.uint8)
    gray[:5, :5] = ring * 255
    gray[5, 8] = 200
    gray[0, 8] = 100  # below the threshold
    path = tmp_path / "in.png"
    Image.fromarray(gray).save(path)
    return path


def _outputs(tmp_path):
    return ["--json", str(tmp_path / "blob.json"), "--plot", str(tmp_path / "blob.plot")]


def test_end_to_end(tmp_path, picture):
    out = tmp_path / "labels.png"
    svg = tmp_path / "blob.svg"
    code = main(_outputs(tmp_path) + ["--svg", str(svg), "--verify", str(picture), str(out)])
    assert code == 0
    assert np.array(Image.open(out)).shape == (6, 9, 3)
    blobs = json.loads((tmp_path / "blob.json").read_text())["blobs"]
    assert [b["label"] for b in blobs] == [1, 2]
    assert blobs[0]["euler_number"] == 1 and len(blobs[0]["internals"]) == 1
    assert blobs[1]["external"] == [8, 5]
    assert (tmp_path / "blob.plot").read_text().strip()
    assert svg.read_text().count("<path") == 3


def test_roi_and_no_internal(tmp_path, picture):
    out = tmp_path / "labels.png"
    code = main(_outputs(tmp_path) + ["-x", "2", "-y", "1", "-w", "20", "-H", "20", "--no-internal",
                                      str(picture), str(out)])
    assert code == 0
    assert np.array(Image.open(out)).shape == (5, 7, 3)
    blobs = json.loads((tmp_path / "blob.json").read_text())["blobs"]
    assert all("internals" not in b for b in blobs)
    assert blobs[0]["external"][:2] == [2, 1]


def test_threshold_option(tmp_path, picture):
    code = main(_outputs(tmp_path) + ["-t", "50", str(picture), str(tmp_path / "l.png")])
    assert code == 0
    blobs = json.loads((tmp_path / "blob.json").read_text())["blobs"]
    assert len(blobs) == 3


def test_missing_input(tmp_path):
    assert main(_outputs(tmp_path) + [str(tmp_path / "nope.png"), str(tmp_path / "out.png")]) == 1


def test_usage_error():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["only-one"])
    assert info.value.code == 2


def test_setup_logging_adds_one_handler():
    from blobtrace.log import setup_logging
    logger = setup_logging("DEBUG")
    setup_logging("INFO")
    ours = [h for h in logger.handlers if getattr(h, "_blobtrace", False)]
    assert len(ours) == 1
    assert logger.level == logging.INFO


@pytest.mark.parametrize("roi_args", [["-x", "20"], ["-y", "6"], ["-w", "0"], ["-H", "0"]])
def test_empty_roi_skips_label_image(tmp_path, picture, roi_args):
    out = tmp_path / "labels.png"
    code = main(_outputs(tmp_path) + roi_args + [str(picture), str(out)])
    assert code == 0
    assert not out.exists()
    assert json.loads((tmp_path / "blob.json").read_text()) == {"blobs": []}
    assert (tmp_path / "blob.plot").read_text() == ""
