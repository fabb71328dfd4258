"""
Tests for the postprocessing module.
"""

import numpy as np
import pytest

from facedetect.detection import Detection
from facedetect.postprocessor import rects_to_detections


def test_empty_tuple():
    """detectMultiScale returns () when nothing is found."""
    assert rects_to_detections(()) == []


def test_empty_array():
    """An empty array also means no detections."""
    assert rects_to_detections(np.empty((0, 4), dtype=np.int32)) == []


def test_rects_preserve_order_and_count():
    """Every rectangle becomes one Detection, in the same order."""
    rects = np.array(
        [[100, 80, 60, 60], [10, 10, 20, 20], [100, 80, 60, 60]],
        dtype=np.int32,
    )

    detections = rects_to_detections(rects)

    assert detections == [
        Detection(x=100, y=80, width=60, height=60),
        Detection(x=10, y=10, width=20, height=20),
        Detection(x=100, y=80, width=60, height=60),
    ]


def test_coordinates_are_plain_ints():
    """numpy integers are converted so OpenCV drawing accepts them."""
    det = rects_to_detections(np.array([[1, 2, 3, 4]], dtype=np.int32))[0]

    assert type(det.x) is int
    assert type(det.height) is int


def test_bad_shape():
    """Rows without four values are rejected."""
    with pytest.raises(ValueError, match="shape"):
        rects_to_detections(np.array([[1, 2, 3]]))
