"""
Tests for the Detection data object.
"""

import dataclasses

import pytest

from facedetect.detection import Detection


def test_corners_and_area():
    """Derived corner and area values."""
    det = Detection(x=100, y=80, width=60, height=60)

    assert det.x2 == 160
    assert det.y2 == 140
    assert det.area == 3600


def test_to_dict():
    det = Detection(x=1, y=2, width=3, height=4)
    assert det.to_dict() == {"x": 1, "y": 2, "width": 3, "height": 4}


def test_frozen():
    """Detections are read-only once produced."""
    det = Detection(x=1, y=2, width=3, height=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        det.x = 10
