"""
Tests for the visualization module.
"""

import numpy as np

from facedetect.config import VisualizationConfig
from facedetect.detection import Detection
from facedetect.visualizer import draw_detections

_GREEN = [50, 255, 50]


def test_draws_outline_at_detection_corners():
    """A box at (100, 80, 60, 60) has corners at (100, 80) and (160, 140)."""
    frame = np.zeros((300, 300, 3), dtype=np.uint8)
    det = Detection(x=100, y=80, width=60, height=60)

    draw_detections(frame, [det], VisualizationConfig())

    # Corners and edges (row, col)
    assert frame[80, 100].tolist() == _GREEN
    assert frame[140, 160].tolist() == _GREEN
    assert frame[80, 130].tolist() == _GREEN
    assert frame[110, 100].tolist() == _GREEN
    # Outline only: the interior stays untouched
    assert frame[110, 130].tolist() == [0, 0, 0]
    # Nothing far from the box is drawn
    assert frame[0, 0].tolist() == [0, 0, 0]
    assert frame[250, 250].tolist() == [0, 0, 0]


def test_draws_in_place():
    """The input buffer is mutated and returned."""
    frame = np.zeros((100, 100, 3), dtype=np.uint8)

    annotated = draw_detections(
        frame, [Detection(x=10, y=10, width=20, height=20)], VisualizationConfig()
    )

    assert annotated is frame
    assert frame.any()


def test_no_detections_leaves_frame_unchanged():
    frame = np.full((50, 80, 3), 127, dtype=np.uint8)
    original = frame.copy()

    draw_detections(frame, [], VisualizationConfig())

    assert np.array_equal(frame, original)


def test_uses_configured_style():
    """Color and thickness come from the configuration."""
    frame = np.zeros((100, 100, 3), dtype=np.uint8)
    config = VisualizationConfig(box_color=(0, 0, 255), thickness=1)

    draw_detections(frame, [Detection(x=20, y=20, width=40, height=40)], config)

    assert frame[20, 40].tolist() == [0, 0, 255]
    # Thickness 1 does not bleed onto neighbouring rows
    assert frame[22, 40].tolist() == [0, 0, 0]


def test_dimensions_unchanged():
    frame = np.zeros((120, 90, 3), dtype=np.uint8)
    annotated = draw_detections(
        frame, [Detection(x=0, y=0, width=200, height=200)], VisualizationConfig()
    )
    assert annotated.shape == (120, 90, 3)
