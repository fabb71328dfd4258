"""
Visualization for the face detection pipeline.

Responsibility:
    Draw bounding box outlines onto a frame. This is a pure rendering
    module and performs no I/O.

Non-goals:
    - No labels or confidence text.
    - No file writing, window management, or display logic.
"""

from typing import List

import cv2
import numpy as np

from facedetect.config import VisualizationConfig
from facedetect.detection import Detection


def draw_detections(
    frame: np.ndarray,
    detections: List[Detection],
    config: VisualizationConfig,
) -> np.ndarray:
    """Draw an unfilled rectangle around every detection.

    Args:
        frame: BGR image. Modified in place.
        detections: Detections to render, one outline each.
        config: Box color and line thickness, shared by every box.

    Returns:
        The same array that was passed in, now annotated.
    """
    for det in detections:
        cv2.rectangle(
            frame,
            (det.x, det.y),
            (det.x2, det.y2),
            color=config.box_color,
            thickness=config.thickness,
        )

    return frame
