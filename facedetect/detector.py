"""
Face detection backends.

Public contract:
    FaceDetector.detect(frame: np.ndarray) -> list[Detection]

The pipeline only depends on the FaceDetector protocol, so the Haar
cascade backend below can be swapped for any other implementation that
turns an image into rectangles.

Constraints:
    - Input must be a BGR numpy array (as returned by OpenCV).
    - Detection is stateless per call.
    - Thread-safety is not guaranteed (single-threaded design).

Non-goals:
    - No file reading or writing.
    - No visualization.
    - No detection tuning: detectMultiScale runs with library defaults.
"""

import logging
from typing import List, Protocol

import numpy as np

from facedetect.detection import Detection
from facedetect.model_loader import load_cascade
from facedetect.postprocessor import rects_to_detections

logger = logging.getLogger(__name__)


class FaceDetector(Protocol):
    """Anything that can turn an image into face rectangles."""

    def detect(self, frame: np.ndarray) -> List[Detection]:
        """Detect faces in a BGR frame.

        Args:
            frame: Input image (H, W, 3), BGR, uint8.

        Returns:
            One Detection per face found. Empty if there are none.
        """
        ...


class HaarCascadeDetector:
    """Face detector backed by an OpenCV Haar cascade.

    Usage:
        detector = HaarCascadeDetector("haarcascade_frontalface_default.xml")
        detections = detector.detect(frame)

    The classifier is loaded once in the constructor and reused for
    every detect() call.
    """

    def __init__(self, cascade_path: str) -> None:
        """Load the cascade classifier.

        Raises:
            ConfigurationError: If the cascade file is missing or invalid.
        """
        self._classifier = load_cascade(cascade_path)

        # Frames reach the cascade in full colour, without grayscale
        # conversion or histogram equalization.
        logger.info(
            "Haar detector ready (cascade=%s, preprocessing=none)", cascade_path
        )

    def detect(self, frame: np.ndarray) -> List[Detection]:
        """Detect faces in a single BGR frame.

        Args:
            frame: A BGR image as a numpy array with shape (H, W, 3)
                   and dtype uint8, as returned by cv2.imread().

        Returns:
            A list of Detection objects in the order the classifier
            reported them. Empty if no faces are detected.

        Raises:
            TypeError: If frame is not a numpy ndarray.
            ValueError: If frame has incorrect shape or is empty.
        """
        self._validate_frame(frame)

        rects = self._classifier.detectMultiScale(frame)
        detections = rects_to_detections(rects)

        logger.debug("Cascade returned %d rectangle(s).", len(detections))
        return detections

    @staticmethod
    def _validate_frame(frame: np.ndarray) -> None:
        """Validate that the input frame meets the API contract.

        Raises:
            TypeError: If frame is not a numpy ndarray.
            ValueError: If frame is empty or has wrong dimensions.
        """
        if not isinstance(frame, np.ndarray):
            raise TypeError(
                f"Expected frame to be a numpy ndarray, "
                f"got {type(frame).__name__}. "
                f"Use cv2.imread() to obtain frames."
            )

        if frame.size == 0:
            raise ValueError("Frame is empty (zero size).")

        if frame.ndim != 3:
            raise ValueError(
                f"Expected a 3-dimensional frame (H, W, C), "
                f"got {frame.ndim} dimensions with shape {frame.shape}."
            )

        if frame.shape[2] != 3:
            raise ValueError(
                f"Expected 3 channels (BGR), got {frame.shape[2]} channels. "
                f"Input must be a BGR image as returned by OpenCV."
            )
