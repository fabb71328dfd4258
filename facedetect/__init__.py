"""
facedetect: annotate faces in a still image with a Haar cascade.

Public API:
    - DetectionPipeline: load → detect → draw → save (facedetect.pipeline).
    - Detection: Data transfer object representing a detected face.
    - Result and the FaceDetectError family: uniform failure reporting.
    - initialize_backend: verify the OpenCV native module is importable.

Modules that import OpenCV (pipeline, detector, image_io, visualizer,
model_loader) are not imported here, so the backend check can run and
report a clean error before cv2 is touched.

Usage:
    from facedetect import initialize_backend
    from facedetect.pipeline import DetectionPipeline

    if initialize_backend().ok:
        pipeline = DetectionPipeline.from_config().unwrap()
        pipeline.run_detection_pipeline("input.jpg", "output_faces.jpg")
"""

from facedetect.backend import initialize_backend
from facedetect.detection import Detection
from facedetect.errors import (
    ConfigurationError,
    FaceDetectError,
    InputError,
    OutputError,
    StartupError,
)
from facedetect.result import Result

__all__ = [
    "Detection",
    "Result",
    "initialize_backend",
    "FaceDetectError",
    "StartupError",
    "ConfigurationError",
    "InputError",
    "OutputError",
]
