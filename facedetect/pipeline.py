"""
Detection pipeline: load → detect → draw → save, once per call.

The pipeline owns a FaceDetector and a box style. Each run reads one
image, detects faces, outlines them in place and writes the result. There
are two early exits (the input cannot be loaded, the output cannot be
written); both are reported through the returned Result and logged, and
neither raises.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from facedetect.config import AppConfig, VisualizationConfig, load_config
from facedetect.detection import Detection
from facedetect.detector import FaceDetector, HaarCascadeDetector
from facedetect.errors import ConfigurationError
from facedetect.image_io import load_image, save_image
from facedetect.result import Result
from facedetect.visualizer import draw_detections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineReport:
    """Summary of a successful pipeline run.

    Attributes:
        input_path: Image that was read.
        output_path: Annotated image that was written.
        detections: Rectangles that were drawn, in detector order.
        image_size: (width, height) of both input and output.
    """

    input_path: Path
    output_path: Path
    detections: Tuple[Detection, ...]
    image_size: Tuple[int, int]

    @property
    def face_count(self) -> int:
        return len(self.detections)


class DetectionPipeline:
    """Runs face detection on a single image and saves an annotated copy.

    Usage:
        result = DetectionPipeline.from_config(config)
        if result.ok:
            report = result.value.run_detection_pipeline("in.jpg", "out.jpg")
    """

    def __init__(
        self,
        detector: FaceDetector,
        visualization: Optional[VisualizationConfig] = None,
    ) -> None:
        self._detector = detector
        self._visualization = visualization or VisualizationConfig()

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "Result[DetectionPipeline]":
        """Build a Haar-cascade pipeline from configuration.

        Args:
            config: Application configuration. If None, defaults are used.

        Returns:
            A successful Result holding the pipeline, or a failed Result
            carrying a ConfigurationError if the classifier cannot be loaded.
            No image is touched in either case.
        """
        try:
            if config is None:
                config = load_config()
            detector = HaarCascadeDetector(config.model.cascade_path)
        except ConfigurationError as e:
            logger.error("Pipeline construction failed: %s", e)
            return Result.failure(e)

        return Result.success(cls(detector, config.visualization))

    @property
    def detector(self) -> FaceDetector:
        return self._detector

    def run_detection_pipeline(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> Result[PipelineReport]:
        """Detect faces in input_path and write the annotated image to output_path.

        Returns:
            A successful Result holding a PipelineReport, or a failed
            Result carrying an InputError or OutputError. When the input
            cannot be loaded, no output file is written.
        """
        # 1. Load image
        loaded = load_image(input_path)
        if not loaded.ok:
            return Result.failure(loaded.error)
        image = loaded.value
        h, w = image.shape[:2]

        # 2. Detect faces
        detections = tuple(self._detector.detect(image))
        logger.info("%d face(s) detected.", len(detections))

        # 3. Draw bounding boxes
        draw_detections(image, list(detections), self._visualization)

        # 4. Save result
        saved = save_image(output_path, image)
        if not saved.ok:
            return Result.failure(saved.error)

        return Result.success(
            PipelineReport(
                input_path=Path(input_path),
                output_path=saved.value,
                detections=detections,
                image_size=(w, h),
            )
        )
