"""
Face Detection CLI Entrypoint.

Responsibility:
    Resolve configuration, check that the OpenCV backend can be loaded,
    build the detection pipeline and run it once on a single image.

Usage:
    python main.py                                   # input.jpg -> output_faces.jpg
    python main.py --input group.jpg --output group_faces.png
    python main.py --config my_config.yaml --verbose

This module is the executable entry point. It should not be imported
by other modules.
"""

import argparse
import logging
import sys
from typing import List, Optional

# Configure logging before importing local modules
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("main")

from facedetect.backend import initialize_backend
from facedetect.config import load_config, with_overrides
from facedetect.errors import ConfigurationError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Detect faces in an image and save an annotated copy.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--cascade",
        type=str,
        help="Path to the Haar cascade XML. Overrides config.",
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Input image path. Overrides config.",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output image path; format follows the extension. Overrides config.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the detection pipeline once. Returns the process exit status."""
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # 1. Load Configuration (CLI args > ENV > YAML > Defaults)
    try:
        config = load_config(args.config)
        config = with_overrides(
            config,
            cascade_path=args.cascade,
            input_path=args.input,
            output_path=args.output,
        )
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 1

    # 2. Initialize the native backend before anything imports cv2
    backend = initialize_backend()
    if not backend.ok:
        return 1

    # Deferred so cv2 is first imported only after the backend check above
    from facedetect.pipeline import DetectionPipeline

    # 3. Build the pipeline (loads the classifier)
    built = DetectionPipeline.from_config(config)
    if not built.ok:
        return 1

    # 4. Run once
    result = built.value.run_detection_pipeline(
        config.io.input_path, config.io.output_path
    )
    if not result.ok:
        return 1

    report = result.value
    logger.info(
        "Done: %d face(s) in %s -> %s",
        report.face_count, report.input_path, report.output_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
