"""
Classifier loading for the face detection pipeline.

Responsibility:
    Load a Haar cascade definition from disk and return a ready-to-use
    cv2.CascadeClassifier.

Non-goals:
    - No image handling or detection.
    - No automatic model downloading.
    - No fallback to alternative models.

Failure behavior:
    - A missing cascade file raises ConfigurationError with the exact
      path that was tried. Nothing is retried.
    - A file OpenCV cannot parse raises ConfigurationError as well.
"""

import logging
from pathlib import Path

import cv2

from facedetect.errors import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_cascade_path(cascade_path: str) -> Path:
    """Resolve a cascade path, falling back to OpenCV's bundled cascades.

    Absolute paths and paths with a directory component are returned
    unchanged. A bare file name not present in the working directory is
    looked up in cv2.data.haarcascades.
    """
    path = Path(cascade_path)
    if path.is_absolute() or path.parent != Path(".") or path.is_file():
        return path

    bundled_dir = getattr(getattr(cv2, "data", None), "haarcascades", None)
    if bundled_dir:
        bundled = Path(bundled_dir) / path.name
        if bundled.is_file():
            logger.debug("Using bundled cascade: %s", bundled)
            return bundled

    return path


def load_cascade(cascade_path: str) -> cv2.CascadeClassifier:
    """Load a Haar cascade classifier.

    Args:
        cascade_path: Path to the cascade XML file.

    Returns:
        A non-empty cv2.CascadeClassifier.

    Raises:
        ConfigurationError: If the file does not exist or cannot be loaded.
    """
    path = resolve_cascade_path(cascade_path)

    # Fail fast with the exact path that was tried
    if not path.is_file():
        raise ConfigurationError(
            f"Cascade classifier XML file not found.\n"
            f"  Expected: {path}\n"
            f"  Provide the file or update 'model.cascade_path' in your config."
        )

    logger.info("Loading cascade classifier: %s", path)
    classifier = cv2.CascadeClassifier()
    # Some 4.x bindings wrap parse failures in SystemError
    try:
        loaded = classifier.load(str(path))
    except (cv2.error, SystemError) as e:
        raise ConfigurationError(
            f"Failed to parse cascade classifier at {path}.\n"
            f"  OpenCV error: {e}"
        ) from e

    if not loaded or classifier.empty():
        raise ConfigurationError(
            f"Cascade classifier at {path} loaded empty. "
            f"Ensure the file is a valid OpenCV cascade XML."
        )

    logger.info("Cascade classifier loaded successfully.")
    return classifier
