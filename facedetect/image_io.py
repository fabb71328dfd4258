"""
Image reading and writing for the face detection pipeline.

Responsibility:
    Decode the input image from disk and encode the annotated image back
    to disk. Both operations report failure through a Result instead of
    raising, so a bad path never crashes the run.

Non-goals:
    - No directories, videos, or webcam streams.
    - No automatic creation of output directories.
    - No retries.
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from facedetect.errors import InputError, OutputError
from facedetect.result import Result

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_image(path: PathLike) -> Result[np.ndarray]:
    """Decode an image file into a BGR array.

    Args:
        path: Image file to read.

    Returns:
        A successful Result holding a (H, W, 3) uint8 array, or a failed
        Result carrying an InputError.
    """
    path = Path(path)

    if not path.is_file():
        error = InputError(f"Could not load image from {path}: file does not exist.")
        logger.error("%s", error)
        return Result.failure(error)

    image = cv2.imread(str(path))
    if image is None or image.size == 0:
        error = InputError(
            f"Could not load image from {path}. "
            f"File may be corrupted or in an unsupported format."
        )
        logger.error("%s", error)
        return Result.failure(error)

    h, w = image.shape[:2]
    logger.info("Loaded image %s (%dx%d)", path, w, h)
    return Result.success(image)


def save_image(path: PathLike, image: np.ndarray) -> Result[Path]:
    """Encode an image and write it, inferring the format from the extension.

    Args:
        path: Destination file. Its parent directory must already exist.
        image: BGR image to write.

    Returns:
        A successful Result holding the written path, or a failed Result
        carrying an OutputError.
    """
    path = Path(path)

    if not cv2.haveImageWriter(str(path)):
        error = OutputError(
            f"Failed to write image to {path}: no encoder for extension "
            f"'{path.suffix}' in this OpenCV build."
        )
        logger.error("%s", error)
        return Result.failure(error)

    if not path.parent.is_dir():
        error = OutputError(
            f"Failed to write image to {path}: directory {path.parent} does not exist."
        )
        logger.error("%s", error)
        return Result.failure(error)

    try:
        written = cv2.imwrite(str(path), image)
    except (cv2.error, SystemError) as e:
        error = OutputError(f"Failed to write image to {path}.\n  OpenCV error: {e}")
        logger.error("%s", error)
        return Result.failure(error)

    if not written:
        error = OutputError(
            f"Failed to write image to {path}. Check permissions and free space."
        )
        logger.error("%s", error)
        return Result.failure(error)

    logger.info("Result saved successfully to: %s", path)
    return Result.success(path)
