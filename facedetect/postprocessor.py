"""
Postprocessing for the face detection pipeline.

Responsibility:
    Convert the raw rectangles returned by
    cv2.CascadeClassifier.detectMultiScale into Detection objects.

Hard-coded:
    - detectMultiScale returns either an (N, 4) integer array of
      [x, y, w, h] rows or an empty tuple when nothing is found.

Every rectangle becomes exactly one Detection, in the original order.
Nothing is filtered, merged or re-sorted here.
"""

from typing import List, Sequence, Union

import numpy as np

from facedetect.detection import Detection


def rects_to_detections(rects: Union[np.ndarray, Sequence]) -> List[Detection]:
    """Convert classifier rectangles into Detection objects.

    Args:
        rects: Output of detectMultiScale, shape (N, 4) or empty.

    Returns:
        One Detection per input row. Empty list for empty input.

    Raises:
        ValueError: If rows do not have exactly four values.
    """
    array = np.asarray(rects)
    if array.size == 0:
        return []

    if array.ndim != 2 or array.shape[1] != 4:
        raise ValueError(
            f"Expected rectangles of shape (N, 4), got {array.shape}."
        )

    return [
        Detection(x=int(x), y=int(y), width=int(w), height=int(h))
        for x, y, w, h in array
    ]
