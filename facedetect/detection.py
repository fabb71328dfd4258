"""
Detection data transfer object.

This module defines the Detection dataclass, the single output type
returned by a FaceDetector. It mirrors the (x, y, width, height) rectangles
produced by a cascade classifier and adds no behavior beyond data access.

Non-goals:
    - No rendering logic.
    - No file I/O.
    - No confidence score (cascade classifiers do not produce one here).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Detection:
    """A single detected face as an axis-aligned rectangle.

    Attributes:
        x: Top-left x coordinate (absolute pixels).
        y: Top-left y coordinate (absolute pixels).
        width: Rectangle width in pixels.
        height: Rectangle height in pixels.

    The origin is the top-left corner of the input image.
    """

    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> dict:
        """Return a plain dict of the rectangle."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @property
    def x2(self) -> int:
        """Bottom-right x coordinate."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Bottom-right y coordinate."""
        return self.y + self.height

    @property
    def area(self) -> int:
        """Rectangle area in pixels."""
        return self.width * self.height
