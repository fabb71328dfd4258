"""
Result container shared by every fallible public operation.

A Result holds either a value or a FaceDetectError, never both. Backend
startup, pipeline construction, image loading, image saving and the
pipeline run all return one, so a caller checks `.ok` the same way no
matter which step failed.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from facedetect.errors import FaceDetectError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value on success, an error on failure.

    Attributes:
        value: The produced value. None on failure.
        error: The failure cause. None on success.
    """

    value: Optional[T] = None
    error: Optional[FaceDetectError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("A Result cannot carry both a value and an error.")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FaceDetectError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            FaceDetectError: The error this result was built with.
        """
        if self.error is not None:
            raise self.error
        return self.value
