"""
Error taxonomy for the face detection pipeline.

Each failure kind of a run has its own exception type. Public operations
never raise these directly: they are carried inside a Result (see
facedetect.result) so callers handle every failure the same way.
"""


class FaceDetectError(Exception):
    """Base error for known pipeline failures."""


class StartupError(FaceDetectError):
    """Raised when the native vision backend cannot be loaded."""


class ConfigurationError(FaceDetectError, ValueError):
    """Raised when configuration is invalid or the classifier model is missing."""


class InputError(FaceDetectError):
    """Raised when the input image is missing, corrupt, or undecodable."""


class OutputError(FaceDetectError):
    """Raised when the annotated image cannot be written."""
