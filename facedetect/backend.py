"""
One-time initialization of the native vision backend.

OpenCV ships as a compiled extension module. If it cannot be imported
(missing wheel, missing shared libraries), nothing else in the pipeline
can run, so this check happens before any pipeline module is imported.
"""

import importlib
import logging

from facedetect.errors import StartupError
from facedetect.result import Result

logger = logging.getLogger(__name__)


def initialize_backend(module_name: str = "cv2") -> Result[str]:
    """Import the native vision module and report its version.

    Args:
        module_name: Import name of the backend module.

    Returns:
        A successful Result holding the backend version string, or a
        failed Result carrying a StartupError.
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        error = StartupError(
            f"Native vision library '{module_name}' could not be loaded. "
            f"Install opencv-python (or opencv-python-headless).\n"
            f"  Import error: {e}"
        )
        logger.error("%s", error)
        return Result.failure(error)

    version = getattr(module, "__version__", "unknown")
    logger.info("OpenCV library loaded (version %s)", version)
    return Result.success(version)
