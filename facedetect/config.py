"""
Configuration management for the face detection pipeline.

Provides a layered configuration system with the following precedence
(highest to lowest):

    CLI arguments > Environment variables > YAML config file > Defaults

Design constraints:
    - The program MUST run with zero configuration (safe defaults only).
    - Missing or invalid values fail early and loudly.
    - No detection logic, I/O, or model loading belongs here.

Non-goals:
    - No detection tuning parameters (scale factor, neighbors, min size).
    - No dynamic reloading.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

import yaml

from facedetect.errors import ConfigurationError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ModelConfig:
    """Classifier model configuration.

    Attributes:
        cascade_path: Path to the serialized Haar cascade XML. A bare file
                      name is also looked up in OpenCV's bundled cascades.
    """

    cascade_path: str = "haarcascade_frontalface_default.xml"


@dataclass(frozen=True)
class IOConfig:
    """Input and output image paths.

    Attributes:
        input_path: Image to run detection on.
        output_path: Where the annotated image is written. The format is
                     inferred from the extension.
    """

    input_path: str = "input.jpg"
    output_path: str = "output_faces.jpg"


@dataclass(frozen=True)
class VisualizationConfig:
    """Bounding box rendering parameters.

    Attributes:
        box_color: BGR color tuple for bounding boxes (light green).
        thickness: Line thickness in pixels.
    """

    box_color: Tuple[int, int, int] = (50, 255, 50)
    thickness: int = 3


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration.

    Aggregates all sub-configurations into a single, frozen object.
    """

    model: ModelConfig = field(default_factory=ModelConfig)
    io: IOConfig = field(default_factory=IOConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _validate(config: AppConfig) -> None:
    """Validate configuration values. Raises ConfigurationError on invalid state."""

    if not config.model.cascade_path.strip():
        raise ConfigurationError("model.cascade_path must not be empty.")

    if not config.io.input_path.strip():
        raise ConfigurationError("io.input_path must not be empty.")

    if not config.io.output_path.strip():
        raise ConfigurationError("io.output_path must not be empty.")

    if len(config.visualization.box_color) != 3:
        raise ConfigurationError(
            f"visualization.box_color must be a (B, G, R) tuple, "
            f"got {config.visualization.box_color}."
        )

    if any(not (0 <= c <= 255) for c in config.visualization.box_color):
        raise ConfigurationError(
            f"visualization.box_color channels must be in [0, 255], "
            f"got {config.visualization.box_color}."
        )

    if config.visualization.thickness <= 0:
        raise ConfigurationError(
            f"visualization.thickness must be positive, "
            f"got {config.visualization.thickness}."
        )


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

def _parse_tuple(value, expected_len: int, cast_type=int):
    """Convert a list from YAML into a tuple of the expected type and length."""
    if isinstance(value, (list, tuple)):
        if len(value) != expected_len:
            raise ConfigurationError(
                f"Expected {expected_len} values, got {len(value)}: {value}"
            )
        return tuple(cast_type(v) for v in value)
    raise ConfigurationError(f"Expected a list of {expected_len} values, got {value!r}")


def _build_model_config(raw: dict) -> ModelConfig:
    """Build ModelConfig from a raw YAML dict."""
    kwargs = {}
    if "cascade_path" in raw:
        kwargs["cascade_path"] = str(raw["cascade_path"])
    return ModelConfig(**kwargs)


def _build_io_config(raw: dict) -> IOConfig:
    """Build IOConfig from a raw YAML dict."""
    kwargs = {}
    if "input_path" in raw:
        kwargs["input_path"] = str(raw["input_path"])
    if "output_path" in raw:
        kwargs["output_path"] = str(raw["output_path"])
    return IOConfig(**kwargs)


def _build_visualization_config(raw: dict) -> VisualizationConfig:
    """Build VisualizationConfig from a raw YAML dict."""
    kwargs = {}
    if "box_color" in raw:
        kwargs["box_color"] = _parse_tuple(raw["box_color"], 3, int)
    if "thickness" in raw:
        kwargs["thickness"] = int(raw["thickness"])
    return VisualizationConfig(**kwargs)


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------

_ENV_PREFIX = "FACE_DETECT_"


def _apply_env_overrides(raw: dict) -> dict:
    """Apply environment variable overrides to the raw config dict.

    Environment variables follow the pattern:
        FACE_DETECT_MODEL_CASCADE_PATH=/opt/models/haarcascade.xml
        FACE_DETECT_IO_OUTPUT_PATH=annotated.png
    """
    env_map = {
        f"{_ENV_PREFIX}MODEL_CASCADE_PATH": ("model", "cascade_path"),
        f"{_ENV_PREFIX}IO_INPUT_PATH": ("io", "input_path"),
        f"{_ENV_PREFIX}IO_OUTPUT_PATH": ("io", "output_path"),
    }

    for env_var, (section, key) in env_map.items():
        value = os.environ.get(env_var)
        if value is not None:
            raw.setdefault(section, {})[key] = value
            logger.debug("Config override from env: %s=%s", env_var, value)

    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load and validate application configuration.

    Precedence (highest → lowest):
        Environment variables > YAML file > Hard-coded defaults

    Args:
        config_path: Path to a YAML configuration file. If None,
                     the program runs entirely on defaults.

    Returns:
        A validated, frozen AppConfig instance.

    Raises:
        ConfigurationError: If config_path does not exist, the YAML is
                            malformed, or any value is invalid.
    """
    raw: dict = {}

    # --- Layer 1: YAML file ---
    if config_path is not None:
        resolved = Path(config_path)
        if not resolved.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {resolved}. "
                f"Provide a valid path or omit to use defaults."
            )

        logger.info("Loading config from: %s", resolved)
        try:
            with open(resolved, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {resolved}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Top level of {resolved} must be a mapping, got {type(raw).__name__}."
            )

    # --- Layer 2: Environment variable overrides ---
    raw = _apply_env_overrides(raw)

    # --- Build typed configs ---
    try:
        config = AppConfig(
            model=_build_model_config(raw.get("model") or {}),
            io=_build_io_config(raw.get("io") or {}),
            visualization=_build_visualization_config(raw.get("visualization") or {}),
        )
    except ConfigurationError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration value: {e}") from e

    # --- Validate ---
    _validate(config)

    logger.debug("Configuration loaded: %s", config)
    return config


def with_overrides(
    config: AppConfig,
    cascade_path: Optional[str] = None,
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
) -> AppConfig:
    """Return a validated copy of config with the given paths replaced.

    This is the top (CLI) layer of the precedence chain. None leaves the
    corresponding value untouched.

    Raises:
        ConfigurationError: If the resulting configuration is invalid.
    """
    model = config.model
    if cascade_path is not None:
        model = replace(model, cascade_path=cascade_path)

    io = config.io
    if input_path is not None:
        io = replace(io, input_path=input_path)
    if output_path is not None:
        io = replace(io, output_path=output_path)

    updated = replace(config, model=model, io=io)
    _validate(updated)
    return updated
