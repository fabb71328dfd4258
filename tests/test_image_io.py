"""
Tests for image reading and writing.
"""

import logging

import cv2
import numpy as np

from facedetect.errors import InputError, OutputError
from facedetect.image_io import load_image, save_image


def _write_png(path, shape=(60, 80, 3), value=90):
    image = np.full(shape, value, dtype=np.uint8)
    assert cv2.imwrite(str(path), image)
    return image


def test_load_valid_image(tmp_path):
    path = tmp_path / "input.png"
    original = _write_png(path)

    result = load_image(path)

    assert result.ok
    assert np.array_equal(result.value, original)


def test_load_missing_image(tmp_path, caplog):
    """A missing file is reported, not raised."""
    with caplog.at_level(logging.ERROR):
        result = load_image(tmp_path / "missing.jpg")

    assert not result.ok
    assert isinstance(result.error, InputError)
    assert "does not exist" in caplog.text


def test_load_corrupt_image(tmp_path, caplog):
    """Bytes that do not decode are an input error."""
    path = tmp_path / "corrupt.jpg"
    path.write_bytes(b"definitely not a jpeg")

    with caplog.at_level(logging.ERROR):
        result = load_image(path)

    assert not result.ok
    assert isinstance(result.error, InputError)
    assert "corrupted" in caplog.text


def test_save_image(tmp_path):
    path = tmp_path / "out.png"
    image = np.zeros((10, 20, 3), dtype=np.uint8)

    result = save_image(path, image)

    assert result.ok
    assert result.value == path
    assert cv2.imread(str(path)).shape == (10, 20, 3)


def test_save_unsupported_extension(tmp_path):
    path = tmp_path / "out.xyz"

    result = save_image(path, np.zeros((10, 10, 3), dtype=np.uint8))

    assert not result.ok
    assert isinstance(result.error, OutputError)
    assert not path.exists()


def test_save_missing_directory(tmp_path, caplog):
    """Output directories are not created on the caller's behalf."""
    path = tmp_path / "no_such_dir" / "out.png"

    with caplog.at_level(logging.ERROR):
        result = save_image(path, np.zeros((10, 10, 3), dtype=np.uint8))

    assert not result.ok
    assert isinstance(result.error, OutputError)
    assert "does not exist" in caplog.text
    assert not path.parent.exists()


def test_save_extension_outside_common_formats(tmp_path):
    """Formats such as PPM are written when OpenCV has an encoder."""
    path = tmp_path / "out.ppm"

    result = save_image(path, np.full((12, 16, 3), 40, dtype=np.uint8))

    assert result.ok
    assert cv2.imread(str(path)).shape == (12, 16, 3)


def test_save_onto_existing_directory(tmp_path, caplog):
    """The encoder refusing to open the target is an output error."""
    path = tmp_path / "taken.png"
    path.mkdir()

    with caplog.at_level(logging.ERROR):
        result = save_image(path, np.zeros((10, 10, 3), dtype=np.uint8))

    assert not result.ok
    assert isinstance(result.error, OutputError)
    assert "Failed to write image" in caplog.text
    assert path.is_dir()
