import cv2
import numpy as np
import pytest
from PIL import Image

from scenetext.utils import read_image


def test_read_image_from_path(sample_image_path):
    img = read_image(sample_image_path)

    assert img.shape == (480, 640, 3)
    assert img.dtype == np.uint8


def test_read_image_from_str_path(sample_image_path):
    assert read_image(str(sample_image_path)).shape == (480, 640, 3)


def test_read_image_keeps_bgr_order(tmp_path):
    bgr = np.zeros((8, 8, 3), dtype=np.uint8)
    bgr[:] = (255, 0, 0)  # blue
    path = tmp_path / "blue.png"
    cv2.imwrite(str(path), bgr)

    img = read_image(path)

    assert tuple(img[0, 0]) == (255, 0, 0)


def test_read_image_from_bytes(sample_image_path):
    img = read_image(sample_image_path.read_bytes())
    assert img.shape == (480, 640, 3)


def test_read_image_from_pil_is_bgr():
    pil_img = Image.new("RGB", (16, 8), color=(255, 0, 0))  # red

    img = read_image(pil_img)

    assert img.shape == (8, 16, 3)
    assert tuple(img[0, 0]) == (0, 0, 255)


def test_read_image_passes_arrays_through():
    arr = np.zeros((4, 4, 3), dtype=np.uint8)
    assert read_image(arr) is arr


def test_read_image_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_image(tmp_path / "missing.jpg")


def test_read_image_undecodable_file(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"not an image")

    with pytest.raises(FileNotFoundError):
        read_image(path)


def test_read_image_undecodable_bytes():
    with pytest.raises(ValueError):
        read_image(b"not an image")


def test_read_image_unsupported_type():
    with pytest.raises(TypeError):
        read_image(12345)
