import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def _pil_to_bgr(pil_img: Image.Image) -> np.ndarray:
    return cv2.cvtColor(np.array(pil_img.convert("RGB")), cv2.COLOR_RGB2BGR)


def read_image(img_or_path: Union[str, Path, bytes, np.ndarray, Image.Image]) -> np.ndarray:
    """
    Universal image reading with support for multiple input types.

    Parameters
    ----------
    img_or_path : str, Path, bytes, np.ndarray, or PIL.Image
        Image source in one of the following formats:
        - File path (str or Path) - supports Unicode paths
        - Bytes buffer (e.g., from HTTP response)
        - NumPy array (already loaded BGR image, returned as is)
        - PIL Image object

    Returns
    -------
    np.ndarray
        BGR image as numpy array with shape (H, W, 3) and dtype uint8,
        the channel order ``cv2.dnn.blobFromImage`` expects.

    Raises
    ------
    FileNotFoundError
        If the image file cannot be read with either OpenCV or PIL.
    TypeError
        If the input type is not supported.
    ValueError
        If bytes cannot be decoded into an image.

    Examples
    --------
    >>> img = read_image("street.jpg")
    >>> img.shape
    (480, 640, 3)

    >>> with open("street.jpg", "rb") as f:
    ...     img = read_image(f.read())
    """
    if isinstance(img_or_path, (str, Path)):
        path = str(img_or_path)
        if not Path(path).is_file():
            raise FileNotFoundError(f"Image file not found: {path}")

        # np.fromfile handles Unicode paths on Windows
        data = np.fromfile(path, dtype=np.uint8)
        img = cv2.imdecode(data, cv2.IMREAD_COLOR)

        # Fallback to PIL for formats OpenCV cannot decode
        if img is None:
            logger.debug("cv2 could not decode %s, falling back to PIL", path)
            try:
                with Image.open(path) as pil_img:
                    img = _pil_to_bgr(pil_img)
            except OSError as e:
                raise FileNotFoundError(
                    f"Cannot read image with cv2 or PIL: {path}. Error: {e}"
                ) from e

    elif isinstance(img_or_path, bytes):
        arr = np.frombuffer(img_or_path, dtype=np.uint8)
        img = cv2.imdecode(arr, cv2.IMREAD_COLOR)
        if img is None:
            raise ValueError("Failed to decode image from bytes")

    elif isinstance(img_or_path, np.ndarray):
        img = img_or_path

    # PIL Image object (duck typing check)
    elif hasattr(img_or_path, "convert"):
        img = _pil_to_bgr(img_or_path)

    else:
        raise TypeError(
            f"Unsupported type for image input: {type(img_or_path)}. "
            f"Expected str, Path, bytes, numpy.ndarray, or PIL.Image"
        )

    return img
