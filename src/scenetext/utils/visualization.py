from typing import Sequence, Tuple

import cv2
import numpy as np

from .geometry import box_points, scale_points


def draw_detections(
    image: np.ndarray,
    detections: Sequence["Detection"],  # type: ignore  # noqa: F821
    ratio: Tuple[float, float] = (1.0, 1.0),
    color: Tuple[int, int, int] = (0, 255, 0),
    thickness: int = 2,
) -> np.ndarray:
    """
    Draw rotated detections as quadrilateral outlines.

    Parameters
    ----------
    image : np.ndarray
        BGR image with shape (H, W, 3). It is not modified.
    detections : sequence of Detection
        Detections in network input coordinates.
    ratio : tuple of float, default=(1.0, 1.0)
        Per-axis (rx, ry) factor mapping network input coordinates to
        ``image`` coordinates, see :func:`scenetext.utils.compute_ratio`.
    color : tuple of int, default=(0, 255, 0)
        BGR line color.
    thickness : int, default=2
        Line thickness in pixels.

    Returns
    -------
    np.ndarray
        Annotated copy of ``image``.

    Examples
    --------
    >>> from scenetext import EAST, draw_detections
    >>> result = EAST("frozen_east_text_detection.pb").predict("street.jpg")
    >>> out = draw_detections(result["image"], result["detections"], result["ratio"])
    """
    out = image.copy()

    for det in detections:
        vertices = scale_points(box_points(det.box), ratio).astype(np.int32)
        for j in range(4):
            p1 = tuple(int(v) for v in vertices[j])
            p2 = tuple(int(v) for v in vertices[(j + 1) % 4])
            cv2.line(out, p1, p2, color, thickness, cv2.LINE_8, 0)

    return out


def show_image(image: np.ndarray, window_name: str = "image") -> int:
    """Display ``image`` and block until a key is pressed. Returns the key code."""
    cv2.imshow(window_name, image)
    return cv2.waitKey(0)
