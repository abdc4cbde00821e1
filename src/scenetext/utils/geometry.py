"""Geometric utilities for scenetext."""

from typing import Tuple

import cv2
import numpy as np

from ..detectors._types import RotatedBox


def box_points(box: RotatedBox) -> np.ndarray:
    """
    Compute the four vertices of a rotated box.

    Parameters
    ----------
    box : RotatedBox
        Rotated rectangle with angle in degrees.

    Returns
    -------
    np.ndarray
        ``float32`` array of shape (4, 2). Vertex order is the one produced by
        ``cv2.boxPoints`` (bottom-left, top-left, top-right, bottom-right for
        an unrotated box), so consecutive vertices share an edge.
    """
    return cv2.boxPoints(box.to_cv()).astype(np.float32)


def compute_ratio(
    orig_size: Tuple[int, int], input_size: Tuple[int, int]
) -> Tuple[float, float]:
    """
    Per-axis ratio from network input resolution to the original image.

    Parameters
    ----------
    orig_size : tuple of int
        Original image size as (width, height).
    input_size : tuple of int
        Network input size as (width, height).

    Returns
    -------
    tuple of float
        ``(orig_w / in_w, orig_h / in_h)`` computed in single precision.

    Examples
    --------
    >>> compute_ratio((640, 480), (320, 320))
    (2.0, 1.5)
    """
    orig_w, orig_h = orig_size
    in_w, in_h = input_size
    ratio_x = np.float32(orig_w) / np.float32(in_w)
    ratio_y = np.float32(orig_h) / np.float32(in_h)
    return float(ratio_x), float(ratio_y)


def scale_points(points: np.ndarray, ratio: Tuple[float, float]) -> np.ndarray:
    """Scale (N, 2) points by a per-axis (rx, ry) ratio."""
    scaled = np.asarray(points, dtype=np.float32).copy()
    scaled[:, 0] *= np.float32(ratio[0])
    scaled[:, 1] *= np.float32(ratio[1])
    return scaled
