"""
EAST Detector Utilities

Helpers around the OpenCV DNN EAST model:
- Loading the network and building its input blob
- Decoding score/geometry maps into rotated boxes
- Rotated non-maximum suppression

Decoding example:
    >>> from scenetext.detectors._east.utils import decode_rboxes_from_maps
    >>> detections = decode_rboxes_from_maps(scores, geometry, score_thresh=0.5)
    >>> keep = nms_rotated(detections, score_thresh=0.5, nms_thresh=0.4)
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import cv2
import numpy as np

from .._types import Detection, RotatedBox

logger = logging.getLogger(__name__)


EAST_STRIDE = 4
EAST_OUTPUT_LAYERS = (
    "feature_fusion/Conv_7/Sigmoid",
    "feature_fusion/concat_3",
)
EAST_MEAN = (123.68, 116.78, 103.94)
DEFAULT_INPUT_SIZE = (320, 320)


def load_network(weights_path: Union[str, Path]) -> "cv2.dnn.Net":
    """
    Load a pretrained EAST network with OpenCV DNN.

    Raises
    ------
    FileNotFoundError
        If ``weights_path`` does not exist.
    cv2.error
        If OpenCV cannot parse the weights.
    """
    if not Path(weights_path).exists():
        raise FileNotFoundError(f"Weights file not found: {weights_path}")
    return cv2.dnn.readNet(str(weights_path))


def build_input_blob(
    image: np.ndarray,
    input_size: Tuple[int, int] = DEFAULT_INPUT_SIZE,
    mean: Tuple[float, float, float] = EAST_MEAN,
    swap_rb: bool = True,
) -> np.ndarray:
    """Resize and mean-subtract a BGR image into a ``(1, 3, H, W)`` float32 blob."""
    return cv2.dnn.blobFromImage(
        image, 1.0, tuple(input_size), mean, swapRB=swap_rb, crop=False
    )


def _check_maps(scores: np.ndarray, geometry: np.ndarray) -> None:
    if scores.ndim != 4 or scores.shape[:2] != (1, 1):
        raise ValueError(
            f"Score map must have shape [1, 1, H, W], got {list(scores.shape)}"
        )
    if geometry.ndim != 4 or geometry.shape[:2] != (1, 5):
        raise ValueError(
            f"Geometry map must have shape [1, 5, H, W], got {list(geometry.shape)}"
        )
    if scores.shape[2:] != geometry.shape[2:]:
        raise ValueError(
            "Score and geometry maps differ in spatial size: "
            f"{list(scores.shape[2:])} vs {list(geometry.shape[2:])}"
        )


def decode_rboxes_from_maps(
    scores: np.ndarray,
    geometry: np.ndarray,
    score_thresh: float,
    stride: int = EAST_STRIDE,
) -> List[Detection]:
    """
    Decode EAST output maps into rotated boxes.

    Parameters
    ----------
    scores : np.ndarray
        Score map with shape ``[1, 1, H, W]``.
    geometry : np.ndarray
        Geometry map with shape ``[1, 5, H, W]``. Channels 0-3 are the
        distances from the cell to the top, right, bottom and left sides of
        the box; channel 4 is the rotation angle in radians.
    score_thresh : float
        Cells with ``score >= score_thresh`` produce a detection.
    stride : int, optional
        Ratio between network input and output resolution. Default is 4.

    Returns
    -------
    list of Detection
        One detection per qualifying cell, in row-major order (y, then x).
        Boxes are in network input coordinates with the angle in degrees.

    Raises
    ------
    ValueError
        If the maps do not have the expected shapes.

    Notes
    -----
    All arithmetic is done in single precision. No suppression is applied;
    overlapping candidates are left to :func:`nms_rotated`.
    """
    scores = np.asarray(scores, dtype=np.float32)
    geometry = np.asarray(geometry, dtype=np.float32)
    _check_maps(scores, geometry)

    score_map = scores[0, 0]
    ys, xs = np.nonzero(score_map >= np.float32(score_thresh))
    if len(ys) == 0:
        return []

    confidences = score_map[ys, xs]
    d_top, d_right, d_bottom, d_left, angle = geometry[0][:, ys, xs]

    offset_x = xs.astype(np.float32) * np.float32(stride)
    offset_y = ys.astype(np.float32) * np.float32(stride)

    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    h = d_top + d_bottom
    w = d_right + d_left

    # anchor point the two corners are measured from
    ox = offset_x + cos_a * d_right + sin_a * d_bottom
    oy = offset_y - sin_a * d_right + cos_a * d_bottom

    p1_x = -sin_a * h + ox
    p1_y = -cos_a * h + oy
    p3_x = -cos_a * w + ox
    p3_y = sin_a * w + oy

    half = np.float32(0.5)
    center_x = (p1_x + p3_x) * half
    center_y = (p1_y + p3_y) * half
    angle_deg = -angle * np.float32(180.0) / np.float32(np.pi)

    detections = []
    for i in range(len(ys)):
        box = RotatedBox(
            center=(float(center_x[i]), float(center_y[i])),
            size=(float(w[i]), float(h[i])),
            angle=float(angle_deg[i]),
        )
        detections.append(Detection(box=box, confidence=float(confidences[i])))
    return detections


def nms_rotated(
    detections: Sequence[Detection],
    score_thresh: float,
    nms_thresh: float,
) -> List[int]:
    """
    Rotated non-maximum suppression via ``cv2.dnn.NMSBoxesRotated``.

    Returns
    -------
    list of int
        Indices into ``detections`` of the surviving boxes, in the order
        OpenCV returns them (descending score).
    """
    if len(detections) == 0:
        return []

    boxes = [det.box.to_cv() for det in detections]
    confidences = [det.confidence for det in detections]
    indices = cv2.dnn.NMSBoxesRotated(
        boxes, confidences, score_thresh, nms_thresh, eta=1.0, top_k=0
    )
    # older OpenCV builds return an (N, 1) array, or an empty tuple
    return [int(i) for i in np.asarray(indices, dtype=np.int64).reshape(-1)]
