import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

import numpy as np
from PIL import Image

from .._types import Detection
from ...utils import compute_ratio, draw_detections, read_image
from .utils import (
    DEFAULT_INPUT_SIZE,
    EAST_MEAN,
    EAST_OUTPUT_LAYERS,
    EAST_STRIDE,
    build_input_blob,
    decode_rboxes_from_maps,
    load_network,
    nms_rotated,
)

logger = logging.getLogger(__name__)


class EAST:
    def __init__(
        self,
        weights_path: Union[str, Path],
        input_size: Tuple[int, int] = DEFAULT_INPUT_SIZE,
        score_thresh: float = 0.5,
        nms_thresh: float = 0.4,
        mean: Tuple[float, float, float] = EAST_MEAN,
        swap_rb: bool = True,
        output_layers: Sequence[str] = EAST_OUTPUT_LAYERS,
    ):
        """
        Initialize the EAST text detector with OpenCV DNN.

        Parameters
        ----------
        weights_path : str or Path
            Path to pretrained EAST weights, e.g. the frozen TensorFlow graph
            ``frozen_east_text_detection.pb``.
        input_size : tuple of int, optional
            Network input size as ``(width, height)``. Both values must be
            multiples of 32. Default is ``(320, 320)``.
        score_thresh : float, optional
            Minimum score for a cell to produce a candidate box; also passed
            to NMS as its score threshold. Default is 0.5.
        nms_thresh : float, optional
            Overlap threshold for rotated non-maximum suppression.
            Default is 0.4.
        mean : tuple of float, optional
            Per-channel mean subtracted during preprocessing, in RGB order.
            Default is ``(123.68, 116.78, 103.94)``.
        swap_rb : bool, optional
            Swap the red and blue channels of the BGR input. Default is True.
        output_layers : sequence of str, optional
            Names of the score and geometry output layers, in that order.

        Raises
        ------
        FileNotFoundError
            If ``weights_path`` does not exist.
        cv2.error
            If the weights cannot be loaded.

        Notes
        -----
        The class exposes one public method:

        - ``predict`` — run inference on a single image and return detections.
        """
        self.weights_path = str(weights_path)
        self.input_size = tuple(input_size)
        self.score_thresh = score_thresh
        self.nms_thresh = nms_thresh
        self.mean = tuple(mean)
        self.swap_rb = swap_rb
        self.output_layers = list(output_layers)

        self.net = load_network(self.weights_path)
        logger.info(f"Loaded EAST weights from {self.weights_path}")

    def predict(
        self,
        img_or_path: Union[str, Path, bytes, np.ndarray, Image.Image],
        vis: bool = False,
        return_maps: bool = False,
    ) -> Dict[str, Any]:
        """
        Run EAST inference and return detection results.

        Parameters
        ----------
        img_or_path : str, Path, bytes, numpy.ndarray or PIL.Image.Image
            Image source accepted by :func:`scenetext.utils.read_image`.
            Arrays are expected in BGR order.
        vis : bool, optional
            If True, an annotated copy of the image is returned under
            ``"vis_image"``. Default is False.
        return_maps : bool, optional
            If True, raw score and geometry maps are returned under
            ``"score_map"`` and ``"geo_map"``. Default is False.

        Returns
        -------
        dict
            - ``"detections"`` : list of Detection
                Boxes surviving NMS, in network input coordinates.
            - ``"ratio"`` : tuple of float
                ``(rx, ry)`` mapping network input to original coordinates.
            - ``"image"`` : numpy.ndarray
                The BGR image that was processed.
            - ``"vis_image"`` : numpy.ndarray or None
            - ``"score_map"`` : numpy.ndarray or None
            - ``"geo_map"`` : numpy.ndarray or None

        Examples
        --------
        >>> from scenetext import EAST
        >>> model = EAST("frozen_east_text_detection.pb")
        >>> result = model.predict("street.jpg", vis=True)
        >>> len(result["detections"])
        12
        """
        img = read_image(img_or_path)
        orig_h, orig_w = img.shape[:2]

        t0 = time.time()
        blob = build_input_blob(
            img, self.input_size, mean=self.mean, swap_rb=self.swap_rb
        )
        self.net.setInput(blob)
        scores, geometry = self.net.forward(self.output_layers)
        logger.debug(f"Model inference: {time.time() - t0:.3f}s")

        t0 = time.time()
        candidates = decode_rboxes_from_maps(
            scores, geometry, self.score_thresh, stride=EAST_STRIDE
        )
        logger.debug(
            f"Decode boxes: {time.time() - t0:.3f}s ({len(candidates)} candidates)"
        )

        t0 = time.time()
        keep = nms_rotated(candidates, self.score_thresh, self.nms_thresh)
        detections: List[Detection] = [candidates[i] for i in keep]
        logger.debug(f"NMS: {time.time() - t0:.3f}s")
        logger.info(
            f"Detected {len(detections)} text regions "
            f"({len(candidates)} candidates before NMS)"
        )

        ratio = compute_ratio((orig_w, orig_h), self.input_size)
        vis_img = draw_detections(img, detections, ratio) if vis else None

        result: Dict[str, Any] = {
            "detections": detections,
            "ratio": ratio,
            "image": img,
            "vis_image": vis_img,
            "score_map": scores if return_maps else None,
            "geo_map": geometry if return_maps else None,
        }
        return result
