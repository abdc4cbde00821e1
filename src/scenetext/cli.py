import argparse
import logging
from typing import List, Optional

import cv2

from .detectors import EAST
from .utils import draw_detections, show_image

logger = logging.getLogger("scenetext")


# logging
def setup_logger(level: int = logging.INFO) -> logging.Logger:
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenetext",
        description="Detect scene text in an image with a pretrained EAST network",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        required=True,
        help="Image file as input",
    )
    parser.add_argument(
        "-w",
        "--weights",
        type=str,
        required=True,
        help="EAST network weights",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()

    try:
        detector = EAST(args.weights)
        result = detector.predict(args.file)
        annotated = draw_detections(
            result["image"], result["detections"], result["ratio"]
        )
        show_image(annotated, "image")
    except (FileNotFoundError, ValueError, TypeError, cv2.error) as e:
        logger.error(f"Text detection failed: {e}")
        return 1

    return 0
