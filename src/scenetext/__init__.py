from .detectors import EAST, Detection, RotatedBox
from .utils import draw_detections, read_image, show_image

__all__ = ["EAST", "Detection", "RotatedBox", "draw_detections", "read_image", "show_image"]
