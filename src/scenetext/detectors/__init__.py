from ._east import EAST
from ._types import Detection, RotatedBox

__all__ = ["EAST", "Detection", "RotatedBox"]
