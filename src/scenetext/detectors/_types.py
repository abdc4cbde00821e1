from pydantic import BaseModel, Field
from typing import Tuple


class RotatedBox(BaseModel):
    """
    A rotated rectangle in OpenCV's convention.
    """
    center: Tuple[float, float] = Field(
        ..., description="Box center (x, y) in pixels."
    )
    size: Tuple[float, float] = Field(
        ..., description="Box size (width, height) in pixels."
    )
    angle: float = Field(
        ..., description="Rotation angle in degrees, as expected by cv2.boxPoints."
    )

    def to_cv(self) -> Tuple[Tuple[float, float], Tuple[float, float], float]:
        """Return the ``((cx, cy), (w, h), angle)`` tuple used by cv2."""
        return (tuple(self.center), tuple(self.size), self.angle)


class Detection(BaseModel):
    box: RotatedBox
    confidence: float = Field(
        ..., description="Text detection confidence score from the score map"
    )
