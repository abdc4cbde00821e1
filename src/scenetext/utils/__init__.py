"""Common utilities for scenetext."""

# I/O utilities
from .io import read_image

# Geometry utilities
from .geometry import (
    box_points,
    compute_ratio,
    scale_points,
)

# Visualization utilities
from .visualization import (
    draw_detections,
    show_image,
)


__all__ = [
    # I/O
    "read_image",
    # Geometry
    "box_points",
    "compute_ratio",
    "scale_points",
    # Visualization
    "draw_detections",
    "show_image",
]
