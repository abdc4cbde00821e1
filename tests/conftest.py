"""Pytest configuration and fixtures."""

import cv2
import numpy as np
import pytest


class FakeNet:
    """Stand-in for ``cv2.dnn.Net`` that returns preset output maps."""

    def __init__(self, scores, geometry):
        self.scores = scores
        self.geometry = geometry
        self.blob = None
        self.requested_layers = None

    def setInput(self, blob):
        self.blob = blob

    def forward(self, layer_names):
        self.requested_layers = list(layer_names)
        return self.scores, self.geometry


class EastMaps:
    """Builder for EAST output maps of a 320x320 input (80x80 cells)."""

    def __init__(self, height=80, width=80):
        self.scores = np.zeros((1, 1, height, width), dtype=np.float32)
        self.geometry = np.zeros((1, 5, height, width), dtype=np.float32)

    def put(self, y, x, score, top, right, bottom, left, angle=0.0):
        self.scores[0, 0, y, x] = score
        self.geometry[0, :, y, x] = [top, right, bottom, left, angle]
        return self


@pytest.fixture
def east_maps():
    return EastMaps


@pytest.fixture
def fake_net():
    return FakeNet


@pytest.fixture
def sample_image_path(tmp_path):
    """A 640x480 BGR image written to disk."""
    img = np.full((480, 640, 3), 255, dtype=np.uint8)
    cv2.putText(img, "TEXT", (100, 200), cv2.FONT_HERSHEY_SIMPLEX, 3, (0, 0, 0), 5)
    path = tmp_path / "sample.png"
    assert cv2.imwrite(str(path), img)
    return path


@pytest.fixture
def weights_path(tmp_path):
    """Placeholder weights file; loading is replaced by a fake network."""
    path = tmp_path / "frozen_east_text_detection.pb"
    path.write_bytes(b"\x00")
    return path
