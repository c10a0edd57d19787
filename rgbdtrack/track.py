"""A tracked person: a Kalman-smoothed box plus bookkeeping."""

from __future__ import annotations

import numpy as np

from rgbdtrack.geometry import Rect
from rgbdtrack.kalman import KalmanFilter

_TIME_STEP = 0.15


class Track:
    """State of one tracked target."""

    def __init__(self, position, width, height, color):
        x, y = position
        self.kalman = KalmanFilter(x, y, width, height, _TIME_STEP)
        self.color = tuple(color)
        self.width = width
        self.height = height
        self.track_id = -1
        self.num_detections = 1
        self.occluded = False
        self.hide = False
        self.detection_corner = (0, 0)
        self.last_position: np.ndarray | None = None
        self.hist = None
        self.feat_hist = None
        self.point3d = (0.0, 0.0, 0.0)
        self._loss = 0

    def update(self, position, width, height) -> None:
        """Correct the filter with a new detection, easing the loss count."""
        if self._loss > 0:
            self._loss -= 1
        x, y = position
        self.kalman.correct(x, y, width, height)

    def get_position(self) -> np.ndarray:
        """Predict the next state and remember it as the last position."""
        self.last_position = self.kalman.predict()
        return self.last_position.copy()

    def add_detection(self) -> None:
        self.num_detections += 1

    def add_loss_detection(self) -> None:
        self._loss += 1

    def _require_position(self) -> np.ndarray:
        if self.last_position is None:
            raise RuntimeError("track has no predicted position yet")
        return self.last_position

    def loss_detections(self) -> int:
        """Number of missed frames; also resets the detection corner to the prediction."""
        p = self._require_position()
        self.detection_corner = (int(p[0]), int(p[1]))
        return self._loss

    def reset(self) -> None:
        self.num_detections = 1
        self._loss = 0

    def last_detection(self) -> tuple[int, int]:
        """Centre of the last detection, from its corner and the track size."""
        x, y = self.detection_corner
        return (x + (self.width >> 1), y + (self.height >> 1))

    def bbox(self) -> Rect:
        """The last predicted box, coordinates truncated to integers."""
        p = self._require_position()
        return Rect(int(p[0]), int(p[1]), int(p[4]), int(p[5]))