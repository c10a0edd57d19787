"""Constant-velocity Kalman filter over a bounding box."""

from __future__ import annotations

import numpy as np


class KalmanFilter:
    """Kalman filter with state (x, y, dx, dy, w, h) and measurement (x, y, w, h)."""

    def __init__(self, x, y, width, height, dt):
        initial = np.array([x, y, 0.0, 0.0, width, height], dtype=np.float64)
        self.state_pre = initial.copy()
        self.state_post = initial.copy()

        self.transition = np.eye(6)
        self.transition[0, 2] = dt
        self.transition[1, 3] = dt

        self.measurement_matrix = np.zeros((4, 6))
        self.measurement_matrix[0, 0] = 1.0
        self.measurement_matrix[1, 1] = 1.0
        self.measurement_matrix[2, 4] = 1.0
        self.measurement_matrix[3, 5] = 1.0

        self.process_noise_cov = np.diag([1e-2, 1e-2, 2.0, 1.0, 1e-2, 1e-2])
        self.measurement_noise_cov = np.eye(4) * 1e-1

        self.error_cov_pre = np.eye(6)
        self.error_cov_post = np.zeros((6, 6))
        self.gain = np.zeros((6, 4))

    def predict(self) -> np.ndarray:
        """Advance one step; the prediction also becomes the posterior state."""
        a = self.transition
        self.state_pre = a @ self.state_post
        self.error_cov_pre = a @ self.error_cov_post @ a.T + self.process_noise_cov
        self.state_post = self.state_pre.copy()
        self.error_cov_post = self.error_cov_pre.copy()
        return self.state_pre.copy()

    def correct(self, x, y, width, height) -> np.ndarray:
        """Fold in a measured box and return the corrected state."""
        measurement = np.array([x, y, width, height], dtype=np.float64)
        h = self.measurement_matrix
        temp2 = h @ self.error_cov_pre
        innovation_cov = temp2 @ h.T + self.measurement_noise_cov
        self.gain = np.linalg.solve(innovation_cov, temp2).T
        residual = measurement - h @ self.state_pre
        self.state_post = self.state_pre + self.gain @ residual
        self.error_cov_post = self.error_cov_pre - self.gain @ temp2
        return self.state_post.copy()