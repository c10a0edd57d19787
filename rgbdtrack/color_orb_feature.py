"""Features that mix a colour histogram with a keypoint-descriptor histogram."""

from __future__ import annotations

import random

import numpy as np

DESCRIPTOR_BINS = 64


class ColorOrbFeature:
    """Sum of a random 3D box of colour bins plus a random range of descriptor bins."""

    def __init__(self, bins, rng=None):
        if bins < 1:
            raise ValueError("bins must be positive")
        rng = rng if rng is not None else random.Random()
        self.bins = bins
        self._color_ranges = [self._draw_range(rng, bins) for _ in range(3)]
        self._descriptor_range = self._draw_range(rng, DESCRIPTOR_BINS)

    @staticmethod
    def _draw_range(rng, count: int) -> tuple[int, int]:
        upper = rng.randrange(count) + 1
        lower = rng.randrange(upper)
        return (lower, upper)

    def limits(self) -> list[tuple[int, int]]:
        """Half-open ranges for the three colour axes, then the descriptor axis."""
        return [*self._color_ranges, self._descriptor_range]

    def resize(self, size) -> None:
        """Histogram features do not depend on the target size."""

    def evaluate(self, data) -> float:
        """Sum the colour histogram box and, if present, the descriptor range.

        ``data`` is a pair ``(color_histogram, descriptor_histogram)``. An empty
        or missing descriptor histogram contributes nothing.
        """
        color_hist, feature_hist = data
        hist = np.asarray(color_hist, dtype=np.float64)
        (i1, i2), (j1, j2), (k1, k2) = self._color_ranges
        total = float(hist[i1:i2, j1:j2, k1:k2].sum())
        if feature_hist is not None:
            feat = np.asarray(feature_hist, dtype=np.float64)
            if feat.size != 0:
                o1, o2 = self._descriptor_range
                total += float(feat.ravel()[o1:o2].sum())
        return total