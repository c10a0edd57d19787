"""Histogram-bin range features for colour histograms."""

from __future__ import annotations

import random

import numpy as np


class ColorFeature:
    """Sum of a random box of bins in a 1D or 3D colour histogram."""

    def __init__(self, bins, channels, rng=None):
        if channels not in (1, 3):
            raise ValueError("channels must be 1 or 3")
        if bins < 1:
            raise ValueError("bins must be positive")
        rng = rng if rng is not None else random.Random()
        self.bins = bins
        self.channels = channels
        self._ranges: list[tuple[int, int]] = []
        for _ in range(channels):
            upper = rng.randrange(bins) + 1
            lower = rng.randrange(upper)
            self._ranges.append((lower, upper))

    def limits(self) -> list[tuple[int, int]]:
        """The half-open bin range chosen for each channel."""
        return list(self._ranges)

    def resize(self, size) -> None:
        """Histogram features do not depend on the target size."""

    def evaluate(self, location, data) -> float:
        """Sum the histogram over the feature's bin ranges."""
        hist = np.asarray(data, dtype=np.float64)
        if self.channels == 1:
            (i1, i2), = self._ranges
            return float(hist.ravel()[i1:i2].sum())
        (i1, i2), (j1, j2), (k1, k2) = self._ranges
        return float(hist[i1:i2, j1:j2, k1:k2].sum())