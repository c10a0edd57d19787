"""Building blocks for multi-person tracking: Kalman tracks, histogram features, association and image filters."""

__version__ = "0.1.0"