"""Colour and keypoint-descriptor histograms of image regions."""

from __future__ import annotations

import numpy as np

COLOR_BINS = 16
DESCRIPTOR_BINS = 64
HIST_RANGE = (0.0, 255.0)


def _bin_indices(values: np.ndarray, bins: int) -> tuple[np.ndarray, np.ndarray]:
    """Uniform bin index over ``[0, 255)``; values outside the range are invalid."""
    low, high = HIST_RANGE
    scaled = np.floor((values - low) * (bins / (high - low)))
    finite = np.isfinite(scaled)
    idx = np.where(finite, scaled, -1).astype(np.int64)
    valid = finite & (idx >= 0) & (idx < bins)
    return idx, valid


def color_histogram(image, mask=None, bins=COLOR_BINS) -> np.ndarray:
    """Normalised 3D colour histogram of the masked pixels of a 3-channel image.

    Counts are divided by the number of non-zero mask pixels. Channel values
    of 255 or more fall outside the histogram range and are not counted.
    """
    arr = np.asarray(image, dtype=np.float64)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("image must have shape (H, W, 3)")
    if mask is None:
        mask_arr = np.ones(arr.shape[:2], dtype=bool)
    else:
        mask_arr = np.asarray(mask) != 0
        if mask_arr.shape != arr.shape[:2]:
            raise ValueError("mask must match the image height and width")
    count = int(np.count_nonzero(mask_arr))
    if count == 0:
        raise ValueError("mask selects no pixels")

    pixels = arr[mask_arr]
    idx, valid = _bin_indices(pixels, bins)
    keep = valid.all(axis=1)
    idx = idx[keep]
    hist = np.zeros((bins, bins, bins), dtype=np.float64)
    np.add.at(hist, (idx[:, 0], idx[:, 1], idx[:, 2]), 1.0)
    return (hist / count).astype(np.float32)


def keypoint_maps(keypoints, shape) -> tuple[np.ndarray, np.ndarray]:
    """Image of keypoint indices (-1 elsewhere) and a 255/0 keypoint mask.

    Keypoint coordinates ``(x, y)`` are rounded to the nearest pixel.
    """
    height, width = shape[:2]
    index = np.full((height, width), -1.0, dtype=np.float32)
    mask = np.zeros((height, width), dtype=np.uint8)
    for i, (x, y) in enumerate(keypoints):
        col = int(np.rint(x))
        row = int(np.rint(y))
        if not (0 <= row < height and 0 <= col < width):
            raise ValueError(f"keypoint {i} lies outside the image")
        index[row, col] = i
        mask[row, col] = 255
    return index, mask


def feature_histogram(rect, descriptors, keypoint_index, keypoint_mask) -> np.ndarray:
    """Histogram of the descriptor values of the keypoints inside ``rect``.

    Values are binned into 64 uniform bins over ``[0, 255)`` and the counts are
    divided by the descriptor width of 64.
    """
    index = np.asarray(keypoint_index)
    mask = np.asarray(keypoint_mask)
    height, width = mask.shape[:2]
    if (
        rect.x < 0
        or rect.y < 0
        or rect.width < 0
        or rect.height < 0
        or rect.x + rect.width > width
        or rect.y + rect.height > height
    ):
        raise ValueError("rect lies outside the keypoint maps")

    sub_mask = mask[rect.y:rect.y + rect.height, rect.x:rect.x + rect.width]
    sub_index = index[rect.y:rect.y + rect.height, rect.x:rect.x + rect.width]
    rows, cols = np.nonzero(sub_mask)
    selected = sub_index[rows, cols].astype(np.int64)

    hist = np.zeros(DESCRIPTOR_BINS, dtype=np.float64)
    if selected.size:
        desc = np.asarray(descriptors, dtype=np.float64)[selected]
        idx, valid = _bin_indices(desc.ravel(), DESCRIPTOR_BINS)
        np.add.at(hist, idx[valid], 1.0)
    return (hist / DESCRIPTOR_BINS).astype(np.float32)