"""Separable triangle smoothing filters for images."""

from __future__ import annotations

import numpy as np


def _as_float_image(image) -> np.ndarray:
    arr = np.asarray(image, dtype=np.float64)
    if arr.ndim not in (2, 3):
        raise ValueError("image must have shape (H, W) or (H, W, C)")
    return arr


def _filter_axis(arr: np.ndarray, kernel: np.ndarray, axis: int, mode: str) -> np.ndarray:
    """Correlate ``arr`` with a centred odd-length kernel along one axis."""
    radius = len(kernel) // 2
    pad = [(0, 0)] * arr.ndim
    pad[axis] = (radius, radius)
    padded = np.pad(arr, pad, mode=mode)
    n = arr.shape[axis]
    out = np.zeros_like(arr)
    for offset, weight in enumerate(kernel):
        out += weight * np.take(padded, np.arange(offset, offset + n), axis=axis)
    return out


def _separable(arr: np.ndarray, kernel: np.ndarray, mode: str) -> np.ndarray:
    out = _filter_axis(arr, kernel, 0, mode)
    out = _filter_axis(out, kernel, 1, mode)
    return out.astype(np.float32)


def conv_tri(image, radius: int) -> np.ndarray:
    """Smooth with a triangle filter of integer radius, symmetric borders.

    The 1D kernel is ``[1, 2, ..., r+1, ..., 2, 1] / (r+1)**2`` applied along
    rows and columns; each channel is filtered independently.
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError("radius must be non-negative")
    arr = _as_float_image(image)
    if radius > min(arr.shape[0], arr.shape[1]):
        raise ValueError("radius must not exceed the image size")
    r = radius + 1
    kernel = np.concatenate([np.arange(1, r + 1), np.arange(r - 1, 0, -1)]).astype(np.float64)
    kernel /= r * r
    return _separable(arr, kernel, "symmetric")


def conv_tri1(image, smooth) -> np.ndarray:
    """Smooth with the 3-tap kernel ``[1, p, 1] / (p + 2)`` in both directions.

    For ``0 < smooth <= 1`` the centre weight is ``int(12/smooth/(smooth+2) - 2)``;
    otherwise it is ``smooth`` itself. Borders replicate the edge pixel.
    """
    if 0 < smooth <= 1:
        p = int(12 / smooth / (smooth + 2) - 2)
    else:
        p = smooth
    if p + 2 == 0:
        raise ValueError("smooth of -2 gives a zero normaliser")
    arr = _as_float_image(image)
    kernel = np.array([1.0, float(p), 1.0]) / (p + 2.0)
    return _separable(arr, kernel, "edge")