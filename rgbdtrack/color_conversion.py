"""Colour conversion of images to normalised RGB or LUV channels."""

from __future__ import annotations

from enum import Enum

import numpy as np

_TABLE_SIZE = 1064
_TABLE_STEPS = 1024
_UN = np.float32(0.197833)
_VN = np.float32(0.468331)
_MR = (0.430574, 0.222015, 0.020183)
_MG = (0.341550, 0.706655, 0.129553)
_MB = (0.178325, 0.071330, 0.939180)


class ColorSpace(Enum):
    """Colour spaces a detector image can be converted to."""

    ORIG = "orig"
    LUV = "luv"


def _luminance_table() -> np.ndarray:
    """Lookup table from Y in [0, 1] (1024 steps, padded) to scaled L."""
    y0 = np.float32((6.0 / 29) ** 3)
    a = np.float32((29.0 / 3) ** 3)
    maxi = np.float32(1.0 / 270)
    y = (np.arange(_TABLE_STEPS + 1) / float(_TABLE_STEPS)).astype(np.float32)
    cube = np.power(y.astype(np.float64), 1.0 / 3.0).astype(np.float32)
    lum = np.where(y > y0, np.float32(116) * cube - np.float32(16), y * a).astype(np.float32)
    table = np.empty(_TABLE_SIZE, dtype=np.float32)
    table[: _TABLE_STEPS + 1] = lum * maxi
    table[_TABLE_STEPS + 1:] = table[_TABLE_STEPS]
    return table


_L_TABLE = _luminance_table()
_MAXI = np.float32(1.0 / 270)
_MIN_U = np.float32(-88) * _MAXI
_MIN_V = np.float32(-134) * _MAXI


def rgb2luv(rgb, nrm=1.0 / 255.0) -> np.ndarray:
    """Convert an RGB array (..., 3) to scaled L, U, V channels.

    Each input value is multiplied by ``nrm`` before conversion, so that the
    luminance falls in [0, 1]. Values whose luminance leaves the lookup
    table raise ``ValueError``.
    """
    arr = np.asarray(rgb, dtype=np.float32)
    if arr.ndim < 1 or arr.shape[-1] != 3:
        raise ValueError("input must have three channels in its last axis")
    z = np.float32(nrm)
    mr = np.array(_MR, dtype=np.float32) * z
    mg = np.array(_MG, dtype=np.float32) * z
    mb = np.array(_MB, dtype=np.float32) * z
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    x = mr[0] * r + mg[0] * g + mb[0] * b
    y = mr[1] * r + mg[1] * g + mb[1] * b
    zz = mr[2] * r + mg[2] * g + mb[2] * b

    index = np.trunc(y * np.float32(_TABLE_STEPS))
    if np.any(~np.isfinite(index)) or np.any(index < 0) or np.any(index >= _TABLE_SIZE):
        raise ValueError("luminance outside the supported range")
    lum = _L_TABLE[index.astype(np.int64)]

    inv = np.float32(1) / (x + np.float32(15) * y + np.float32(3) * zz + np.float32(1e-35))
    u = lum * (np.float32(13 * 4) * x * inv - np.float32(13) * _UN) - _MIN_U
    v = lum * (np.float32(13 * 9) * y * inv - np.float32(13) * _VN) - _MIN_V
    return np.stack([lum, u, v], axis=-1).astype(np.float32)


def convert_color(image, color_space=ColorSpace.LUV) -> np.ndarray:
    """Convert a BGR image (H, W, 3) to the requested colour space.

    ``ORIG`` gives RGB scaled to [0, 1]; a float32 image is returned as an
    unchanged copy. ``LUV`` gives the channels of :func:`rgb2luv`.
    """
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("image must have shape (H, W, 3)")
    color_space = ColorSpace(color_space)
    if color_space is ColorSpace.ORIG:
        if arr.dtype == np.float32:
            return arr.copy()
        rgb = arr[..., ::-1].astype(np.float32)
        return (rgb * np.float32(1.0 / 255.0)).astype(np.float32)
    rgb = arr[..., ::-1].astype(np.float32)
    return rgb2luv(rgb, 1.0 / 255.0)