import numpy as np
import pytest

from rgbdtrack.convolution import conv_tri, conv_tri1


def _random_image(shape, seed=0):
    return np.random.default_rng(seed).random(shape).astype(np.float32)


def test_conv_tri_radius_zero_is_identity():
    img = _random_image((6, 7))
    np.testing.assert_allclose(conv_tri(img, 0), img, rtol=1e-6)


@pytest.mark.parametrize("radius", [1, 2, 3])
def test_conv_tri_constant_image_unchanged(radius):
    img = np.full((8, 9, 3), 4.5, dtype=np.float32)
    out = conv_tri(img, radius)
    assert out.shape == img.shape
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, img, rtol=1e-6)


@pytest.mark.parametrize("smooth", [1, 3, 5])
def test_conv_tri1_constant_image_unchanged(smooth):
    img = np.full((5, 6), 2.0, dtype=np.float32)
    np.testing.assert_allclose(conv_tri1(img, smooth), img, rtol=1e-6)


def test_conv_tri_radius_one_matches_conv_tri1_smooth_one():
    img = _random_image((7, 8, 3), seed=3)
    np.testing.assert_allclose(conv_tri(img, 1), conv_tri1(img, 1), rtol=1e-5, atol=1e-6)


def test_conv_tri1_impulse_center_weight():
    img = np.zeros((5, 5), dtype=np.float32)
    img[2, 2] = 1.0
    out = conv_tri1(img, 1)
    assert out[2, 2] == pytest.approx(0.25)
    np.testing.assert_allclose(out, out.T, rtol=1e-6)


def test_conv_tri_commutes_with_flip():
    img = _random_image((9, 10), seed=5)
    out = conv_tri(img, 2)
    np.testing.assert_allclose(conv_tri(img[::-1, ::-1], 2), out[::-1, ::-1], rtol=1e-5)


def test_conv_tri_channels_independent():
    img = _random_image((6, 6, 3), seed=7)
    out = conv_tri(img, 2)
    for c in range(3):
        np.testing.assert_allclose(out[..., c], conv_tri(img[..., c], 2), rtol=1e-6)


def test_conv_tri_keeps_value_range():
    img = _random_image((10, 10), seed=9)
    out = conv_tri(img, 3)
    assert out.min() >= img.min() - 1e-6
    assert out.max() <= img.max() + 1e-6


def test_conv_tri_negative_radius_raises():
    with pytest.raises(ValueError):
        conv_tri(np.zeros((4, 4)), -1)


def test_conv_tri_radius_too_large_raises():
    with pytest.raises(ValueError):
        conv_tri(np.zeros((3, 3)), 5)


def test_bad_dimensions_raise():
    with pytest.raises(ValueError):
        conv_tri1(np.zeros(5), 1)