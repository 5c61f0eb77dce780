# test/test_color_ops.py
import numpy as np
from picture import PixelBuffer, Color
from picture.color_ops import invert, grayscale


def _random_picture(w, h, seed=0):
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8))


def test_invert_values():
    pic = PixelBuffer(2, 1)
    pic.set_pixel(0, 0, Color(0, 100, 255))
    out = invert(pic)
    assert out.get_pixel(0, 0) == Color(255, 155, 0)
    assert out.get_pixel(1, 0) == Color(255, 255, 255)


def test_invert_does_not_mutate_input():
    pic = _random_picture(4, 4)
    before = pic.copy()
    out = invert(pic)
    assert pic == before
    assert out is not pic


def test_grayscale_truncates():
    pic = PixelBuffer(1, 1)
    pic.set_pixel(0, 0, Color(10, 20, 32))  # 62 / 3 = 20.67
    assert grayscale(pic).get_pixel(0, 0) == Color(20, 20, 20)


def test_grayscale_no_overflow():
    pic = PixelBuffer(1, 1)
    pic.set_pixel(0, 0, Color(255, 255, 254))
    assert grayscale(pic).get_pixel(0, 0) == Color(254, 254, 254)


def test_grayscale_channels_equal():
    out = grayscale(_random_picture(9, 7, 3)).to_array()
    assert np.all(out[..., 0] == out[..., 1])
    assert np.all(out[..., 1] == out[..., 2])


def test_empty_buffers():
    assert invert(PixelBuffer(0, 3)).size == (0, 3)
    assert grayscale(PixelBuffer(4, 0)).size == (4, 0)
