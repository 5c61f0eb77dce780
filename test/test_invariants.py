import numpy as np
import pytest
from picture import (
    PixelBuffer, invert, grayscale, rotate90, rotate180, rotate270,
    flip_horizontal, flip_vertical,
)

SIZES = [(0, 0), (1, 1), (4, 2), (5, 7), (16, 9)]


def _random_picture(w, h, seed=0):
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8))


@pytest.mark.parametrize("w,h", SIZES)
def test_four_quarter_turns_identity(w, h):
    img = _random_picture(w, h)
    assert rotate90(rotate90(rotate90(rotate90(img)))) == img


@pytest.mark.parametrize("w,h", SIZES)
def test_rotate180_is_both_flips(w, h):
    img = _random_picture(w, h, 1)
    assert rotate180(img) == flip_horizontal(flip_vertical(img))


@pytest.mark.parametrize("w,h", SIZES)
def test_rotate270_is_three_quarter_turns(w, h):
    img = _random_picture(w, h, 2)
    assert rotate270(img) == rotate90(rotate90(rotate90(img)))


@pytest.mark.parametrize("w,h", SIZES)
def test_flips_are_involutions(w, h):
    img = _random_picture(w, h, 3)
    assert flip_horizontal(flip_horizontal(img)) == img
    assert flip_vertical(flip_vertical(img)) == img


@pytest.mark.parametrize("w,h", SIZES)
def test_invert_is_involution(w, h):
    img = _random_picture(w, h, 4)
    assert invert(invert(img)) == img


def test_grayscale_idempotent():
    img = _random_picture(8, 8, 5)
    once = grayscale(img)
    assert grayscale(once) == once


def test_equal_buffers_hash_equal():
    img = _random_picture(6, 5, 6)
    other = flip_horizontal(flip_horizontal(img))
    assert img == other
    assert img.content_hash() == other.content_hash()
