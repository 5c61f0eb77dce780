# test/test_operations.py
import numpy as np
import pytest
from picture import (
    PixelBuffer, Operation, resolve_operation, apply_operation,
    UnknownOperation, InvalidArgument, invert, rotate270, flip_vertical, blend, mosaic,
)


def _random_picture(w, h, seed=0):
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8))


@pytest.mark.parametrize("command,variant,expected", [
    ("invert", None, Operation.INVERT),
    ("grayscale", None, Operation.GRAYSCALE),
    ("rotate", "90", Operation.ROTATE_90),
    ("rotate", "180", Operation.ROTATE_180),
    ("rotate", "270", Operation.ROTATE_270),
    ("flip", "H", Operation.FLIP_HORIZONTAL),
    ("flip", "V", Operation.FLIP_VERTICAL),
    ("blend", None, Operation.BLEND),
    ("blur", None, Operation.BLUR),
    ("mosaic", None, Operation.MOSAIC),
])
def test_resolve_operation(command, variant, expected):
    assert resolve_operation(command, variant) is expected


@pytest.mark.parametrize("command,variant", [
    ("sharpen", None),
    ("rotate", "45"),
    ("rotate", None),
    ("flip", "D"),
    ("invert", "90"),
    ("", None),
])
def test_resolve_unknown(command, variant):
    with pytest.raises(UnknownOperation):
        resolve_operation(command, variant)


def test_operation_flags():
    assert Operation.BLEND.multi_input and Operation.MOSAIC.multi_input
    assert not Operation.BLUR.multi_input
    assert Operation.MOSAIC.needs_tile_size
    assert not Operation.BLEND.needs_tile_size


def test_apply_single_input():
    pic = _random_picture(4, 3)
    assert apply_operation(Operation.INVERT, [pic]) == invert(pic)
    assert apply_operation(Operation.ROTATE_270, [pic]) == rotate270(pic)
    assert apply_operation(Operation.FLIP_VERTICAL, [pic]) == flip_vertical(pic)


def test_apply_multi_input():
    a = _random_picture(4, 4, 1)
    b = _random_picture(4, 4, 2)
    assert apply_operation(Operation.BLEND, [a, b]) == blend([a, b])
    assert apply_operation(Operation.MOSAIC, [a, b], tile_size=2) == mosaic([a, b], 2)


def test_apply_argument_errors():
    pic = PixelBuffer(2, 2)
    with pytest.raises(InvalidArgument):
        apply_operation(Operation.BLUR, [pic, pic])
    with pytest.raises(InvalidArgument):
        apply_operation(Operation.INVERT, [])
    with pytest.raises(InvalidArgument):
        apply_operation(Operation.MOSAIC, [pic])
    with pytest.raises(InvalidArgument):
        apply_operation(Operation.BLEND, [])
    with pytest.raises(UnknownOperation):
        apply_operation("invert", [pic])
