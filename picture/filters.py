import numpy as np

from .pixel_buffer import PixelBuffer

# --- 3x3 box blur ---
_KERNEL_SIZE = 3
_KERNEL_AREA = _KERNEL_SIZE * _KERNEL_SIZE


def blur(picture: PixelBuffer) -> PixelBuffer:
    """
    3x3 box blur.
    Interior pixels become the per-channel truncated mean of their 3x3
    neighbourhood (self included). Border pixels (x == 0, x == W-1, y == 0,
    y == H-1) are copied unchanged, so buffers narrower or shorter than
    3 pixels come back as an exact copy.
    """
    src = picture.as_array()
    out = src.copy()
    H, W = src.shape[0], src.shape[1]
    if H < _KERNEL_SIZE or W < _KERNEL_SIZE:
        return PixelBuffer.from_array(out, copy=False)

    wide = src.astype(np.uint16)
    total = np.zeros((H - 2, W - 2, 3), dtype=np.uint16)
    # sum the nine shifted interior windows (max 9 * 255, fits in uint16)
    for dy in range(_KERNEL_SIZE):
        for dx in range(_KERNEL_SIZE):
            total += wide[dy:dy + H - 2, dx:dx + W - 2]
    out[1:-1, 1:-1] = (total // _KERNEL_AREA).astype(np.uint8)
    return PixelBuffer.from_array(out, copy=False)
