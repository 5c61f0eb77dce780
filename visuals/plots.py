"""
visuals/plots.py

Side-by-side comparison of pictures before and after a transform.

APIs:
- compare_and_save(originals, processed, out_path=None, titles=None)

Notes:
- Uses matplotlib. If out_path is None, the Figure is returned (caller can save or display).
"""

from typing import Optional, Sequence, Union
import os
import matplotlib.pyplot as plt

from picture import PixelBuffer


def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path


def _show(ax, picture: PixelBuffer, title: str):
    if picture.width == 0 or picture.height == 0:
        # imshow rejects zero-sized arrays
        ax.text(0.5, 0.5, f"empty {picture.width}x{picture.height}", ha="center", va="center")
    else:
        ax.imshow(picture.as_array(), interpolation="nearest")
    ax.set_title(title)
    ax.axis("off")


def compare_and_save(
    originals: Union[PixelBuffer, Sequence[PixelBuffer]],
    processed: PixelBuffer,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Inputs (left, one panel each) | Result (right).
    Returns out_path when saved, otherwise the Figure.
    """
    if isinstance(originals, PixelBuffer):
        originals = [originals]
    originals = list(originals)
    panels = originals + [processed]
    if titles is None:
        if len(originals) == 1:
            titles = ["Original", "Result"]
        else:
            titles = [f"Input {i + 1}" for i in range(len(originals))] + ["Result"]
    if len(titles) != len(panels):
        raise ValueError("titles must name every input plus the result.")

    fig, axs = plt.subplots(1, len(panels), figsize=(6 * len(panels), 6), squeeze=False)
    for ax, pic, title in zip(axs[0], panels, titles):
        _show(ax, pic, title)

    if out_path:
        _ensure_outdir(out_path)
        fig.savefig(out_path, dpi=100, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        return out_path
    return fig
