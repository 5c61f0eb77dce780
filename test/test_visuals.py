import os
import matplotlib
matplotlib.use("Agg")
import pytest
from picture import PixelBuffer, invert
from visuals.plots import compare_and_save


def test_compare_single_input(tmp_path):
    pic = PixelBuffer(8, 6)
    p = str(tmp_path / "vis" / "cmp.png")
    assert compare_and_save(pic, invert(pic), out_path=p) == p
    assert os.path.exists(p)


def test_compare_multi_input_and_empty(tmp_path):
    a = PixelBuffer(4, 4)
    b = PixelBuffer(4, 4)
    p = str(tmp_path / "multi.png")
    assert compare_and_save([a, b], PixelBuffer(0, 0), out_path=p) == p
    assert os.path.exists(p)


def test_compare_returns_figure():
    import matplotlib.pyplot as plt
    fig = compare_and_save(PixelBuffer(2, 2), PixelBuffer(2, 2))
    assert len(fig.axes) == 2
    plt.close(fig)


def test_compare_title_count_checked():
    with pytest.raises(ValueError):
        compare_and_save(PixelBuffer(2, 2), PixelBuffer(2, 2), titles=["only one"])
