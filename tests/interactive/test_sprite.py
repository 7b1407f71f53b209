"""手続き的スプライト画像（soft_dot_rgba）のテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from danmaku.interactive.sprite import soft_dot_rgba


def test_soft_dot_shape_and_color() -> None:
    img = soft_dot_rgba(15, (1.0, 0.5, 0.0))
    assert img.shape == (15, 15, 4)
    assert img.dtype == np.uint8
    assert (img[..., 0] == 255).all()
    assert (img[..., 1] == 128).all()
    assert (img[..., 2] == 0).all()


def test_soft_dot_alpha_peaks_at_center_and_fades_out() -> None:
    img = soft_dot_rgba(15, (1.0, 1.0, 1.0))
    alpha = img[..., 3].astype(int)
    assert alpha[7, 7] == 255
    assert alpha[0, 0] == 0
    assert alpha[7, 7] > alpha[7, 10] > alpha[7, 13]
    np.testing.assert_array_equal(alpha, alpha.T)
    np.testing.assert_array_equal(alpha, alpha[::-1, ::-1])


@pytest.mark.parametrize("size", [0, -4])
def test_soft_dot_rejects_non_positive_size(size: int) -> None:
    with pytest.raises(ValueError):
        soft_dot_rgba(size, (1.0, 1.0, 1.0))
