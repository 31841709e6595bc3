import numpy as np
import pytest

from cachematrix import hilbert
from cachematrix._internal.factories import PLACEHOLDER_SHAPE, placeholder


def test_hilbert_entries():
    h = hilbert(4)
    assert h.shape == (4, 4)
    assert h[0, 0] == 1.0
    assert h[0, 1] == 0.5
    assert h[3, 3] == pytest.approx(1.0 / 7.0)
    np.testing.assert_array_equal(h, h.T)


def test_hilbert_order_one():
    np.testing.assert_array_equal(hilbert(1), [[1.0]])


@pytest.mark.parametrize("n", [0, -3])
def test_hilbert_rejects_non_positive_order(n):
    with pytest.raises(ValueError):
        hilbert(n)


def test_placeholder_is_fresh_nan_matrix():
    a = placeholder()
    b = placeholder()
    assert a.shape == PLACEHOLDER_SHAPE
    assert np.isnan(a).all()
    assert a is not b
