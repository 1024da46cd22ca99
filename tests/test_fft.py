import numpy as np
import pytest

from modarith.fft import FastFourierTransform, dft, multiply


def test_known_convolution():
    f = FastFourierTransform([0.0, 1.0, 2.0, 3.0, 4.0])
    g = FastFourierTransform([0.0, 1.0, 2.0, 4.0, 8.0])
    x = f * g
    assert np.rint(x).astype(int).tolist() == [0, 0, 1, 4, 11, 26, 36, 40, 32, 0, 0]


def test_matches_numpy_convolve():
    rng = np.random.default_rng(3)
    f = rng.uniform(-1, 1, size=37)
    g = rng.uniform(-1, 1, size=21)
    h = multiply(f, g)
    assert h.shape == (len(f) + len(g) + 1,)
    np.testing.assert_allclose(h[:len(f) + len(g) - 1], np.convolve(f, g), atol=1e-9)
    np.testing.assert_allclose(h[len(f) + len(g) - 1:], 0.0, atol=1e-9)


def test_forward_inverse_roundtrip():
    a = np.arange(8, dtype=np.float64)
    back = dft(dft(a), inverse=True) / 8
    np.testing.assert_allclose(back.real, a, atol=1e-12)
    np.testing.assert_allclose(back.imag, 0.0, atol=1e-12)


def test_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        dft([1.0, 2.0, 3.0])
