"""Tests for numpy/torch dispatch."""

import numpy as np
import pytest

from okcolor import (
    oklab_to_okhsl,
    okhsl_to_oklab,
    oklab_to_okhsv,
    okhsv_to_oklab,
    oklab_to_okhwb,
    okhwb_to_oklab,
    okhsl_to_srgb,
    srgb_to_oklab,
)
from okcolor import _backend as B


class TestNumpyBackend:

    def test_asarray_casts_ints(self):
        arr = B.asarray([1, 2, 3])
        assert arr.dtype == np.float64

    def test_asarray_keeps_float32(self):
        arr = B.asarray(np.zeros(3, dtype=np.float32))
        assert arr.dtype == np.float32

    def test_scalars_do_not_raise(self):
        """Plain floats at the lightness extremes go through numpy semantics."""
        h, s, l = oklab_to_okhsl(1.0, 0.0, 0.0)
        assert float(s) == 0.0
        L, a, b = okhsl_to_oklab(30.0, 0.5, 0.0)
        assert (float(L), float(a), float(b)) == (0.0, 0.0, 0.0)

    def test_amax_of_empty_is_minus_inf(self):
        assert B.amax(np.array([])) == -np.inf

    @pytest.mark.parametrize("forward, inverse", [
        (oklab_to_okhsl, okhsl_to_oklab),
        (oklab_to_okhsv, okhsv_to_oklab),
        (oklab_to_okhwb, okhwb_to_oklab),
    ])
    def test_empty_batch(self, forward, inverse):
        """Zero-size inputs give zero-size outputs in both directions."""
        e = np.array([])
        for out in forward(e, e, e) + inverse(e, e, e):
            assert out.shape == (0,)

    def test_image_shape(self):
        image = np.random.default_rng(3).random((4, 5, 3))
        h, s, v = oklab_to_okhsv(*srgb_to_oklab(image))
        assert h.shape == s.shape == v.shape == (4, 5)
        assert okhsl_to_srgb(h, s, v).shape == (4, 5, 3)


class TestTorchBackend:
    """Test torch tensor support (if torch available)."""

    @pytest.fixture
    def torch(self):
        pytest.importorskip('torch')
        import torch
        return torch

    @pytest.fixture
    def lab(self, random_srgb):
        return srgb_to_oklab(random_srgb[:50])

    def test_returns_tensors(self, torch):
        h = torch.tensor([0.0, 120.0, 240.0], dtype=torch.float64)
        s = torch.full_like(h, 0.5)
        l = torch.full_like(h, 0.6)
        L, a, b = okhsl_to_oklab(h, s, l)
        assert isinstance(L, torch.Tensor)
        assert isinstance(a, torch.Tensor)
        assert a.dtype == torch.float64

    def test_okhsl_numpy_parity(self, torch, lab):
        """Torch and numpy should give same results."""
        out_np = oklab_to_okhsl(*lab)
        out_t = oklab_to_okhsl(*(torch.tensor(c) for c in lab))
        for t, n in zip(out_t, out_np):
            np.testing.assert_allclose(t.numpy(), n, atol=1e-9)

        back_np = okhsl_to_oklab(*out_np)
        back_t = okhsl_to_oklab(*out_t)
        for t, n in zip(back_t, back_np):
            np.testing.assert_allclose(t.numpy(), n, atol=1e-9)

    def test_okhsv_numpy_parity(self, torch, lab):
        out_np = oklab_to_okhsv(*lab)
        out_t = oklab_to_okhsv(*(torch.tensor(c) for c in lab))
        for t, n in zip(out_t, out_np):
            np.testing.assert_allclose(t.numpy(), n, atol=1e-9)

        back_np = okhsv_to_oklab(*out_np)
        back_t = okhsv_to_oklab(*out_t)
        for t, n in zip(back_t, back_np):
            np.testing.assert_allclose(t.numpy(), n, atol=1e-9)

    def test_mixed_scalar_and_tensor(self, torch):
        """Scalar components follow the tensor ones."""
        h = torch.tensor([30.0, 200.0], dtype=torch.float64)
        L, a, b = okhsv_to_oklab(h, 0.5, 0.8)
        assert isinstance(L, torch.Tensor)
        assert L.shape == (2,)

    def test_gpu_if_available(self, torch):
        """GPU tensors should stay on GPU."""
        if not torch.cuda.is_available():
            pytest.skip("CUDA not available")
        h = torch.tensor([0.7, 120.0], device='cuda')
        L, a, b = okhsl_to_oklab(h, torch.full_like(h, 0.5), torch.full_like(h, 0.5))
        assert L.device.type == 'cuda'

    def test_empty_tensor_batch(self, torch):
        e = torch.zeros(0, dtype=torch.float64)
        h, s, l = oklab_to_okhsl(e, e, e)
        assert isinstance(h, torch.Tensor)
        assert h.shape == (0,)
