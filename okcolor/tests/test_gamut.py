"""Tests for the sRGB gamut geometry: cusp, intersection, chroma values."""

import numpy as np
import pytest

from okcolor import (
    ClippingChannel,
    clipping_channel,
    max_saturation,
    find_cusp,
    cusp_to_st,
    st_mid,
    find_gamut_intersection,
    get_cs,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    LC,
    ST,
    ChromaValues,
)


def _unit(deg):
    h = np.deg2rad(deg)
    return np.cos(h), np.sin(h)


class TestClippingChannel:

    @pytest.mark.parametrize("hue, channel", [
        (195.0, ClippingChannel.RED),
        (330.0, ClippingChannel.GREEN),
        (90.0, ClippingChannel.BLUE),
    ])
    def test_channel_by_hue(self, hue, channel):
        assert clipping_channel(*_unit(hue)) is channel

    def test_tables_have_eight_coefficients(self):
        for channel in ClippingChannel:
            assert len(channel.value) == 8

    def test_vectorized_matches_scalar(self, hue_directions):
        """Element-wise coefficient selection equals one-at-a-time evaluation."""
        a_, b_ = hue_directions
        S = max_saturation(a_, b_)
        expected = [float(max_saturation(float(a), float(b))) for a, b in zip(a_, b_)]
        np.testing.assert_allclose(S, expected, rtol=1e-14)


class TestCusp:
    """Cusp is the most colorful in-gamut point of a hue."""

    def test_brightest_channel_is_one(self, hue_directions):
        a_, b_ = hue_directions
        L, C = find_cusp(a_, b_)
        r, g, b = oklab_to_linear_rgb(L, C * a_, C * b_)
        np.testing.assert_allclose(np.maximum(np.maximum(r, g), b), 1.0, atol=1e-9)

    def test_darkest_channel_is_zero(self, hue_directions):
        """Max saturation is where a channel reaches zero."""
        a_, b_ = hue_directions
        L, C = find_cusp(a_, b_)
        r, g, b = oklab_to_linear_rgb(L, C * a_, C * b_)
        np.testing.assert_allclose(np.minimum(np.minimum(r, g), b), 0.0, atol=1e-3)

    @pytest.mark.parametrize("rgb", [
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
        (1.0, 1.0, 0.0),
        (0.0, 1.0, 1.0),
        (1.0, 0.0, 1.0),
    ])
    def test_primaries_are_cusps(self, rgb):
        """Primaries and secondaries sit on the cusp of their own hue."""
        L, a, b = linear_rgb_to_oklab(*rgb)
        C = np.hypot(a, b)
        L_cusp, C_cusp = find_cusp(a / C, b / C)
        np.testing.assert_allclose([L_cusp, C_cusp], [L, C], atol=1e-4)

    def test_lc_record(self):
        a_, b_ = _unit(264.0)
        lc = LC.find_cusp(a_, b_)
        L, C = find_cusp(a_, b_)
        assert lc == LC(float(L), float(C))

    def test_unnormalized_hue_rejected(self):
        with pytest.raises(AssertionError):
            find_cusp(0.5, 0.5)


class TestST:

    def test_from_lc(self):
        st = ST.from_lc(LC(lightness=0.5, chroma=0.2))
        assert st.s == pytest.approx(0.4)
        assert st.t == pytest.approx(0.4)

    def test_cusp_to_st_edges(self, hue_directions):
        """Both triangle edges pass through the cusp."""
        a_, b_ = hue_directions
        L, C = find_cusp(a_, b_)
        S, T = cusp_to_st(L, C)
        np.testing.assert_allclose(S * L, C)
        np.testing.assert_allclose(T * (1 - L), C)

    def test_mid_is_positive(self, hue_directions):
        S, T = st_mid(*hue_directions)
        assert np.all(np.isfinite(S)) and np.all(S > 0)
        assert np.all(np.isfinite(T)) and np.all(T > 0)

    def test_mid_record(self):
        a_, b_ = _unit(30.0)
        s, t = st_mid(a_, b_)
        assert ST.mid(a_, b_) == ST(float(s), float(t))


class TestGamutIntersection:

    @pytest.mark.parametrize("L", [0.2, 0.35, 0.5, 0.65, 0.8])
    def test_full_chroma_ray_lands_on_boundary(self, hue_directions, L):
        """The intersection is in gamut and touches either 0 or 1."""
        a_, b_ = hue_directions
        t = find_gamut_intersection(a_, b_, L, 1.0, L)
        r, g, b = oklab_to_linear_rgb(L, t * a_, t * b_)
        rgb = np.stack([r, g, b], axis=-1)

        assert np.all(t > 0)
        assert np.all(rgb > -1e-3)
        assert np.all(rgb < 1 + 1e-3)
        on_top = np.abs(rgb.max(axis=-1) - 1) < 1e-3
        on_bottom = np.abs(rgb.min(axis=-1)) < 1e-3
        assert np.all(on_top | on_bottom)

    def test_lower_half_is_exact_line(self):
        """Below the cusp, the boundary is the straight black-to-cusp edge."""
        a_, b_ = _unit(264.0)
        L_cusp, C_cusp = find_cusp(a_, b_)
        L = 0.5 * L_cusp
        t = find_gamut_intersection(a_, b_, L, 1.0, L)
        np.testing.assert_allclose(t, 0.5 * C_cusp, rtol=1e-12)

    def test_precomputed_cusp_matches(self, hue_directions):
        a_, b_ = hue_directions
        cusp = find_cusp(a_, b_)
        np.testing.assert_array_equal(
            find_gamut_intersection(a_, b_, 0.7, 1.0, 0.7, cusp),
            find_gamut_intersection(a_, b_, 0.7, 1.0, 0.7),
        )

    def test_ray_toward_cusp(self):
        """A ray aimed at the cusp from mid grey stops at the cusp."""
        a_, b_ = _unit(140.0)
        L_cusp, C_cusp = find_cusp(a_, b_)
        t = find_gamut_intersection(a_, b_, L_cusp, C_cusp, 0.5)
        np.testing.assert_allclose(t, 1.0, rtol=1e-9)


class TestChromaValues:

    def test_ordering(self, hue_directions):
        """C_mid is reached before the boundary C_max."""
        a_, b_ = hue_directions
        for L in (0.2, 0.5, 0.8):
            C_0, C_mid, C_max = get_cs(L, a_, b_)
            assert np.all(C_0 > 0)
            assert np.all(C_mid > 0)
            assert np.all(C_mid < C_max)

    def test_c0_is_hue_independent(self, hue_directions):
        C_0, _, _ = get_cs(0.4, *hue_directions)
        np.testing.assert_allclose(C_0, C_0[0])

    def test_scalar_lightness_broadcasts(self, hue_directions):
        """All three values share the shape of the hue directions."""
        a_, b_ = hue_directions
        C_0, C_mid, C_max = get_cs(0.4, a_, b_)
        assert C_0.shape == C_mid.shape == C_max.shape == a_.shape

    def test_record(self):
        a_, b_ = _unit(200.0)
        cs = ChromaValues.from_normalized(0.6, a_, b_)
        C_0, C_mid, C_max = get_cs(0.6, a_, b_)
        assert (cs.zero, cs.mid, cs.max) == (float(C_0), float(C_mid), float(C_max))
