"""Okhsv: hue, saturation and value over the sRGB gamut.

For each hue the gamut triangle is stretched onto a square: black expands to
the whole bottom edge, the neutral axis stays on the left and the cusp moves
to the top right corner. Saturation 1 is therefore always the most colorful
color of the hue at that value, and value scales along the line from black.

The triangle is first treated as straight (slopes S_max, T_max from the
cusp), then corrected for the toe and the curved upper edge by rescaling
with the largest linear sRGB channel.

Reference: https://bottosson.github.io/posts/colorpicker/#hsv-2
"""

from math import pi

import numpy as np

from . import _backend as B
from ._backend import Array
from .defaults import OKHSV_S0
from .gamut import cusp_to_st, find_cusp
from .oklab import oklab_to_linear_rgb, oklab_to_srgb, srgb_to_oklab
from .toe import toe, toe_inv


def _lightness_scale(L_vt: Array, C_vt: Array, a_: Array, b_: Array) -> Array:
    """Factor that pushes (L_vt, C_vt) out to the curved gamut boundary."""
    r, g, b = oklab_to_linear_rgb(L_vt, a_ * C_vt, b_ * C_vt)
    rgb_max = B.maximum(B.maximum(r, g), B.maximum(b, B.zeros_like(b)))
    return B.cbrt(1 / rgb_max)


def oklab_to_okhsv(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Okhsv. Returns (h, s, v) with h in degrees [0, 360).

    L == 0 gives (0, 0, 0). Achromatic input gives (0, 0, toe(L)).
    """
    L, a, b = B.asarrays(L, a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        black = L == 0
        achromatic = (a == 0) & (b == 0)

        C = B.hypot(a, b)
        C_safe = B.where(achromatic, 1.0, C)
        a_ = B.where(achromatic, 1.0, a / C_safe)
        b_ = B.where(achromatic, 0.0, b / C_safe)

        h = (B.atan2(b, a) * (180 / pi)) % 360

        S_max, T_max = cusp_to_st(*find_cusp(a_, b_))
        k = 1 - OKHSV_S0 / S_max

        # L_v, C_v: the point on the straight triangle edge at value 1
        t = T_max / (C + L * T_max)
        L_v = t * L
        C_v = t * C

        L_vt = toe_inv(L_v)
        C_vt = C_v * L_vt / L_v

        # Invert the toe and curved-top compensation
        scale_L = _lightness_scale(L_vt, C_vt, a_, b_)
        L_r = toe(L / scale_L)

        v = L_r / L_v
        s = (OKHSV_S0 + T_max) * C_v / (T_max * OKHSV_S0 + T_max * k * C_v)

        h = B.where(achromatic | black, 0.0, h)
        s = B.where(achromatic | black, 0.0, s)
        v = B.where(black, 0.0, B.where(achromatic, toe(L), v))

    return h, s, v


def okhsv_to_oklab(h: Array, s: Array, v: Array) -> tuple[Array, Array, Array]:
    """Okhsv -> OKLab. h in degrees.

    v == 0 is exactly black; s == 0 is the grey toe_inv(v).
    """
    h, s, v = B.asarrays(h, s, v)
    with np.errstate(divide='ignore', invalid='ignore'):
        black = v == 0
        grey = s == 0

        h_rad = h * (pi / 180)
        a_ = B.cos(h_rad)
        b_ = B.sin(h_rad)

        S_max, T_max = cusp_to_st(*find_cusp(a_, b_))
        k = 1 - OKHSV_S0 / S_max

        # L, C as if the gamut were a perfect triangle, at v == 1
        denom = OKHSV_S0 + T_max - T_max * k * s
        L_v = 1 - s * OKHSV_S0 / denom
        C_v = s * T_max * OKHSV_S0 / denom

        # Compensate for the toe and the curved top of the triangle
        L_vt = toe_inv(L_v)
        C_vt = C_v * L_vt / L_v

        L = v * L_v
        C = v * C_v
        L_new = toe_inv(L)
        C = C * L_new / L

        scale_L = _lightness_scale(L_vt, C_vt, a_, b_)
        L = L_new * scale_L
        C = C * scale_L

        L = B.where(black, 0.0, B.where(grey, toe_inv(v), L))
        C = B.where(black | grey, 0.0, C)

    return L, C * a_, C * b_


# === Convenience Composites ===

def srgb_to_okhsv(rgb: Array) -> tuple[Array, Array, Array]:
    """sRGB (..., 3) in [0, 1] -> Okhsv (h, s, v)."""
    return oklab_to_okhsv(*srgb_to_oklab(rgb))


def okhsv_to_srgb(h: Array, s: Array, v: Array) -> Array:
    """Okhsv -> sRGB array (..., 3); unclipped."""
    return oklab_to_srgb(*okhsv_to_oklab(h, s, v))
