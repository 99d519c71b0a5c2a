"""Okhsl: hue, saturation and lightness over the sRGB gamut.

Lightness is the toe-mapped Oklab lightness L_r. Saturation runs from the
neutral axis (0) to the gamut boundary (1) at that lightness, through a
two-segment rational curve anchored on C_0, C_mid and C_max
(see gamut.get_cs). The curve passes C_mid at s = 0.8 and is smooth there.

Reference: https://bottosson.github.io/posts/colorpicker/#hsl-2
"""

from math import pi

import numpy as np

from . import _backend as B
from ._backend import Array
from .defaults import OKHSL_MID_SATURATION
from .gamut import get_cs
from .oklab import oklab_to_srgb, srgb_to_oklab
from .toe import toe, toe_inv

_MID = OKHSL_MID_SATURATION
_MID_INV = 1 / OKHSL_MID_SATURATION


def oklab_to_okhsl(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Okhsl. Returns (h, s, l) with h in degrees [0, 360).

    Achromatic input (a == b == 0) gives h = 0, s = 0.
    """
    L, a, b = B.asarrays(L, a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        l = toe(L)

        achromatic = (a == 0) & (b == 0)
        C = B.hypot(a, b)
        C_safe = B.where(achromatic, 1.0, C)
        # Any unit vector keeps the masked-out lanes finite
        a_ = B.where(achromatic, 1.0, a / C_safe)
        b_ = B.where(achromatic, 0.0, b / C_safe)

        # Rotated by 180 degrees so the result lands in [0, 360)
        h = 180 + B.atan2(-b, -a) * (180 / pi)

        C_0, C_mid, C_max = get_cs(L, a_, b_)

        # Inverse of the interpolation in okhsl_to_oklab
        k_1 = _MID * C_0
        k_2 = 1 - k_1 / C_mid
        s_low = C / (k_1 + k_2 * C) * _MID

        k_0 = C_mid
        k_1 = (1 - _MID) * (C_mid * _MID_INV) ** 2 / C_0
        k_2 = 1 - k_1 / (C_max - C_mid)
        s_high = _MID + (1 - _MID) * (C - k_0) / (k_1 + k_2 * (C - k_0))

        s = B.where(C < C_mid, s_low, s_high)

        h = B.where(achromatic, 0.0, h)
        s = B.where(achromatic, 0.0, s)

    return h, s, l


def okhsl_to_oklab(h: Array, s: Array, l: Array) -> tuple[Array, Array, Array]:
    """Okhsl -> OKLab. h in degrees.

    l == 1 is exactly white and l == 0 exactly black, whatever h and s are;
    s == 0 is the grey toe_inv(l) for any hue.
    """
    h, s, l = B.asarrays(h, s, l)
    with np.errstate(divide='ignore', invalid='ignore'):
        h_rad = h * (pi / 180)
        a_ = B.cos(h_rad)
        b_ = B.sin(h_rad)
        L = toe_inv(l)

        C_0, C_mid, C_max = get_cs(L, a_, b_)

        # At s = 0: dC/ds = C_0, C = 0
        # At s = 0.8: C = C_mid
        # At s = 1.0: C = C_max
        t = _MID_INV * s
        k_1 = _MID * C_0
        k_2 = 1 - k_1 / C_mid
        C_low = t * k_1 / (1 - k_2 * t)

        t = (s - _MID) / (1 - _MID)
        k_0 = C_mid
        k_1 = (1 - _MID) * C_mid * C_mid * _MID_INV * _MID_INV / C_0
        k_2 = 1 - k_1 / (C_max - C_mid)
        C_high = k_0 + t * k_1 / (1 - k_2 * t)

        C = B.where(s < _MID, C_low, C_high)

        white = l == 1
        black = l == 0
        C = B.where(white | black | (s == 0), 0.0, C)
        L = B.where(white, 1.0, B.where(black, 0.0, L))

    return L, C * a_, C * b_


# === Convenience Composites ===

def srgb_to_okhsl(rgb: Array) -> tuple[Array, Array, Array]:
    """sRGB (..., 3) in [0, 1] -> Okhsl (h, s, l)."""
    return oklab_to_okhsl(*srgb_to_oklab(rgb))


def okhsl_to_srgb(h: Array, s: Array, l: Array) -> Array:
    """Okhsl -> sRGB array (..., 3); unclipped."""
    return oklab_to_srgb(*okhsl_to_oklab(h, s, l))
