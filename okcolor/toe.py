"""Toe function: Oklab lightness <-> sRGB reference-white lightness L_r.

Oklab lightness is scale free, so L = 0.5 carries no fixed luminance. The toe
remaps it to an estimate L_r that closely follows CIELab L* and matches it
near 0.5. Okhsl uses L_r as its lightness, Okhsv as the basis of its value.

Reference: https://bottosson.github.io/posts/colorpicker/#intermission---a-new-lightness-estimate-for-oklab
"""

from . import _backend as B
from ._backend import Array
from .defaults import TOE_K1, TOE_K2, TOE_K3


def toe(L: Array) -> Array:
    """Oklab lightness -> L_r. toe(0) == 0 and toe(1) == 1."""
    x = TOE_K3 * L - TOE_K1
    return 0.5 * (x + B.sqrt(x * x + 4 * TOE_K2 * TOE_K3 * L))


def toe_inv(L_r: Array) -> Array:
    """L_r -> Oklab lightness. Exact inverse of toe()."""
    return (L_r * L_r + TOE_K1 * L_r) / (TOE_K3 * (L_r + TOE_K2))
