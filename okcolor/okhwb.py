"""Okhwb: hue, whiteness and blackness, a linear remap of Okhsv."""

from . import _backend as B
from ._backend import Array
from .okhsv import oklab_to_okhsv, okhsv_to_oklab


def okhsv_to_okhwb(h: Array, s: Array, v: Array) -> tuple[Array, Array, Array]:
    """Okhsv -> Okhwb."""
    return h, (1 - s) * v, 1 - v


def okhwb_to_okhsv(h: Array, w: Array, b: Array) -> tuple[Array, Array, Array]:
    """Okhwb -> Okhsv. Blackness 1 gives saturation 0."""
    v = 1 - b
    s = B.where(v == 0, 0.0, 1 - w / B.where(v == 0, 1.0, v))
    return h, s, v


def oklab_to_okhwb(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Okhwb (through Okhsv)."""
    return okhsv_to_okhwb(*oklab_to_okhsv(L, a, b))


def okhwb_to_oklab(h: Array, w: Array, b: Array) -> tuple[Array, Array, Array]:
    """Okhwb -> OKLab (through Okhsv)."""
    return okhsv_to_oklab(*okhwb_to_okhsv(h, w, b))


# === Greyscale predicates ===

def is_grey(w: Array, b: Array, epsilon: float = 1e-12) -> Array:
    """Whiteness and blackness that add up to 1 (or more) leave no room for color."""
    total = w + b
    return (total > 1) | (B.abs(total - 1) <= epsilon)


def is_white(w: Array, b: Array, epsilon: float = 1e-12) -> Array:
    return is_grey(w, b, epsilon) & (b < epsilon)


def is_black(w: Array, b: Array, epsilon: float = 1e-12) -> Array:
    return is_grey(w, b, epsilon) & (w < epsilon)
