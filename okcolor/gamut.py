"""sRGB gamut geometry in the Oklab lightness/chroma plane.

For a fixed hue the sRGB gamut, drawn with lightness on the vertical axis and
chroma on the horizontal one, is close to a triangle: black at the bottom,
white at the top and the cusp (maximum chroma) pointing right. The lower edge
is exactly straight, the upper edge curves slightly outward.

This module finds the cusp, intersects rays from the neutral axis with the
gamut boundary, and derives the three characteristic chroma values Okhsl
interpolates between.

Hue directions (a_, b_) must be normalized so that a_**2 + b_**2 == 1.

Reference: https://bottosson.github.io/posts/gamutclipping/
"""

import enum
from dataclasses import dataclass

from . import _backend as B
from ._backend import Array
from .defaults import (
    GAMUT_INTERSECTION_HALLEY_STEPS,
    HALLEY_SENTINEL,
    MAX_SATURATION_HALLEY_STEPS,
    NORMALIZED_HUE_TOLERANCE,
    OKHSL_C0_SLOPE_BLACK,
    OKHSL_C0_SLOPE_WHITE,
    OKHSL_MID_CHROMA_SCALE,
)
from .oklab import _LMS_TO_RGB, _OKLAB_TO_LMS, oklab_to_linear_rgb


class ClippingChannel(enum.Enum):
    """sRGB channel that drops below zero first as saturation grows.

    Each member carries the fitted coefficients for its hue range:
    (k0, k1, k2, k3, k4) of the initial saturation polynomial and the
    (wl, wm, ws) LMS weights of that channel.
    """

    RED = (
        1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245,
        4.0767416621, -3.3077115913, 0.2309699292,
    )
    GREEN = (
        0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204,
        -1.2684380046, 2.6097574011, -0.3413193965,
    )
    BLUE = (
        1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167,
        -0.0041960863, -0.7034186147, 1.7076147010,
    )


def _channel_masks(a_: Array, b_: Array) -> tuple[Array, Array]:
    red = -1.88170328 * a_ - 0.80936493 * b_ > 1
    green = 1.81444104 * a_ - 1.19445276 * b_ > 1
    return red, green


def clipping_channel(a_: float, b_: float) -> ClippingChannel:
    """Which channel limits saturation for a single hue direction."""
    red, green = _channel_masks(a_, b_)
    if red:
        return ClippingChannel.RED
    if green:
        return ClippingChannel.GREEN
    return ClippingChannel.BLUE


def _select_coefficients(a_: Array, b_: Array) -> list[Array]:
    red, green = _channel_masks(a_, b_)
    # Coefficients follow the dtype and device of the input
    like = B.asarray(a_)
    return [
        B.where(red, B.full_like(like, r), B.where(green, B.full_like(like, g), B.full_like(like, b)))
        for r, g, b in zip(
            ClippingChannel.RED.value,
            ClippingChannel.GREEN.value,
            ClippingChannel.BLUE.value,
        )
    ]


def _check_normalized(a_: Array, b_: Array) -> None:
    """Assert a_**2 + b_**2 == 1. Skipped entirely under python -O."""
    if __debug__:
        err = B.amax(B.abs(a_ * a_ + b_ * b_ - 1.0))
        assert not err > NORMALIZED_HUE_TOLERANCE, (
            f'hue direction must satisfy a**2 + b**2 == 1 (off by {err})'
        )


def _lms_direction(a_: Array, b_: Array) -> tuple[Array, Array, Array]:
    """Change of (l_, m_, s_) per unit chroma along the hue direction."""
    k_l = _OKLAB_TO_LMS[0][1] * a_ + _OKLAB_TO_LMS[0][2] * b_
    k_m = _OKLAB_TO_LMS[1][1] * a_ + _OKLAB_TO_LMS[1][2] * b_
    k_s = _OKLAB_TO_LMS[2][1] * a_ + _OKLAB_TO_LMS[2][2] * b_
    return k_l, k_m, k_s


# === Cusp ===

def max_saturation(a_: Array, b_: Array) -> Array:
    """Maximum sRGB saturation S = C / L for a hue.

    The saturation is reached where one of r, g or b hits zero. A polynomial
    fit gives the starting point, then a fixed number of Halley steps solve
    wl * l**3 + wm * m**3 + ws * s**3 = 0 for that channel.
    """
    k0, k1, k2, k3, k4, wl, wm, ws = _select_coefficients(a_, b_)

    S = k0 + k1 * a_ + k2 * b_ + k3 * (a_ * a_) + k4 * a_ * b_

    k_l, k_m, k_s = _lms_direction(a_, b_)

    for _ in range(MAX_SATURATION_HALLEY_STEPS):
        l_ = 1 + S * k_l
        m_ = 1 + S * k_m
        s_ = 1 + S * k_s

        l = l_ * l_ * l_
        m = m_ * m_ * m_
        s = s_ * s_ * s_

        l_dS = 3 * k_l * l_ * l_
        m_dS = 3 * k_m * m_ * m_
        s_dS = 3 * k_s * s_ * s_

        l_dS2 = 6 * k_l * k_l * l_
        m_dS2 = 6 * k_m * k_m * m_
        s_dS2 = 6 * k_s * k_s * s_

        f = wl * l + wm * m + ws * s
        f1 = wl * l_dS + wm * m_dS + ws * s_dS
        f2 = wl * l_dS2 + wm * m_dS2 + ws * s_dS2

        S = S - f * f1 / (f1 * f1 - 0.5 * f * f2)

    return S


def find_cusp(a_: Array, b_: Array) -> tuple[Array, Array]:
    """(L_cusp, C_cusp): the point of maximum in-gamut chroma for a hue."""
    _check_normalized(a_, b_)

    S_cusp = max_saturation(a_, b_)

    # Scale the white-lightness color so the largest channel lands on 1
    r, g, b = oklab_to_linear_rgb(1.0, S_cusp * a_, S_cusp * b_)
    L_cusp = B.cbrt(1.0 / B.maximum(B.maximum(r, g), b))
    return L_cusp, L_cusp * S_cusp


def cusp_to_st(L_cusp: Array, C_cusp: Array) -> tuple[Array, Array]:
    """Slopes of the triangle edges: S from black, T from white."""
    return C_cusp / L_cusp, C_cusp / (1 - L_cusp)


def st_mid(a_: Array, b_: Array) -> tuple[Array, Array]:
    """Smooth approximation of the cusp slopes, with S_mid < S_max and T_mid < T_max.

    The rational polynomials come from a numerical fit over all hues.
    """
    S = 0.11516993 + 1 / (
        7.44778970 + 4.15901240 * b_
        + a_ * (-2.19557347 + 1.75198401 * b_
        + a_ * (-2.13704948 - 10.02301043 * b_
        + a_ * (-4.24894561 + 5.38770819 * b_ + 4.69891013 * a_)))
    )
    T = 0.11239642 + 1 / (
        1.61320320 - 0.68124379 * b_
        + a_ * (0.40370612 + 0.90148123 * b_
        + a_ * (-0.27087943 + 0.61223990 * b_
        + a_ * (0.00299215 - 0.45399568 * b_ - 0.14661872 * a_)))
    )
    return S, T


# === Gamut intersection ===

def find_gamut_intersection(
    a_: Array,
    b_: Array,
    L1: Array,
    C1: Array,
    L0: Array,
    cusp: tuple[Array, Array] | None = None,
) -> Array:
    """Where the ray L = L0 * (1 - t) + t * L1, C = t * C1 leaves the gamut.

    Returns t. Below the cusp the boundary is a straight line and the answer
    is exact. Above it the straight cusp-to-white estimate is refined with one
    Halley step per RGB channel, keeping the smallest valid correction.
    """
    _check_normalized(a_, b_)
    if cusp is None:
        cusp = find_cusp(a_, b_)
    L_cusp, C_cusp = cusp

    lower = ((L1 - L0) * C_cusp - (L_cusp - L0) * C1) <= 0

    # Lower half: black-to-cusp edge
    t_lower = C_cusp * L0 / (C1 * L_cusp + C_cusp * (L0 - L1))

    # Upper half: cusp-to-white edge, then Halley on the curved boundary
    t = C_cusp * (L0 - 1) / (C1 * (L_cusp - 1) + C_cusp * (L0 - L1))

    dL = L1 - L0
    dC = C1

    k_l, k_m, k_s = _lms_direction(a_, b_)

    l_dt = dL + dC * k_l
    m_dt = dL + dC * k_m
    s_dt = dL + dC * k_s

    for _ in range(GAMUT_INTERSECTION_HALLEY_STEPS):
        L = L0 * (1 - t) + t * L1
        C = t * C1

        l_ = L + C * k_l
        m_ = L + C * k_m
        s_ = L + C * k_s

        l = l_ * l_ * l_
        m = m_ * m_ * m_
        s = s_ * s_ * s_

        ldt = 3 * l_dt * l_ * l_
        mdt = 3 * m_dt * m_ * m_
        sdt = 3 * s_dt * s_ * s_

        ldt2 = 6 * l_dt * l_dt * l_
        mdt2 = 6 * m_dt * m_dt * m_
        sdt2 = 6 * s_dt * s_dt * s_

        correction = None
        for wl, wm, ws in _LMS_TO_RGB:
            f = wl * l + wm * m + ws * s - 1
            f1 = wl * ldt + wm * mdt + ws * sdt
            f2 = wl * ldt2 + wm * mdt2 + ws * sdt2

            u = f1 / (f1 * f1 - 0.5 * f * f2)
            t_channel = B.where(u >= 0, -f * u, HALLEY_SENTINEL)
            correction = t_channel if correction is None else B.minimum(correction, t_channel)

        t = t + correction

    return B.where(lower, t_lower, t)


# === Characteristic chroma values ===

def get_cs(L: Array, a_: Array, b_: Array) -> tuple[Array, Array, Array]:
    """(C_0, C_mid, C_max) at lightness L for hue (a_, b_). Requires 0 < L < 1.

    C_max is the gamut boundary. C_mid is a smooth landmark reached at
    saturation 0.8, and C_0 the hue-independent slope of chroma at
    saturation 0.
    """
    L = B.asarray(L, like=a_)
    cusp = find_cusp(a_, b_)

    C_max = find_gamut_intersection(a_, b_, L, 1.0, L, cusp)
    S_max, T_max = cusp_to_st(*cusp)

    # Scale factor to compensate for the curved part of gamut shape
    k = C_max / B.minimum(L * S_max, (1 - L) * T_max)

    S_mid, T_mid = st_mid(a_, b_)

    # Soft minimum instead of a sharp triangle for a smooth chroma
    C_a = L * S_mid
    C_b = (1 - L) * T_mid
    C_mid = OKHSL_MID_CHROMA_SCALE * k * B.sqrt(B.sqrt(
        1 / (1 / (C_a * C_a * C_a * C_a) + 1 / (C_b * C_b * C_b * C_b))
    ))

    # Hue independent, ST picked near the average over all hues
    C_a = L * OKHSL_C0_SLOPE_BLACK
    C_b = (1 - L) * OKHSL_C0_SLOPE_WHITE
    C_0 = B.sqrt(1 / (1 / (C_a * C_a) + 1 / (C_b * C_b)))
    # C_0 only depends on L; give it the shape of the other two
    C_0 = C_0 + B.zeros_like(C_max)

    return C_0, C_mid, C_max


# === Records ===

@dataclass(frozen=True)
class LC:
    """A lightness/chroma point of the gamut triangle for one hue."""
    lightness: float
    chroma: float

    @classmethod
    def find_cusp(cls, a_: float, b_: float) -> 'LC':
        L, C = find_cusp(a_, b_)
        return cls(float(L), float(C))


@dataclass(frozen=True)
class ST:
    """Triangle edge slopes: s = C/L from black, t = C/(1-L) from white."""
    s: float
    t: float

    @classmethod
    def from_lc(cls, lc: LC) -> 'ST':
        s, t = cusp_to_st(lc.lightness, lc.chroma)
        return cls(float(s), float(t))

    @classmethod
    def mid(cls, a_: float, b_: float) -> 'ST':
        s, t = st_mid(a_, b_)
        return cls(float(s), float(t))


@dataclass(frozen=True)
class ChromaValues:
    """Chroma at saturation 0 (as a slope), 0.8 and 1.0 for a lightness and hue."""
    zero: float
    mid: float
    max: float

    @classmethod
    def from_normalized(cls, lightness: float, a_: float, b_: float) -> 'ChromaValues':
        C_0, C_mid, C_max = get_cs(lightness, a_, b_)
        return cls(float(C_0), float(C_mid), float(C_max))
