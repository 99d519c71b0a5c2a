"""Oklab <-> linear sRGB <-> CIE XYZ conversions.

Reference: https://bottosson.github.io/posts/oklab/

All functions accept numpy arrays, torch tensors or plain floats.
GPU acceleration automatic when torch GPU tensors are passed.
"""

from math import pi
from . import _backend as B
from ._backend import Array

# === OKLab <-> Linear RGB matrices ===
# From Björn Ottosson's reference implementation

# Linear RGB -> LMS
_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> OKLab
_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> LMS cube root
_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear RGB
_LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)

# === OKLab <-> XYZ (D65) matrices ===

# XYZ -> LMS
_XYZ_TO_LMS = (
    (0.8190224432164319, 0.3619062562801221, -0.12887378261216414),
    (0.0329836671980271, 0.9292868468965546, 0.03614466816999844),
    (0.048177199566046255, 0.26423952494422764, 0.6335478258136937),
)

# LMS -> XYZ
_LMS_TO_XYZ = (
    (1.2268798733741557, -0.5578149965554813, 0.28139105017721583),
    (-0.04057576262431372, 1.1122868293970594, -0.07171106666151701),
    (-0.07637294974672142, -0.4214933239627914, 1.5869240244272418),
)

# OKLab -> LMS cube root, full precision inverse of _LMS_TO_OKLAB
_OKLAB_TO_LMS_EXACT = (
    (0.99999999845051981432, 0.39633779217376785678, 0.21580375806075880339),
    (1.0000000088817607767, -0.1055613423236563494, -0.063854174771705903402),
    (1.0000000546724109177, -0.089484182094965759684, -1.2914855378640917399),
)


def _mul3(m, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    return (
        m[0][0]*x + m[0][1]*y + m[0][2]*z,
        m[1][0]*x + m[1][1]*y + m[1][2]*z,
        m[2][0]*x + m[2][1]*y + m[2][2]*z,
    )


# === Core Conversions ===

def oklch_to_oklab(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> OKLab. H in degrees."""
    H_rad = H * (pi / 180)
    a = C * B.cos(H_rad)
    b = C * B.sin(H_rad)
    return L, a, b


def oklab_to_oklch(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> OKLCH. Returns H in degrees [0, 360)."""
    C = B.sqrt(a**2 + b**2)
    H_rad = B.atan2(b, a)
    H = H_rad * (180 / pi)
    # Wrap to [0, 360)
    H = H % 360
    return L, C, H


def oklab_to_linear_rgb(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Linear RGB via LMS intermediate."""
    # OKLab -> LMS (cube root space)
    l_ = L + _OKLAB_TO_LMS[0][1] * a + _OKLAB_TO_LMS[0][2] * b
    m_ = L + _OKLAB_TO_LMS[1][1] * a + _OKLAB_TO_LMS[1][2] * b
    s_ = L + _OKLAB_TO_LMS[2][1] * a + _OKLAB_TO_LMS[2][2] * b

    # Cube to get LMS
    l, m, s = l_**3, m_**3, s_**3

    return _mul3(_LMS_TO_RGB, l, m, s)


def linear_rgb_to_oklab(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear RGB -> OKLab via LMS intermediate."""
    l, m, s = _mul3(_RGB_TO_LMS, r, g, b)

    # Cube root (sign-preserving for edge cases)
    l_, m_, s_ = B.cbrt(l), B.cbrt(m), B.cbrt(s)

    return _mul3(_LMS_TO_OKLAB, l_, m_, s_)


def xyz_to_oklab(x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """CIE XYZ (D65, Y=1 white) -> OKLab."""
    l, m, s = _mul3(_XYZ_TO_LMS, x, y, z)
    return _mul3(_LMS_TO_OKLAB, B.cbrt(l), B.cbrt(m), B.cbrt(s))


def oklab_to_xyz(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> CIE XYZ (D65, Y=1 white)."""
    l_, m_, s_ = _mul3(_OKLAB_TO_LMS_EXACT, L, a, b)
    return _mul3(_LMS_TO_XYZ, l_**3, m_**3, s_**3)


def linear_to_srgb(x: Array) -> Array:
    """Linear RGB -> sRGB gamma encoding (per channel)."""
    threshold = 0.0031308
    low = x * 12.92
    high = 1.055 * B.pow(B.maximum(x, B.full_like(x, 1e-10)), 1/2.4) - 0.055
    return B.where(x <= threshold, low, high)


def srgb_to_linear(x: Array) -> Array:
    """sRGB -> Linear RGB gamma decoding (per channel)."""
    threshold = 0.04045
    low = x / 12.92
    high = B.pow(B.maximum((x + 0.055) / 1.055, B.zeros_like(x)), 2.4)
    return B.where(x <= threshold, low, high)


# === Convenience Composites ===

def oklab_to_srgb(L: Array, a: Array, b: Array) -> Array:
    """OKLab -> sRGB in one call.

    Returns:
        RGB array with shape (..., 3), values may be outside [0,1] if out of gamut
    """
    r, g, b = oklab_to_linear_rgb(L, a, b)
    return B.stack([linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)], axis=-1)


def srgb_to_oklab(rgb: Array) -> tuple[Array, Array, Array]:
    """sRGB -> OKLab.

    Args:
        rgb: RGB array with shape (..., 3), values in [0,1]

    Returns:
        (L, a, b) tuple
    """
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    return linear_rgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
