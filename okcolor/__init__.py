"""Gamut-aware Okhsl, Okhsv and Okhwb conversions on top of Oklab.

This package provides:
- Oklab <-> linear sRGB / sRGB / XYZ conversions
- The toe lightness remap
- sRGB gamut geometry: cusp finder, gamut intersection, characteristic chroma
- Okhsl, Okhsv and Okhwb forward and inverse conversions
- Backend-agnostic: works with numpy arrays, torch tensors or plain floats
- Immutable single-color records (Oklab, Okhsl, Okhsv, Okhwb)

Example:
    import numpy as np
    from okcolor import srgb_to_okhsv, okhsl_to_srgb, Okhsv, Oklab

    # Whole images at once
    h, s, v = srgb_to_okhsv(image)          # image: (..., 3) in [0, 1]
    rgb = okhsl_to_srgb(h, 0.5 * s, 0.6)

    # Single colors
    hsv = Okhsv.from_oklab(Oklab.from_srgb_hex('#5588cc'))
"""

from .oklab import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    oklab_to_xyz,
    xyz_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklab_to_srgb,
    srgb_to_oklab,
)

from .toe import toe, toe_inv

from .gamut import (
    ClippingChannel,
    clipping_channel,
    max_saturation,
    find_cusp,
    cusp_to_st,
    st_mid,
    find_gamut_intersection,
    get_cs,
    LC,
    ST,
    ChromaValues,
)

from .okhsl import oklab_to_okhsl, okhsl_to_oklab, srgb_to_okhsl, okhsl_to_srgb
from .okhsv import oklab_to_okhsv, okhsv_to_oklab, srgb_to_okhsv, okhsv_to_srgb
from .okhwb import (
    okhsv_to_okhwb,
    okhwb_to_okhsv,
    oklab_to_okhwb,
    okhwb_to_oklab,
    is_grey,
    is_white,
    is_black,
)

from .srgb import parse_hex, to_hex, to_u8
from .types import Oklab, Okhsl, Okhsv, Okhwb

__all__ = [
    # Records
    'Oklab',
    'Okhsl',
    'Okhsv',
    'Okhwb',
    'LC',
    'ST',
    'ChromaValues',
    # Oklab conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'oklab_to_xyz',
    'xyz_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklab_to_srgb',
    'srgb_to_oklab',
    # Toe
    'toe',
    'toe_inv',
    # Gamut geometry
    'ClippingChannel',
    'clipping_channel',
    'max_saturation',
    'find_cusp',
    'cusp_to_st',
    'st_mid',
    'find_gamut_intersection',
    'get_cs',
    # Okhsl / Okhsv / Okhwb
    'oklab_to_okhsl',
    'okhsl_to_oklab',
    'srgb_to_okhsl',
    'okhsl_to_srgb',
    'oklab_to_okhsv',
    'okhsv_to_oklab',
    'srgb_to_okhsv',
    'okhsv_to_srgb',
    'okhsv_to_okhwb',
    'okhwb_to_okhsv',
    'oklab_to_okhwb',
    'okhwb_to_oklab',
    'is_grey',
    'is_white',
    'is_black',
    # sRGB hex
    'parse_hex',
    'to_hex',
    'to_u8',
]
