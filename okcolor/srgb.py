"""8-bit sRGB hex strings <-> float sRGB."""

import numpy as np

from . import _backend as B
from ._backend import Array

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def parse_hex(text: str) -> tuple[float, float, float]:
    """'#rrggbb', 'rrggbb' or '#rgb' -> (r, g, b) floats in [0, 1].

    Raises:
        ValueError: If text is not a 3 or 6 digit hex color
    """
    digits = text.strip().removeprefix('#')
    if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f'Invalid hex color: {text!r}')
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


def to_u8(rgb: Array) -> np.ndarray:
    """Float sRGB (..., 3) -> uint8, clamped and rounded half away from zero."""
    rgb = np.clip(B.to_numpy(rgb), 0.0, 1.0)
    return np.floor(rgb * 255.0 + 0.5).astype(np.uint8)


def to_hex(rgb: Array) -> str:
    """Float sRGB triple -> lower-case 'rrggbb'."""
    r, g, b = to_u8(rgb).reshape(3)
    return '{:02x}{:02x}{:02x}'.format(r, g, b)
