"""Immutable single-color records.

Each record is a thin scalar wrapper around the array functions; use those
directly for images or batches. Records do no validation on construction:
out-of-range components pass through conversions unchanged in spirit, and
is_within_bounds() is there for callers that need a range check.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .defaults import MAX_SRGB_SATURATION_INACCURACY
from .okhsl import oklab_to_okhsl, okhsl_to_oklab
from .okhsv import oklab_to_okhsv, okhsv_to_oklab
from .okhwb import is_black, is_grey, is_white, okhsv_to_okhwb, okhwb_to_okhsv
from .oklab import (
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklab_to_srgb,
    oklab_to_xyz,
    srgb_to_oklab,
    xyz_to_oklab,
)
from .srgb import parse_hex, to_hex, to_u8


def _floats(*values) -> tuple[float, ...]:
    return tuple(float(v) for v in values)


def _close(x: float, y: float, epsilon: float) -> bool:
    return abs(x - y) <= epsilon


def _hue_close(h1: float, h2: float, epsilon: float) -> bool:
    """Hue equality on the circle, so 359.9 and -0.1 are the same angle."""
    return abs((h1 - h2 + 180.0) % 360.0 - 180.0) <= epsilon


def _visually_eq(s, o, epsilon: float, greyscale_fields: tuple[str, ...], fields: tuple[str, ...]) -> bool:
    """Equal up to epsilon, ignoring hue where it carries no information.

    Two whites or two blacks are always equal. Two greys compare only
    greyscale_fields. Anything else compares hue and fields.
    """
    if s.is_white(epsilon) and o.is_white(epsilon):
        return True
    if s.is_black(epsilon) and o.is_black(epsilon):
        return True
    if s.is_grey(epsilon) and o.is_grey(epsilon):
        return all(_close(getattr(s, f), getattr(o, f), epsilon) for f in greyscale_fields)
    return _hue_close(s.hue, o.hue, epsilon) and all(
        _close(getattr(s, f), getattr(o, f), epsilon) for f in fields
    )


@dataclass(frozen=True)
class Oklab:
    """Oklab color.

    Attributes:
        l: Lightness, 0 is black and 1 the reference white
        a: Green (negative) to red (positive)
        b: Blue (negative) to yellow (positive)
    """
    l: float
    a: float
    b: float

    @property
    def chroma(self) -> float:
        return self.to_oklch()[1]

    @property
    def hue(self) -> float:
        """Hue in degrees [0, 360)."""
        return self.to_oklch()[2]

    @classmethod
    def from_oklch(cls, lightness: float, chroma: float, hue: float) -> Oklab:
        return cls(*_floats(*oklch_to_oklab(lightness, chroma, hue)))

    def to_oklch(self) -> tuple[float, float, float]:
        """(L, C, h) with h in degrees [0, 360)."""
        return _floats(*oklab_to_oklch(self.l, self.a, self.b))

    @classmethod
    def from_linear_srgb(cls, r: float, g: float, b: float) -> Oklab:
        return cls(*_floats(*linear_rgb_to_oklab(r, g, b)))

    def to_linear_srgb(self) -> tuple[float, float, float]:
        return _floats(*oklab_to_linear_rgb(self.l, self.a, self.b))

    @classmethod
    def from_srgb(cls, r: float, g: float, b: float) -> Oklab:
        return cls(*_floats(*srgb_to_oklab(np.array([r, g, b], dtype=np.float64))))

    def to_srgb(self) -> tuple[float, float, float]:
        return _floats(*oklab_to_srgb(self.l, self.a, self.b))

    @classmethod
    def from_srgb_hex(cls, text: str) -> Oklab:
        return cls.from_srgb(*parse_hex(text))

    def to_srgb_hex(self) -> str:
        return to_hex(oklab_to_srgb(self.l, self.a, self.b))

    def to_srgb_u8(self) -> tuple[int, int, int]:
        return tuple(int(c) for c in to_u8(oklab_to_srgb(self.l, self.a, self.b)))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Oklab:
        return cls(*_floats(*xyz_to_oklab(x, y, z)))

    def to_xyz(self) -> tuple[float, float, float]:
        return _floats(*oklab_to_xyz(self.l, self.a, self.b))


@dataclass(frozen=True)
class Okhsl:
    """Okhsl color. Hue in degrees, saturation and lightness nominally in [0, 1]."""
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_oklab(cls, lab: Oklab) -> Okhsl:
        return cls(*_floats(*oklab_to_okhsl(lab.l, lab.a, lab.b)))

    def to_oklab(self) -> Oklab:
        return Oklab(*_floats(*okhsl_to_oklab(self.hue, self.saturation, self.lightness)))

    def is_within_bounds(self) -> bool:
        return 0.0 <= self.saturation <= 1.0 and 0.0 <= self.lightness <= 1.0

    def is_grey(self, epsilon: float = 1e-12) -> bool:
        return _close(self.saturation, 0.0, epsilon)

    def is_white(self, epsilon: float = 1e-12) -> bool:
        """Grey at or beyond full lightness, or lightness 1 at any saturation."""
        return (self.is_grey(epsilon) and self.lightness > 1.0) or _close(self.lightness, 1.0, epsilon)

    def is_black(self, epsilon: float = 1e-12) -> bool:
        return self.lightness <= epsilon

    def visually_eq(self, other: Okhsl, epsilon: float = 1e-12) -> bool:
        return _visually_eq(self, other, epsilon, ('lightness',), ('saturation', 'lightness'))


@dataclass(frozen=True)
class Okhsv:
    """Okhsv color. Hue in degrees, saturation and value nominally in [0, 1]."""
    hue: float
    saturation: float
    value: float

    @classmethod
    def from_oklab(cls, lab: Oklab) -> Okhsv:
        return cls(*_floats(*oklab_to_okhsv(lab.l, lab.a, lab.b)))

    def to_oklab(self) -> Oklab:
        return Oklab(*_floats(*okhsv_to_oklab(self.hue, self.saturation, self.value)))

    @classmethod
    def from_okhwb(cls, hwb: Okhwb) -> Okhsv:
        return cls(*_floats(*okhwb_to_okhsv(hwb.hue, hwb.whiteness, hwb.blackness)))

    def to_okhwb(self) -> Okhwb:
        return Okhwb.from_okhsv(self)

    def is_within_bounds(self) -> bool:
        limit = 1.0 + MAX_SRGB_SATURATION_INACCURACY
        return 0.0 <= self.saturation <= limit and 0.0 <= self.value <= limit

    def is_grey(self, epsilon: float = 1e-12) -> bool:
        return _close(self.saturation, 0.0, epsilon)

    def is_white(self, epsilon: float = 1e-12) -> bool:
        """Grey at or beyond full value, or value 1 at any saturation."""
        return (self.is_grey(epsilon) and self.value >= 1.0) or _close(self.value, 1.0, epsilon)

    def is_black(self, epsilon: float = 1e-12) -> bool:
        return _close(self.value, 0.0, epsilon)

    def visually_eq(self, other: Okhsv, epsilon: float = 1e-12) -> bool:
        return _visually_eq(self, other, epsilon, ('value',), ('saturation', 'value'))


@dataclass(frozen=True)
class Okhwb:
    """Okhwb color. Hue in degrees, whiteness and blackness nominally in [0, 1]."""
    hue: float
    whiteness: float
    blackness: float

    @classmethod
    def from_okhsv(cls, hsv: Okhsv) -> Okhwb:
        return cls(*_floats(*okhsv_to_okhwb(hsv.hue, hsv.saturation, hsv.value)))

    def to_okhsv(self) -> Okhsv:
        return Okhsv.from_okhwb(self)

    @classmethod
    def from_oklab(cls, lab: Oklab) -> Okhwb:
        return cls.from_okhsv(Okhsv.from_oklab(lab))

    def to_oklab(self) -> Oklab:
        return self.to_okhsv().to_oklab()

    def is_within_bounds(self) -> bool:
        return (
            0.0 <= self.whiteness <= 1.0
            and 0.0 <= self.blackness <= 1.0
            and self.whiteness + self.blackness <= 1.0
        )

    def is_grey(self, epsilon: float = 1e-12) -> bool:
        return bool(is_grey(self.whiteness, self.blackness, epsilon))

    def is_white(self, epsilon: float = 1e-12) -> bool:
        return bool(is_white(self.whiteness, self.blackness, epsilon))

    def is_black(self, epsilon: float = 1e-12) -> bool:
        return bool(is_black(self.whiteness, self.blackness, epsilon))

    def visually_eq(self, other: Okhwb, epsilon: float = 1e-12) -> bool:
        fields = ('whiteness', 'blackness')
        return _visually_eq(self, other, epsilon, fields, fields)
