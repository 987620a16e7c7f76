"""sRGB colours with hex parsing and a perceptual hue shift."""

from __future__ import annotations

import math
from dataclasses import dataclass

COLOR_PRIMARY_U32 = 0x005BBE
SHIFT_HUE = 70.0

_WHITE = (0.95047, 1.0, 1.08883)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0

_RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
_XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)


def _channel(value: int, shift: int) -> float:
    return ((value >> shift) & 0xFF) / 255.0


def _to_linear(c: float) -> float:
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _from_linear(c: float) -> float:
    return 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1.0 / 2.4) - 0.055


def _mul(matrix, vector):
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)


def _lab_f(t: float) -> float:
    return t ** (1.0 / 3.0) if t > _EPSILON else (_KAPPA * t + 16.0) / 116.0


def _lab_f_inv(f: float) -> float:
    cube = f**3
    return cube if cube > _EPSILON else (116.0 * f - 16.0) / _KAPPA


def _clamp(c: float) -> float:
    return min(max(c, 0.0), 1.0)


def _to_u8(c: float) -> int:
    return int(math.floor(_clamp(c) * 255.0 + 0.5))


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components in ``[0, 1]``; defaults to the primary colour."""

    red: float = _channel(COLOR_PRIMARY_U32, 16)
    green: float = _channel(COLOR_PRIMARY_U32, 8)
    blue: float = _channel(COLOR_PRIMARY_U32, 0)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rrggbb`` or ``#rgb`` (``#`` optional); fall back to the default."""
        digits = text[1:] if text.startswith("#") else text
        if not all(ch in "0123456789abcdefABCDEF" for ch in digits):
            return cls()
        if len(digits) == 6:
            parts = [int(digits[i : i + 2], 16) for i in (0, 2, 4)]
        elif len(digits) == 3:
            parts = [int(ch, 16) * 17 for ch in digits]
        else:
            return cls()
        red, green, blue = (p / 255.0 for p in parts)
        return cls(red, green, blue)

    def to_string_hex(self) -> str:
        """Return the colour as ``#RRGGBB``."""
        return "#{:02X}{:02X}{:02X}".format(*(_to_u8(c) for c in (self.red, self.green, self.blue)))

    def shift_hue(self) -> Color:
        """Rotate the hue in LCh space by ``SHIFT_HUE`` degrees."""
        linear = tuple(_to_linear(c) for c in (self.red, self.green, self.blue))
        x, y, z = _mul(_RGB_TO_XYZ, linear)
        fx, fy, fz = (_lab_f(v / w) for v, w in zip((x, y, z), _WHITE))
        lightness = 116.0 * fy - 16.0
        a = 500.0 * (fx - fy)
        b = 200.0 * (fy - fz)

        chroma = math.hypot(a, b)
        hue = math.degrees(math.atan2(b, a)) + SHIFT_HUE
        a = chroma * math.cos(math.radians(hue))
        b = chroma * math.sin(math.radians(hue))

        fy = (lightness + 16.0) / 116.0
        fx = a / 500.0 + fy
        fz = fy - b / 200.0
        yr = fy**3 if lightness > _KAPPA * _EPSILON else lightness / _KAPPA
        xyz = (_lab_f_inv(fx) * _WHITE[0], yr * _WHITE[1], _lab_f_inv(fz) * _WHITE[2])
        red, green, blue = (_clamp(_from_linear(c)) for c in _mul(_XYZ_TO_RGB, xyz))
        return Color(red, green, blue)