"""HSL views of packed IPT colors.

Hue, saturation and lightness here are the familiar RGB-derived HSL values,
computed from the reverse-transformed RGB of a packed color by a min/mid/max
decomposition of its channels. Hue is in [0, 1) and wraps.
"""

from .conversions import decode_srgb, from_rgba
from .defaults import (
    EDITED_BLACK_WORD,
    HSL_EPSILON,
    NEAR_BLACK_INTENSITY,
    NEAR_BLACK_WORD,
    SATURATION_EDGE,
)
from .ipt import ipt_to_srgb
from .packing import ALPHA_MASK, alpha as alpha_of, decode_centered, intensity as intensity_of


def _clamp01(x: float) -> float:
    return min(max(x, 0.0), 1.0)


def _decompose(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """Split RGB into (max, mid-or-min, hue offset, remaining channel)."""
    if g < b:
        x, y, z, w = b, g, -1.0, 2.0 / 3.0
    else:
        x, y, z, w = g, b, 0.0, -1.0 / 3.0
    if r < x:
        z = w
        w = r
    else:
        w = x
        x = r
    return x, y, z, w


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Display RGB in [0, 1] -> (hue, saturation, lightness)."""
    x, y, z, w = _decompose(r, g, b)
    d = x - min(w, y)
    lum = x * (1.0 - 0.5 * d / (x + HSL_EPSILON))
    hue = abs(z + (w - y) / (6.0 * d + HSL_EPSILON))
    sat = (x - lum) / (min(lum, 1.0 - lum) + HSL_EPSILON)
    return hue, sat, lum


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """(hue, saturation, lightness) -> display RGB in [0, 1]."""
    hue %= 1.0
    x = _clamp01(abs(hue * 6.0 - 3.0) - 1.0)
    y = (hue + 2.0 / 3.0) % 1.0
    z = (hue + 1.0 / 3.0) % 1.0
    y = _clamp01(abs(y * 6.0 - 3.0) - 1.0)
    z = _clamp01(abs(z * 6.0 - 3.0) - 1.0)
    v = lightness + saturation * min(lightness, 1.0 - lightness)
    d = 2.0 * (1.0 - lightness / (v + HSL_EPSILON))
    return (
        v * (1.0 + (x - 1.0) * d),
        v * (1.0 + (y - 1.0) * d),
        v * (1.0 + (z - 1.0) * d),
    )


def hue(packed: int) -> float:
    """Hue of a packed color, from 0 (red) through 1/3 (green) and 2/3 (blue)."""
    x, y, z, w = _decompose(*decode_srgb(packed))
    d = x - min(w, y)
    return abs(z + (w - y) / (6.0 * d + HSL_EPSILON))


def saturation(packed: int) -> float:
    """Spread between the largest and smallest RGB channel.

    Returns 0 for intensities within 0.005 of black or white, where hue is
    meaningless.
    """
    if abs(intensity_of(packed) - 0.5) > SATURATION_EDGE:
        return 0.0
    x, y, _, w = _decompose(*decode_srgb(packed))
    return x - min(w, y)


def lightness(packed: int) -> float:
    """HSL lightness of a packed color."""
    x, y, _, w = _decompose(*decode_srgb(packed))
    d = x - min(w, y)
    return x * (1.0 - 0.5 * d / (x + HSL_EPSILON))


def from_hsl(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> int:
    """HSL(A) -> packed IPT word.

    Lightness at or below 0.001 gives the fixed near-black word, since hue
    and saturation cannot be recovered there.
    """
    if lightness <= NEAR_BLACK_INTENSITY:
        return (int(alpha * 255) << 24 & ALPHA_MASK) | NEAR_BLACK_WORD
    r, g, b = hsl_to_rgb(hue, saturation, lightness)
    return from_rgba(r, g, b, alpha)


def to_edited(packed: int, hue: float, saturation: float, light: float, opacity: float) -> int:
    """Add HSL deltas to a packed color.

    The intensity lane gets ``light`` added before the HSL round trip. Hue
    wraps, so +1.0 is a full turn. Saturation and opacity are clamped to
    [0, 1].
    Intensity at or below 0.001 gives EDITED_BLACK_WORD with the new opacity.

    Args:
        packed: Starting color
        hue: Hue change, any real number
        saturation: Saturation change
        light: Intensity change
        opacity: Alpha change
    """
    i = _clamp01(light + intensity_of(packed))
    opacity = _clamp01(opacity + alpha_of(packed))
    if i <= NEAR_BLACK_INTENSITY:
        return (int(opacity * 255) << 24 & ALPHA_MASK) | EDITED_BLACK_WORD

    _, p, t = decode_centered(packed)
    h, s, lum = rgb_to_hsl(*ipt_to_srgb(i, p, t))
    r, g, b = hsl_to_rgb(h + hue, _clamp01(s + saturation), lum)
    return from_rgba(r, g, b, opacity)


def shift_hue(packed: int, amount: float) -> int:
    """Rotate hue by ``amount`` turns, leaving everything else to to_edited()."""
    return to_edited(packed, amount, 0.0, 0.0, 0.0)
