"""Conversions between packed IPT words and RGB formats.

Input formats:
- RGBA8888 int, red in the most significant byte
- ABGR8888 int, red in the least significant byte (GPU vertex color order)
- four floats in [0, 1]
- hex text such as "#FF7F00" or "ff7f00cc"

Output formats mirror the inputs, plus per-channel float and int accessors.
"""

from . import _backend as B
from .defaults import FORWARD_LANE_SCALE, RGB_OUTPUT_SCALE
from .errors import ColorParseError
from .ipt import ipt_to_linear_rgb, linear_rgb_to_ipt
from .packing import ALPHA_MASK, decode_centered
from .transfer import forward_gamma, reverse_gamma

_BYTE_SCALE = 1.0 / 255.0


def _lane(value: float) -> int:
    """Scale and truncate an encoded channel into 0-255."""
    return min(max(int(value * FORWARD_LANE_SCALE), 0), 255)


def _encode_linear(r: float, g: float, b: float, alpha_lane: int) -> int:
    """Linear RGB plus a ready-made alpha lane -> packed word."""
    i, p, t = linear_rgb_to_ipt(r, g, b)
    return (
        _lane(i)
        | _lane(p * 0.5 + 0.5) << 8
        | _lane(t * 0.5 + 0.5) << 16
        | alpha_lane
    )


def decode_linear(packed: int) -> tuple[float, float, float]:
    """Packed word -> unclamped linear RGB."""
    return ipt_to_linear_rgb(*decode_centered(packed))


def decode_srgb(packed: int) -> tuple[float, float, float]:
    """Packed word -> display RGB floats, clamped to [0, 1]."""
    r, g, b = decode_linear(packed)
    return (
        reverse_gamma(B.clip(r, 0.0, 1.0)),
        reverse_gamma(B.clip(g, 0.0, 1.0)),
        reverse_gamma(B.clip(b, 0.0, 1.0)),
    )


def _channel_int(value: float) -> int:
    return int(value * RGB_OUTPUT_SCALE)


# === RGB -> IPT ===

def from_rgba8888(rgba: int) -> int:
    """RGBA8888 int (red in the top byte) -> packed IPT word."""
    return _encode_linear(
        forward_gamma((rgba >> 24 & 0xFF) * _BYTE_SCALE),
        forward_gamma((rgba >> 16 & 0xFF) * _BYTE_SCALE),
        forward_gamma((rgba >> 8 & 0xFF) * _BYTE_SCALE),
        (rgba & 0xFE) << 24,
    )


def from_abgr8888(abgr: int) -> int:
    """ABGR8888 int (red in the low byte) -> packed IPT word."""
    return _encode_linear(
        forward_gamma((abgr & 0xFF) * _BYTE_SCALE),
        forward_gamma((abgr >> 8 & 0xFF) * _BYTE_SCALE),
        forward_gamma((abgr >> 16 & 0xFF) * _BYTE_SCALE),
        abgr & ALPHA_MASK,
    )


def from_rgba(r: float, g: float, b: float, a: float = 1.0) -> int:
    """Display RGBA floats in [0, 1] -> packed IPT word."""
    return _encode_linear(
        forward_gamma(r),
        forward_gamma(g),
        forward_gamma(b),
        int(a * 255) << 24 & ALPHA_MASK,
    )


def from_hex(text: str) -> int:
    """Parse "RRGGBB" or "RRGGBBAA" (optional leading '#') into a packed word.

    Raises:
        ColorParseError: If the text is not 6 or 8 hex digits
    """
    digits = text.strip().lstrip('#')
    if len(digits) not in (6, 8):
        raise ColorParseError(f"Expected 6 or 8 hex digits, got {text!r}")
    try:
        value = int(digits, 16)
    except ValueError as e:
        raise ColorParseError(f"Invalid hex color {text!r}") from e
    if len(digits) == 6:
        value = value << 8 | 0xFF
    return from_rgba8888(value)


# === IPT -> RGB ===

def to_rgba8888(packed: int) -> int:
    """Packed IPT word -> RGBA8888 int. Alpha 254 is widened to 255."""
    r, g, b = decode_srgb(packed)
    return (
        _channel_int(r) << 24
        | _channel_int(g) << 16
        | _channel_int(b) << 8
        | (packed & ALPHA_MASK) >> 24
        | packed >> 31 & 1
    )


def to_abgr8888(packed: int) -> int:
    """Packed IPT word -> ABGR8888 int with the alpha lane copied over."""
    r, g, b = decode_srgb(packed)
    return (
        _channel_int(r)
        | _channel_int(g) << 8
        | _channel_int(b) << 16
        | packed & ALPHA_MASK
    )


def to_rgba(packed: int) -> tuple[float, float, float, float]:
    """Packed IPT word -> display RGBA floats in [0, 1]."""
    r, g, b = decode_srgb(packed)
    return r, g, b, (packed >> 24 & 0xFE) / 254.0


def to_hex(packed: int) -> str:
    """Packed IPT word -> "RRGGBBAA" hex text."""
    return f"{to_rgba8888(packed):08X}"


# === Per-channel accessors ===

def red(packed: int) -> float:
    return decode_srgb(packed)[0]


def green(packed: int) -> float:
    return decode_srgb(packed)[1]


def blue(packed: int) -> float:
    return decode_srgb(packed)[2]


def red_int(packed: int) -> int:
    return _channel_int(red(packed))


def green_int(packed: int) -> int:
    return _channel_int(green(packed))


def blue_int(packed: int) -> int:
    return _channel_int(blue(packed))
