"""Editing operations on packed IPT colors.

Lane editors (lighten, darken, protan/tritan up/down, blot, fade) work directly
on a single byte lane and never run the gamut limiter. Intensity and alpha are
valid over their whole range; pass protan/tritan edits through limit_packed()
where they must stay displayable.

enrich() and edit_ipt() decode, edit, limit to gamut and re-encode. dullen()
only shrinks chroma and skips the limiter.

Every editor except blot() and fade() leaves alpha unchanged.
"""

from .defaults import INVERSE_LIGHTNESS_DISTANCE, RANDOM_EDIT_ATTEMPTS
from .gamut import centered_in_gamut, in_gamut_packed, limit_packed, pack_limited
from .packing import ALPHA_MASK, decode_centered, pack, pack_centered

_MASK64 = 0xFFFFFFFFFFFFFFFF
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def _alpha(packed: int) -> float:
    return (packed >> 25) / 127.0


# === Single-lane editors ===

def lighten(packed: int, change: float) -> int:
    """Move intensity toward white by ``change`` (0 to 1) of the remaining distance."""
    i = packed & 0xFF
    return (int(i + (0xFF - i) * change) & 0xFF) | (packed & 0xFEFFFF00)


def darken(packed: int, change: float) -> int:
    """Move intensity toward black by ``change`` (0 to 1) of the remaining distance."""
    i = packed & 0xFF
    return (int(i * (1.0 - change)) & 0xFF) | (packed & 0xFEFFFF00)


def protan_up(packed: int, change: float) -> int:
    """Shift protan toward red."""
    p = packed >> 8 & 0xFF
    return (int(p + (0xFF - p) * change) << 8 & 0xFF00) | (packed & 0xFEFF00FF)


def protan_down(packed: int, change: float) -> int:
    """Shift protan toward green."""
    p = packed >> 8 & 0xFF
    return (int(p * (1.0 - change)) & 0xFF) << 8 | (packed & 0xFEFF00FF)


def tritan_up(packed: int, change: float) -> int:
    """Shift tritan toward yellow."""
    t = packed >> 16 & 0xFF
    return (int(t + (0xFF - t) * change) << 16 & 0xFF0000) | (packed & 0xFE00FFFF)


def tritan_down(packed: int, change: float) -> int:
    """Shift tritan toward blue."""
    t = packed >> 16 & 0xFF
    return (int(t * (1.0 - change)) & 0xFF) << 16 | (packed & 0xFE00FFFF)


def blot(packed: int, change: float) -> int:
    """Make a color more opaque by ``change`` of the remaining distance."""
    opacity = packed >> 24 & 0xFE
    return (int(opacity + (0xFE - opacity) * change) & 0xFE) << 24 | (packed & 0x00FFFFFF)


def fade(packed: int, change: float) -> int:
    """Make a color more transparent by ``change`` of the remaining distance."""
    opacity = packed >> 24 & 0xFE
    return (int(opacity * (1.0 - change)) & 0xFE) << 24 | (packed & 0x00FFFFFF)


# === Chroma editors ===

def dullen(packed: int, change: float) -> int:
    """Scale chroma toward gray by ``change`` (0 keeps, 1 removes all chroma)."""
    keep = 1.0 - change
    i, p, t = decode_centered(packed)
    return pack_centered(i, p * keep, t * keep, 0.0) | (packed & ALPHA_MASK)


def enrich(packed: int, change: float) -> int:
    """Scale chroma away from gray by ``1 + change``, then limit to gamut."""
    grow = 1.0 + change
    i, p, t = decode_centered(packed)
    return pack_limited(i, p * grow, t * grow, 0.0) | (packed & ALPHA_MASK)


def edit_ipt(
    packed: int,
    add_i: float = 0.0,
    add_p: float = 0.0,
    add_t: float = 0.0,
    add_alpha: float = 0.0,
    mul_i: float = 1.0,
    mul_p: float = 1.0,
    mul_t: float = 1.0,
    mul_alpha: float = 1.0,
) -> int:
    """Multiply then add each channel, and bring the result into gamut.

    Protan and tritan are edited in centered form ([-1, 1], 0 neutral), so
    ``mul_p=0`` removes red/green chroma. Results are clamped to each
    channel's range before gamut limiting.
    """
    i, p, t = decode_centered(packed)
    return pack_limited(
        i * mul_i + add_i,
        p * mul_p + add_p,
        t * mul_t + add_t,
        _alpha(packed) * mul_alpha + add_alpha,
    )


# === Contrast ===

def inverse_lightness(main: int, contrasting: int) -> int:
    """Push ``main`` to the opposite side of the intensity range from ``contrasting``.

    Colors whose chroma already differs a lot are returned unchanged.
    """
    i, p, t = main & 0xFF, main >> 8 & 0xFF, main >> 16 & 0xFF
    ci, cp, ct = contrasting & 0xFF, contrasting >> 8 & 0xFF, contrasting >> 16 & 0xFF
    if (p - cp) ** 2 + (t - ct) ** 2 >= INVERSE_LIGHTNESS_DISTANCE:
        return main
    if ci < 128:
        new_i = i * (0.45 / 255.0) + 0.55
    else:
        new_i = 0.5 - i * (0.45 / 255.0)
    return pack(new_i, p / 255.0, t / 255.0, 0.0) | (main & ALPHA_MASK)


def differentiate_lightness(main: int, contrasting: int) -> int:
    """Average ``main``'s intensity with ``contrasting``'s intensity offset by half the range."""
    shifted = ((contrasting + 128 & 0xFF) + (main & 0xFF)) >> 1
    return limit_packed((main & 0xFEFFFF00) | shifted)


def offset_lightness(main: int) -> int:
    """differentiate_lightness() against the color itself."""
    return differentiate_lightness(main, main)


def lessen_change(packed: int, fraction: float) -> int:
    """Weaken a tint by moving every lane toward neutral mid-gray.

    ``fraction`` 1 keeps the color, 0 gives neutral gray; alpha is kept.
    """
    i, p, t = packed & 0xFF, packed >> 8 & 0xFF, packed >> 16 & 0xFF
    return (
        (int(0x80 + fraction * (i - 0x80)) & 0xFF)
        | (int(0x80 + fraction * (p - 0x80)) & 0xFF) << 8
        | (int(0x80 + fraction * (t - 0x80)) & 0xFF) << 16
        | (packed & ALPHA_MASK)
    )


# === Random jitter ===

def _unit_from_seed(seed: int, multiplier: int) -> float:
    """Hash a 64-bit seed to a float in [-1, 1)."""
    return ((((seed * multiplier) & _MASK64) >> 41) - 4194303.5) * 2.0 ** -22


def random_edit(packed: int, seed: int, variance: float) -> int:
    """Nudge a color by a random offset in IPT space, staying in gamut.

    Draws up to 50 offsets within a ball of radius ``variance`` and returns
    the first that lands in gamut, or ``packed`` unchanged if none does. The
    same seed always gives the same result.
    """
    i, p, t = decode_centered(packed)
    limit = variance * variance
    seed &= _MASK64
    for _ in range(RANDOM_EDIT_ATTEMPTS):
        x = _unit_from_seed(seed, 0xD1B54A32D192ED03) * variance
        y = _unit_from_seed(seed, 0xABC98388FB8FAC03) * variance
        z = _unit_from_seed(seed, 0x8CB92BA72F3D8DD7) * variance
        seed = (seed + _GOLDEN_GAMMA) & _MASK64
        if x * x + y * y + z * z > limit:
            continue
        new_p = p + y
        new_t = t + z
        if not centered_in_gamut(i + x, new_p, new_t):
            continue
        candidate = pack_centered(i + x, new_p, new_t, 0.0) | (packed & ALPHA_MASK)
        if in_gamut_packed(candidate):
            return candidate
    return packed
