"""Gamut testing and limiting for IPT colors.

Not every (I, P, T) combination maps back to displayable RGB. High chroma at
extreme intensity is particularly problematic.

The limiter scans a fixed ladder of 32 desaturation steps from full chroma
toward gray and keeps the first step that passes the gamut test. It never
bisects: the chroma/gamut boundary is not guaranteed monotonic for every set
of matrices, and a downward scan always accepts the first passing step.
Intensity is never changed.

The packed forms (limit_packed, pack_limited) test each step after its chroma
has been truncated into byte lanes, so the word they return is in gamut as
stored unless the scan falls through to gray.
"""

from . import _backend as B
from ._backend import Array
from .defaults import GAMUT_TOLERANCE, LIMIT_STEPS
from .ipt import ipt_to_linear_rgb, to_centered, to_normalized
from .packing import ALPHA_MASK, INTENSITY_MASK, IPTColor, decode_centered, pack_centered

# === Gamut checking ===

def _within_unit(x: Array, tolerance: float) -> Array:
    return (x >= -tolerance) & (x <= 1.0 + tolerance)


def centered_in_gamut(i: Array, p: Array, t: Array, tolerance: float = GAMUT_TOLERANCE) -> Array:
    """Check centered IPT (P, T in [-1, 1]) against the linear RGB cube."""
    r, g, b = ipt_to_linear_rgb(i, p, t)
    return _within_unit(r, tolerance) & _within_unit(g, tolerance) & _within_unit(b, tolerance)


def in_gamut(intensity: Array, protan: Array, tritan: Array,
             tolerance: float = GAMUT_TOLERANCE) -> Array:
    """Check if normalized IPT values produce valid RGB (all channels in [0, 1]).

    The test runs in linear RGB; gamma is monotonic, so it cannot change the
    answer. Returns a bool for scalar input and a boolean array otherwise.
    """
    return centered_in_gamut(intensity, to_centered(protan), to_centered(tritan), tolerance)


def in_gamut_packed(packed: int, tolerance: float = GAMUT_TOLERANCE) -> bool:
    """Check a packed color against the gamut."""
    i, p, t = decode_centered(packed)
    return centered_in_gamut(i, p, t, tolerance)


# === Gamut limiting ===

def desaturate_centered(i: float, p: float, t: float) -> tuple[float, float]:
    """Scale centered chroma toward zero until (i, p, t) is in gamut.

    The color as given is tested first, then progress 31/32 down to 1/32.
    If none of those pass, progress 0 (gray) is used untested.
    """
    p2, t2 = p, t
    for attempt in range(LIMIT_STEPS - 1, -1, -1):
        if centered_in_gamut(i, p2, t2):
            break
        progress = attempt / LIMIT_STEPS
        p2 = p * progress
        t2 = t * progress
    return p2, t2


def limit_to_gamut(intensity: float, protan: float, tritan: float, alpha: float = 1.0) -> IPTColor:
    """Bring a normalized IPT color into gamut by reducing chroma.

    Args:
        intensity: Lightness (clamped to [0, 1])
        protan, tritan: Normalized chroma (0.5 neutral, clamped to [0, 1])
        alpha: Opacity (clamped to [0, 1])

    Returns:
        IPTColor with the same intensity and alpha, in gamut
    """
    i = B.clip(intensity, 0.0, 1.0)
    p = B.clip(to_centered(protan), -1.0, 1.0)
    t = B.clip(to_centered(tritan), -1.0, 1.0)
    p2, t2 = desaturate_centered(i, p, t)
    return IPTColor(i, to_normalized(p2), to_normalized(t2), B.clip(alpha, 0.0, 1.0))


def _desaturate_lanes(fixed: int, p: float, t: float) -> int:
    """Scan the limiter ladder on stored words.

    ``fixed`` holds the intensity and alpha lanes. Each step is tested after
    its chroma is truncated into bytes, so a passing step is in gamut exactly
    as stored. Gray is used untested when no step passes.
    """
    for attempt in range(LIMIT_STEPS - 1, 0, -1):
        progress = attempt / LIMIT_STEPS
        candidate = pack_centered(0.0, p * progress, t * progress, 0.0) | fixed
        if in_gamut_packed(candidate):
            return candidate
    return pack_centered(0.0, 0.0, 0.0, 0.0) | fixed


def pack_limited(intensity: float, protan: float, tritan: float, alpha: float = 1.0) -> int:
    """Pack centered IPT, reducing chroma until the stored word is in gamut.

    Channels are clamped to their ranges first. The chroma scan never touches
    the intensity or alpha lanes.
    """
    p = min(max(protan, -1.0), 1.0)
    t = min(max(tritan, -1.0), 1.0)
    word = pack_centered(min(max(intensity, 0.0), 1.0), p, t, min(max(alpha, 0.0), 1.0))
    if in_gamut_packed(word):
        return word
    return _desaturate_lanes(word & (INTENSITY_MASK | ALPHA_MASK), p, t)


def limit_packed(packed: int) -> int:
    """limit_to_gamut() for a packed color.

    In-gamut colors come back unchanged; otherwise only the chroma lanes are
    rewritten. The result is in gamut as stored unless the scan fell through
    to gray.
    """
    i, p, t = decode_centered(packed)
    if centered_in_gamut(i, p, t):
        return packed
    return _desaturate_lanes(packed & (INTENSITY_MASK | ALPHA_MASK), p, t)


def limit_to_gamut_arrays(intensity: Array, protan: Array, tritan: Array) -> tuple[Array, Array, Array]:
    """Vectorized limit_to_gamut() over numpy arrays or torch tensors.

    Uses the same 32-step ladder as the scalar version, so both give the same
    result for the same input.

    Returns:
        (intensity, protan, tritan) with normalized chroma
    """
    i = B.clip(intensity, 0.0, 1.0)
    p = B.clip(to_centered(protan), -1.0, 1.0)
    t = B.clip(to_centered(tritan), -1.0, 1.0)

    p2, t2 = p, t
    done = centered_in_gamut(i, p, t)
    for attempt in range(LIMIT_STEPS - 1, -1, -1):
        progress = attempt / LIMIT_STEPS
        p2 = B.where(done, p2, p * progress)
        t2 = B.where(done, t2, t * progress)
        done = done | centered_in_gamut(i, p2, t2)

    return i, to_normalized(p2), to_normalized(t2)
