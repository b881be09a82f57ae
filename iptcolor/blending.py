"""Blending, mixing and gradients of packed IPT colors.

Interpolation is per lane on the packed bytes, which is linear in IPT space.
Gradients limit every interior step to the gamut; gradient_lut() does the same
for a whole table at once with the vectorized converters.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from .defaults import DEFAULT_LUT_SIZE
from .errors import GradientError
from .gamut import limit_packed, limit_to_gamut_arrays
from .ipt import ipt_to_srgb_array, to_centered

logger = logging.getLogger(__name__)


# === Interpolation ===

def lerp_colors(start: int, end: int, change: float) -> int:
    """Interpolate every lane, alpha included, from ``start`` to ``end``.

    No gamut limiting is done; results between two in-gamut colors can still
    fall slightly outside.
    """
    i0, p0, t0, a0 = start & 0xFF, start >> 8 & 0xFF, start >> 16 & 0xFF, start >> 24 & 0xFE
    i1, p1, t1, a1 = end & 0xFF, end >> 8 & 0xFF, end >> 16 & 0xFF, end >> 24 & 0xFE
    return (
        (int(i0 + change * (i1 - i0)) & 0xFF)
        | (int(p0 + change * (p1 - p0)) & 0xFF) << 8
        | (int(t0 + change * (t1 - t0)) & 0xFF) << 16
        | (int(a0 + change * (a1 - a0)) & 0xFE) << 24
    )


def lerp_colors_blended(start: int, end: int, change: float) -> int:
    """Interpolate toward ``end`` scaled by its opacity, keeping ``start``'s alpha.

    A fully transparent ``end`` leaves ``start`` unchanged.
    """
    change *= (end >> 25) / 127.0
    i0, p0, t0 = start & 0xFF, start >> 8 & 0xFF, start >> 16 & 0xFF
    i1, p1, t1 = end & 0xFF, end >> 8 & 0xFF, end >> 16 & 0xFF
    return (
        (int(i0 + change * (i1 - i0)) & 0xFF)
        | (int(p0 + change * (p1 - p0)) & 0xFF) << 8
        | (int(t0 + change * (t1 - t0)) & 0xFF) << 16
        | (start & 0xFE000000)
    )


def mix(*colors: int) -> int:
    """Equal-weight mix of any number of colors. No colors gives transparent 0."""
    if not colors:
        return 0
    result = colors[0]
    for n, color in enumerate(colors[1:], start=2):
        result = lerp_colors(result, color, 1.0 / n)
    return result


def uneven_mix(*pairs: float) -> int:
    """Weighted mix of alternating ``color, weight`` arguments.

    ``uneven_mix(red, 3.0, blue, 1.0)`` is three parts red to one part blue.
    Non-positive total weight gives the first color.
    """
    if len(pairs) % 2 != 0:
        raise ValueError("uneven_mix takes color, weight pairs")
    if not pairs:
        return 0
    result = int(pairs[0])
    total = max(float(pairs[1]), 0.0)
    for k in range(2, len(pairs), 2):
        weight = max(float(pairs[k + 1]), 0.0)
        total += weight
        if total > 0.0:
            result = lerp_colors(result, int(pairs[k]), weight / total)
    return result


# === Alpha ===

def multiply_alpha(packed: int, multiplier: float) -> int:
    """Scale opacity, clamped to the valid even alpha bytes."""
    a = min(max(int((packed >> 24 & 0xFE) * multiplier), 0), 0xFE)
    return (a & 0xFE) << 24 | (packed & 0x00FFFFFF)


def set_alpha(packed: int, alpha: float) -> int:
    """Replace opacity with ``alpha`` in [0, 1]."""
    a = min(max(int(alpha * 255), 0), 0xFF)
    return (a & 0xFE) << 24 | (packed & 0x00FFFFFF)


# === Gradients ===

def make_gradient(start: int, end: int, steps: int) -> list[int]:
    """``steps`` colors from ``start`` to exactly ``end``.

    Every color before the last is limited to the gamut.
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [start]
    last = steps - 1
    gradient = [limit_packed(lerp_colors(start, end, k / last)) for k in range(last)]
    gradient.append(end)
    return gradient


def gradient_chain(chain: Sequence[int], steps: int) -> list[int]:
    """``steps`` evenly spaced colors through every color in ``chain``.

    Each output is a gamut-limited blend of the two chain colors around it.
    """
    if steps <= 0 or not chain:
        return []
    if len(chain) == 1:
        return [chain[0]] * steps
    if steps == 1:
        return [chain[0]]

    splits = len(chain) - 1
    gradient = []
    for k in range(steps):
        splint = k / (steps - 1) * splits
        idx = min(int(splint), splits - 1)
        gradient.append(limit_packed(lerp_colors(chain[idx], chain[idx + 1], splint - idx)))
    return gradient


def gradient_lut(chain: Iterable[int], size: int = DEFAULT_LUT_SIZE) -> np.ndarray:
    """Build a float32 display-RGB lookup table through the colors in ``chain``.

    Stops are spread evenly over the table and blended linearly in IPT space,
    then limited to the gamut as whole arrays.

    Returns:
        Array of shape (size, 3) in [0, 1]

    Raises:
        GradientError: If size is not positive
    """
    if size <= 0:
        raise GradientError(f"LUT size must be positive, got {size}")

    stops = np.asarray(list(chain), dtype=np.uint32)
    if stops.size == 0:
        return np.zeros((size, 3), dtype=np.float32)

    stop_i = (stops & 0xFF) / 255.0
    stop_p = (stops >> 8 & 0xFF) / 255.0
    stop_t = (stops >> 16 & 0xFF) / 255.0

    positions = np.linspace(0.0, 1.0, size)
    if stops.size == 1:
        i = np.full(size, stop_i[0])
        p = np.full(size, stop_p[0])
        t = np.full(size, stop_t[0])
    else:
        stop_pos = np.linspace(0.0, 1.0, stops.size)
        i = np.interp(positions, stop_pos, stop_i)
        p = np.interp(positions, stop_pos, stop_p)
        t = np.interp(positions, stop_pos, stop_t)

    i, p, t = limit_to_gamut_arrays(i, p, t)
    lut = ipt_to_srgb_array(i, to_centered(p), to_centered(t)).astype(np.float32)
    logger.debug("Built gradient LUT: %d stops, %d entries", stops.size, size)
    return lut
