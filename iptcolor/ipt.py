"""IPT color space conversions.

Reference: Ebner & Fairchild, "Development and Testing of a Color Space (IPT)
with Improved Hue Uniformity" (1998), with a square-law display gamma in front
of the LMS step.

IPT values returned here are centered: P and T lie roughly in [-1, 1] with 0
as neutral. Packed colors store them normalized to [0, 1]; use to_centered()
and to_normalized() to move between the two.

All functions accept Python floats, numpy arrays or torch tensors.
"""

from . import _backend as B
from ._backend import Array
from .transfer import forward_gamma, reverse_gamma, forward_compress, reverse_compress

# === IPT <-> Linear RGB matrices ===

# Linear RGB -> LMS
_RGB_TO_LMS = (
    (0.313921, 0.639468, 0.046597),
    (0.151693, 0.748209, 0.1000044),
    (0.017753, 0.109468, 0.872969),
)

# LMS -> Linear RGB
_LMS_TO_RGB = (
    (5.432622, -4.67910, 0.246257),
    (-1.10517, 2.311198, -0.20588),
    (0.028104, -0.19466, 1.166325),
)

# Compressed LMS' -> IPT
_LMS_TO_IPT = (
    (0.4000, 0.4000, 0.2000),
    (4.4550, -4.8510, 0.3960),
    (0.8056, 0.3572, -1.1628),
)

# IPT -> compressed LMS'
_IPT_TO_LMS = (
    (1.0, 0.097569, 0.205226),
    (1.0, -0.11388, 0.133217),
    (1.0, 0.032615, -0.67689),
)


def _apply(matrix, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """Matrix-vector product, one output channel per matrix row."""
    return tuple(row[0] * x + row[1] * y + row[2] * z for row in matrix)


# === Lane helpers ===

def to_centered(c: Array) -> Array:
    """Normalized chroma [0, 1] -> centered chroma [-1, 1]."""
    return (c - 0.5) * 2.0


def to_normalized(c: Array) -> Array:
    """Centered chroma [-1, 1] -> normalized chroma [0, 1]."""
    return c * 0.5 + 0.5


# === Linear transforms ===

def linear_rgb_to_lms(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    return _apply(_RGB_TO_LMS, r, g, b)


def lms_to_linear_rgb(l: Array, m: Array, s: Array) -> tuple[Array, Array, Array]:
    return _apply(_LMS_TO_RGB, l, m, s)


def lms_to_ipt(l_: Array, m_: Array, s_: Array) -> tuple[Array, Array, Array]:
    """Compressed LMS' -> centered IPT."""
    return _apply(_LMS_TO_IPT, l_, m_, s_)


def ipt_to_lms(i: Array, p: Array, t: Array) -> tuple[Array, Array, Array]:
    """Centered IPT -> compressed LMS'."""
    return _apply(_IPT_TO_LMS, i, p, t)


# === Core Conversions ===

def linear_rgb_to_ipt(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear RGB -> centered IPT via LMS intermediate."""
    l, m, s = linear_rgb_to_lms(r, g, b)
    return lms_to_ipt(forward_compress(l), forward_compress(m), forward_compress(s))


def ipt_to_linear_rgb(i: Array, p: Array, t: Array) -> tuple[Array, Array, Array]:
    """Centered IPT -> linear RGB. Values fall outside [0, 1] when out of gamut."""
    l_, m_, s_ = ipt_to_lms(i, p, t)
    return lms_to_linear_rgb(reverse_compress(l_), reverse_compress(m_), reverse_compress(s_))


# === Convenience Composites ===

def srgb_to_ipt(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Display RGB in [0, 1] -> centered IPT."""
    return linear_rgb_to_ipt(forward_gamma(r), forward_gamma(g), forward_gamma(b))


def ipt_to_srgb(i: Array, p: Array, t: Array) -> tuple[Array, Array, Array]:
    """Centered IPT -> display RGB, clamped to [0, 1]."""
    r, g, b = ipt_to_linear_rgb(i, p, t)
    return (
        reverse_gamma(B.clip(r, 0.0, 1.0)),
        reverse_gamma(B.clip(g, 0.0, 1.0)),
        reverse_gamma(B.clip(b, 0.0, 1.0)),
    )


def ipt_to_srgb_array(i: Array, p: Array, t: Array) -> Array:
    """Centered IPT -> display RGB stacked as (..., 3)."""
    return B.stack(list(ipt_to_srgb(i, p, t)), axis=-1)
