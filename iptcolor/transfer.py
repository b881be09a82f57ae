"""Pointwise nonlinear channel mappings.

Two pairs of curves are used by the IPT pipeline:
- gamma: square-law linearization of display RGB and its square-root inverse
- compress: the sign-preserving 0.43 power applied to linear LMS, and its inverse

All functions accept Python floats, numpy arrays or torch tensors.
"""

from . import _backend as B
from ._backend import Array
from .defaults import FORWARD_COMPRESS_EXPONENT, REVERSE_COMPRESS_EXPONENT


def forward_gamma(c: Array) -> Array:
    """Display RGB -> linear RGB (per channel)."""
    return c * c


def reverse_gamma(c: Array) -> Array:
    """Linear RGB -> display RGB. Clamp to [0, 1] before calling."""
    return B.sqrt(c)


def forward_compress(c: Array) -> Array:
    """Linear LMS -> compressed LMS', keeping the sign of c.

    Linear RGB outside [0, 1] can give negative LMS.
    """
    return B.copysign(B.pow(B.abs(c), FORWARD_COMPRESS_EXPONENT), c)


def reverse_compress(c: Array) -> Array:
    """Compressed LMS' -> linear LMS.

    Keeps the sign, since slightly negative LMS' values show up near the
    gamut boundary.
    """
    return B.copysign(B.pow(B.abs(c), REVERSE_COMPRESS_EXPONENT), c)
