"""Backend dispatch for scalar/numpy/torch compatibility.

Provides unified math operations that work with Python floats, numpy arrays
and torch tensors. Torch is imported lazily on first use to avoid loading it
when not needed.
"""

import math

import numpy as np
from typing import Any

Array = Any  # float, numpy.ndarray or torch.Tensor

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


def is_scalar(x: Array) -> bool:
    """Check if x is a plain Python number (numpy float64 counts)."""
    return isinstance(x, (int, float))


# === Dispatched operations ===

def sqrt(x: Array) -> Array:
    if is_scalar(x):
        return math.sqrt(x)
    if is_torch(x):
        return _get_torch().sqrt(x)
    return np.sqrt(x)


def pow(x: Array, exp: float) -> Array:
    if is_scalar(x):
        return math.pow(x, exp)
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def abs(x: Array) -> Array:
    if is_scalar(x):
        return math.fabs(x)
    if is_torch(x):
        return _get_torch().abs(x)
    return np.abs(x)


def copysign(magnitude: Array, sign: Array) -> Array:
    """Magnitude of the first argument with the sign of the second."""
    if is_scalar(magnitude):
        return math.copysign(magnitude, sign)
    if is_torch(magnitude):
        return _get_torch().copysign(magnitude, sign)
    return np.copysign(magnitude, sign)


def clip(x: Array, lo: float, hi: float) -> Array:
    if is_scalar(x):
        return min(max(x, lo), hi)
    if is_torch(x):
        return _get_torch().clamp(x, lo, hi)
    return np.clip(x, lo, hi)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    """Stack arrays along a new axis."""
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)
