"""Backend dispatch for numpy/torch compatibility.

Provides unified math operations that work with both numpy arrays and torch tensors.
Torch is imported lazily on first use to avoid loading it when not needed.
Plain Python floats go through numpy and come back as numpy scalars.
"""

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

Array = Any  # numpy.ndarray, torch.Tensor or float

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        logger.debug('Loaded torch %s for tensor inputs', torch.__version__)
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


def asarray(x: Array, like: Array = None) -> Array:
    """Tensor if x or like is one, otherwise a floating numpy array.

    Keeps scalar inputs on numpy semantics (inf/nan instead of ZeroDivisionError).
    """
    if is_torch(x):
        return x
    if like is not None and is_torch(like):
        return _get_torch().as_tensor(x, dtype=like.dtype, device=like.device)
    arr = np.asarray(x)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


def asarrays(*xs: Array) -> tuple[Array, ...]:
    """Bring all inputs onto one backend: torch if any of them is a tensor."""
    like = next((x for x in xs if is_torch(x)), None)
    return tuple(asarray(x, like) for x in xs)


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def sqrt(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sqrt(x)
    return np.sqrt(x)


def cbrt(x: Array) -> Array:
    """Cube root (sign-preserving)."""
    if is_torch(x):
        torch = _get_torch()
        return torch.sign(x) * torch.abs(x).pow(1/3)
    return np.cbrt(x)


def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def abs(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().abs(x)
    return np.abs(x)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    """Stack arrays along a new axis."""
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)


def atan2(y: Array, x: Array) -> Array:
    if is_torch(y):
        return _get_torch().atan2(y, x)
    return np.arctan2(y, x)


def hypot(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().hypot(x, y)
    return np.hypot(x, y)


def minimum(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().minimum(x, y)
    return np.minimum(x, y)


def maximum(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().maximum(x, y)
    return np.maximum(x, y)


def amax(x: Array) -> float:
    """Largest element of x as a Python float; -inf when x is empty."""
    if is_torch(x):
        if x.numel() == 0:
            return float('-inf')
        return float(_get_torch().max(x))
    return float(np.max(x, initial=-np.inf))


def zeros_like(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().zeros_like(x)
    return np.zeros_like(x)


def full_like(x: Array, value: float) -> Array:
    if is_torch(x):
        return _get_torch().full_like(x, value)
    return np.full_like(x, value)


def to_numpy(x: Array) -> np.ndarray:
    """Convert to numpy array (moves from GPU if needed)."""
    if is_torch(x):
        return x.detach().cpu().numpy()
    return np.asarray(x)
