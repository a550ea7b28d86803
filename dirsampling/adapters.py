"""
Container adapters around the 3-vector sampling core.

The samplers work on float64 numpy vectors. These helpers accept lists,
tuples, numpy arrays or torch tensors at the boundary and hand results back
in the caller's container type.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

import numpy as np
import torch


def as_vector(x: Any) -> np.ndarray:
    """Convert a vector-like (list, tuple, ndarray, torch.Tensor) to a float64 array."""
    if isinstance(x, torch.Tensor):
        return x.detach().cpu().numpy().astype(np.float64)
    return np.array(x, dtype=np.float64)


def restore_type(result: np.ndarray, like: Any) -> Any:
    """
    Return result in the same container type as like.

    Parameters
    ----------
    result : np.ndarray
        Output of the sampling core.
    like : Any
        Object whose type (and, for tensors, dtype and device) is mirrored.

    Returns
    -------
    Any
        A torch tensor, list, tuple or numpy array.
    """
    if isinstance(like, torch.Tensor):
        return torch.from_numpy(np.ascontiguousarray(result)).to(dtype=like.dtype, device=like.device)
    if isinstance(like, tuple):
        return tuple(result.tolist())
    if isinstance(like, list):
        return result.tolist()
    return result


def directional(func: Callable) -> Callable:
    """
    Decorator for samplers taking a ``mean_direction`` argument.

    The mean direction is converted with ``as_vector`` before the call and the
    returned sample is converted back with ``restore_type``.
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        original = bound.arguments["mean_direction"]
        bound.arguments["mean_direction"] = as_vector(original)
        result = func(*bound.args, **bound.kwargs)
        return restore_type(result, original)

    return wrapper
