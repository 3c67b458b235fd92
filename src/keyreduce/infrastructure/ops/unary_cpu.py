"""
CPU (NumPy) elementwise kernels used by the derived reductions.

Implemented operations
----------------------
- ``abs_cpu``  : absolute value
- ``exp_cpu``  : natural exponential
- ``log_cpu``  : natural logarithm
- ``sqrt_cpu`` : square root
- ``pow_cpu``  : power with a scalar or same-shape tensor exponent

Design notes
------------
- Every kernel allocates a new tensor of the input's shape via ``type(x)``.
- Floating-point domain problems are not errors: ``log(0) == -inf``,
  ``log(-1)`` and ``sqrt(-1)`` are NaN, and ``exp`` overflows to ``inf``.
  NumPy's floating-point warnings are silenced inside these kernels.
- The output dtype is whatever NumPy produces for the input dtype
  (float32 stays float32; integer inputs to ``exp``/``log``/``sqrt`` give
  float64).
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np

from ...domain._tensor import ITensor, Number


def _apply_unary(x: ITensor, fn: Callable[[np.ndarray], np.ndarray]) -> ITensor:
    """
    Apply a NumPy ufunc-like callable to `x` and wrap the result.
    """
    with np.errstate(all="ignore"):
        y = np.asarray(fn(x.to_numpy()))

    Tensor = type(x)
    out = Tensor(x.shape, dtype=y.dtype)
    out.copy_from_numpy(y)
    return out


def abs_cpu(x: ITensor) -> ITensor:
    """Elementwise absolute value."""
    return _apply_unary(x, np.abs)


def exp_cpu(x: ITensor) -> ITensor:
    """Elementwise ``e ** x``."""
    return _apply_unary(x, np.exp)


def log_cpu(x: ITensor) -> ITensor:
    """Elementwise natural logarithm."""
    return _apply_unary(x, np.log)


def sqrt_cpu(x: ITensor) -> ITensor:
    """Elementwise square root."""
    return _apply_unary(x, np.sqrt)


def pow_cpu(x: ITensor, exponent: Union[ITensor, Number]) -> ITensor:
    """
    Elementwise power ``x ** exponent``.

    Parameters
    ----------
    x : ITensor
        Base tensor.
    exponent : ITensor or Number
        Scalar exponent, or a tensor of exactly the same shape as `x`
        (broadcasting is not supported).

    Returns
    -------
    ITensor
        Tensor of the same shape as `x`.

    Raises
    ------
    ValueError
        If `exponent` is a tensor whose shape differs from `x.shape`.
    """
    if isinstance(exponent, ITensor):
        if exponent.shape != x.shape:
            raise ValueError(f"Shape mismatch: {x.shape} vs {exponent.shape}")
        e = exponent.to_numpy()
        return _apply_unary(x, lambda a: np.power(a, e))

    return _apply_unary(x, lambda a: np.power(a, exponent))
