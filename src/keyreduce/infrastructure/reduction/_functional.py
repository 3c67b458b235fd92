"""
Public axis-wise reduction functions.

Primitive reductions run the generic engine (`reduce_cpu`) with a registered
reducer. Derived reductions are compositions of a primitive reduction with
elementwise kernels:

- ``reduce_sum_square``  : ``sum(x ** 2)``
- ``reduce_l1``          : ``sum(|x|)``
- ``reduce_l2``          : ``sqrt(sum(x ** 2))``
- ``reduce_log_sum``     : ``log(sum(x))``
- ``reduce_log_sum_exp`` : ``log(sum(exp(x)))`` (not max-shifted; may overflow)

Every function accepts ``axes=None`` (all axes; ``()`` means none) and
``keep_dimensions=False``.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

import numpy as np

from ...domain._tensor import ITensor
from ..ops.reduce_cpu import reduce_cpu
from ..ops.unary_cpu import abs_cpu, exp_cpu, log_cpu, pow_cpu
from ._reducers import ReducerRegistry

Axes = Optional[Sequence[int]]


def _reduce_registered(
    name: str, x: ITensor, axes: Axes, keep_dimensions: bool
) -> ITensor:
    return reduce_cpu(
        x, ReducerRegistry.get(name), axes=axes, keep_dimensions=keep_dimensions
    )


def reduce_max(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """
    Compute the maximum of `x` along `axes`.

    Parameters
    ----------
    x : ITensor
        Input tensor.
    axes : Optional[Sequence[int]], optional
        Axes to reduce. Defaults to every axis.
    keep_dimensions : bool, optional
        Retain reduced axes with size 1. Defaults to False.

    Returns
    -------
    ITensor
        The reduced tensor.
    """
    return _reduce_registered("max", x, axes, keep_dimensions)


def reduce_min(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """Compute the minimum of `x` along `axes`."""
    return _reduce_registered("min", x, axes, keep_dimensions)


def reduce_sum(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """Compute the sum of `x` along `axes`."""
    return _reduce_registered("sum", x, axes, keep_dimensions)


def reduce_product(
    x: ITensor, axes: Axes = None, keep_dimensions: bool = False
) -> ITensor:
    """Compute the product of `x` along `axes`."""
    return _reduce_registered("product", x, axes, keep_dimensions)


def reduce_mean(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """
    Compute the arithmetic mean of `x` along `axes`.

    Notes
    -----
    The result equals ``reduce_sum`` over the same axes divided by the
    product of the reduced extents. Integer inputs yield float64 output.
    """
    return _reduce_registered("mean", x, axes, keep_dimensions)


def reduce_sum_square(
    x: ITensor, axes: Axes = None, keep_dimensions: bool = False
) -> ITensor:
    """Compute the sum of the elementwise squares of `x` along `axes`."""
    return reduce_sum(pow_cpu(x, 2), axes=axes, keep_dimensions=keep_dimensions)


def reduce_l1(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """Compute the L1 norm (sum of absolute values) of `x` along `axes`."""
    return reduce_sum(abs_cpu(x), axes=axes, keep_dimensions=keep_dimensions)


def reduce_l2(x: ITensor, axes: Axes = None, keep_dimensions: bool = False) -> ITensor:
    """
    Compute the L2 norm of `x` along `axes`.

    Notes
    -----
    A rank-0 intermediate sum of squares takes a direct scalar square root;
    any other intermediate is raised elementwise to the power 0.5. Both
    paths produce the same values.
    """
    intermediate = reduce_sum_square(x, axes=axes, keep_dimensions=keep_dimensions)
    if len(intermediate.shape) == 0:
        value = np.sqrt(intermediate.get_value_by_index(0))
        out = type(intermediate)((), dtype=np.asarray(value).dtype)
        out.set_value_by_index(0, value)
        return out
    return pow_cpu(intermediate, 0.5)


def reduce_log_sum(
    x: ITensor, axes: Axes = None, keep_dimensions: bool = False
) -> ITensor:
    """
    Compute the natural log of the sum of `x` along `axes`.

    Non-positive sums yield ``-inf`` or NaN rather than raising.
    """
    return log_cpu(reduce_sum(x, axes=axes, keep_dimensions=keep_dimensions))


def reduce_log_sum_exp(
    x: ITensor, axes: Axes = None, keep_dimensions: bool = False
) -> ITensor:
    """
    Compute ``log(sum(exp(x)))`` along `axes`.

    Notes
    -----
    No max-subtraction is performed, so large inputs overflow to ``inf``.
    """
    return log_cpu(reduce_sum(exp_cpu(x), axes=axes, keep_dimensions=keep_dimensions))


REDUCTIONS: Dict[str, Callable[..., ITensor]] = {
    "max": reduce_max,
    "min": reduce_min,
    "sum": reduce_sum,
    "product": reduce_product,
    "mean": reduce_mean,
    "sum_square": reduce_sum_square,
    "l1": reduce_l1,
    "l2": reduce_l2,
    "log_sum": reduce_log_sum,
    "log_sum_exp": reduce_log_sum_exp,
}


def reduce_by_name(
    x: ITensor, name: str, axes: Axes = None, keep_dimensions: bool = False
) -> ITensor:
    """
    Run the reduction registered in `REDUCTIONS` under `name`.

    Raises
    ------
    ValueError
        If `name` is not a known reduction.
    """
    try:
        fn = REDUCTIONS[name]
    except KeyError as e:
        available = ", ".join(sorted(REDUCTIONS))
        raise ValueError(
            f"Unsupported reduction name: {name!r}. Available: {available}"
        ) from e
    return fn(x, axes=axes, keep_dimensions=keep_dimensions)
