"""
Parameter validation for axis-wise reductions.

`validate_reduce_params` is called by the reduction engine before any work is
done or any output is allocated. A failed validation therefore never leaves a
partially written result behind.
"""

from typing import Any, Callable, Union

import numpy as np

from ...domain._errors import ArityError, ShapeError
from ...domain._reduction import ReduceOptions, Reducer
from ...domain._tensor import ITensor


def _normalize_axis(axis: Any) -> int:
    """
    Convert an axis entry to a Python int.

    Raises
    ------
    TypeError
        If `axis` is not an integer (``bool`` is rejected as well).
    """
    if isinstance(axis, (bool, np.bool_)) or not isinstance(axis, (int, np.integer)):
        raise TypeError(f"axis entries must be int, got {type(axis).__name__}")
    return int(axis)


def validate_reduce_params(
    x: ITensor,
    reducer: Union[Reducer, Callable[[Any, Any], Any]],
    options: ReduceOptions,
) -> tuple[int, ...]:
    """
    Validate the input, the reducer and the options of a reduction.

    Parameters
    ----------
    x : ITensor
        Tensor to be reduced.
    reducer : Reducer or Callable
        A `Reducer`, or a plain binary combining function.
    options : ReduceOptions
        Axis set and keep-dimensions flag. ``axes=None`` means every axis.

    Returns
    -------
    tuple[int, ...]
        The validated axis set, sorted ascending.

    Raises
    ------
    TypeError
        If `x` is not tensor-like, `reducer` is not callable, or an axis is
        not an integer.
    ShapeError
        If an axis lies outside ``[0, rank)`` or appears more than once.
    ArityError
        If a reduced axis has extent 0 and the reducer has no identity.
    """
    if not isinstance(x, ITensor):
        raise TypeError(f"expected a tensor, got {type(x)!r}")

    reducer = Reducer.coerce(reducer)

    rank = len(x.shape)
    axes = tuple(_normalize_axis(a) for a in options.resolve_axes(rank))

    seen: set[int] = set()
    for axis in axes:
        if axis < 0 or axis >= rank:
            raise ShapeError(
                f"axis {axis} out of bounds for tensor of rank {rank}",
                axis=axis,
                rank=rank,
                axes=axes,
            )
        if axis in seen:
            raise ShapeError(
                f"axis {axis} appears more than once in axes {axes}",
                axis=axis,
                rank=rank,
                axes=axes,
            )
        seen.add(axis)

    if reducer.identity is None and any(x.shape[a] == 0 for a in axes):
        raise ArityError(reducer.name, 0)

    return tuple(sorted(axes))
